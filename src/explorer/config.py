WIDTH = 1200
HEIGHT = 600
FPS = 60
VSYNC = False
SHOW_FPS = False
DEFAULT_THEME = "dark"

# World clock
WALK_SPEED = 45.0  # world units per second the scene scrolls by
MAX_DT = 0.1  # longest step a single update may take (stalled frames)
WALK_PHASE_RATE = 5.0  # gait radians per second

# Layout (fractions of the viewport)
SCREEN_X = 0.35  # horizontal anchor of the walking figure
GROUND_Y = 0.8  # ground baseline

# Culling / fading
CULL_MARGIN = 200.0  # px past the left edge before an entity is recycled
FADE = 60.0  # px band at the right edge where entities fade in
BUCKETS = 5  # alpha tiers used to batch star fills

# Spawn placement beyond the right edge (px)
SPAWN_OFFSET_MIN = 20.0
SPAWN_OFFSET_MAX = 80.0
# Mobile devices space spawns out further
MOBILE_INTERVAL_SCALE = 1.5

# Meteor life, in seconds of life units (drains LIFE_DECAY per second)
METEOR_LIFE = 2.0
METEOR_LIFE_DECAY = 1.5

# Stick figure proportions
HEAD_R = 5.5
TORSO = 14.0
NECK = 3.0
U_LEG = 8.0
L_LEG = 7.0
U_ARM = 6.0
L_ARM = 5.0
STRIDE = 6.0  # half-span of the foot path
FOOT_LIFT = 6.0
HIP_BOB = 1.2
LEAN = 0.03  # radians
TWIST = 1.0
ARM_SWING = 0.45
FOREARM_SWING = 0.65  # fraction of ARM_SWING applied to the forearm

# Reduced-motion pose offsets. These are hand-tuned, not derived.
STATIC_FOOT_SPREAD = 2.0
STATIC_KNEE_SPREAD = 1.5
STATIC_KNEE_DROP = 1.0  # knee sits this far above a straight upper leg
STATIC_ELBOW_SPREAD = 1.5
STATIC_HAND_SPREAD = 2.0

# Reduced-motion scenes are seeded with fewer entities
REDUCED_SEED_SCALE = 0.5

# Parallax per category. Foreground ground clutter scrolls 1:1.
PARALLAX = {
    "star": 0.1,
    "cloud": 0.15,
    "mountain": 0.2,
    "bird": 0.5,
    "ufo": 0.6,
    "meteor": 0.05,
    "balloon": 0.35,
    "whale": 0.55,
    "jellyfish": 0.4,
    "grassTuft": 1.0,
    "pebble": 1.0,
}

# (category, start as a multiple of width, min interval, max interval)
SPAWN_TABLE = (
    ("star", 0.0, 50.0, 100.0),
    ("cloud", 0.4, 180.0, 350.0),
    ("mountain", 0.8, 400.0, 700.0),
    ("bird", 0.5, 200.0, 400.0),
    ("meteor", 0.8, 400.0, 800.0),
    ("balloon", 2.2, 600.0, 1000.0),
    ("ufo", 3.0, 900.0, 1800.0),
    ("whale", 3.8, 1400.0, 2500.0),
    ("jellyfish", 2.5, 800.0, 1400.0),
    ("grassTuft", 0.0, 30.0, 70.0),
    ("pebble", 0.2, 40.0, 90.0),
)

CATEGORIES = tuple(row[0] for row in SPAWN_TABLE)

CAPACITY_DESKTOP = {
    "star": 30,
    "cloud": 6,
    "mountain": 12,
    "bird": 8,
    "ufo": 3,
    "meteor": 2,
    "balloon": 2,
    "whale": 1,
    "jellyfish": 2,
    "grassTuft": 20,
    "pebble": 10,
}

CAPACITY_MOBILE = {
    "star": 18,
    "cloud": 4,
    "mountain": 10,
    "bird": 6,
    "ufo": 2,
    "meteor": 1,
    "balloon": 1,
    "whale": 1,
    "jellyfish": 1,
    "grassTuft": 12,
    "pebble": 6,
}


def capacity_for(is_mobile: bool) -> dict[str, int]:
    """Return a copy of the per-category capacity table for a device class."""
    return dict(CAPACITY_MOBILE if is_mobile else CAPACITY_DESKTOP)
