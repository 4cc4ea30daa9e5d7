from .clock import Viewport, WorldClock
from .pool import EntityPool, PoolExhaustedError, PoolSet
from .world_spawner import SpawnSchedule, Spawner

__all__ = [
    "EntityPool",
    "PoolExhaustedError",
    "PoolSet",
    "SpawnSchedule",
    "Spawner",
    "Viewport",
    "WorldClock",
]
