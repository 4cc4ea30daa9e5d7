from .kinematics import Pose, arm_fk, foot_lift_y, foot_path_x, leg_ik, solve_pose

__all__ = [
    "Pose",
    "arm_fk",
    "foot_lift_y",
    "foot_path_x",
    "leg_ik",
    "solve_pose",
]
