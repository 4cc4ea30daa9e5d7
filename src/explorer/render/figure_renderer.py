"""Stick figure drawing from a solved :class:`~explorer.figure.kinematics.Pose`."""

from __future__ import annotations

import math

from explorer.config import HEAD_R
from explorer.figure.kinematics import Pose
from explorer.render.frame import Frame

_TWO_PI = math.pi * 2.0
LINE_WIDTH = 1.8


def draw_figure(frame: Frame, pose: Pose) -> None:
    c = frame.canvas
    c.stroke_style = frame.colors.text
    c.fill_style = frame.colors.text
    c.line_width = LINE_WIDTH
    c.line_cap = "round"
    c.line_join = "round"
    c.global_alpha = 1.0

    hx, hy = pose.head
    c.begin_path()
    c.arc(hx, hy, HEAD_R, 0.0, _TWO_PI)
    c.stroke()

    c.begin_path()
    # spine
    c.move_to(*pose.neck)
    c.line_to(*pose.hip)
    # arms
    for elbow, hand in ((pose.left_elbow, pose.left_hand), (pose.right_elbow, pose.right_hand)):
        c.move_to(*pose.shoulder)
        c.line_to(*elbow)
        c.line_to(*hand)
    # legs
    for knee, foot in ((pose.left_knee, pose.left_foot), (pose.right_knee, pose.right_foot)):
        c.move_to(*pose.hip)
        c.line_to(*knee)
        c.line_to(*foot)
    c.stroke()
