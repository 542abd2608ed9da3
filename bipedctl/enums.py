"""Enumerations shared by the controller: platforms, user commands and FSM states."""

from __future__ import annotations

from enum import IntEnum


class CtrlPlatform(IntEnum):
    """Where the controller runs."""

    GAZEBO_A1 = 0
    REAL_A1 = 1


class UserCommand(IntEnum):
    """Command chosen by the operator."""

    NONE = 0
    START = 1  # walking
    L2_A = 2  # fixed stand
    L2_B = 3  # passive
    L2_X = 4  # pushing
    L2_Y = 5  # probe
    L1_X = 6  # QP stand
    L1_A = 7
    L1_Y = 8


class FSMMode(IntEnum):
    """Whether the state machine stays in its state or is switching."""

    NORMAL = 0
    CHANGE = 1


class FSMStateName(IntEnum):
    """States of the control state machine."""

    INVALID = 0
    PASSIVE = 1
    PDSTAND = 2
    QPSTAND = 3
    WALKING = 4
    PUSHING = 5
    PROBE = 6
    SLAM = 7
    TO = 8