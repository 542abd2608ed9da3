"""State estimation: estimate container, estimator interface and a simulation estimator."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, TypeVar

import numpy as np

from bipedctl.messages import LowlevelState
from bipedctl.orientation import quat_to_rpy, quaternion_to_rotation_matrix

_log = logging.getLogger(__name__)

NUM_TIPS = 4
INITIAL_WORLD_POSITION = (0.0, 0.0, 0.335)


def _zeros3() -> np.ndarray:
    return np.zeros(3)


@dataclass
class StateEstimate:
    """Result of state estimation.

    ``r_body`` maps world vectors into the body frame. ``p_world`` and
    ``tip_v_world`` are derived from the foot-tip prints.
    """

    contact_estimate: np.ndarray = field(default_factory=lambda: np.zeros(4))
    position: np.ndarray = field(default_factory=_zeros3)
    v_body: np.ndarray = field(default_factory=_zeros3)
    orientation: np.ndarray = field(default_factory=lambda: np.array([1.0, 0.0, 0.0, 0.0]))
    omega_body: np.ndarray = field(default_factory=_zeros3)
    r_body: np.ndarray = field(default_factory=lambda: np.eye(3))
    rpy: np.ndarray = field(default_factory=_zeros3)
    omega_world: np.ndarray = field(default_factory=_zeros3)
    v_world: np.ndarray = field(default_factory=_zeros3)
    a_body: np.ndarray = field(default_factory=_zeros3)
    a_world: np.ndarray = field(default_factory=_zeros3)
    p_world_confirm: bool = False
    p_world: np.ndarray = field(default_factory=_zeros3)
    tip_v_world: np.ndarray = field(default_factory=_zeros3)
    rtip: list[np.ndarray] = field(default_factory=lambda: [_zeros3() for _ in range(NUM_TIPS)])
    tip_print: list[np.ndarray] = field(
        default_factory=lambda: [_zeros3() for _ in range(NUM_TIPS)]
    )
    tip_print_confirm: list[bool] = field(default_factory=lambda: [False] * NUM_TIPS)
    first_stage: bool = False
    tp_valid: list[bool] = field(default_factory=lambda: [False] * NUM_TIPS)


@dataclass
class StateEstimatorData:
    """Inputs and output shared by every estimator."""

    result: StateEstimate
    low_state: LowlevelState
    leg_controller_data: Any = None


class GenericEstimator(ABC):
    """Base class of all estimators."""

    def __init__(self) -> None:
        self.data: StateEstimatorData | None = None

    def set_data(self, data: StateEstimatorData) -> None:
        """Attach the shared estimator data."""
        self.data = data

    def _require_data(self) -> StateEstimatorData:
        if self.data is None:
            raise RuntimeError("estimator has no data attached")
        return self.data

    @abstractmethod
    def run(self) -> None:
        """Update the estimate."""

    @abstractmethod
    def setup(self) -> None:
        """Prepare the estimator after data is attached."""


class CheaterRobotStateEstimator(GenericEstimator):
    """Copies the true simulated state into the estimate.

    The gyroscope reading is taken as the world-frame angular velocity.
    """

    def run(self) -> None:
        data = self._require_data()
        result, low = data.result, data.low_state
        result.orientation = np.array(low.imu.quaternion, dtype=float)
        result.r_body = quaternion_to_rotation_matrix(result.orientation)
        result.omega_world = np.array(low.imu.gyroscope, dtype=float)
        result.omega_body = result.r_body @ result.omega_world
        result.rpy = quat_to_rpy(result.orientation)
        result.v_world = np.array(low.v_world, dtype=float)
        result.position = np.array(low.position, dtype=float)
        result.a_body = np.zeros(3)
        result.a_world = result.r_body.T @ result.a_body

    def setup(self) -> None:
        pass


_E = TypeVar("_E", bound=GenericEstimator)


def _check_tip(idx: int) -> None:
    if not 0 <= idx < NUM_TIPS:
        raise IndexError(f"tip index must be within [0, {NUM_TIPS}), got {idx}")


class StateEstimatorContainer:
    """Holds a set of estimators and runs them in the order they were added."""

    def __init__(self, low_state, leg_controller_data, state_estimate):
        self._data = StateEstimatorData(
            result=state_estimate,
            low_state=low_state,
            leg_controller_data=leg_controller_data,
        )
        self._estimators: list[GenericEstimator] = []

    @property
    def result(self) -> StateEstimate:
        """The shared state estimate."""
        return self._data.result

    @property
    def estimators(self) -> tuple[GenericEstimator, ...]:
        """The estimators, in run order."""
        return tuple(self._estimators)

    def run(self) -> None:
        """Run every estimator."""
        for estimator in self._estimators:
            estimator.run()

    def add_estimator(self, estimator_type: type[_E]) -> _E:
        """Create, attach and set up an estimator of the given type."""
        _log.debug("add estimator %s", estimator_type.__name__)
        estimator = estimator_type()
        estimator.set_data(self._data)
        estimator.setup()
        self._estimators.append(estimator)
        return estimator

    def remove_estimator(self, estimator_type: type[GenericEstimator]) -> int:
        """Remove every estimator of the given type; return how many were removed."""
        kept = [e for e in self._estimators if not isinstance(e, estimator_type)]
        removed = len(self._estimators) - len(kept)
        self._estimators = kept
        return removed

    def remove_all_estimators(self) -> None:
        """Remove every estimator."""
        self._estimators.clear()

    def calc_rtip(self, idx: int, tip_vec) -> None:
        """Store a tip vector rotated from the body frame into the world frame."""
        _check_tip(idx)
        result = self._data.result
        result.rtip[idx] = result.r_body.T @ np.asarray(tip_vec, dtype=float)

    def set_p_world(self, position) -> None:
        """Set the world position derived from the tip prints."""
        self._data.result.p_world = np.array(position, dtype=float)

    def init_p_world(self) -> None:
        """Reset the world position and forget every tip print."""
        result = self._data.result
        result.p_world = np.array(INITIAL_WORLD_POSITION)
        result.p_world_confirm = False
        result.tip_print_confirm = [False] * NUM_TIPS

    def set_tip_print(self, idx: int, p) -> None:
        """Record where a tip touched down."""
        _check_tip(idx)
        result = self._data.result
        result.tip_print[idx] = np.array(p, dtype=float)
        result.tip_print_confirm[idx] = True

    def set_first_stage(self, value: bool) -> None:
        """Mark whether the robot is still in its initial, floating stage."""
        self._data.result.first_stage = bool(value)