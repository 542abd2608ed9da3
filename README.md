# bipedctl

Building blocks for the control software of a small two-legged robot. Everything
is plain Python on top of numpy; vectors and matrices are numpy arrays and
quaternions are stored as `[w, x, y, z]`.

## Modules

- `bipedctl.orientation`: `CoordinateAxis`, `coordinate_rotation`,
  `rpy_to_rot_mat`, `rpy_to_quat`, `quat_to_rpy`, `rotation_matrix_to_quaternion`,
  `quaternion_to_rotation_matrix`, `rotation_matrix_to_rpy`, `vector_to_skew_mat`,
  `mat_to_skew_vec`, `quat_product`, `quat_derivative`, `integrate_quat`,
  `integrate_quat_implicit`, `quat_to_so3`, `quaternion_to_so3`, `so3_to_quat`,
  `rad2deg`, `deg2rad`. Rotation matrices are coordinate transformations from the
  world frame into the body frame.
- `bipedctl.interpolation`: `lerp`, `cubic_bezier`, `cubic_bezier_first_derivative`,
  `cubic_bezier_second_derivative`. The phase must lie in `[0, 1]`, otherwise
  `ValueError` is raised.
- `bipedctl.mathutils`: `square` and `almost_equal`.
- `bipedctl.bspline`: `BSpline`, a clamped uniform B-spline with fixed endpoints,
  optional velocity/acceleration constraints at each end, and free middle control
  points. `curve_point(u)` and `curve_derivative(u, d)` clamp `u` to the time range.
- `bipedctl.bezier`: `BezierCurve` with any number of control points over a
  fixed duration; `curve_point` and `curve_velocity`.
- `bipedctl.iir`: `FirstOrderIIRFilter`, built from `alpha` or with
  `from_frequencies(cutoff, sample, initial)`; works on scalars and arrays.
- `bipedctl.linalg`: `pseudo_inverse(matrix, sigma_threshold)` by SVD.
- `bipedctl.timer`: `Timer`, a monotonic stopwatch (`elapsed_ns`, `elapsed_ms`,
  `elapsed_seconds`).
- `bipedctl.enums`: `CtrlPlatform`, `UserCommand`, `FSMMode`, `FSMStateName`.
- `bipedctl.biped`: `Biped` geometry and mass, `RobotVariant` (`HECTOR`, `LAMBDA`,
  `LAMBDA_R2`; the plain `Biped()` defaults are `LAMBDA_R2`), with
  `hip_yaw_location(leg)` and `hip_roll_location(leg)` for leg 0 (left) and 1 (right).
- `bipedctl.messages`: `MotorCmd`, `LowlevelCmd`, `MotorState`, `IMU`,
  `LowlevelState`, `UserValue`, `WaypointCmd`.
- `bipedctl.joystick`: `KeySwitch` (16-bit button word) and `RockerBtnData`, the
  40-byte remote packet with `unpack` and `pack`.
- `bipedctl.estimator`: `StateEstimate`, `StateEstimatorContainer`,
  `GenericEstimator` and `CheaterRobotStateEstimator`, which copies the true
  simulated IMU, position and velocity into the estimate.
- `bipedctl.motion`: `default_motor_commands`, `interpolate_positions` and
  `stand_trajectory` for a twelve-joint robot.
- `bipedctl.forces`: `ForceTeleop` (pulsed or continuous push forces driven by
  key codes), `ForceMode`, `average_contact_force` and `scale_force_for_display`.

## Install

```
pip install .
pip install ".[test]"   # with pytest
```

Requires Python 3.10 or later and numpy.

## Examples

Rotations and quaternions:

```python
import numpy as np
from bipedctl.orientation import rpy_to_quat, quat_to_rpy, quaternion_to_rotation_matrix

q = rpy_to_quat(np.array([0.1, -0.2, 0.3]))
rpy = quat_to_rpy(q)
R = quaternion_to_rotation_matrix(q)     # world-to-body coordinate transform
v_body = R @ np.array([1.0, 0.0, 0.0])
```

A Bézier curve over two seconds:

```python
from bipedctl.bezier import BezierCurve

curve = BezierCurve(dim=2, num_ctrl_points=3)
curve.set_param([[0.0, 0.0], [1.0, 2.0], [2.0, 0.0]], fin_time=2.0)
print(curve.curve_point(1.0), curve.curve_velocity(1.0))
```

Leg geometry:

```python
from bipedctl.biped import Biped, RobotVariant

biped = Biped.for_variant(RobotVariant.HECTOR)
print(biped.hip_yaw_location(0), biped.hip_yaw_location(1))
```

Filtering a signal:

```python
from bipedctl.iir import FirstOrderIIRFilter

filt = FirstOrderIIRFilter.from_frequencies(10.0, 1000.0, 0.0)
for sample in (1.0, 1.0, 1.0):
    value = filt.update(sample)
```

State estimation from simulated readings:

```python
from bipedctl.estimator import (
    CheaterRobotStateEstimator, StateEstimate, StateEstimatorContainer,
)
from bipedctl.messages import LowlevelState

low = LowlevelState()
low.imu.quaternion[:] = [1.0, 0.0, 0.0, 0.0]
container = StateEstimatorContainer(low, None, StateEstimate())
container.add_estimator(CheaterRobotStateEstimator)
container.run()
print(container.result.rpy)
```

## What it does not do

This is a library, not a running controller. It has no command-line program,
does not talk to a simulator or to robot hardware, does not read the keyboard
or a joystick itself, and contains no walking controller or state machine:
the enums name the state-machine states, and `ForceTeleop` turns key codes
into forces, but sending commands and reading sensors is left to the caller.

## Tests

```
pytest
```