"""
Orientation rig example - non-scalar variables with local charts.

A camera, a gimbal and a compass heading:
  - the gimbal holds a fixed 15 degree pitch relative to the camera
  - the compass heading tracks the camera's yaw (an angle on the circle)

Rotations are charted by rotation vectors, headings by wrapped offsets,
so the same gradient descent drives both.
"""

import math

from scipy.spatial.transform import Rotation
from auto_constraint import (
    AutomaticConstraintCluster,
    AngleVariable,
    RotationVariable,
)
from auto_constraint.variables import wrap_angle


def main():
    print("=" * 60)
    print("ORIENTATION RIG")
    print("=" * 60)

    pitch = Rotation.from_euler('y', 15, degrees=True)

    cluster = AutomaticConstraintCluster()
    cluster.add_variable('camera', RotationVariable())
    cluster.add_variable('gimbal', RotationVariable())
    cluster.add_variable('heading', AngleVariable(0.0))

    cluster.add_constraint(
        'camera', 'gimbal',
        lambda cam, gim: (cam * pitch * gim.inv()).magnitude(),
    )
    cluster.add_constraint(
        'camera', 'heading',
        lambda cam, heading: abs(wrap_angle(cam.as_euler('zyx')[0] - heading)),
    )

    for yaw in (30, 170, -170):
        camera = Rotation.from_euler('z', yaw, degrees=True)
        result = cluster.set_value('camera', camera)

        print(f"\nCamera yaw = {yaw} deg")
        if not result:
            print(f"  Failed: {result.message}")
            continue

        gimbal = cluster.get_value('gimbal')
        heading = cluster.get_value('heading')
        print(f"  Gimbal (zyx deg): {gimbal.as_euler('zyx', degrees=True).round(2)}")
        print(f"  Heading: {math.degrees(heading):.2f} deg")
        print(f"  Settled: {' -> '.join(result.visited)}")


if __name__ == '__main__':
    main()
