"""
Path quickstart for splinepath.
- Builds a three-knot path from polar tangents (degrees)
- Queries position, tangent and curvature by distance traveled
- Prints a coarse arc-length sample table

Run from the repository root:
    python examples/path_quickstart.py
"""

import logging

from splinepath import PathBuilder, sample_path
from splinepath.config import LOG_LEVEL_DEFAULT


def main() -> None:
    logging.basicConfig(level=LOG_LEVEL_DEFAULT, format="%(levelname)s %(name)s: %(message)s")

    path = (
        PathBuilder()
        .add_knot_polar(0.0, -5.0, -45.0, 1.0, degrees=True)
        .add_knot_polar(1.0, 3.0, -45.0, 3.0, degrees=True)
        .add_knot_polar(3.0, 0.0, 0.0, 1.0, degrees=True)
        .build()
    )
    print(f"segments: {path.num_segments}  length: {path.length():.4f}")
    print("start:", path.point_at(0.0))
    print("shared knot:", path.point_at(float(path.offsets[1])))
    print("end:", path.point_at(path.length()))

    mid = 0.5 * path.length()
    print(f"s={mid:.3f} point={path.point_at(mid)} tangent={path.tangent_at(mid)} curvature={path.curvature_at(mid)}")

    for row in sample_path(path, num_samples=6):
        s, x, y, _dx, _dy, _ddx, _ddy, kappa = row
        print(f"  s={s:7.3f}  x={x:7.3f}  y={y:7.3f}  kappa={kappa:8.3f}")


if __name__ == "__main__":
    main()
