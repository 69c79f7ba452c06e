"""
Demonstration Program
=====================
Prints a few sample vectors and their cross products.

Why is this file needed?
------------------------
1. It is a quick sanity check of the public Vector API from the outside.
2. It shows the right-hand rule (X cross Y = Z) and anticommutativity.
"""
import logging

from tinygeo.geometry import Vector3f, cross
from tinygeo.logging_config import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    # Diagnostics go to stderr; stdout carries only the demo output
    setup_logging(level=logging.DEBUG)

    right = Vector3f(1, 0, 0)    # X axis
    forward = Vector3f(0, 1, 0)  # Y axis

    # Right-hand rule: X cross Y = Z
    up = cross(right, forward)

    print(f"Right:   {right}")
    print(f"Forward: {forward}")
    print(f"Up (RxF):{up} (Expected: [0, 0, 1])")

    down = cross(forward, right)
    print(f"Down(FxR):{down} (Expected: [0, 0, -1])")

    logger.debug(f"up={up!r}, down={down!r}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
