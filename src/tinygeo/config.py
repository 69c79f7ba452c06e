"""
Configuration & Numerical Constants
===================================
This module serves as the central registry for global numerical constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (e.g. 1e-8) scattered throughout
   the geometry code.
2. Tuning: Thresholds can be adjusted in one place for a given target.

Exports:
    NORMALIZE_EPSILON (float): Vectors shorter than this normalise to zero.
    DEFAULT_TOLERANCE (float): Absolute tolerance for approximate comparisons.
"""

# Below this length a vector has no usable direction
NORMALIZE_EPSILON: float = 1e-8

DEFAULT_TOLERANCE: float = 1e-5
