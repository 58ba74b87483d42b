"""
Output checker.

Compares numbered reference files against candidate output files and
shows highlighted differences for mismatched pairs.
"""

__version__ = "1.0.0"
