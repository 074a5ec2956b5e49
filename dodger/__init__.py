"""
Dodger: steer a rectangle left and right to dodge falling blocks.

Run with ``python -m dodger``.
"""

__version__ = "1.0.0"
