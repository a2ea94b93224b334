"""
speedview: live terminal view of an in-flight network speed measurement.
"""

__version__ = "0.1.0"
