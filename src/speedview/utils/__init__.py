"""
Utility modules for logging and terminal UI.
"""
