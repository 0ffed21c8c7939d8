"""
termarcade - a terminal arcade dashboard.

The playable panel is an endless runner with an autopilot ghost.
"""

__version__ = "0.1.0"
