"""
Container ship app: shipping containers, cargo rules and container ships.
"""

__version__ = "0.1.0"
