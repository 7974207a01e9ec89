"""
Landscape GUI Package

Pygame window that hosts a procedurally generated landscape scene.
"""

from .main import LandscapeGUI, main

__all__ = ["LandscapeGUI", "main"]
