"""Scene parsing, XPM textures and player movement for a grid raycaster."""

__version__ = "0.1.0"
__all__ = ["__version__"]