"""Closet Log: wardrobe catalog, outfit composition, wear logging and analytics."""

__version__ = "1.0.0"
