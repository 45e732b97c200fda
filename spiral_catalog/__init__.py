"""Folder and car catalog with a 3D spiral view of the folder collection."""

__version__ = "1.0.0"
