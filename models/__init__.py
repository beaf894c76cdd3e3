"""
Shared models for the Orb Catcher project.

This package provides the Pydantic primitives used across the system:
- Primitives: Basic geometric types (Point2D, Resolution, Rectangle)

Usage:
    >>> from models import Point2D, Resolution, Rectangle
"""

from .primitives import (
    Point2D,
    Resolution,
    Rectangle,
)

__all__ = [
    'Point2D',
    'Resolution',
    'Rectangle',
]
