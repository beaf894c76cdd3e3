"""
Shared primitive data types for the game.

Geometric types used by the simulation, the snapshot projection and the
renderer. All are immutable pydantic models.
"""

from pydantic import BaseModel, Field, field_validator, computed_field, ConfigDict
from typing import Tuple


class Point2D(BaseModel):
    """Immutable 2D point in playfield coordinates.

    Attributes:
        x: X coordinate (horizontal, grows to the right)
        y: Y coordinate (vertical, grows downward)

    Examples:
        >>> pos = Point2D(x=100.0, y=200.0)
        >>> pos.as_tuple
        (100.0, 200.0)
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True)

    @property
    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def __str__(self) -> str:
        return f"Point2D(x={self.x:.2f}, y={self.y:.2f})"


class Resolution(BaseModel):
    """Playfield or window size in pixels.

    Attributes:
        width: Width in pixels (must be positive)
        height: Height in pixels (must be positive)

    Examples:
        >>> Resolution(width=800, height=600).aspect_ratio
        1.3333333333333333
    """
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)

    @computed_field
    @property
    def aspect_ratio(self) -> float:
        """Calculate aspect ratio (width / height)."""
        return self.width / self.height

    model_config = ConfigDict(frozen=True)

    @classmethod
    def parse(cls, text: str) -> 'Resolution':
        """Parse a ``WIDTHxHEIGHT`` string such as ``1280x720``.

        Raises:
            ValueError: If the string is not in WIDTHxHEIGHT form
        """
        try:
            width, height = text.lower().split('x')
            return cls(width=int(width), height=int(height))
        except ValueError as e:
            raise ValueError(
                f"Expected WIDTHxHEIGHT (e.g. 1280x720), got {text!r}"
            ) from e

    def __str__(self) -> str:
        return f"Resolution({self.width}x{self.height})"


class Rectangle(BaseModel):
    """Immutable axis-aligned rectangle.

    Position is the top-left corner (pygame convention).

    Attributes:
        x: X coordinate of top-left corner
        y: Y coordinate of top-left corner
        width: Width of rectangle (must be positive)
        height: Height of rectangle (must be positive)

    Examples:
        >>> rect = Rectangle(x=100.0, y=100.0, width=50.0, height=20.0)
        >>> rect.right, rect.bottom
        (150.0, 120.0)
    """
    x: float
    y: float
    width: float
    height: float

    model_config = ConfigDict(frozen=True)

    @field_validator('width', 'height')
    @classmethod
    def validate_positive_dimensions(cls, v: float) -> float:
        """Validate dimensions are positive."""
        if v <= 0:
            raise ValueError(f'Rectangle dimensions must be positive, got {v}')
        return v

    @computed_field
    @property
    def center(self) -> Point2D:
        """Center point of the rectangle."""
        return Point2D(
            x=self.x + self.width / 2,
            y=self.y + self.height / 2
        )

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def as_tuple(self) -> Tuple[float, float, float, float]:
        """Return (x, y, width, height) for pygame.Rect construction."""
        return (self.x, self.y, self.width, self.height)

    def __str__(self) -> str:
        return f"Rectangle(x={self.x:.2f}, y={self.y:.2f}, w={self.width:.2f}, h={self.height:.2f})"
