"""Shapes split into 2D and 3D interfaces so flat shapes need no volume."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class VolumeNotApplicableError(Exception):
    """Raised when a volume is asked of a flat shape."""


class TwoDimensionalShape(ABC):
    @abstractmethod
    def area(self) -> float:
        """The shape's area."""


class ThreeDimensionalShape(ABC):
    @abstractmethod
    def area(self) -> float:
        """The solid's surface area."""

    @abstractmethod
    def volume(self) -> float:
        """The solid's volume."""


@dataclass
class Square(TwoDimensionalShape):
    side: float

    def area(self):
        return self.side * self.side


@dataclass
class Rectangle(TwoDimensionalShape):
    length: float
    width: float

    def area(self):
        return self.length * self.width


@dataclass
class Cube(ThreeDimensionalShape):
    side: float

    def area(self):
        return 6 * self.side * self.side

    def volume(self):
        return self.side * self.side * self.side


def volume_of(shape) -> float:
    """The volume of a solid; raise VolumeNotApplicableError for flat shapes."""
    if isinstance(shape, ThreeDimensionalShape):
        return shape.volume()
    raise VolumeNotApplicableError(f"Volume not applicable for {type(shape).__name__}")