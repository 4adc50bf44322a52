# -*- coding: utf-8 -*-
"""
Primitives - Geographic angle and latitude/longitude pair types.

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

from dataclasses import dataclass
from typing import Generic, Tuple, TypeVar

T = TypeVar('T')


@dataclass(frozen=True)
class Angle:
    """
    Signed geographic angle in degrees, minutes and seconds.

    The magnitude fields are never negative; the hemisphere is carried
    by ``negative`` alone (True for South and West).

    Attributes
    ----------
    degrees : int
        Whole degrees, 0-999.
    minutes : int
        Arc minutes, 0-59.
    seconds : float
        Arc seconds, fractional values allowed.
    negative : bool
        True when the angle lies in the negative hemisphere.
    """
    degrees: int = 0
    minutes: int = 0
    seconds: float = 0.0
    negative: bool = False

    def to_decimal_degrees(self) -> float:
        """Convert to signed decimal degrees."""
        dd = self.degrees + self.minutes / 60.0 + self.seconds / 3600.0
        return -dd if self.negative else dd


@dataclass(frozen=True)
class AxisElement(Generic[T]):
    """
    A latitude/longitude pair of values of the same type.

    Attributes
    ----------
    lat : T
        Latitude component.
    lon : T
        Longitude component.
    """
    lat: T
    lon: T

    def as_tuple(self) -> Tuple[T, T]:
        """Return ``(lat, lon)``."""
        return self.lat, self.lon


__all__ = ["Angle", "AxisElement"]
