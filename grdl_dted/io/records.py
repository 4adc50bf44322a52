# -*- coding: utf-8 -*-
"""
DTED Records - Decoded header, data record and file structures.

Structures produced by :mod:`grdl_dted.io.parsers`. A file owns its
records and each record owns its elevation samples; nothing is shared.

Grid orientation follows the DTED column order: one record per
longitude line, each holding the posts along that line from south to
north, so :meth:`RawDTEDFile.elevation_grid` has shape
``(num_lons, num_lats)``.

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

import math
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from grdl_dted.primitives import Angle, AxisElement
from grdl_dted.utils.constants import DTED_VOID, TENTHS_OF_SECOND_PER_DEGREE


@dataclass(frozen=True)
class RawDTEDHeader:
    """
    Decoded User Header Label (UHL).

    Attributes
    ----------
    origin : AxisElement[Angle]
        Latitude and longitude of the lower-left post.
    interval_secs_x_10 : AxisElement[int]
        Post spacing in tenths of an arc second.
    accuracy : int or None
        Absolute vertical accuracy in meters, ``None`` when the field
        holds the "not available" sentinel.
    count : AxisElement[int]
        Number of latitude points per line and number of longitude lines.
    """
    origin: AxisElement[Angle]
    interval_secs_x_10: AxisElement[int]
    accuracy: Optional[int]
    count: AxisElement[int]

    @property
    def interval_degrees(self) -> AxisElement[float]:
        """Post spacing in decimal degrees."""
        return AxisElement(
            lat=self.interval_secs_x_10.lat / TENTHS_OF_SECOND_PER_DEGREE,
            lon=self.interval_secs_x_10.lon / TENTHS_OF_SECOND_PER_DEGREE,
        )


@dataclass(eq=False)
class RawDTEDRecord:
    """
    One longitude profile of elevation posts.

    Attributes
    ----------
    blk_count : int
        24-bit sequential block counter.
    lon_count : int
        Longitude line index.
    lat_count : int
        Latitude index of the first post.
    elevations : np.ndarray
        Elevations in meters, ``int16``, one per latitude point.
    """
    blk_count: int
    lon_count: int
    lat_count: int
    elevations: np.ndarray

    def __eq__(self, other):
        if not isinstance(other, RawDTEDRecord):
            return NotImplemented
        return (
            self.blk_count == other.blk_count
            and self.lon_count == other.lon_count
            and self.lat_count == other.lat_count
            and np.array_equal(self.elevations, other.elevations)
        )

    __hash__ = None


@dataclass
class RawDTEDFile:
    """
    A fully decoded DTED file.

    Attributes
    ----------
    header : RawDTEDHeader
        Decoded UHL.
    data : list of RawDTEDRecord
        One record per longitude line, in file order.
    dsi_record : bytes or None
        Reserved for a decoded DSI record; not populated.
    acc_record : bytes or None
        Reserved for a decoded ACC record; not populated.
    """
    header: RawDTEDHeader
    data: List[RawDTEDRecord] = field(default_factory=list)
    dsi_record: Optional[bytes] = None
    acc_record: Optional[bytes] = None

    def elevation_grid(self) -> np.ndarray:
        """
        Stack all records into one elevation array.

        Returns
        -------
        np.ndarray
            ``int16`` array of shape ``(num_lons, num_lats)``.
        """
        if not self.data:
            return np.empty((0, self.header.count.lat), dtype=np.int16)
        return np.stack([rec.elevations for rec in self.data]).astype(np.int16, copy=False)

    def void_mask(self) -> np.ndarray:
        """Boolean array, True where the post holds the void value."""
        return self.elevation_grid() == DTED_VOID

    def latitudes(self) -> np.ndarray:
        """Latitude of each post along a line, in decimal degrees."""
        origin = self.header.origin.lat.to_decimal_degrees()
        spacing = self.header.interval_degrees.lat
        return np.arange(self.header.count.lat) * spacing + origin

    def longitudes(self) -> np.ndarray:
        """Longitude of each line, in decimal degrees."""
        origin = self.header.origin.lon.to_decimal_degrees()
        spacing = self.header.interval_degrees.lon
        return np.arange(self.header.count.lon) * spacing + origin

    def get_elevation(self, lat: float, lon: float) -> Optional[int]:
        """
        Elevation of the post nearest to a location.

        A location halfway between two posts takes the upper (north or
        east) post.

        Parameters
        ----------
        lat : float
            Latitude in decimal degrees.
        lon : float
            Longitude in decimal degrees.

        Returns
        -------
        int or None
            Elevation in meters, or ``None`` if the location falls
            outside the tile, is not finite, or the nearest post is void.
        """
        interval = self.header.interval_degrees
        i = _nearest_index(
            lon, self.header.origin.lon.to_decimal_degrees(), interval.lon, len(self.data)
        )
        j = _nearest_index(
            lat, self.header.origin.lat.to_decimal_degrees(), interval.lat, self.header.count.lat
        )
        if i is None or j is None:
            return None
        elevations = self.data[i].elevations
        if j >= len(elevations):
            return None
        value = int(elevations[j])
        if value == DTED_VOID:
            return None
        return value


def _nearest_index(value: float, origin: float, spacing: float, n: int) -> Optional[int]:
    """
    Index of the grid post closest to ``value``, or None if off-grid.

    A value exactly halfway between two posts resolves to the upper post.
    """
    if n <= 0 or not math.isfinite(value):
        return None
    if spacing == 0:
        return 0 if n == 1 and math.isclose(value, origin) else None
    idx = math.floor((value - origin) / spacing + 0.5)
    if idx < 0 or idx >= n:
        return None
    return idx


__all__ = ["RawDTEDHeader", "RawDTEDRecord", "RawDTEDFile"]
