"""Geographic bounds for the island region of interest."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class BoundingBox:
    """Open lat-lon box. A ``None`` edge is unbounded.

    All comparisons are strict: a point sitting exactly on an edge is outside.
    """

    swlat: float | None = None
    swlng: float | None = None
    nelat: float | None = None
    nelng: float | None = None

    def contains(self, lat: Any, lon: Any) -> Any:
        """Return True where (lat, lon) lies strictly inside the box.

        Works on plain floats and elementwise on pandas Series; NaN is never
        inside.
        """
        inside: Any = True
        if self.swlat is not None:
            inside = inside & (lat > self.swlat)
        if self.nelat is not None:
            inside = inside & (lat < self.nelat)
        if self.swlng is not None:
            inside = inside & (lon > self.swlng)
        if self.nelng is not None:
            inside = inside & (lon < self.nelng)
        return inside


# Rottnest Island plus the surrounding water; no western edge
ROTTNEST_BBOX = BoundingBox(swlat=-32.2, nelat=-31.8, nelng=115.6)
