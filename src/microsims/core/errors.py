"""Exceptions raised by the geo core and the CSV loader."""
from __future__ import annotations


class MicroSimError(Exception):
    """Base class for every error raised by microsims."""


class EmptyInputError(MicroSimError, ValueError):
    """A bounding box or centroid was requested for zero points."""


class DegenerateBoxError(MicroSimError, ValueError):
    """A box axis has zero span, so it cannot be rescaled.

    Only raised by strict projection; the default projection falls back to
    the rectangle midpoint on that axis.
    """


class WaypointFormatError(MicroSimError, ValueError):
    """CSV waypoint text could not be turned into any points."""
