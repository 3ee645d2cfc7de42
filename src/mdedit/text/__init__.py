"""Text snapshots, line indexing, edit operations and host surfaces."""

from .lines import (
    Line,
    Location,
    clamp_offset,
    line_at,
    lines_of,
    location_to_offset,
    offset_to_location,
)
from .ops import EditOp, Selection, clamp_selection
from .surface import EditSurface, MemorySurface, SurfaceRangeError
from .undo import UndoEntry, UndoTimeline

__all__ = [
    "EditOp",
    "EditSurface",
    "Line",
    "Location",
    "MemorySurface",
    "Selection",
    "SurfaceRangeError",
    "UndoEntry",
    "UndoTimeline",
    "clamp_offset",
    "clamp_selection",
    "line_at",
    "lines_of",
    "location_to_offset",
    "offset_to_location",
]
