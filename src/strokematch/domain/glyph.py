"""Glyph representation.

This module defines the parsed glyph model: a character with its strokes,
each carrying an outline and a median skeleton, plus the map that groups
graphical strokes into the logical strokes a learner actually draws.
"""

from dataclasses import dataclass
from typing import Any

from strokematch.domain.path import PathCommand, Point


@dataclass(frozen=True, slots=True)
class StrokeRecord:
    """One graphical stroke of a glyph.

    Attributes:
        id: Index of the stroke within its glyph
        outline: Drawing commands of the filled stroke boundary
        medians: Centerline points of the stroke (at least two)
    """

    id: int
    outline: tuple[PathCommand, ...]
    medians: tuple[Point, ...]

    def to_dict(self) -> dict[str, Any]:
        """Serialize the median skeleton.

        Outlines are left out; use ``format_outline`` for their text form.

        Returns:
            Dictionary with the stroke id and median points
        """
        return {
            "id": self.id,
            "medians": [p.to_dict() for p in self.medians],
        }


@dataclass(frozen=True)
class GlyphModel:
    """Immutable parsed glyph.

    Several graphical strokes may map to the same logical stroke id; they are
    matched as one stroke by concatenating their medians.

    Attributes:
        character: Character label, e.g. "永"
        strokes: Graphical strokes in drawing order
        stroke_map: Logical stroke id of each graphical stroke
    """

    character: str
    strokes: tuple[StrokeRecord, ...]
    stroke_map: tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.stroke_map) != len(self.strokes):
            raise ValueError(
                f"stroke_map has {len(self.stroke_map)} entries "
                f"for {len(self.strokes)} strokes"
            )

    def logical_ids(self) -> list[int]:
        """Get distinct logical stroke ids in first-seen order."""
        seen: list[int] = []
        for logical_id in self.stroke_map:
            if logical_id not in seen:
                seen.append(logical_id)
        return seen

    def logical_stroke_count(self) -> int:
        """Number of strokes a learner has to draw."""
        return len(self.logical_ids())

    def logical_id_at(self, graphical_index: int) -> int:
        """Get the logical stroke id of a graphical stroke.

        Raises:
            IndexError: If the glyph has no such graphical stroke
        """
        return self.stroke_map[graphical_index]

    def strokes_for(self, logical_id: int) -> list[StrokeRecord]:
        """Get the graphical strokes that make up a logical stroke, in order."""
        return [
            stroke
            for stroke, mapped in zip(self.strokes, self.stroke_map)
            if mapped == logical_id
        ]

    def merged_medians(self, logical_id: int) -> list[Point]:
        """Concatenate the medians of every graphical stroke of a logical stroke.

        Args:
            logical_id: Logical stroke id from the stroke map

        Returns:
            Canonical point sequence to match user strokes against

        Raises:
            KeyError: If no graphical stroke maps to ``logical_id``
        """
        strokes = self.strokes_for(logical_id)
        if not strokes:
            raise KeyError(f"Glyph '{self.character}' has no logical stroke {logical_id}")
        merged: list[Point] = []
        for stroke in strokes:
            merged.extend(stroke.medians)
        return merged
