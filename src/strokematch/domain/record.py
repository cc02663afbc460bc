"""Raw glyph record as decoded from a character dataset.

The record is produced by the dataset layer and consumed once by the glyph
builder. Field names follow the dataset's JSON keys on the way in.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class RawGlyphRecord:
    """Undecoded definition of one character.

    Attributes:
        character: Character label, e.g. "我"
        strokes: Outline path string of every graphical stroke
        medians: Median points of every stroke as ``[x, y]`` pairs
        width: Width of the source coordinate space (must equal height)
        height: Height of the source coordinate space
        x_offset: Added to x before scaling, used to center characters
        y_offset: Added to y before scaling
        stroke_map: Logical stroke id of every graphical stroke
    """

    character: str
    strokes: list[str]
    medians: list[list[list[float]]]
    width: float | None = None
    height: float | None = None
    x_offset: float | None = None
    y_offset: float | None = None
    stroke_map: list[int] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the dataset's key names.

        Returns:
            Dictionary that ``from_dict`` accepts
        """
        data: dict[str, Any] = {
            "character": self.character,
            "strokes": list(self.strokes),
            "medians": [list(m) for m in self.medians],
        }
        optional = {
            "width": self.width,
            "height": self.height,
            "xOffset": self.x_offset,
            "yOffset": self.y_offset,
            "strokeMap": self.stroke_map,
        }
        data.update({k: v for k, v in optional.items() if v is not None})
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RawGlyphRecord":
        """Deserialize from a dataset entry.

        Args:
            data: Decoded JSON object with dataset keys

        Returns:
            RawGlyphRecord instance

        Raises:
            KeyError: If a required key is missing
        """
        stroke_map = data.get("strokeMap")
        return cls(
            character=data["character"],
            strokes=list(data["strokes"]),
            medians=[list(m) for m in data["medians"]],
            width=data.get("width"),
            height=data.get("height"),
            x_offset=data.get("xOffset"),
            y_offset=data.get("yOffset"),
            stroke_map=list(stroke_map) if stroke_map is not None else None,
        )
