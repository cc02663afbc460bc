"""Exception hierarchy for strokematch."""


class StrokeMatchError(Exception):
    """Base exception for all strokematch errors."""

    pass


class GlyphDataError(StrokeMatchError):
    """Malformed glyph input. Always aborts the whole glyph build."""

    pass


class PathSyntaxError(GlyphDataError):
    """Path string could not be tokenized.

    ``kind`` is one of ``unexpected_character``, ``invalid_number``,
    ``leading_numbers`` or ``missing_move_to``.
    """

    def __init__(self, kind: str, position: int, path: str, detail: str = "") -> None:
        self.kind = kind
        self.position = position
        self.path = path
        self.detail = detail
        message = f"Path syntax error ({kind}) at index {position}"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class PathArgumentError(GlyphDataError):
    """Wrong number of numeric arguments for a path command."""

    def __init__(self, command: str, count: int, expected: str) -> None:
        self.command = command
        self.count = count
        self.expected = expected
        super().__init__(
            f"Command '{command}' got {count} arguments, expected {expected}"
        )


class ScaleMismatchError(GlyphDataError):
    """Record declares a width different from its height."""

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        super().__init__(
            f"Asymmetric scaling is not supported: width={width}, height={height}"
        )


class MediansMismatchError(GlyphDataError):
    """Median array count differs from the stroke count."""

    def __init__(self, character: str, stroke_count: int, median_count: int) -> None:
        self.character = character
        self.stroke_count = stroke_count
        self.median_count = median_count
        super().__init__(
            f"Glyph '{character}' has {stroke_count} strokes but {median_count} medians"
        )


class StrokeMapMismatchError(GlyphDataError):
    """Explicit stroke map does not cover every graphical stroke."""

    def __init__(self, character: str, map_length: int, stroke_count: int) -> None:
        self.character = character
        self.map_length = map_length
        self.stroke_count = stroke_count
        super().__init__(
            f"Glyph '{character}' stroke map has {map_length} entries "
            f"for {stroke_count} strokes"
        )


class MedianFormatError(GlyphDataError):
    """Median points of a stroke are corrupted."""

    def __init__(self, character: str, stroke_index: int, reason: str) -> None:
        self.character = character
        self.stroke_index = stroke_index
        self.reason = reason
        super().__init__(
            f"Glyph '{character}' stroke {stroke_index} has bad medians: {reason}"
        )


class RecordFormatError(GlyphDataError):
    """A JSON document does not have the expected shape."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid record: {reason}")


class GeometryError(StrokeMatchError):
    """Errors in geometric calculations."""

    pass


class UnsupportedGeometryError(GeometryError):
    """Path geometry outside the supported subset."""

    pass


class UnequalRadiusError(UnsupportedGeometryError):
    """Elliptical arc (rX != rY)."""

    def __init__(self, radius_x: float, radius_y: float) -> None:
        self.radius_x = radius_x
        self.radius_y = radius_y
        super().__init__(f"Elliptical arcs are not supported: rx={radius_x}, ry={radius_y}")


class ArcRotationError(UnsupportedGeometryError):
    """Arc with a non-zero x-axis rotation."""

    def __init__(self, rotation: float) -> None:
        self.rotation = rotation
        super().__init__(f"Rotated arcs are not supported: rotation={rotation}")


class DegenerateStrokeError(GeometryError):
    """Stroke has no usable extent (zero length or zero scale)."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
