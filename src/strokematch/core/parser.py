"""Parser for the compact path mini-language used by glyph datasets.

Path strings are a subset of SVG path data: single-letter commands
(m/M, l/L, h/H, v/V, c/C, s/S, q/Q, a/A, z/Z) each followed by a flat list of
numbers. Lowercase commands are relative to the current point.

Numbers are separated by whitespace or commas, but the datasets also rely on
``.`` and ``-`` acting as separators whenever that is unambiguous, so
``-1.4-.8-2.4,1.1`` reads as ``-1.4, -.8, -2.4, 1.1``.

Key functions:
- parse_numbers: Split a bare run of numbers
- parse_num_sequence: Tokenize a path into (command, numbers) pairs
- parse_path: Interpret a path into PathCommand values
- format_command / format_outline: Fixed-precision text form of commands
"""

from collections.abc import Callable, Iterator, Sequence
from typing import NamedTuple

from strokematch.domain import (
    ArcTo,
    ClosePath,
    CubicCurveTo,
    LineTo,
    MoveTo,
    PathCommand,
    Point,
    QuadCurveTo,
)
from strokematch.exceptions import (
    ArcRotationError,
    PathArgumentError,
    PathSyntaxError,
    UnequalRadiusError,
)

Remapper = Callable[[Point], Point]

COMMAND_LETTERS = frozenset("mMlLhHvVcCsSqQaAzZ")

# Numbers consumed per repetition of each command
COMMAND_STRIDES: dict[str, int] = {
    "m": 2,
    "l": 2,
    "h": 1,
    "v": 1,
    "c": 6,
    "s": 4,
    "q": 4,
    "a": 7,
    "z": 0,
}


class PathToken(NamedTuple):
    """A command letter or a number found in a path string."""

    kind: str
    value: str | float
    position: int


class PathSegment(NamedTuple):
    """A command letter with its numeric arguments."""

    command: str
    coords: list[float]


def _identity(point: Point) -> Point:
    return point


def _scan(path: str) -> Iterator[PathToken]:
    buf = ""
    buf_start = 0
    met_dot = False
    met_minus = False

    def flush(position: int) -> Iterator[PathToken]:
        if not buf:
            return
        try:
            value = float(buf)
        except ValueError:
            raise PathSyntaxError(
                "invalid_number", buf_start, path, f"'{buf}' is not a number"
            ) from None
        yield PathToken("number", value, buf_start)

    idx = 0
    while idx < len(path):
        ch = path[idx]

        if ch in COMMAND_LETTERS:
            yield from flush(idx)
            buf = ""
            met_dot = met_minus = False
            yield PathToken("command", "z" if ch == "Z" else ch, idx)
            idx += 1
            continue

        if (
            ch.isspace()
            or ch == ","
            or (ch == "." and met_dot)
            or (ch == "-" and (met_minus or met_dot))
        ):
            yield from flush(idx)
            buf = ""
            met_dot = met_minus = False
            # A separating '.' or '-' starts the next number
            if ch not in ".-":
                idx += 1
            continue

        if not buf:
            buf_start = idx

        if ch == ".":
            met_dot = True
        elif ch == "-" or "0" <= ch <= "9":
            met_minus = True
        elif ch != "+":
            raise PathSyntaxError(
                "unexpected_character", idx, path, f"unexpected character {ch!r}"
            )

        buf += ch
        idx += 1

    yield from flush(len(path))


def parse_numbers(text: str) -> list[float]:
    """Split a run of numbers using the dataset's separator rules.

    Args:
        text: Numbers only, e.g. "-1.4-.8-2.4,1.1"

    Returns:
        Parsed numbers, e.g. [-1.4, -0.8, -2.4, 1.1]

    Raises:
        PathSyntaxError: If the text contains anything but numbers and separators
    """
    numbers: list[float] = []
    for token in _scan(text):
        if token.kind == "command":
            raise PathSyntaxError(
                "unexpected_character",
                token.position,
                text,
                f"command {token.value!r} in a number list",
            )
        numbers.append(float(token.value))
    return numbers


def parse_num_sequence(path: str) -> list[PathSegment]:
    """Tokenize a path string into commands with their numeric arguments.

    Args:
        path: Path data, e.g. "M 10 20 L30-40z"

    Returns:
        Ordered list of PathSegment(command, coords). 'Z' is folded into 'z'.

    Raises:
        PathSyntaxError: On unexpected characters, malformed numbers, or
            numbers appearing before the first command
    """
    segments: list[PathSegment] = []
    for token in _scan(path):
        if token.kind == "command":
            segments.append(PathSegment(str(token.value), []))
        elif not segments:
            raise PathSyntaxError(
                "leading_numbers", token.position, path, "numbers before the first command"
            )
        else:
            segments[-1].coords.append(float(token.value))
    return segments


def _check_arity(segment: PathSegment) -> int:
    stride = COMMAND_STRIDES[segment.command.lower()]
    count = len(segment.coords)
    if stride == 0:
        if count:
            raise PathArgumentError(segment.command, count, "no arguments")
    elif count == 0 or count % stride:
        raise PathArgumentError(
            segment.command, count, f"a positive multiple of {stride}"
        )
    return stride


def _chunks(coords: Sequence[float], stride: int) -> Iterator[Sequence[float]]:
    for idx in range(0, len(coords), stride):
        yield coords[idx : idx + stride]


def _move(current: Point, x: float, y: float, relative: bool) -> Point:
    if relative:
        return Point(current.x + x, current.y + y)
    return Point(x, y)


def reflect_point(prev_control: Point, current: Point) -> Point:
    """Mirror a control point through the current point."""
    return Point(2 * current.x - prev_control.x, 2 * current.y - prev_control.y)


def parse_path(
    path: str,
    remap: Remapper = _identity,
    radius_scale: float = 1.0,
    flip_sweep: bool = False,
) -> list[PathCommand]:
    """Interpret a path string into drawing commands.

    Coordinates are resolved to absolute values in the path's own frame and
    then passed through ``remap``, so the parser does not care which
    coordinate system the caller wants. Arc radii are multiplied by
    ``radius_scale`` to follow the same remapping. When ``remap`` mirrors an
    axis, ``flip_sweep`` inverts every arc's sweep flag so arcs keep their shape.

    Args:
        path: Path data string
        remap: Maps every emitted point into the caller's frame
        radius_scale: Factor applied to arc radii
        flip_sweep: Invert arc sweep flags, for remaps that mirror one axis

    Returns:
        Ordered list of PathCommand values, starting with a MoveTo

    Raises:
        PathSyntaxError: If tokenization fails or the path does not start with a move
        PathArgumentError: If a command has the wrong number of arguments
        UnequalRadiusError: If an arc has different x and y radii
        ArcRotationError: If an arc is rotated
    """
    segments = parse_num_sequence(path)
    if segments and segments[0].command.lower() != "m":
        raise PathSyntaxError(
            "missing_move_to", 0, path, f"path starts with '{segments[0].command}'"
        )

    result: list[PathCommand] = []
    current = Point(0.0, 0.0)
    subpath_start = current
    last_control: Point | None = None

    for segment in segments:
        stride = _check_arity(segment)
        op = segment.command.lower()
        relative = segment.command.islower()
        # Control point of the previous cubic, only valid right after c/s
        next_control: Point | None = None

        match op:
            case "m":
                for idx, (x, y) in enumerate(_chunks(segment.coords, stride)):
                    current = _move(current, x, y, relative)
                    if idx == 0:
                        subpath_start = current
                        result.append(MoveTo(remap(current)))
                    else:
                        result.append(LineTo(remap(current)))
            case "l":
                for x, y in _chunks(segment.coords, stride):
                    current = _move(current, x, y, relative)
                    result.append(LineTo(remap(current)))
            case "h":
                for value in segment.coords:
                    x = current.x + value if relative else value
                    current = Point(x, current.y)
                    result.append(LineTo(remap(current)))
            case "v":
                for value in segment.coords:
                    y = current.y + value if relative else value
                    current = Point(current.x, y)
                    result.append(LineTo(remap(current)))
            case "q":
                for cx, cy, x, y in _chunks(segment.coords, stride):
                    control = _move(current, cx, cy, relative)
                    current = _move(current, x, y, relative)
                    result.append(QuadCurveTo(to=remap(current), control=remap(control)))
            case "c":
                for c1x, c1y, c2x, c2y, x, y in _chunks(segment.coords, stride):
                    control1 = _move(current, c1x, c1y, relative)
                    control2 = _move(current, c2x, c2y, relative)
                    current = _move(current, x, y, relative)
                    next_control = control2
                    result.append(
                        CubicCurveTo(
                            to=remap(current),
                            control1=remap(control1),
                            control2=remap(control2),
                        )
                    )
            case "s":
                for c2x, c2y, x, y in _chunks(segment.coords, stride):
                    prev_control = next_control or last_control
                    control1 = (
                        reflect_point(prev_control, current) if prev_control else current
                    )
                    control2 = _move(current, c2x, c2y, relative)
                    current = _move(current, x, y, relative)
                    next_control = control2
                    result.append(
                        CubicCurveTo(
                            to=remap(current),
                            control1=remap(control1),
                            control2=remap(control2),
                        )
                    )
            case "a":
                for rx, ry, rotation, large, sweep, x, y in _chunks(segment.coords, stride):
                    if rx != ry:
                        raise UnequalRadiusError(rx, ry)
                    if rotation != 0:
                        raise ArcRotationError(rotation)
                    current = _move(current, x, y, relative)
                    result.append(
                        ArcTo(
                            radius=rx * radius_scale,
                            large_arc=large > 0,
                            sweep=(sweep > 0) != flip_sweep,
                            to=remap(current),
                        )
                    )
            case "z":
                current = subpath_start
                result.append(ClosePath())

        last_control = next_control

    return result


def format_command(command: PathCommand) -> str:
    """Render a command as fixed-precision text.

    Used for debugging output and for comparing outlines in tests.

    Args:
        command: Any PathCommand

    Returns:
        Text such as "M 0.10 0.20" or "Q 0.50 0.50 1.00 0.00"
    """
    match command:
        case MoveTo(to=p):
            return f"M {p.x:.2f} {p.y:.2f}"
        case LineTo(to=p):
            return f"L {p.x:.2f} {p.y:.2f}"
        case QuadCurveTo(to=p, control=c):
            return f"Q {c.x:.2f} {c.y:.2f} {p.x:.2f} {p.y:.2f}"
        case CubicCurveTo(to=p, control1=c1, control2=c2):
            return (
                f"C {c1.x:.2f} {c1.y:.2f} {c2.x:.2f} {c2.y:.2f} {p.x:.2f} {p.y:.2f}"
            )
        case ArcTo(radius=r, large_arc=large, sweep=sweep, to=p):
            return f"A {r:.2f} {int(large)} {int(sweep)} {p.x:.2f} {p.y:.2f}"
        case ClosePath():
            return "Z"
    raise TypeError(f"Not a path command: {command!r}")


def format_outline(outline: Sequence[PathCommand]) -> str:
    """Render a whole outline, commands separated by single spaces."""
    return " ".join(format_command(command) for command in outline)
