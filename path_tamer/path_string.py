"""Parse and format path strings.

Two textual forms are supported:

- The postfix command language paths are stored and displayed in: operands
  first, operator last (``"10 20 m 30 40 l h"``).
- SVG path ``d`` attributes, parsed with svgpathtools.
"""

import logging
import re

from svgpathtools import Arc, CubicBezier, QuadraticBezier, parse_path
from svgpathtools import Line as SVGLine

from path_tamer.config import DEFAULT_PRECISION, DEFAULT_SUBDIVISIONS
from path_tamer.errors import InvalidPath
from path_tamer.interpolation import sample_parameters
from path_tamer.types import (
    ClosePath,
    CubicCurve,
    Line,
    Move,
    Path,
    PathCommand,
    Point,
    QuadCurve,
)

logger = logging.getLogger(__name__)

# Numbers, single-letter operators, and anything else (reported as invalid)
TOKEN_RE = re.compile(
    r"(?P<number>[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)"
    r"|(?P<op>[mlqch])(?![A-Za-z])"
    r"|(?P<junk>\S+)"
)

# Operands consumed by each operator
OPERAND_COUNTS = {"m": 2, "l": 2, "q": 4, "c": 6, "h": 0}


def _build_command(op: str, args: list[float]) -> PathCommand:
    points = [Point(x=args[i], y=args[i + 1]) for i in range(0, len(args), 2)]
    match op:
        case "m":
            return Move(to=points[0])
        case "l":
            return Line(to=points[0])
        case "q":
            return QuadCurve(control=points[0], to=points[1])
        case "c":
            return CubicCurve(control1=points[0], control2=points[1], to=points[2])
        case _:
            return ClosePath()


def parse_path_string(text: str) -> Path:
    """Parse the postfix command language into a Path.

    Raises:
        InvalidPath: Unknown tokens, wrong operand counts, or dangling operands
    """
    commands: Path = []
    operands: list[float] = []

    for match in TOKEN_RE.finditer(text):
        if match.group("junk") is not None:
            raise InvalidPath(f"Unexpected token {match.group('junk')!r} at offset {match.start()}")
        if match.group("number") is not None:
            operands.append(float(match.group("number")))
            continue

        op = match.group("op")
        expected = OPERAND_COUNTS[op]
        if len(operands) != expected:
            raise InvalidPath(
                f"Operator {op!r} takes {expected} operands, got {len(operands)}"
            )
        commands.append(_build_command(op, operands))
        operands = []

    if operands:
        raise InvalidPath(f"{len(operands)} trailing operands without an operator")

    return commands


def _format_points(points: list[Point], precision: int) -> str:
    return " ".join(f"{p.x:.{precision}f} {p.y:.{precision}f}" for p in points)


def format_command(command: PathCommand, precision: int = DEFAULT_PRECISION) -> str:
    """Format a single command in the postfix command language."""
    match command:
        case Move(to=to):
            return f"{_format_points([to], precision)} m"
        case Line(to=to):
            return f"{_format_points([to], precision)} l"
        case QuadCurve(to=to, control=control):
            return f"{_format_points([control, to], precision)} q"
        case CubicCurve(to=to, control1=control1, control2=control2):
            return f"{_format_points([control1, control2, to], precision)} c"
        case ClosePath():
            return "h"
    raise TypeError(f"Unknown path command: {command!r}")


def format_path(path: Path, precision: int = DEFAULT_PRECISION) -> str:
    """Format a path in the postfix command language with fixed precision."""
    return " ".join(format_command(command, precision) for command in path)


# Coordinates as svgpathtools tokenizes them
SVG_NUMBER_RE = re.compile(r"[-+]?(?:\d*\.\d+|\d+\.?)(?:[eE][-+]?\d+)?")

# One subpath body per match, followed by the Z that closes it (if any)
SVG_SUBPATH_RE = re.compile(r"([Mm]?[^MmZz]*)([Zz]?)")


def _point(z: complex) -> Point:
    return Point(x=z.real, y=z.imag)


def _move_target(body: str, current: complex) -> complex:
    numbers = SVG_NUMBER_RE.findall(body)
    if len(numbers) < 2:
        raise InvalidPath(f"Move needs two coordinates: {body!r}")
    target = complex(float(numbers[0]), float(numbers[1]))
    return target if body[0] == "M" else current + target


def _segment_commands(segment: object, subdivisions: int) -> list[PathCommand]:
    if isinstance(segment, SVGLine):
        return [Line(to=_point(segment.end))]
    if isinstance(segment, QuadraticBezier):
        return [QuadCurve(to=_point(segment.end), control=_point(segment.control))]
    if isinstance(segment, CubicBezier):
        return [
            CubicCurve(
                to=_point(segment.end),
                control1=_point(segment.control1),
                control2=_point(segment.control2),
            )
        ]
    if isinstance(segment, Arc):
        return [Line(to=_point(segment.point(t))) for t in sample_parameters(subdivisions)]
    logger.warning(f"Skipping unsupported SVG segment: {segment!r}")
    return []


def parse_svg_path(d: str, subdivisions: int = DEFAULT_SUBDIVISIONS) -> Path:
    """Parse an SVG path 'd' attribute string into a Path.

    Commands follow the d-string: every M becomes a move and every Z a close,
    without the closing line svgpathtools would add. Drawing after a Z without
    a new M restarts at the subpath start, which is emitted as a move. Arcs are
    flattened into ``subdivisions`` line segments.

    Raises:
        InvalidPath: The d-string could not be parsed or does not start with a move
    """
    if not d or not d.strip():
        return []

    commands: Path = []
    current = start = 0j

    for match in SVG_SUBPATH_RE.finditer(d):
        body, close = match.group(1).strip(), match.group(2)
        if not body and not close:
            continue

        if body:
            if body[0] in "Mm":
                start = current = _move_target(body, current)
                commands.append(Move(to=_point(start)))
            elif not commands:
                raise InvalidPath(f"SVG path data must start with a move: {d!r}")
            else:
                commands.append(Move(to=_point(start)))

            try:
                segments = parse_path(body, current)
            except Exception as e:
                raise InvalidPath(f"Could not parse SVG path data: {e}") from e

            for segment in segments:
                commands.extend(_segment_commands(segment, subdivisions))
            if len(segments):
                current = segments[-1].end

        if close:
            if not commands:
                raise InvalidPath(f"SVG path data must start with a move: {d!r}")
            commands.append(ClosePath())
            current = start

    logger.debug(f"Parsed SVG path into {len(commands)} commands")
    return commands
