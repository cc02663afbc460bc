"""Core processing algorithms for strokematch.

This module contains the core algorithms for:

- Path parsing (tokenizer, command interpreter, serialization)
- Arc center inference
- Glyph model construction from raw records
- Curve normalization
- Similarity metrics (Fréchet distance, cosine similarity, nearest-point distance)
- Stroke matching (ordered decision gates)

All services are designed to be:
- Stateless (safe to call concurrently)
- Pure (no side effects besides logging)

Key functions:
- parse_path: Interpret a path string into PathCommand values
- resolve_arc: Find the circle of an arc command
- normalize_curve: Make two strokes comparable by shape
- frechet_distance: Discrete Fréchet distance
- strokes_match: Boolean match verdict

Key classes:
- GlyphModelBuilder: Builds GlyphModels from RawGlyphRecords
- StrokeMatcher: Runs the gate chain and reports diagnostics
"""

from strokematch.core.arc import (
    Quadrant,
    find_arc_centers,
    get_quadrant,
    resolve_arc,
    resolve_outline_arcs,
)
from strokematch.core.builder import GlyphModelBuilder, build_glyph, make_remapper
from strokematch.core.matcher import (
    GateOutcome,
    MatchResult,
    StrokeMatcher,
    dedup,
    length_ratio,
    shape_fit_distance,
    strokes_match,
)
from strokematch.core.metrics import (
    average_distance,
    avg_cosine_similarity,
    cosine_similarity,
    curve_length,
    distance,
    frechet_distance,
    get_vectors,
    rotate,
)
from strokematch.core.normalize import (
    center_and_scale,
    normalize_curve,
    outline_curve,
    subdivide_curve,
)
from strokematch.core.parser import (
    format_command,
    format_outline,
    parse_num_sequence,
    parse_numbers,
    parse_path,
)

__all__ = [
    # Builder
    "GlyphModelBuilder",
    "build_glyph",
    "make_remapper",
    # Matcher
    "GateOutcome",
    "MatchResult",
    "StrokeMatcher",
    "dedup",
    "length_ratio",
    "shape_fit_distance",
    "strokes_match",
    # Arcs
    "Quadrant",
    "find_arc_centers",
    "get_quadrant",
    "resolve_arc",
    "resolve_outline_arcs",
    # Metrics
    "average_distance",
    "avg_cosine_similarity",
    "cosine_similarity",
    "curve_length",
    "distance",
    "frechet_distance",
    "get_vectors",
    "rotate",
    # Normalization
    "center_and_scale",
    "normalize_curve",
    "outline_curve",
    "subdivide_curve",
    # Parser
    "format_command",
    "format_outline",
    "parse_num_sequence",
    "parse_numbers",
    "parse_path",
]
