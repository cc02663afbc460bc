"""strokematch - Decide whether a handwritten stroke matches a glyph stroke.

strokematch parses vector glyph definitions (outline paths plus median
skeleton points for every stroke of a character) and checks freehand strokes
drawn by a user against them, the way a handwriting-practice quiz does.

Example:
    $ strokematch match 永.json user-stroke.json --stroke 0

This prints every decision gate with its metric and exits with 0 when the
stroke is accepted.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
