"""Shared constants used across the model, geometry and composition layers."""

import math

ISO_ANGLE: float = math.pi / 6
"""Isometric projection angle (30 degrees)."""

DEFAULT_ISO_SCALE: float = 28.0
"""Display units per model unit for projected cuboids."""

MIN_SIDES: int = 3
MAX_SIDES: int = 12

POLYGON_NAMES: dict[int, str] = {
    3: "Triangle",
    4: "Square",
    5: "Pentagon",
    6: "Hexagon",
    7: "Heptagon",
    8: "Octagon",
    9: "Nonagon",
    10: "Decagon",
    11: "Hendecagon",
    12: "Dodecagon",
}

# Bottom face A-D, top face E-H directly above A-D.
VERTEX_NAMES: tuple[str, ...] = ("A", "B", "C", "D", "E", "F", "G", "H")

# Fractional corner positions (x, y, z) in units of (width, depth, height).
CORNER_FRACTIONS: dict[str, tuple[int, int, int]] = {
    "A": (0, 0, 0),
    "B": (1, 0, 0),
    "C": (1, 1, 0),
    "D": (0, 1, 0),
    "E": (0, 0, 1),
    "F": (1, 0, 1),
    "G": (1, 1, 1),
    "H": (0, 1, 1),
}

FACE_VERTICES: dict[str, tuple[str, str, str, str]] = {
    "top": ("E", "F", "G", "H"),
    "bottom": ("A", "B", "C", "D"),
    "front": ("A", "B", "F", "E"),
    "back": ("D", "C", "G", "H"),
    "left": ("A", "D", "H", "E"),
    "right": ("B", "C", "G", "F"),
}

FACE_NAMES: frozenset[str] = frozenset(FACE_VERTICES)

# The two bottom edges meeting at B and the vertical edge above it.
HIDDEN_EDGES: tuple[str, ...] = ("AB", "BC", "BF")

VISIBLE_EDGES: tuple[str, ...] = (
    "AD", "DC", "AE", "DH", "CG", "EF", "FG", "GH", "EH",
)

ALL_EDGES: frozenset[str] = frozenset(HIDDEN_EDGES + VISIBLE_EDGES)

# Edges carrying the width/depth/height dimension labels.
DIMENSION_EDGES: dict[str, str] = {
    "width": "DC",
    "depth": "AD",
    "height": "AE",
}

# Which dimension every cuboid edge measures.
EDGE_DIMENSIONS: dict[str, str] = {
    "AB": "width", "DC": "width", "EF": "width", "GH": "width",
    "AD": "depth", "BC": "depth", "EH": "depth", "FG": "depth",
    "AE": "height", "BF": "height", "CG": "height", "DH": "height",
}
