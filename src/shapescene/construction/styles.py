"""Palette save/load for JSON files."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from shapescene.model import CuboidStyle, PolygonStyle

_VALID_SECTIONS = frozenset({"cuboid_style", "polygon_style"})


@dataclass
class StyleSet:
    """Palettes loaded from or saved to a file.

    Both fields are optional.  A ``StyleSet`` loaded from a file that
    only contains ``"polygon_style"`` has ``cuboid_style`` set to
    ``None``.

    Attributes:
        cuboid_style: Palette for cuboid scenes.
        polygon_style: Palette for polygon scenes.
    """

    cuboid_style: CuboidStyle | None = None
    polygon_style: PolygonStyle | None = None


def save_styles(
    path: str | Path,
    *,
    cuboid_style: CuboidStyle | None = None,
    polygon_style: PolygonStyle | None = None,
) -> None:
    """Save palettes to a JSON file.

    Only sections that are not ``None`` are written, and each palette
    only records the fields that differ from its defaults.  The file
    is human-readable with two-space indentation.

    Args:
        path: Destination file path.
        cuboid_style: Palette for cuboid scenes.
        polygon_style: Palette for polygon scenes.
    """
    data: dict = {}
    if cuboid_style is not None:
        data["cuboid_style"] = cuboid_style.to_dict()
    if polygon_style is not None:
        data["polygon_style"] = polygon_style.to_dict()

    Path(path).write_text(json.dumps(data, indent=2) + "\n")


def load_styles(path: str | Path) -> StyleSet:
    """Load palettes from a JSON file.

    Args:
        path: Source file path.

    Returns:
        A :class:`StyleSet` with the parsed sections.

    Raises:
        ValueError: If the file contains unknown top-level keys or a
            palette contains unknown fields.
    """
    data = json.loads(Path(path).read_text())

    unknown = set(data) - _VALID_SECTIONS
    if unknown:
        raise ValueError(
            f"unknown top-level keys in style file: {sorted(unknown)}"
        )

    cuboid_style = None
    if "cuboid_style" in data:
        cuboid_style = CuboidStyle.from_dict(data["cuboid_style"])

    polygon_style = None
    if "polygon_style" in data:
        polygon_style = PolygonStyle.from_dict(data["polygon_style"])

    return StyleSet(cuboid_style=cuboid_style, polygon_style=polygon_style)
