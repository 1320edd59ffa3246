"""Shared helpers for model dataclasses."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable

_field_defaults_cache: dict[tuple[type, frozenset[str]], dict] = {}


def _field_defaults(cls: type, *, exclude: frozenset[str] = frozenset()) -> dict:
    """Return a dict of ``{field_name: default}`` for a dataclass.

    Only fields with simple defaults (not ``MISSING`` and not
    ``default_factory``) are included.  Fields listed in *exclude*
    are skipped.  ``to_dict()`` methods compare against these so only
    non-default fields are serialised.  Results are cached per
    ``(cls, exclude)`` pair.
    """
    key = (cls, exclude)
    if key not in _field_defaults_cache:
        _field_defaults_cache[key] = {
            f.name: f.default
            for f in dataclasses.fields(cls)
            if f.default is not dataclasses.MISSING
            and f.name not in exclude
        }
    return _field_defaults_cache[key]


def _freeze(obj: object, name: str, values: Iterable | None) -> None:
    """Store *values* on a frozen dataclass as a ``frozenset``.

    A bare string is treated as a single entry rather than a sequence
    of characters, so ``highlight_faces="top"`` means ``{"top"}``.
    """
    if values is None:
        frozen: frozenset = frozenset()
    elif isinstance(values, str):
        frozen = frozenset({values})
    else:
        frozen = frozenset(values)
    object.__setattr__(obj, name, frozen)
