"""Prop name to field label conversion."""

from __future__ import annotations

import re

_WORD_BOUNDARY_RE = re.compile(r"([a-z0-9])([A-Z])")


def label_from_name(name: str) -> str:
    """Turn a camelCase prop name into a label.

    ``textAlign`` becomes ``Text Align`` and ``halign`` becomes ``Halign``.
    Hyphens are left alone, so ``text-align`` becomes ``Text-align``.
    """
    if not name:
        return name
    capitalized = name[0].upper() + name[1:]
    return _WORD_BOUNDARY_RE.sub(r"\1 \2", capitalized)
