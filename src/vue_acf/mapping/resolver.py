"""Prop to ACF field type resolution.

Rules are evaluated in order and the first match wins. Name rules come
before the primitive type table because some prop names (``image*``,
``body``, ``align``...) always need a specific widget.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from vue_acf.schema.component import PrimitiveType, Prop
from vue_acf.schema.field_group import AcfFieldType

logger = logging.getLogger(__name__)

ALIGN_NAMES: frozenset[str] = frozenset({"align", "halign", "valign", "text-align"})

NAME_RULES: tuple[tuple[Callable[[str], bool], AcfFieldType], ...] = (
    (lambda name: name.startswith("image"), AcfFieldType.IMAGE),
    (lambda name: name == "button", AcfFieldType.ADVANCED_LINK),
    (lambda name: name == "body", AcfFieldType.WYSIWYG),
    (lambda name: name in ALIGN_NAMES, AcfFieldType.BUTTON_GROUP),
    (lambda name: name == "buttons", AcfFieldType.REPEATER),
    (lambda name: name == "images", AcfFieldType.GALLERY),
)

PRIMITIVE_TYPE_MAP: dict[PrimitiveType, AcfFieldType] = {
    PrimitiveType.STRING: AcfFieldType.TEXT,
    PrimitiveType.BOOLEAN: AcfFieldType.TRUE_FALSE,
    PrimitiveType.NUMBER: AcfFieldType.NUMBER,
    PrimitiveType.ARRAY: AcfFieldType.REPEATER,
}


def resolve_field_type(prop: Prop) -> AcfFieldType | None:
    """Return the ACF field type for *prop*, or ``None`` if nothing maps it."""
    for matches, field_type in NAME_RULES:
        if matches(prop.name):
            return field_type

    try:
        primitive = PrimitiveType(prop.type.lower())
    except ValueError:
        logger.debug("No field type for prop %r of type %r", prop.name, prop.type)
        return None
    return PRIMITIVE_TYPE_MAP[primitive]
