"""Build an ACF field config from a single prop."""

from __future__ import annotations

import logging
from typing import Any

from vue_acf.exceptions import UnmappedFieldTypeError
from vue_acf.mapping.naming import label_from_name
from vue_acf.mapping.resolver import resolve_field_type
from vue_acf.schema.component import Prop
from vue_acf.schema.field_group import AcfFieldType, FieldConfig

logger = logging.getLogger(__name__)

_TYPE_DEFAULTS: dict[AcfFieldType, dict[str, Any]] = {
    AcfFieldType.WYSIWYG: {"tabs": "visual", "toolbar": "simple", "media_upload": 0, "delay": 1},
    AcfFieldType.TRUE_FALSE: {"ui": 1},
    AcfFieldType.IMAGE: {"return_format": "array", "preview_size": "thumbnail"},
    AcfFieldType.GALLERY: {"return_format": "array", "preview_size": "thumbnail"},
    AcfFieldType.REPEATER: {"layout": "row"},
}

_VERTICAL_CHOICES = {"start": "Top", "center": "Center", "end": "Bottom"}
_HORIZONTAL_CHOICES = {"left": "Left", "center": "Center", "right": "Right"}

# Name overrides replace the type defaults entirely.
_NAME_OVERRIDES: dict[str, dict[str, Any]] = {
    "valign": {"choices": _VERTICAL_CHOICES},
    "text-align": {"choices": _HORIZONTAL_CHOICES},
    "halign": {"choices": _HORIZONTAL_CHOICES},
    "align": {"choices": _HORIZONTAL_CHOICES},
}


def auxiliary_settings(field_type: AcfFieldType, name: str) -> dict[str, Any]:
    """Return the extra ACF settings for a field of *field_type* named *name*.

    The result is a fresh dict on every call.
    """
    settings = _NAME_OVERRIDES.get(name)
    if settings is None:
        settings = _TYPE_DEFAULTS.get(field_type, {})
    return {key: dict(value) if isinstance(value, dict) else value for key, value in settings.items()}


def build_field_config(prop: Prop) -> FieldConfig:
    """Build the (not yet keyed) field config for *prop*.

    Raises:
        UnmappedFieldTypeError: If no rule resolves a field type for the prop.
    """
    field_type = resolve_field_type(prop)
    if field_type is None:
        raise UnmappedFieldTypeError(prop.name, prop.type)

    logger.debug("Prop %r -> %s", prop.name, field_type.value)
    return FieldConfig(
        label=label_from_name(prop.name),
        name=prop.name,
        type=field_type,
        auxiliary=auxiliary_settings(field_type, prop.name),
    )
