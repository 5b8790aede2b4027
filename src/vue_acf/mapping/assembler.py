"""Assemble field configs into a keyed ACF field group."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from vue_acf.schema.field_group import FieldConfig, FieldGroupConfig

logger = logging.getLogger(__name__)


def group_key(component_name: str) -> str:
    """Return the field-group key for *component_name*.

    Names that differ only by case share a key.
    """
    return f"group_{component_name.lower()}_component"


def field_key(key_of_group: str, field_name: str) -> str:
    """Return the key of field *field_name* inside the group keyed *key_of_group*."""
    return f"{key_of_group}_{field_name}"


def assemble_field_group(component_name: str, fields: Iterable[FieldConfig]) -> FieldGroupConfig:
    """Key every field under the component's group and wrap them in a group.

    Field order is preserved.
    """
    key = group_key(component_name)
    keyed = [f.model_copy(update={"key": field_key(key, f.name)}) for f in fields]
    logger.info("Assembled field group %s with %d field(s)", key, len(keyed))
    return FieldGroupConfig(
        key=key,
        title=f"Component: {component_name}",
        fields=keyed,
    )
