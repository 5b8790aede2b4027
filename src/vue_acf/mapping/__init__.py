"""Prop to ACF field mapping and field-group assembly."""

from vue_acf.mapping.assembler import assemble_field_group, group_key
from vue_acf.mapping.builder import auxiliary_settings, build_field_config
from vue_acf.mapping.naming import label_from_name
from vue_acf.mapping.resolver import resolve_field_type

__all__ = [
    "assemble_field_group",
    "auxiliary_settings",
    "build_field_config",
    "group_key",
    "label_from_name",
    "resolve_field_type",
]
