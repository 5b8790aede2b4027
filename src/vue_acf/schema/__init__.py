"""Component metadata and ACF field-group models."""

from vue_acf.schema.component import ComponentMetadata, PrimitiveType, Prop
from vue_acf.schema.field_group import AcfFieldType, FieldConfig, FieldGroupConfig

__all__ = [
    "AcfFieldType",
    "ComponentMetadata",
    "FieldConfig",
    "FieldGroupConfig",
    "PrimitiveType",
    "Prop",
]
