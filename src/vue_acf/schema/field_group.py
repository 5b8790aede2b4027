"""ACF field and field-group definitions."""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, Field

LABEL_PLACEMENT = "left"
COMPONENT_CATEGORY = "component"


class AcfFieldType(str, Enum):
    """Field types the generator can emit."""

    IMAGE = "image"
    ADVANCED_LINK = "acfe_advanced_link"
    WYSIWYG = "wysiwyg"
    BUTTON_GROUP = "button_group"
    REPEATER = "repeater"
    GALLERY = "gallery"
    TEXT = "text"
    TRUE_FALSE = "true_false"
    NUMBER = "number"


class FieldConfig(BaseModel):
    """A single ACF field generated from one prop.

    ``key`` stays ``None`` until the field is placed in a group, since the
    key is qualified by the group key.
    """

    key: str | None = Field(default=None, description="Group-qualified field key.")
    label: str = Field(description="Human-readable label.")
    name: str = Field(min_length=1, description="Field name, identical to the prop name.")
    type: AcfFieldType = Field(description="ACF field type.")
    auxiliary: dict[str, Any] = Field(default_factory=dict, description="Type/name specific settings.")

    model_config = {"extra": "forbid", "frozen": True}

    def to_document(self) -> dict[str, Any]:
        """Flatten into the ACF JSON shape: ``{key, label, name, type, **auxiliary}``."""
        data = self.model_dump(mode="json")
        auxiliary = data.pop("auxiliary")
        return {**data, **auxiliary}


class FieldGroupConfig(BaseModel):
    """A complete ACF field group for one component."""

    key: str = Field(min_length=1, description="Group key, derived from the component name.")
    title: str = Field(min_length=1, description="Group title shown in the admin.")
    fields: list[FieldConfig] = Field(default_factory=list, description="Fields in prop declaration order.")
    label_placement: Literal["left"] = LABEL_PLACEMENT
    active: Literal[False] = False
    acfe_categories: dict[str, str] = Field(default_factory=lambda: {COMPONENT_CATEGORY: COMPONENT_CATEGORY})

    model_config = {"extra": "forbid", "frozen": True}

    def to_document(self) -> dict[str, Any]:
        """Build the JSON document ACF loads from ``acf-json/``."""
        return {
            "key": self.key,
            "title": self.title,
            "fields": [f.to_document() for f in self.fields],
            "label_placement": self.label_placement,
            "active": self.active,
            "acfe_categories": dict(self.acfe_categories),
        }
