"""Component metadata produced by a metadata provider."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class PrimitiveType(str, Enum):
    """Primitive prop types that have a generic ACF field mapping."""

    STRING = "string"
    BOOLEAN = "boolean"
    NUMBER = "number"
    ARRAY = "array"


class Prop(BaseModel):
    """A declared, typed property of a component's public interface.

    ``type`` holds the type exactly as declared (``"String"``, ``"boolean"``,
    ``"any"``...). It is compared case-insensitively against
    :class:`PrimitiveType` during resolution, and anything outside that set is
    rejected when the field config is built.
    """

    name: str = Field(min_length=1, description="Prop identifier, camelCase or kebab-case.")
    type: str = Field(min_length=1, description="Declared primitive type.")

    model_config = {"extra": "forbid", "frozen": True}


class ComponentMetadata(BaseModel):
    """Name and props of a single component, in declaration order.

    Prop names are expected to be unique; this is not checked here.
    """

    name: str = Field(min_length=1, description="Component name (original casing).")
    props: list[Prop] = Field(default_factory=list, description="Props in declaration order.")

    model_config = {"extra": "forbid", "frozen": True}
