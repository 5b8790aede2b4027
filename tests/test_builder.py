"""Tests for building field configs from props."""

import pytest
from vue_acf.exceptions import UnmappedFieldTypeError
from vue_acf.mapping.builder import auxiliary_settings, build_field_config
from vue_acf.schema.component import Prop
from vue_acf.schema.field_group import AcfFieldType

HORIZONTAL = {"left": "Left", "center": "Center", "right": "Right"}


class TestBuildFieldConfig:
    def test_text_field(self):
        field = build_field_config(Prop(name="headingText", type="String"))
        assert field.key is None
        assert field.label == "Heading Text"
        assert field.name == "headingText"
        assert field.type == AcfFieldType.TEXT
        assert field.auxiliary == {}

    def test_wysiwyg_defaults(self):
        field = build_field_config(Prop(name="body", type="string"))
        assert field.type == AcfFieldType.WYSIWYG
        assert field.auxiliary == {"tabs": "visual", "toolbar": "simple", "media_upload": 0, "delay": 1}

    def test_true_false_ui(self):
        field = build_field_config(Prop(name="dark", type="Boolean"))
        assert field.type == AcfFieldType.TRUE_FALSE
        assert field.auxiliary == {"ui": 1}

    def test_image_settings(self):
        field = build_field_config(Prop(name="imageHero", type="object"))
        assert field.type == AcfFieldType.IMAGE
        assert field.auxiliary == {"return_format": "array", "preview_size": "thumbnail"}

    def test_repeater_layout(self):
        field = build_field_config(Prop(name="buttons", type="array"))
        assert field.type == AcfFieldType.REPEATER
        assert field.auxiliary == {"layout": "row"}

    def test_button_has_no_auxiliary(self):
        field = build_field_config(Prop(name="button", type="object"))
        assert field.type == AcfFieldType.ADVANCED_LINK
        assert field.auxiliary == {}

    def test_number_has_no_auxiliary(self):
        field = build_field_config(Prop(name="count", type="number"))
        assert field.type == AcfFieldType.NUMBER
        assert field.auxiliary == {}

    def test_valign_choices(self):
        field = build_field_config(Prop(name="valign", type="string"))
        assert field.type == AcfFieldType.BUTTON_GROUP
        assert field.auxiliary == {"choices": {"start": "Top", "center": "Center", "end": "Bottom"}}

    @pytest.mark.parametrize("name", ["align", "halign", "text-align"])
    def test_horizontal_choices(self, name):
        field = build_field_config(Prop(name=name, type="string"))
        assert field.type == AcfFieldType.BUTTON_GROUP
        assert field.auxiliary == {"choices": HORIZONTAL}

    def test_kebab_label(self):
        assert build_field_config(Prop(name="text-align", type="string")).label == "Text-align"

    def test_unmapped_type_raises(self):
        with pytest.raises(UnmappedFieldTypeError) as exc_info:
            build_field_config(Prop(name="settings", type="Object"))
        assert exc_info.value.prop_name == "settings"
        assert exc_info.value.declared_type == "Object"
        assert "settings" in str(exc_info.value)


class TestAuxiliarySettings:
    def test_name_override_replaces_type_defaults(self):
        # A repeater-typed field named "align" gets only the choices.
        assert auxiliary_settings(AcfFieldType.REPEATER, "align") == {"choices": HORIZONTAL}

    def test_gallery_defaults(self):
        assert auxiliary_settings(AcfFieldType.GALLERY, "images") == {
            "return_format": "array",
            "preview_size": "thumbnail",
        }

    def test_unknown_combination_is_empty(self):
        assert auxiliary_settings(AcfFieldType.TEXT, "title") == {}

    def test_returns_fresh_values(self):
        first = auxiliary_settings(AcfFieldType.BUTTON_GROUP, "valign")
        first["choices"]["start"] = "Changed"
        first["extra"] = True
        assert auxiliary_settings(AcfFieldType.BUTTON_GROUP, "valign") == {
            "choices": {"start": "Top", "center": "Center", "end": "Bottom"}
        }
