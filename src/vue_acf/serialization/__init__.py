"""Field-group JSON serialization."""

from vue_acf.serialization.io import field_group_path, render_field_group, save_field_group, write_field_group

__all__ = ["field_group_path", "render_field_group", "save_field_group", "write_field_group"]
