"""Shared test fixtures for vue-acf."""

from __future__ import annotations

from pathlib import Path

import pytest
from vue_acf.schema.component import ComponentMetadata, Prop

CALLOUT_SFC = """\
<template>
  <div class="callout" :class="align">
    <img :src="imageHero.url" />
    <div v-html="body" />
  </div>
</template>

<script>
export default {
  name: 'Callout',
  props: {
    body: String,
    imageHero: {
      type: String,
      default: '',
    },
    align: {
      type: String,
      default: 'left', // left | center | right
    },
  },
}
</script>
"""


@pytest.fixture
def callout_metadata() -> ComponentMetadata:
    return ComponentMetadata(
        name="Callout",
        props=[
            Prop(name="body", type="string"),
            Prop(name="imageHero", type="string"),
            Prop(name="align", type="string"),
        ],
    )


@pytest.fixture
def components_dir(tmp_path: Path) -> Path:
    """A directory holding ``Callout.vue``."""
    src = tmp_path / "components"
    src.mkdir()
    (src / "Callout.vue").write_text(CALLOUT_SFC, encoding="utf-8")
    return src


@pytest.fixture
def callout_source() -> str:
    return CALLOUT_SFC
