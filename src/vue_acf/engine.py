"""Pipeline engine: read a component, map its props, write the field group.

Stages run strictly in order. Reading and writing are the only awaits;
mapping and assembly are synchronous.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from vue_acf.config import ParseConfig
from vue_acf.exceptions import MetadataParseError, VueAcfError
from vue_acf.mapping.assembler import assemble_field_group
from vue_acf.mapping.builder import build_field_config
from vue_acf.providers.base import MetadataProvider
from vue_acf.providers.vue import VueSFCProvider
from vue_acf.schema.component import ComponentMetadata
from vue_acf.schema.field_group import FieldGroupConfig
from vue_acf.serialization.io import write_field_group

logger = logging.getLogger(__name__)

# Map source file extensions to provider classes
_EXTENSION_PROVIDER_MAP: dict[str, type[MetadataProvider]] = {
    ".vue": VueSFCProvider,
}


def _detect_provider(path: Path) -> MetadataProvider:
    """Pick a provider for *path* by its extension.

    Raises:
        MetadataParseError: If no provider handles the extension.
    """
    provider_class = _EXTENSION_PROVIDER_MAP.get(path.suffix.lower())
    if provider_class is None:
        raise MetadataParseError(f"No metadata provider for '{path.suffix}' files ({path}).", path=path)
    return provider_class()


@dataclass
class PipelineResult:
    """Outcome of one pipeline run.

    ``error`` is set when a stage failed; the fields for the stages that
    completed before it are still populated.
    """

    component: ComponentMetadata | None = None
    group: FieldGroupConfig | None = None
    output_path: Path | None = None
    error: VueAcfError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def build_field_group(metadata: ComponentMetadata) -> FieldGroupConfig:
    """Map every prop of *metadata* to a field and assemble the group.

    Raises:
        UnmappedFieldTypeError: If any prop has no field type.
    """
    fields = [build_field_config(prop) for prop in metadata.props]
    return assemble_field_group(metadata.name, fields)


async def run_pipeline(
    config: ParseConfig,
    *,
    provider: MetadataProvider | None = None,
    dry_run: bool = False,
) -> PipelineResult:
    """Run the full pipeline for the component described by *config*.

    Args:
        config: Source and destination settings.
        provider: Optional provider override. Defaults to one chosen by file extension.
        dry_run: If True, stop after assembly and write nothing.

    Returns:
        PipelineResult with the written path on success, or the error that stopped the run.
    """
    result = PipelineResult()
    source = config.source_path

    try:
        provider = provider or _detect_provider(source)
        result.component = await provider.read(source)
        result.group = build_field_group(result.component)
        if not dry_run:
            result.output_path = await write_field_group(result.group, config.dest_dir)
    except VueAcfError as exc:
        logger.info("Pipeline failed for %s: %s", source, exc.detail)
        result.error = exc

    return result
