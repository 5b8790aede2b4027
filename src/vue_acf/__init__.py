"""vue-acf: generate ACF field groups from Vue component props."""

from vue_acf.config import ParseConfig
from vue_acf.engine import PipelineResult, build_field_group, run_pipeline
from vue_acf.exceptions import (
    DestinationWriteError,
    MetadataParseError,
    SourceError,
    SourceNotFoundError,
    SourceUnreadableError,
    UnmappedFieldTypeError,
    VueAcfError,
)

__all__ = [
    "DestinationWriteError",
    "MetadataParseError",
    "ParseConfig",
    "PipelineResult",
    "SourceError",
    "SourceNotFoundError",
    "SourceUnreadableError",
    "UnmappedFieldTypeError",
    "VueAcfError",
    "build_field_group",
    "run_pipeline",
]
