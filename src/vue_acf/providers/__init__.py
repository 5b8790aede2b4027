"""Component metadata providers."""

from vue_acf.providers.base import MetadataProvider
from vue_acf.providers.vue import VueSFCProvider, parse_component

__all__ = [
    "MetadataProvider",
    "VueSFCProvider",
    "parse_component",
]
