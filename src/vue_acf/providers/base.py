"""Abstract base for component metadata providers."""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from pathlib import Path

from vue_acf.exceptions import SourceNotFoundError, SourceUnreadableError
from vue_acf.schema.component import ComponentMetadata


class MetadataProvider(ABC):
    """Protocol for component metadata providers.

    Each provider reads one kind of component source file and produces the
    component's name and its declared props.
    """

    @abstractmethod
    async def read(self, path: Path) -> ComponentMetadata:
        """Read the component at *path* and extract its metadata.

        Args:
            path: Path to the component source file.

        Returns:
            ComponentMetadata with the component name and props in declaration order.

        Raises:
            SourceError: If the file is missing or unreadable.
            MetadataParseError: If no metadata can be extracted.
        """

    async def read_source(self, path: Path) -> str:
        """Read *path* as UTF-8 text without blocking the event loop."""
        return await asyncio.to_thread(_read_text, path)


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise SourceNotFoundError(f"Error reading {path}. Does it exist?", path=path, cause=exc) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceUnreadableError(f"Error reading {path}: {exc}", path=path, cause=exc) from exc
