"""Render and write ACF field groups as JSON files."""

from __future__ import annotations

import asyncio
import json
import logging
import os
import stat
import tempfile
from pathlib import Path

from vue_acf.config import DEFAULT_DEST_DIR
from vue_acf.exceptions import DestinationWriteError
from vue_acf.schema.field_group import FieldGroupConfig

logger = logging.getLogger(__name__)


def render_field_group(group: FieldGroupConfig) -> str:
    """Serialize *group* to 2-space indented JSON with a trailing newline."""
    return json.dumps(group.to_document(), indent=2, ensure_ascii=False) + "\n"


def field_group_path(group: FieldGroupConfig, dest_dir: str | Path = DEFAULT_DEST_DIR) -> Path:
    return Path(dest_dir) / f"{group.key}.json"


def _target_mode(dest: Path) -> int:
    """Mode for *dest*: the existing file's mode, else the umask default for new files."""
    try:
        return stat.S_IMODE(dest.stat().st_mode)
    except FileNotFoundError:
        pass
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def _write_atomic(dest: Path, content: str) -> None:
    """Write *content* to *dest* via a temp file in the same directory.

    The target is either fully replaced or left untouched.
    """
    fd, tmp_name = tempfile.mkstemp(dir=dest.parent, prefix=f".{dest.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(content)
        os.chmod(tmp_name, _target_mode(dest))
        os.replace(tmp_name, dest)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def save_field_group(group: FieldGroupConfig, dest_dir: str | Path = DEFAULT_DEST_DIR) -> Path:
    """Write *group* to ``<dest_dir>/<group key>.json``, overwriting any existing file.

    *dest_dir* is created if missing, but its parent must already exist.

    Returns:
        The path that was written.

    Raises:
        DestinationWriteError: If the directory or file cannot be written.
    """
    directory = Path(dest_dir)
    dest = field_group_path(group, directory)
    content = render_field_group(group)

    try:
        if not directory.is_dir():
            directory.mkdir()
            logger.info("Created directory %s", directory)
        _write_atomic(dest, content)
    except OSError as exc:
        logger.error("Writing %s failed: %s", dest, type(exc).__name__)
        raise DestinationWriteError(f"Error writing {dest}: {exc.strerror or exc}", path=dest, cause=exc) from exc

    logger.info("Wrote %s", dest)
    return dest


async def write_field_group(group: FieldGroupConfig, dest_dir: str | Path = DEFAULT_DEST_DIR) -> Path:
    """Async wrapper around :func:`save_field_group` that keeps the event loop free."""
    return await asyncio.to_thread(save_field_group, group, dest_dir)
