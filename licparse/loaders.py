"""Load license texts from files and manifests."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from licparse.json_utils import json_loads
from licparse.segmenter import LicenseEntry
from licparse.segmenter.types import EntryList, LicenseEntryCollector

logger = logging.getLogger(__name__)


class LicenseLoadError(ValueError):
    """Raised when a license file or manifest cannot be loaded.

    Attributes:
        path: File that failed to load.
    """

    def __init__(self, message: str, path: Path | str | None = None):
        super().__init__(message)
        self.path = str(path) if path is not None else None


def read_license_text(path: Path) -> str:
    """Read a license file, falling back to latin-1 for legacy encodings.

    Args:
        path: Location of the license file.

    Returns:
        Text of the file with line endings normalized to ``\\n``.

    Raises:
        LicenseLoadError: If the file cannot be read.
    """

    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        logger.warning(f"{path}: not valid UTF-8, reading as latin-1")
        return path.read_text(encoding="latin-1")
    except OSError as exc:
        raise LicenseLoadError(
            f"Failed to read license file {path}: {exc}", path=path
        ) from exc


def entries_from_files(
    paths: Iterable[Path], packages: Iterable[str] = ()
) -> EntryList:
    """Create one license entry per file.

    Args:
        paths: License files to read.
        packages: Package names attached to every entry.

    Returns:
        Entries in the order of ``paths``.
    """

    names = tuple(packages)
    entries: EntryList = []
    for path in paths:
        text = read_license_text(path)
        logger.debug(f"Read {len(text)} characters from {path}")
        entries.append(
            LicenseEntry(text=text, packages=names, source=str(path))
        )
    return entries


def _load_manifest_file(path: Path) -> Any:  # noqa: ANN401
    """Decode a JSON or YAML manifest depending on the file extension."""

    # JSON is decoded from raw bytes, YAML from text.
    try:
        if path.suffix == ".json":
            content: str | bytes = path.read_bytes()
        else:
            content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise LicenseLoadError(
            f"Failed to read manifest {path}: {exc}", path=path
        ) from exc

    try:
        if path.suffix == ".json":
            return json_loads(content)
        return yaml.safe_load(content)
    except (ValueError, yaml.YAMLError) as exc:
        raise LicenseLoadError(
            f"Failed to decode manifest {path}: {exc}", path=path
        ) from exc


def _entry_from_item(
    item: Any,  # noqa: ANN401
    index: int,
    path: Path,
) -> LicenseEntry:
    """Build a license entry from one item of a manifest.

    Args:
        item: Mapping with ``packages`` and either ``text`` or ``file``.
        index: Position of the item, used in error messages.
        path: Location of the manifest; ``file`` is relative to it.

    Returns:
        The described license entry.
    """

    if not isinstance(item, dict):
        raise LicenseLoadError(
            f"{path}: licenses[{index}] must be a mapping", path=path
        )

    has_text = "text" in item
    has_file = "file" in item
    if has_text == has_file:
        raise LicenseLoadError(
            f"{path}: licenses[{index}] needs exactly one of 'text' or 'file'",
            path=path,
        )

    packages = item.get("packages") or []
    if not isinstance(packages, (str, list)):
        raise LicenseLoadError(
            f"{path}: licenses[{index}].packages must be a list or string",
            path=path,
        )

    key = "text" if has_text else "file"
    if not isinstance(item[key], str):
        raise LicenseLoadError(
            f"{path}: licenses[{index}].{key} must be a string", path=path
        )

    if has_text:
        return LicenseEntry(
            text=item["text"],
            packages=packages,
            source=f"{path}#licenses[{index}]",
        )

    # Resolve files relative to the manifest location.
    license_path = path.parent / item["file"]
    return LicenseEntry(
        text=read_license_text(license_path),
        packages=packages,
        source=str(license_path),
    )


def load_manifest(path: Path) -> EntryList:
    """Read license entries listed in a JSON or YAML manifest.

    The manifest holds a ``licenses`` list. Every item names the covered
    ``packages`` and gives the license either inline as ``text`` or as a
    ``file`` path relative to the manifest.

    Args:
        path: Location of the manifest.

    Returns:
        Entries in manifest order.

    Raises:
        LicenseLoadError: If the manifest is unreadable or malformed.
    """

    data = _load_manifest_file(path)
    if not isinstance(data, dict) or not isinstance(
        data.get("licenses"), list
    ):
        raise LicenseLoadError(
            f"{path}: manifest must contain a 'licenses' list", path=path
        )

    entries = [
        _entry_from_item(item, index, path)
        for index, item in enumerate(data["licenses"])
    ]
    logger.debug(f"Loaded {len(entries)} license entries from {path}")
    return entries


def file_collector(
    paths: Iterable[Path], packages: Iterable[str] = ()
) -> LicenseEntryCollector:
    """Return a registry collector reading ``paths`` when invoked."""

    path_list = list(paths)
    names = tuple(packages)
    return lambda: entries_from_files(path_list, names)


def manifest_collector(path: Path) -> LicenseEntryCollector:
    """Return a registry collector loading the manifest when invoked."""

    return lambda: load_manifest(path)
