"""Common type aliases for segmenter structures."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .license_entry import LicenseEntry  # noqa: F401
    from .paragraph import Paragraph  # noqa: F401


ParagraphList = list["Paragraph"]
LineList = list[str]
PackageNames = tuple[str, ...]
EntryList = list["LicenseEntry"]
EntryDict = dict[str, Any]
LicenseEntryCollector = Callable[[], Iterable["LicenseEntry"]]
