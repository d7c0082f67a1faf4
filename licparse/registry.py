"""Process-wide registry of license entry collectors."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from licparse.segmenter import LicenseEntry
from licparse.segmenter.types import LicenseEntryCollector

logger = logging.getLogger(__name__)

# Collectors in registration order.
_COLLECTORS: list[LicenseEntryCollector] = []


def add_license(collector: LicenseEntryCollector) -> None:
    """Register a collector producing license entries.

    The collector is only called when ``licenses`` is iterated, so it can
    defer expensive work such as reading files until the licenses are
    actually needed.

    Args:
        collector: Zero-argument callable returning license entries.
    """

    _COLLECTORS.append(collector)
    logger.debug(f"Registered license collector #{len(_COLLECTORS)}")


def licenses() -> Iterator[LicenseEntry]:
    """Yield the entries of every registered collector, in order."""

    # Iterate over a snapshot so collectors may register further ones.
    for collector in list(_COLLECTORS):
        yield from collector()


def collector_count() -> int:
    """Return the number of registered collectors."""
    return len(_COLLECTORS)


def reset() -> None:
    """Remove all registered collectors."""
    _COLLECTORS.clear()
