"""License text together with the packages it applies to."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from attrs import asdict, define, field

from .paragraph import Paragraph
from .segment_text import iter_paragraphs
from .types import EntryDict, PackageNames


def _to_packages(value: str | Iterable[str]) -> PackageNames:
    """Normalize package names into a tuple."""

    if isinstance(value, str):
        return (value,)
    return tuple(value)


@define(slots=True, frozen=True)
class LicenseEntry:
    """License text together with the packages it applies to.

    Attributes:
        text: Raw, hard-wrapped license text.
        packages: Names of the packages covered by the license.
        source: Where the text came from, usually a file path.
    """

    text: str = field(repr=False)
    packages: PackageNames = field(default=(), converter=_to_packages)
    source: str | None = None

    def paragraphs(self) -> Iterator[Paragraph]:
        """Return a fresh iterator over the paragraphs of the license."""
        return iter_paragraphs(self.text)

    def to_dict(self) -> EntryDict:
        """Return the entry as plain data with its paragraphs segmented."""
        return {
            "packages": list(self.packages),
            "source": self.source,
            "paragraphs": [asdict(p) for p in self.paragraphs()],
        }
