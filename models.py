"""Record shapes passed between the scanner, the extractor and the writer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RawPage:
    """One decoded <page> subtree. Missing fields decode to empty strings."""

    title: str
    text: str
    namespace: Optional[str] = None
    redirect: bool = False


@dataclass(frozen=True)
class Summary:
    """One <doc> entry of the output document."""

    title: str
    url: str
    abstract: str

    def __post_init__(self):
        if not self.abstract:
            raise ValueError(f"empty abstract for page {self.title!r}")
