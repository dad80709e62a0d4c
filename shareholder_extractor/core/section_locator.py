"""Locate the shareholder table inside a full document.

Stock purchase agreements put the purchaser list in an exhibit or schedule
near the end of the document. Searching only that window keeps the record
pattern from matching names in signature blocks and recitals.
"""

import re
from dataclasses import dataclass

from shareholder_extractor.core.config import SectionConfig


@dataclass(frozen=True)
class LocatedSection:
    """A bounded window of document text following an anchor phrase.

    Attributes:
        anchor: The anchor phrase that matched (lowercase form).
        start: Offset of the match in the full document.
        text: Original-cased text, at most SectionConfig.WINDOW_CHARS long.
    """

    anchor: str
    start: int
    text: str

    def __len__(self) -> int:
        return len(self.text)


_ANCHOR_PATTERNS = [
    (anchor, re.compile(re.escape(anchor), re.IGNORECASE))
    for anchor in SectionConfig.ANCHOR_PHRASES
]


def locate_section(
    text: str,
    window: int = SectionConfig.WINDOW_CHARS,
) -> LocatedSection | None:
    """Find the shareholder section.

    Anchors are tried in priority order; the first one present anywhere in
    the document wins and the window starts at its first occurrence. Near
    the end of the document the shorter remainder is returned as-is.

    Args:
        text: Full document text.
        window: Maximum section length in characters.

    Returns:
        LocatedSection, or None when no anchor phrase occurs.
    """
    for anchor, pattern in _ANCHOR_PATTERNS:
        match = pattern.search(text)
        if match:
            start = match.start()
            return LocatedSection(
                anchor=anchor,
                start=start,
                text=text[start:start + window],
            )
    return None
