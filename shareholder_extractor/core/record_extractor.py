"""Candidate matching for shareholder rows.

Two stages, kept separate so the validator can be tested on its own:

1. find_candidates(): regex scan producing raw (name, shares) candidates,
   with table header words stripped from the name
2. extract_shareholders(): runs candidates through record_validator and
   deduplicates by name, keeping first-match order

Flattened PDF tables lose their columns, so a row like
    Iryna Krutenko | 54,000 | $0.0001
arrives as "Iryna Krutenko 54,000 shares ..." in running text.
"""

import logging
import re
from dataclasses import dataclass

from shareholder_extractor.core.config import EXCLUDED_NAME_WORDS, RegexPatterns
from shareholder_extractor.core.number_format import parse_share_count
from shareholder_extractor.core.record_validator import rejection_reason
from shareholder_extractor.core.section_locator import LocatedSection
from shareholder_extractor.pydantic_models.shareholder_models import ShareholderRecord

logger = logging.getLogger(__name__)

SHAREHOLDER_PATTERN = re.compile(RegexPatterns.SHAREHOLDER_LINE)


@dataclass(frozen=True)
class CandidateRecord:
    """A (name, shares) pair found by pattern matching, before validation.

    Attributes:
        name: Name with header words removed.
        shares: Parsed share count.
        raw_name: Name exactly as matched.
        offset: Match position inside the section text.
    """

    name: str
    shares: int
    raw_name: str = ""
    offset: int = 0


def clean_name(raw_name: str) -> str:
    """Remove table header words ("Schedule", "Name", ...) from a matched name."""
    kept = [
        token for token in raw_name.split()
        if token.lower() not in EXCLUDED_NAME_WORDS
    ]
    return " ".join(kept)


def find_candidates(section_text: str) -> list[CandidateRecord]:
    """Scan text for non-overlapping name/share-count matches.

    Matches with an unparseable number or a name made only of header
    words are dropped here.
    """
    candidates = []
    for match in SHAREHOLDER_PATTERN.finditer(section_text):
        raw_name = match.group(1).strip()
        try:
            shares = parse_share_count(match.group(2))
        except ValueError:
            continue

        name = clean_name(raw_name)
        if not name:
            continue

        candidates.append(CandidateRecord(
            name=name,
            shares=shares,
            raw_name=raw_name,
            offset=match.start(),
        ))
    return candidates


def extract_shareholders(section: LocatedSection | str | None) -> list[ShareholderRecord]:
    """Extract validated, deduplicated shareholders from a located section.

    Args:
        section: Output of locate_section(), a raw text window, or None.

    Returns:
        Shareholder records in first-match order. Empty when section is None.
    """
    if section is None:
        return []
    text = section.text if isinstance(section, LocatedSection) else section

    records: list[ShareholderRecord] = []
    seen: set[str] = set()
    for candidate in find_candidates(text):
        reason = rejection_reason(candidate.name, candidate.shares)
        if reason is not None:
            logger.debug(
                f"Rejected candidate {candidate.name!r} ({candidate.shares}): {reason}"
            )
            continue
        if candidate.name in seen:
            continue
        seen.add(candidate.name)
        records.append(ShareholderRecord(name=candidate.name, shares=candidate.shares))

    return records
