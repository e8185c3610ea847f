#!/usr/bin/env python3
"""
Data loader for country report generation.

Provides:
- CountryBundle: Container for the loaded country list
- load_countries(): Single entry point to read the input file
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from core.io import read_lines

LOGGER = logging.getLogger(__name__)


# ============================================================================
# DATA BUNDLE
# ============================================================================
@dataclass(frozen=True)
class CountryBundle:
    """
    Container for the loaded country list.

    Attributes:
        source: File the names were read from
        countries: Names in file order, duplicates kept
    """
    source: Path
    countries: Tuple[str, ...]

    def __post_init__(self):
        LOGGER.info("CountryBundle loaded: %d names from %s",
                    len(self.countries), self.source)

    def __len__(self) -> int:
        return len(self.countries)

    @property
    def is_empty(self) -> bool:
        return not self.countries


# ============================================================================
# LOADING FUNCTIONS
# ============================================================================
def load_countries(path: Path | str, encoding: str = "utf-8") -> CountryBundle:
    """
    Load the country list, one name per line.

    Every line is taken as-is, blank or not. I/O errors propagate.

    Args:
        path: Input text file
        encoding: File encoding

    Returns:
        CountryBundle with the names in file order

    Example:
        >>> bundle = load_countries("week8countries.txt")
        >>> len(bundle)
        31
    """
    path = Path(path)
    LOGGER.debug("Reading countries from %s (%s)", path, encoding)

    countries = tuple(read_lines(path, encoding=encoding))
    if not countries:
        LOGGER.warning("✗ No country names in %s", path)

    return CountryBundle(source=path, countries=countries)


# ============================================================================
# UTILITY FUNCTIONS
# ============================================================================
def summarize_country_bundle(bundle: CountryBundle) -> str:
    """
    Create human-readable summary of a country bundle.

    Returns:
        Multi-line summary string
    """
    distinct = len(set(bundle.countries))
    blank = sum(1 for c in bundle.countries if not c.strip())
    lines = [
        "Country Bundle Summary",
        f"  Source:    {bundle.source}",
        "",
        f"  Names:     {len(bundle):6d}",
        f"  Distinct:  {distinct:6d}",
        f"  Blank:     {blank:6d}",
    ]
    return "\n".join(lines)
