#!/usr/bin/env python3
"""
Summary sections.

Single-value results over the whole country list:
- Total count
- Longest and shortest name (first one wins a tie)
- Whether any name starts with 'Z'
- Whether all names are longer than 3 characters
"""
from typing import Callable, List, Optional

from reporting.core.section_registry import Section, SectionConfig, SECTION_REGISTRY


def format_bool(value: bool) -> str:
    """Render a boolean as the lowercase words used in the report."""
    return "true" if value else "false"


def longest_name(countries) -> Optional[str]:
    # max/min return the first of several equal candidates
    return max(countries, key=len, default=None)


def shortest_name(countries) -> Optional[str]:
    return min(countries, key=len, default=None)


class CountSection(Section):
    """Number of entries in the country list."""

    def render(self, context) -> List[str]:
        return [str(len(context.countries))]


class ExtremeSection(Section):
    """One name picked by ``pick``; empty body when there is none."""

    def __init__(self, config: SectionConfig, pick: Callable):
        super().__init__(config)
        self.pick = pick

    def render(self, context) -> List[str]:
        name = self.pick(context.countries)
        return [] if name is None else [name]


class MatchSection(Section):
    """
    Boolean check across all countries.

    ``quantifier`` is ``any`` or ``all``; an empty list gives ``false``
    for ``any`` and ``true`` for ``all``.
    """

    def __init__(self, config: SectionConfig, quantifier: Callable,
                 predicate: Callable[[str], bool]):
        super().__init__(config)
        self.quantifier = quantifier
        self.predicate = predicate

    def render(self, context) -> List[str]:
        result = self.quantifier(self.predicate(country) for country in context.countries)
        return [format_bool(result)]


# Auto-register
SECTION_REGISTRY.register(
    CountSection(SectionConfig(
        name="total_count",
        title="Total count of country names:",
        order=90,
    ))
)
SECTION_REGISTRY.register(
    ExtremeSection(SectionConfig(
        name="longest",
        title="Longest country name:",
        order=100,
    ), longest_name)
)
SECTION_REGISTRY.register(
    ExtremeSection(SectionConfig(
        name="shortest",
        title="Shortest country name:",
        order=110,
    ), shortest_name)
)
SECTION_REGISTRY.register(
    MatchSection(SectionConfig(
        name="any_starts_with_z",
        title="Any country name starts with 'Z':",
        order=150,
    ), any, lambda c: c.startswith("Z"))
)
SECTION_REGISTRY.register(
    MatchSection(SectionConfig(
        name="all_longer_than_3",
        title="All country names longer than 3 characters:",
        order=160,
    ), all, lambda c: len(c) > 3)
)
