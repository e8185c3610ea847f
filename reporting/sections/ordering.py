#!/usr/bin/env python3
"""
Ordering sections.

Renders:
- All countries in alphabetical order
- All countries in reverse alphabetical order
- Unique first letters, in order of first appearance
"""
from typing import List

from reporting.core.section_registry import Section, SectionConfig, SECTION_REGISTRY


class SortedSection(Section):
    """Full copy of the country list, sorted lexically."""

    def __init__(self, config: SectionConfig, reverse: bool = False):
        super().__init__(config)
        self.reverse = reverse

    def render(self, context) -> List[str]:
        return sorted(context.countries, reverse=self.reverse)


class FirstLettersSection(Section):
    """First character of each country, duplicates removed."""

    def render(self, context) -> List[str]:
        # Empty names have no first letter and are skipped.
        letters = (country[0] for country in context.countries if country)
        return list(dict.fromkeys(letters))


# Auto-register
SECTION_REGISTRY.register(
    SortedSection(SectionConfig(
        name="alphabetical",
        title="Country names in alphabetical order:",
        order=60,
    ))
)
SECTION_REGISTRY.register(
    SortedSection(SectionConfig(
        name="reverse_alphabetical",
        title="Country names in reverse alphabetical order:",
        order=70,
    ), reverse=True)
)
SECTION_REGISTRY.register(
    FirstLettersSection(SectionConfig(
        name="unique_first_letters",
        title="Unique first letters of country names:",
        order=80,
    ))
)
