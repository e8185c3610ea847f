#!/usr/bin/env python3
"""
Per-country transform sections: uppercase names and character counts.
"""
from reporting.core.section_registry import Section, SectionConfig, SECTION_REGISTRY


class UppercaseSection(Section):

    def render(self, context):
        return [country.upper() for country in context.countries]


class CharacterCountSection(Section):
    """One "<name>: <length> characters" line per country."""

    def render(self, context):
        return [f"{country}: {len(country)} characters" for country in context.countries]


# Auto-register
SECTION_REGISTRY.register(
    UppercaseSection(SectionConfig(
        name="uppercase",
        title="Country names in uppercase:",
        order=120,
    ))
)
SECTION_REGISTRY.register(
    CharacterCountSection(SectionConfig(
        name="character_count",
        title="Country names to character count:",
        order=140,
    ))
)
