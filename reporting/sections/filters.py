#!/usr/bin/env python3
"""
Filter sections.

Each section keeps the countries matching a predicate, in input order:
- Longer than 10 characters
- Shorter than 5 characters
- Starting with 'A'
- Ending with 'land'
- Containing 'United'
- More than one word
"""
from typing import Callable, List

from reporting.core.section_registry import Section, SectionConfig, SECTION_REGISTRY


def word_count(name: str) -> int:
    """
    Count the pieces of ``name`` split on single spaces.

    A name without spaces (the empty name included) is one word.
    Otherwise trailing empty pieces are dropped, so "Chad " is one word
    while " Chad" and "Costa  Rica" count their leading/inner gaps.
    """
    pieces = name.split(" ")
    if len(pieces) == 1:
        return 1
    while pieces and pieces[-1] == "":
        pieces.pop()
    return len(pieces)


def is_multi_word(name: str) -> bool:
    return word_count(name) > 1


class PredicateSection(Section):
    """Countries for which ``predicate`` holds."""

    def __init__(self, config: SectionConfig, predicate: Callable[[str], bool]):
        super().__init__(config)
        self.predicate = predicate

    def render(self, context) -> List[str]:
        matches = [country for country in context.countries if self.predicate(country)]
        self.logger.debug("%d of %d countries match", len(matches), len(context.countries))
        return matches


_FILTERS = [
    ("longer_than_10", "Country names longer than 10 characters:", 10,
     lambda c: len(c) > 10),
    ("shorter_than_5", "Country names shorter than 5 characters:", 20,
     lambda c: len(c) < 5),
    ("starts_with_a", "Country names starting with 'A':", 30,
     lambda c: c.startswith("A")),
    ("ends_with_land", "Country names ending with 'land':", 40,
     lambda c: c.endswith("land")),
    ("contains_united", "Country names containing 'United':", 50,
     lambda c: "United" in c),
    ("multi_word", "Countries with more than one word:", 130,
     is_multi_word),
]

# Auto-register
for _name, _title, _order, _predicate in _FILTERS:
    SECTION_REGISTRY.register(
        PredicateSection(SectionConfig(name=_name, title=_title, order=_order), _predicate)
    )
