"""
Report generation pipeline modules.

Components for loading the country list and rendering sections.
"""

from .data_loader import load_countries, CountryBundle, summarize_country_bundle
from .section_renderer import SectionRenderer

__all__ = [
    'load_countries',
    'CountryBundle',
    'summarize_country_bundle',
    'SectionRenderer',
]
