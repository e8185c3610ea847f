#!/usr/bin/env python3
"""
Section Renderer

Renders every enabled section of a registry into one list of report lines.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from reporting.core.section_registry import RenderContext, SectionRegistry

LOGGER = logging.getLogger(__name__)


class SectionRenderer:
    """
    Renders all enabled sections from the registry, in order.

    A failing section aborts the render: a report missing a section
    would still look complete to a reader.
    """

    def __init__(self, registry: Optional[SectionRegistry] = None):
        """
        Args:
            registry: Registry to render (defaults to SECTION_REGISTRY with
                all built-in sections loaded)
        """
        if registry is None:
            import reporting.sections  # noqa: F401  (registers sections)
            from reporting.core.section_registry import SECTION_REGISTRY
            registry = SECTION_REGISTRY
        self.registry = registry

    def render_all(self, context: RenderContext) -> List[str]:
        """
        Render all enabled sections.

        Args:
            context: RenderContext with the country list

        Returns:
            List of report lines
        """
        lines: List[str] = []

        sections = self.registry.get_enabled_sections()
        LOGGER.info("  Rendering %d enabled sections for %s:", len(sections),
                    context.source or "<memory>")

        for section in sections:
            rendered = section.lines(context)
            lines.extend(rendered)
            LOGGER.debug("    ✓ %s (%d lines)", section.config.name, len(rendered))

        LOGGER.info("  Total lines: %d", len(lines))
        return lines
