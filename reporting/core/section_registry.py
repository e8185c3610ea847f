#!/usr/bin/env python3
"""
Section registry pattern for modular report building.

Provides:
- Abstract Section base class
- SectionConfig for section metadata
- RenderContext handed to every section
- Global SECTION_REGISTRY for auto-registration
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import List, Dict, Optional, Tuple
import logging

LOGGER = logging.getLogger(__name__)


# ============================================================================
# SECTION CONFIGURATION
# ============================================================================
@dataclass
class SectionConfig:
    """
    Configuration for a report section.

    Attributes:
        name: Unique section identifier (e.g., "longer_than_10")
        title: Header line written above the section body
        enabled: Whether section should be included
        order: Sort order (lower = earlier in report)
        blank_line_before: Emit an empty line before the header
    """
    name: str
    title: str
    enabled: bool = True
    order: int = 100
    blank_line_before: bool = True

    def __post_init__(self):
        """Validate configuration."""
        if not self.name:
            raise ValueError("Section name cannot be empty")
        if self.order < 0:
            raise ValueError("Section order must be non-negative")


# ============================================================================
# RENDER CONTEXT
# ============================================================================
@dataclass(frozen=True)
class RenderContext:
    """
    Context passed to section render() methods.

    Every section reads the same country tuple; none of them can change it.
    """
    countries: Tuple[str, ...]
    source: Optional[Path] = None


# ============================================================================
# ABSTRACT SECTION
# ============================================================================
class Section(ABC):
    """
    Abstract base class for report sections.

    Subclasses implement render(), returning the body lines only;
    lines() adds the blank separator and the header.
    """

    def __init__(self, config: SectionConfig):
        self.config = config
        self.logger = logging.getLogger(f"{__name__}.{config.name}")

    @abstractmethod
    def render(self, context: RenderContext) -> List[str]:
        """
        Render section body.

        Args:
            context: Rendering context with the country list

        Returns:
            List of body lines (may be empty)
        """

    def lines(self, context: RenderContext) -> List[str]:
        """Return the full section: optional blank line, header, body."""
        out = [""] if self.config.blank_line_before else []
        out.append(self.config.title)
        out.extend(self.render(context))
        return out

    def __repr__(self) -> str:
        return f"Section(name='{self.config.name}', enabled={self.config.enabled}, order={self.config.order})"


# ============================================================================
# SECTION REGISTRY
# ============================================================================
class SectionRegistry:
    """
    Registry for report sections.

    Sections auto-register on module import via:
        SECTION_REGISTRY.register(MySection(SectionConfig(...)))
    """

    def __init__(self):
        self._sections: Dict[str, Section] = {}
        self.logger = logging.getLogger(__name__)

    def register(self, section: Section) -> None:
        """
        Register a section.

        Raises:
            ValueError: If section name already registered
        """
        name = section.config.name
        if name in self._sections:
            raise ValueError(f"Section '{name}' already registered")

        self._sections[name] = section
        self.logger.debug("Registered section: %s", name)

    def unregister(self, name: str) -> None:
        """Unregister a section by name (no-op when unknown)."""
        if name in self._sections:
            del self._sections[name]
            self.logger.debug("Unregistered section: %s", name)

    def get(self, name: str) -> Optional[Section]:
        return self._sections.get(name)

    def get_enabled_sections(self) -> List[Section]:
        """
        Get all enabled sections sorted by order.

        Returns:
            List of enabled Section instances, sorted by config.order
        """
        sections = [s for s in self._sections.values() if s.config.enabled]
        return sorted(sections, key=lambda s: s.config.order)

    def list_all(self) -> List[str]:
        return list(self._sections.keys())

    def __len__(self) -> int:
        return len(self._sections)

    def __contains__(self, name: str) -> bool:
        return name in self._sections


# ============================================================================
# GLOBAL REGISTRY INSTANCE
# ============================================================================
SECTION_REGISTRY = SectionRegistry()
