#!/usr/bin/env python3
"""
Country Report Builder - Main Orchestrator

Coordinates the report generation pipeline:
1. Load the country list (CountryBundle)
2. Render sections
3. Write the report file

Usage:
    builder = ReportBuilder(input_path, output_path, cfg)
    report_path = builder.build()
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Any, List, Optional

from core.io import write_lines
from reporting.core.errors import ReportIOError
from reporting.core.section_registry import RenderContext, SectionRegistry
from reporting.pipeline.data_loader import (
    CountryBundle, load_countries, summarize_country_bundle,
)
from reporting.pipeline.section_renderer import SectionRenderer

LOGGER = logging.getLogger(__name__)


# ============================================================================
# REPORT BUILDER
# ============================================================================
class ReportBuilder:
    """
    Main orchestrator for country report generation.

    Attributes:
        input_path: Country list file
        output_path: Report file
        cfg: Configuration dict

    Example:
        >>> builder = ReportBuilder(
        ...     input_path=Path("week8countries.txt"),
        ...     output_path=Path("matches/data.txt"),
        ...     cfg=get_config()
        ... )
        >>> report_path = builder.build()
    """

    def __init__(self,
                 input_path: Path,
                 output_path: Path,
                 cfg: Optional[Dict[str, Any]] = None,
                 registry: Optional[SectionRegistry] = None):
        self.input_path = Path(input_path)
        self.output_path = Path(output_path)
        self.cfg = cfg or {}
        self.encoding = self.cfg.get("report", {}).get("encoding", "utf-8")
        self.registry = registry

        # Populated during build
        self.data: Optional[CountryBundle] = None
        self.lines: List[str] = []

        LOGGER.debug("ReportBuilder initialized:")
        LOGGER.debug("  Input:  %s", self.input_path)
        LOGGER.debug("  Output: %s", self.output_path)

    # ========================================================================
    # PUBLIC API
    # ========================================================================
    def build(self) -> Path:
        """
        Execute the complete report pipeline.

        Returns:
            Path to the written report

        Raises:
            ReportIOError: If the input cannot be read or the report
                cannot be written. Nothing is written on a read failure.
        """
        LOGGER.info("[1/3] Loading countries...")
        self._load_data()

        LOGGER.info("[2/3] Rendering sections...")
        self._render_sections()

        LOGGER.info("[3/3] Writing report...")
        self._write_report()

        LOGGER.info("✓ Report written: %s (%d lines)", self.output_path, len(self.lines))
        return self.output_path

    # ========================================================================
    # PRIVATE METHODS (Pipeline Stages)
    # ========================================================================
    def _load_data(self):
        try:
            self.data = load_countries(self.input_path, encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise ReportIOError(f"Cannot read {self.input_path}",
                                path=self.input_path, cause=e) from e

        for line in summarize_country_bundle(self.data).splitlines():
            LOGGER.debug("  %s", line)

    def _render_sections(self):
        context = RenderContext(
            countries=self.data.countries,
            source=self.data.source,
        )
        self.lines = SectionRenderer(self.registry).render_all(context)

    def _write_report(self):
        try:
            write_lines(self.lines, self.output_path, encoding=self.encoding)
        except OSError as e:
            raise ReportIOError(f"Cannot write {self.output_path}",
                                path=self.output_path, cause=e) from e


# ============================================================================
# CONVENIENCE FUNCTIONS
# ============================================================================
def generate_report(input_path: Path | str,
                    output_path: Path | str,
                    cfg: Optional[Dict[str, Any]] = None) -> Path:
    """
    Generate the country report.

    Convenience wrapper around ReportBuilder.

    Raises:
        ReportIOError: On any read/write failure
    """
    return ReportBuilder(Path(input_path), Path(output_path), cfg).build()
