#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Country Report Generation - Standalone Entry Point

Reads a list of country names and writes the fixed set of report sections.

Usage:
    # Defaults: week8countries.txt -> matches/data.txt
    python generate_report.py

    # Other files
    python generate_report.py --input countries.txt --output out/report.txt

    # Config overrides
    python generate_report.py --set report.encoding=latin-1

    # Verbose logging
    python generate_report.py -v
"""
from __future__ import annotations

import argparse
import logging
import sys
from copy import deepcopy
from pathlib import Path

REPO = Path(__file__).resolve().parent
sys.path.insert(0, str(REPO))

from core.config import BUILTIN_DEFAULTS, get_config, get_config_overrides, get_config_source
from core.runtime import resolve_path
from reporting.core.errors import ReportIOError
from reporting.report_builder import ReportBuilder

LOGGER = logging.getLogger("generate_report")


# ============================================================================
# SETUP
# ============================================================================
def setup_logging(cfg, verbose=False):
    log_cfg = cfg.get("logging", {})
    if verbose:
        level = logging.DEBUG
    else:
        level = getattr(logging, str(log_cfg.get("level", "INFO")).upper(), logging.INFO)
    logging.basicConfig(level=level, format=log_cfg.get("format", "[%(levelname)s] %(message)s"))


# ============================================================================
# COMMAND LINE INTERFACE
# ============================================================================
def parse_args(argv):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Generate a plain-text report from a list of country names",
    )
    parser.add_argument(
        "--input", "-i",
        help="Country list file (default: report.input_path from config)",
        type=Path,
        default=None,
        metavar="PATH"
    )
    parser.add_argument(
        "--output", "-o",
        help="Report file (default: report.output_path from config)",
        type=Path,
        default=None,
        metavar="PATH"
    )
    parser.add_argument(
        "--config",
        help="Alternative YAML config (default: config/defaults.yaml)",
        metavar="PATH"
    )
    parser.add_argument(
        "--set",
        help="Override a config value, e.g. report.encoding=latin-1 (repeatable)",
        action="append",
        default=[],
        metavar="KEY=VALUE"
    )
    parser.add_argument(
        "--verbose", "-v",
        help="Enable verbose logging (DEBUG level)",
        action="store_true"
    )
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point. Returns the process exit code."""
    if argv is None:
        argv = sys.argv[1:]
    args = parse_args(argv)

    cfg_error = None
    try:
        cfg = get_config(cli_args=argv)
    except (FileNotFoundError, TypeError, ValueError) as e:
        cfg_error = e
        cfg = deepcopy(BUILTIN_DEFAULTS)

    setup_logging(cfg, verbose=args.verbose)
    if cfg_error is not None:
        LOGGER.warning("Could not load config: %s (continuing with defaults)", cfg_error)
    else:
        LOGGER.debug("[OK] Config loaded from %s", get_config_source())
        for key, value in get_config_overrides().items():
            LOGGER.debug("  override %s = %r", key, value)

    report_cfg = cfg["report"]
    input_path = resolve_path(args.input or report_cfg["input_path"])
    output_path = resolve_path(args.output or report_cfg["output_path"])

    try:
        ReportBuilder(input_path, output_path, cfg).build()
    except ReportIOError as e:
        LOGGER.debug("Report generation failed", exc_info=True)
        print(f"Error processing file: {e.cause or e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
