"""
Main entry point for composite code generation.

This module orchestrates the generation of the composite wrapper module and
its equivalence tests from the resource catalog.

Architecture:
    - meta/: catalog descriptors and loading
    - validation/: catalog invariants checked before rendering
    - extractors/: type mapping
    - builders/: per-resource dispatch plans
    - generators/: template contexts and rendering per module section
    - utils/: formatting and headers
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from composite_gen.meta.catalog import load_catalog
from composite_gen.meta.models import Catalog
from composite_gen.settings import GeneratorSettings
from composite_gen.templates import render
from composite_gen.validation import validate_catalog

from .gen_logging import get_logger
from .generators import generate_conversions, generate_tests, generate_types, generate_wrappers
from .utils import format_python_code, license_header

logger = get_logger(__name__)


@dataclass(frozen=True)
class GeneratedSources:
    wrapper: str
    tests: str


def render_sources(
    catalog: Catalog, settings: Optional[GeneratorSettings] = None, year: Optional[int] = None
) -> GeneratedSources:
    """
    Render and format both generated modules without touching the filesystem.

    Args:
        catalog: A validated catalog.
        settings: Vendor package and wrapper import path. Defaults from the environment.
        year: Year written into the license header. Defaults to the current year.

    Returns:
        The formatted wrapper and test module sources. The same inputs always
        produce the same text.
    """
    settings = settings or GeneratorSettings()
    license = license_header(year).rstrip("\n")
    modules = [r.module for r in catalog.revisions]

    logger.info("[PHASE 1] Rendering wrapper module...")
    wrapper = "".join([
        render(
            "header.jinja",
            license=license,
            revision_labels=catalog.revision_labels,
            modules=modules,
            vendor_package=settings.vendor_package,
        ),
        generate_types(catalog),
        generate_conversions(catalog),
        generate_wrappers(catalog),
    ])

    logger.info("[PHASE 2] Rendering test module...")
    tests = "".join([
        render(
            "test_header.jinja",
            license=license,
            wrapper_module=settings.wrapper_module,
            modules=modules,
            vendor_package=settings.vendor_package,
        ),
        generate_tests(catalog),
    ])

    logger.info("[PHASE 3] Formatting...")
    return GeneratedSources(
        wrapper=format_python_code(wrapper, line_length=settings.line_length),
        tests=format_python_code(tests, line_length=settings.line_length),
    )


def _write_all(outputs: list[tuple[Path, str]]) -> None:
    """
    Write every output or none of them.

    Each text is staged in a sibling temp file first. Existing destinations are
    moved aside before the staged files are moved into place, and restored if
    any move fails.
    """
    staged = []
    try:
        for path, text in outputs:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp = path.with_name(f".{path.name}.tmp")
            tmp.write_text(text, encoding="utf-8")
            staged.append((tmp, path))
    except OSError:
        for tmp, _ in staged:
            tmp.unlink(missing_ok=True)
        raise

    # (destination, backup of the previous file or None, staged file moved in)
    moves: list[tuple[Path, Optional[Path], bool]] = []
    try:
        for tmp, path in staged:
            backup = None
            if path.is_file():
                backup = path.with_name(f".{path.name}.bak")
                os.replace(path, backup)
            moves.append((path, backup, False))
            os.replace(tmp, path)
            moves[-1] = (path, backup, True)
    except OSError:
        for path, backup, placed in reversed(moves):
            if placed:
                path.unlink(missing_ok=True)
            if backup is not None:
                os.replace(backup, path)
        for tmp, _ in staged:
            tmp.unlink(missing_ok=True)
        raise

    for _, backup, _ in moves:
        if backup is not None:
            backup.unlink(missing_ok=True)


def generate(settings: Optional[GeneratorSettings] = None, year: Optional[int] = None) -> GeneratedSources:
    """
    Load and validate the catalog, render both modules, and write them to the
    configured locations. Any failure raises before either file is written.
    """
    settings = settings or GeneratorSettings()

    logger.info("[CATALOG] Loading resource catalog...")
    catalog = validate_catalog(load_catalog(settings.catalog_path))
    logger.info(
        f"[CATALOG] {len(catalog.services)} types, {len(catalog.main_services)} main, "
        f"{len(catalog.crud_services)} with CRUD operations"
    )

    sources = render_sources(catalog, settings, year)

    _write_all([(settings.wrapper_output, sources.wrapper), (settings.test_output, sources.tests)])
    logger.info(f"[GENERATED] {settings.wrapper_output}")
    logger.info(f"[GENERATED] {settings.test_output}")
    return sources
