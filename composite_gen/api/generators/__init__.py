"""
Code generators for the composite wrapper module and its tests.

Each generator builds a template context from the catalog and returns the
rendered (unformatted) source fragment.
"""

from .conversion_generator import PatchPlan, build_conversion_methods, generate_conversions
from .test_generator import generate_tests
from .type_generator import generate_types
from .wrapper_generator import generate_wrappers

__all__ = [
    "PatchPlan",
    "build_conversion_methods",
    "generate_conversions",
    "generate_tests",
    "generate_types",
    "generate_wrappers",
]
