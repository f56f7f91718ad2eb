"""
Validation module for the resource catalog.

All checks run at generation time, before any template is rendered.
"""

from composite_gen.validation.catalog_validators import (
    BOOKKEEPING_FIELDS,
    RESERVED_NAMES,
    validate_catalog,
    verify_field_types,
    verify_force_send_patches,
    verify_group_resources,
    verify_names,
    verify_operations,
    verify_revisions,
)

__all__ = [
    "BOOKKEEPING_FIELDS",
    "RESERVED_NAMES",
    "validate_catalog",
    "verify_field_types",
    "verify_force_send_patches",
    "verify_group_resources",
    "verify_names",
    "verify_operations",
    "verify_revisions",
]
