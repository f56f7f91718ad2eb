"""Composite pydantic model generation from catalog descriptors."""

import textwrap

from composite_gen.meta.models import Catalog
from composite_gen.templates import render

from ..extractors import map_to_python_type
from ..gen_logging import get_logger
from .conversion_generator import build_conversion_methods

logger = get_logger(__name__)


def build_types_context(catalog: Catalog) -> dict:
    types = []
    for service in catalog.services:
        fields = []
        for field in service.fields:
            fields.append({
                "name": field.name,
                "annotation": map_to_python_type(field),
                "wire": field.wire,
                "comment_lines": textwrap.wrap(field.description or "", width=76),
            })

        types.append({
            "name": service.name,
            "is_main": service.is_main_service,
            "fields": fields,
            "has_server_response": service.is_main_service and service.has_crud,
            "conversions": build_conversion_methods(service, catalog) if service.is_main_service else None,
        })
        logger.debug(f"  [TYPE] {service.name} ({len(fields)} fields)")

    return {"types": types, "revision_labels": catalog.revision_labels}


def generate_types(catalog: Catalog) -> str:
    """Render one composite model per catalog descriptor."""
    context = build_types_context(catalog)
    logger.info(f"[TYPES] {len(context['types'])} composite types")
    return render("types.jinja", **context)
