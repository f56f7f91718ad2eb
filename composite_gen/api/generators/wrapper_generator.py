"""CRUD and group operation generation for main CRUD services."""

from composite_gen.meta.models import Catalog
from composite_gen.templates import render

from ..builders import build_service_plans
from ..gen_logging import get_logger

logger = get_logger(__name__)


def generate_wrappers(catalog: Catalog) -> str:
    """Render the version/scope-dispatching operations of every main CRUD service."""
    plans = build_service_plans(catalog)
    for plan in plans:
        logger.debug(
            f"  [WRAPPER] {plan.name}: {plan.service.scope_class.value}, "
            f"{len(plan.functions)} functions"
        )
    logger.info(f"[WRAPPERS] {sum(len(p.functions) for p in plans)} functions for {len(plans)} services")
    return render("wrappers.jinja", plans=plans)
