"""
Conversion function generation.

Every main service gets list/single converters into the composite type, one
typed converter per revision, and ``to_<revision>()`` methods on the model.
The methods apply the service's force-send patches after the transcode.
"""

from dataclasses import dataclass

from composite_gen.meta.models import ApiService, Catalog, ForceSendPatch
from composite_gen.templates import render

from ..gen_logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class PatchPlan:
    patch: ForceSendPatch

    @property
    def path(self) -> str:
        return self.patch.path

    @property
    def value(self) -> str:
        names = ", ".join(repr(f) for f in self.patch.fields)
        if self.patch.append:
            return f"[*force_send_fields_of(self.{self.patch.path}), {names}]"
        return f"[{names}]"

    def condition(self, var: str) -> str:
        """alpha.cdn_policy and alpha.cdn_policy.cache_key_policy"""
        attrs = self.patch.attrs
        terms = [".".join([var, *attrs[: i + 1]]) for i in range(len(attrs))]
        if self.patch.when:
            terms.append(".".join([var, *attrs, self.patch.when]))
        return " and ".join(terms)


def build_conversion_methods(service: ApiService, catalog: Catalog) -> dict:
    """Context for the ``to_<revision>()`` methods of one composite model."""
    return {
        "name": service.name,
        "revisions": list(catalog.revisions),
        "patches": [PatchPlan(p) for p in service.force_send_patches],
    }


def build_conversions_context(catalog: Catalog) -> dict:
    conversions = [
        {"name": s.name, "snake": s.snake_name, "revisions": list(catalog.revisions)}
        for s in catalog.main_services
    ]
    return {"conversions": conversions, "revision_labels": catalog.revision_labels}


def generate_conversions(catalog: Catalog) -> str:
    """Render the module-level converters for every main service."""
    context = build_conversions_context(catalog)
    logger.info(f"[CONVERSIONS] {len(context['conversions'])} main types")
    return render("conversions.jinja", **context)
