"""
Dispatch plans for the version- and scope-dispatching wrappers.

A plan is computed once per resource from its ScopeClass and the revision
table. Every operation template renders from the same plan, so all the
operations of a resource take the same scope branches and call the same
accessors.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from composite_gen.errors import CatalogError
from composite_gen.meta.models import ApiService, Catalog, Revision, ScopeClass, snake_case
from composite_gen.runtime.meta import KeyType, Version

from ..gen_logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ScopeBranch:
    """One physical form of a call: zonal, regional, or global."""

    key_type: Optional[KeyType]  # condition on key.type(); None is the unconditional/else arm
    filler: str                  # accessor fragment, e.g. "Region" or "Global"
    label: str                   # log label, e.g. " region"
    location: Optional[str]      # key attribute passed to list(), None for global lists


@dataclass(frozen=True)
class ScopeAccess:
    branch: ScopeBranch
    accessor: str
    sets_region: bool = False

    @property
    def key_type(self) -> Optional[KeyType]:
        return self.branch.key_type

    @property
    def label(self) -> str:
        return self.branch.label

    @property
    def list_args(self) -> str:
        if self.branch.location:
            return f"ctx, key.{self.branch.location}, cloud_filter.NONE"
        return "ctx, cloud_filter.NONE"


@dataclass(frozen=True)
class RevisionBranch:
    revision: Revision
    is_fallback: bool
    scopes: tuple[ScopeAccess, ...]

    @property
    def var(self) -> str:
        return self.revision.lower

    @property
    def version_expr(self) -> str:
        return f"Version.{self.revision.version.name}"

    @property
    def zonal(self) -> ScopeAccess:
        return self.scopes[0]


@dataclass(frozen=True)
class GroupPlan:
    attach_func: str
    attach_method: str
    attach_req: str
    detach_func: str
    detach_method: str
    detach_req: str
    list_func: str
    list_method: str
    list_req: str
    list_resp: str
    list_resp_snake: str
    agg_func: str
    agg_method: str
    agg_resp: str
    agg_resp_snake: str


@dataclass(frozen=True)
class ServicePlan:
    service: ApiService
    revisions: tuple[RevisionBranch, ...]
    stamp_scope: Optional[str]
    group: Optional[GroupPlan] = None
    functions: tuple[str, ...] = field(default=())

    @property
    def name(self) -> str:
        return self.service.name

    @property
    def snake(self) -> str:
        return self.service.snake_name

    @property
    def var_name(self) -> str:
        return self.service.var_name

    @property
    def has_update(self) -> bool:
        return self.service.has_update

    @property
    def validates_zonal(self) -> bool:
        return self.service.scope_class.validates_zonal_key

    @property
    def list_func(self) -> str:
        return f"list_{snake_case(self.service.provider_name)}"


def scope_branches(scope_class: ScopeClass) -> tuple[ScopeBranch, ...]:
    """
    The legal scope branches of a scope class, in the order they are emitted.

    Zonal classes have a single unconditional zonal form. Key-dispatching
    classes take the regional form for regional keys and the global form
    otherwise.
    """
    if scope_class in (ScopeClass.ZONAL_ONLY, ScopeClass.DEFAULT_ZONAL):
        return (ScopeBranch(None, "", " zonal", "zone"),)
    if scope_class.dispatches_on_key:
        return (
            ScopeBranch(KeyType.REGIONAL, scope_class.regional_filler, " region", "region"),
            ScopeBranch(None, scope_class.global_filler, "", None),
        )
    raise CatalogError(f"unhandled scope class {scope_class!r}")


def scope_stamp(scope_class: ScopeClass) -> Optional[str]:
    """Scope written onto objects returned by get/list: 'zonal', 'regional' (if key is), or None."""
    if scope_class is ScopeClass.ZONAL_ONLY:
        return "zonal"
    if scope_class is ScopeClass.DEFAULT_REGIONAL:
        return "regional"
    return None


def accessor_name(revision: Revision, filler: str, provider_name: str) -> str:
    """alpha + Region + BackendServices -> alpha_region_backend_services"""
    prefix = "" if revision.version is Version.GA else revision.lower
    parts = [prefix, snake_case(filler) if filler else "", snake_case(provider_name)]
    return "_".join(p for p in parts if p)


def build_group_plan(service: ApiService) -> GroupPlan:
    info = service.group_resource_info
    return GroupPlan(
        attach_func=snake_case(info.attach_func_name),
        attach_method=snake_case(info.attach_func_name),
        attach_req=info.attach_req_name,
        detach_func=snake_case(info.detach_func_name),
        detach_method=snake_case(info.detach_func_name),
        detach_req=info.detach_req_name,
        list_func=snake_case(info.list_func_name),
        list_method=snake_case(info.list_func_name),
        list_req=info.list_req_name,
        list_resp=info.list_resp_name,
        list_resp_snake=snake_case(info.list_resp_name),
        agg_func=snake_case(info.agg_list_func_name + info.agg_list_resp_name),
        agg_method=snake_case(info.agg_list_func_name),
        agg_resp=info.agg_list_resp_name,
        agg_resp_snake=snake_case(info.agg_list_resp_name),
    )


def build_service_plan(service: ApiService, catalog: Catalog) -> ServicePlan:
    branches = scope_branches(service.scope_class)
    has_region = service.field("region") is not None
    last = len(catalog.revisions) - 1

    revisions = []
    for i, revision in enumerate(catalog.revisions):
        scopes = tuple(
            ScopeAccess(
                branch=b,
                accessor=accessor_name(revision, b.filler, service.provider_name),
                sets_region=has_region and b.key_type is KeyType.REGIONAL,
            )
            for b in branches
        )
        revisions.append(RevisionBranch(revision=revision, is_fallback=i == last, scopes=scopes))

    group = build_group_plan(service) if service.is_group_resource_service else None

    functions = [f"create_{service.snake_name}", f"delete_{service.snake_name}",
                 f"get_{service.snake_name}", f"list_{snake_case(service.provider_name)}"]
    if service.has_update:
        functions.append(f"update_{service.snake_name}")
    if group is not None:
        functions += [group.attach_func, group.detach_func, group.list_func, group.agg_func]

    return ServicePlan(
        service=service,
        revisions=tuple(revisions),
        stamp_scope=scope_stamp(service.scope_class),
        group=group,
        functions=tuple(functions),
    )


def build_service_plans(catalog: Catalog) -> list[ServicePlan]:
    """Plans for every main CRUD service, in catalog order."""
    plans = [build_service_plan(s, catalog) for s in catalog.crud_services]

    seen: dict[str, str] = {}
    problems = []
    for plan in plans:
        for func in plan.functions:
            if func in seen:
                problems.append(f"{plan.name}: function '{func}' is also emitted for {seen[func]}")
            seen[func] = plan.name
    if problems:
        raise CatalogError("emitted function names collide", problems)

    logger.debug(f"[PLAN] {len(plans)} CRUD services planned")
    return plans
