"""
Catalog-level validation.

Every rule here is one the emitted code relies on: a violation would either
produce source that does not import, or dispatch logic that applies a
different scope rule than the resource declares.
"""

import keyword

from composite_gen.api.extractors import is_valid_type_expr, referenced_types
from composite_gen.errors import CatalogError
from composite_gen.meta.models import Catalog, ScopeClass
from composite_gen.runtime.meta import Version

# Local names used inside the emitted functions.
RESERVED_NAMES = {
    "cloud", "key", "version", "logger", "ctx", "mc", "req", "obj", "objs",
    "composite", "composite_objs", "composite_map", "gce_obj", "gce_objs",
    "resource_id", "self", "filter",
}

BOOKKEEPING_FIELDS = {"version", "scope", "server_response", "force_send_fields", "null_fields"}


def verify_revisions(catalog: Catalog) -> list[str]:
    problems = []
    revisions = catalog.revisions
    if len(revisions) != 3:
        problems.append(f"expected exactly 3 revisions, got {len(revisions)}")
    labels = [r.label for r in revisions]
    if len(set(labels)) != len(labels):
        problems.append(f"duplicate revision labels: {labels}")
    modules = [r.module for r in revisions]
    if len(set(modules)) != len(modules):
        problems.append(f"duplicate revision namespaces: {modules}")
    versions = [r.version for r in revisions]
    if len(set(versions)) != len(versions):
        problems.append(f"duplicate revision versions: {[v.value for v in versions]}")
    if revisions and revisions[-1].version is not Version.GA:
        problems.append("the stable (ga) revision must be listed last; it is the dispatch fallback")
    return problems


def verify_names(catalog: Catalog) -> list[str]:
    problems = []
    seen = set()
    revision_names = {r.lower for r in catalog.revisions}
    for service in catalog.services:
        if service.name in seen:
            problems.append(f"duplicate service '{service.name}'")
        seen.add(service.name)

        if not service.name.isidentifier() or not service.name[:1].isupper():
            problems.append(f"service name '{service.name}' must be a CapWords identifier")

        var_name = service.var_name
        if not var_name.isidentifier() or keyword.iskeyword(var_name):
            problems.append(f"{service.name}: var_name '{var_name}' is not a valid identifier")
        elif var_name in RESERVED_NAMES or var_name in revision_names:
            problems.append(f"{service.name}: var_name '{var_name}' clashes with a generated local name")

        field_names = set()
        for field in service.fields:
            if field.name in field_names:
                problems.append(f"{service.name}: duplicate field '{field.name}'")
            field_names.add(field.name)
            if not field.name.isidentifier() or keyword.iskeyword(field.name):
                problems.append(f"{service.name}.{field.name}: not a valid attribute name")
            if field.name in BOOKKEEPING_FIELDS:
                problems.append(f"{service.name}.{field.name}: name is reserved for bookkeeping")
    return problems


def verify_field_types(catalog: Catalog) -> list[str]:
    problems = []
    known = set(catalog.names)
    for service in catalog.services:
        for field in service.fields:
            if not is_valid_type_expr(field.type):
                problems.append(f"{service.name}.{field.name}: invalid type '{field.type}'")
                continue
            for ref in referenced_types(field.type):
                if ref not in known:
                    problems.append(f"{service.name}.{field.name}: unknown type '{ref}'")
    return problems


def verify_operations(catalog: Catalog) -> list[str]:
    problems = []
    for service in catalog.services:
        if service.has_update and not service.has_crud:
            problems.append(f"{service.name}: has_update requires has_crud")
        if service.has_crud and not service.is_main_service:
            problems.append(f"{service.name}: only main services can have CRUD operations")
        if service.is_group_resource_service and not service.has_crud:
            problems.append(f"{service.name}: group resources must be CRUD services")
        if service.has_crud and service.field("name") is None:
            problems.append(f"{service.name}: CRUD services need a 'name' field")
    return problems


def verify_group_resources(catalog: Catalog) -> list[str]:
    problems = []
    for service in catalog.services:
        info = service.group_resource_info
        if info is None:
            continue
        if service.scope_class is not ScopeClass.ZONAL_ONLY:
            problems.append(
                f"{service.name}: group resources are defined only for zonal resources "
                f"(scope_class is {service.scope_class.value})"
            )
        for type_name in (info.attach_req_name, info.detach_req_name, info.list_req_name,
                          info.list_resp_name, info.agg_list_resp_name):
            target = catalog.get(type_name)
            if target is None:
                problems.append(f"{service.name}: group payload type '{type_name}' is not in the catalog")
            elif not target.is_main_service:
                problems.append(f"{service.name}: group payload type '{type_name}' must be a main service")
        for func in (info.attach_func_name, info.detach_func_name, info.list_func_name,
                     info.agg_list_func_name):
            if not func.isidentifier():
                problems.append(f"{service.name}: group function name '{func}' is not an identifier")
        agg = catalog.get(info.agg_list_resp_name)
        if agg is not None and agg.field("self_link") is None:
            problems.append(
                f"{service.name}: aggregate list type '{agg.name}' needs a self_link field to be keyed"
            )
    return problems


def verify_force_send_patches(catalog: Catalog) -> list[str]:
    problems = []
    for service in catalog.services:
        if service.force_send_patches and not service.is_main_service:
            problems.append(f"{service.name}: force_send_patches apply only to main services")
        for patch in service.force_send_patches:
            current = service
            for attr in patch.attrs:
                field = current.field(attr) if current else None
                refs = referenced_types(field.type) if field else []
                if field is None or len(refs) != 1 or field.type != refs[0]:
                    problems.append(
                        f"{service.name}: force_send path '{patch.path}' does not resolve to a nested object"
                    )
                    current = None
                    break
                current = catalog.get(refs[0])
            if current is None:
                continue
            for name in patch.fields:
                if current.field(name) is None:
                    problems.append(
                        f"{service.name}: force_send field '{name}' is not a field of {current.name}"
                    )
            if patch.when and current.field(patch.when) is None:
                problems.append(
                    f"{service.name}: force_send condition '{patch.when}' is not a field of {current.name}"
                )
    return problems


def validate_catalog(catalog: Catalog) -> Catalog:
    """Run every check and raise one CatalogError listing all problems."""
    problems = []
    problems += verify_revisions(catalog)
    problems += verify_names(catalog)
    problems += verify_field_types(catalog)
    problems += verify_operations(catalog)
    problems += verify_group_resources(catalog)
    problems += verify_force_send_patches(catalog)
    if problems:
        raise CatalogError("invalid resource catalog", problems)
    return catalog
