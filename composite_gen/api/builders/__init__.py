"""Dispatch plan builders."""

from .dispatch_builders import (
    GroupPlan,
    RevisionBranch,
    ScopeAccess,
    ScopeBranch,
    ServicePlan,
    accessor_name,
    build_service_plan,
    build_service_plans,
    scope_branches,
    scope_stamp,
)

__all__ = [
    "GroupPlan",
    "RevisionBranch",
    "ScopeAccess",
    "ScopeBranch",
    "ServicePlan",
    "accessor_name",
    "build_service_plan",
    "build_service_plans",
    "scope_branches",
    "scope_stamp",
]
