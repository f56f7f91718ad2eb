"""Parse compute self links into resource IDs."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from .errors import ResourceURLError
from .meta import Key

_PREFIX = re.compile(r"^https?://(?:www|compute)\.googleapis\.com/compute/[^/]+/")


@dataclass(frozen=True)
class ResourceID:
    project_id: str
    resource: str
    key: Optional[Key]


def parse_resource_url(url: str) -> ResourceID:
    """
    Parse a self link or a relative resource path.

    Accepted forms:
        https://www.googleapis.com/compute/v1/projects/p/zones/z/networkEndpointGroups/n
        projects/p/regions/r/forwardingRules/n
        projects/p/global/backendServices/n
        projects/p/zones/z  (location only; key is None)
    """
    if not url:
        raise ResourceURLError("empty resource URL")

    path = _PREFIX.sub("", url.strip()).strip("/")
    parts = path.split("/")

    if len(parts) < 2 or parts[0] != "projects" or not parts[1]:
        raise ResourceURLError(f"invalid resource URL {url!r}")
    project = parts[1]
    rest = parts[2:]

    if len(rest) == 2 and rest[0] in ("zones", "regions"):
        return ResourceID(project, rest[0], None)

    if len(rest) == 4 and rest[0] == "zones":
        return ResourceID(project, rest[2], Key(name=rest[3], zone=rest[1]))
    if len(rest) == 4 and rest[0] == "regions":
        return ResourceID(project, rest[2], Key(name=rest[3], region=rest[1]))
    if len(rest) == 3 and rest[0] == "global":
        return ResourceID(project, rest[1], Key(name=rest[2]))

    raise ResourceURLError(f"invalid resource URL {url!r}")
