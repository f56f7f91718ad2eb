"""Load the resource catalog from YAML."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import ValidationError

from composite_gen.errors import CatalogError

from .models import Catalog

PACKAGED_CATALOG = Path(__file__).parent / "catalog.yaml"


def load_catalog(path: Optional[Union[str, Path]] = None) -> Catalog:
    """
    Parse a catalog file into a Catalog.

    Args:
        path: YAML file to read. None reads the catalog shipped with the package.

    Raises:
        CatalogError: the file is missing, is not valid YAML, or does not match
            the descriptor schema.
    """
    catalog_path = Path(path) if path is not None else PACKAGED_CATALOG
    try:
        raw = yaml.safe_load(catalog_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise CatalogError(f"cannot read catalog {catalog_path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise CatalogError(f"catalog {catalog_path} is not valid YAML: {exc}") from exc

    return parse_catalog(raw, source=str(catalog_path))


def parse_catalog(raw, source: str = "<catalog>") -> Catalog:
    if not isinstance(raw, dict):
        raise CatalogError(f"catalog {source} must be a mapping with 'revisions' and 'services'")
    try:
        return Catalog.model_validate(raw)
    except ValidationError as exc:
        problems = [
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
        ]
        raise CatalogError(f"catalog {source} does not match the descriptor schema", problems) from exc
