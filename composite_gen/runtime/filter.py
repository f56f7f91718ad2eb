"""List filters forwarded to vendor list calls."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Filter:
    """A server-side list filter expression. ``None`` expression matches everything."""

    expression: Optional[str] = None

    def __bool__(self) -> bool:
        return self.expression is not None

    def __str__(self) -> str:
        return self.expression or ""


NONE = Filter()
