"""
Keys and versions used by the generated composite wrappers.

A Key names a single cloud resource together with the location it lives in.
Exactly one of zone/region is set for zonal/regional keys; global keys have
neither.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Version(str, Enum):
    """API revision a composite object is sent to or was read from."""

    ALPHA = "alpha"
    BETA = "beta"
    GA = "ga"

    def __str__(self) -> str:
        return self.value


class KeyType(str, Enum):
    ZONAL = "zonal"
    REGIONAL = "regional"
    GLOBAL = "global"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Key:
    name: str
    zone: str = ""
    region: str = ""

    def __post_init__(self):
        if self.zone and self.region:
            raise ValueError(f"Key {self.name!r} cannot be both zonal and regional")

    def type(self) -> KeyType:
        if self.zone:
            return KeyType.ZONAL
        if self.region:
            return KeyType.REGIONAL
        return KeyType.GLOBAL

    def __str__(self) -> str:
        if self.zone:
            return f"Key{{{self.name!r}, zone: {self.zone!r}}}"
        if self.region:
            return f"Key{{{self.name!r}, region: {self.region!r}}}"
        return f"Key{{{self.name!r}}}"


def zonal_key(name: str, zone: str) -> Key:
    return Key(name=name, zone=zone)


def regional_key(name: str, region: str) -> Key:
    return Key(name=name, region=region)


def global_key(name: str) -> Key:
    return Key(name=name)
