# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025 Stacklet, Inc.
#

"""
Typed view of an MkDocs configuration and its navigation entries.
"""

from dataclasses import dataclass, field
from typing import Any, Self


@dataclass(frozen=True)
class PathEntry:
    """A bare page path, titled by MkDocs itself."""

    path: str


@dataclass(frozen=True)
class TitledEntry:
    """A page with an explicit title."""

    title: str
    path: str


@dataclass(frozen=True)
class SectionEntry:
    """A titled group of nested entries."""

    title: str
    children: tuple["NavItem", ...]


@dataclass(frozen=True)
class RawEntry:
    """Anything else found in the nav list, kept as is."""

    value: Any


NavItem = PathEntry | TitledEntry | SectionEntry | RawEntry


def parse_nav_item(value: Any) -> NavItem:
    if isinstance(value, str):
        return PathEntry(value)
    if isinstance(value, dict) and len(value) == 1:
        [(title, target)] = value.items()
        if isinstance(title, str) and isinstance(target, str):
            return TitledEntry(title, target)
        if isinstance(title, str) and isinstance(target, list):
            return SectionEntry(title, tuple(parse_nav_item(child) for child in target))
    return RawEntry(value)


def dump_nav_item(item: NavItem) -> Any:
    match item:
        case PathEntry(path):
            return path
        case TitledEntry(title, path):
            return {title: path}
        case SectionEntry(title, children):
            return {title: [dump_nav_item(child) for child in children]}
        case RawEntry(value):
            return value


def nav_contains(items: list[NavItem] | tuple[NavItem, ...], path: str) -> bool:
    """Whether a page path is already referenced anywhere in the navigation."""
    for item in items:
        match item:
            case PathEntry(entry_path) | TitledEntry(_, entry_path):
                if entry_path == path:
                    return True
            case SectionEntry(_, children):
                if nav_contains(children, path):
                    return True
            case RawEntry(value):
                if isinstance(value, dict) and path in value.values():
                    return True
    return False


@dataclass
class NavConfig:
    """
    An MkDocs configuration.

    Only the keys this service touches are typed. Every other top-level key
    is kept in ``extra``, and ``key_order`` remembers the original layout so
    the file can be written back with its keys where they were.
    """

    KNOWN_KEYS = ("site_name", "theme", "nav")

    site_name: str | None = None
    theme: Any = None
    nav: list[NavItem] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict)
    key_order: list[str] = field(default_factory=list)

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> Self:
        nav = data.get("nav") or []
        if not isinstance(nav, list):
            raise ValueError("nav must be a list")
        return cls(
            site_name=data.get("site_name"),
            theme=data.get("theme"),
            nav=[parse_nav_item(item) for item in nav],
            extra={k: v for k, v in data.items() if k not in cls.KNOWN_KEYS},
            key_order=list(data),
        )

    def to_mapping(self) -> dict[str, Any]:
        known = {
            "site_name": self.site_name,
            "theme": self.theme,
            "nav": [dump_nav_item(item) for item in self.nav],
        }
        result: dict[str, Any] = {}
        for key in [*self.key_order, *self.KNOWN_KEYS, *self.extra]:
            if key in result:
                continue
            if key in known:
                # keys absent from the original are only written once set
                if known[key] is not None or key in self.key_order:
                    result[key] = known[key]
            elif key in self.extra:
                result[key] = self.extra[key]
        return result
