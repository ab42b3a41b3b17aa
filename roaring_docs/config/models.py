"""Typed dataclasses describing the docs site configuration."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from roaring_docs.sidebar import NavEntry

SEARCH_PROVIDERS = frozenset({"local", "algolia"})


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class SidebarSection:
    """A titled group of sidebar entries.

    ``items`` holds the statically declared entries. When ``autogenerate``
    names a directory (relative to the docs root), entries derived from its
    markdown files are appended after ``items`` at build time.
    """

    text: str
    items: list[NavEntry] = dc.field(default_factory=list)
    collapsed: bool | None = None
    autogenerate: Path | None = None

    def as_dict(self) -> dict[str, typ.Any]:
        """Return the mapping shape VitePress expects for a sidebar group."""
        payload: dict[str, typ.Any] = {"text": self.text}
        if self.collapsed is not None:
            payload["collapsed"] = self.collapsed
        payload["items"] = [item.as_dict() for item in self.items]
        return payload


@dc.dataclass(slots=True)
class SocialLink:
    """Icon link rendered in the site header."""

    icon: str
    link: str


@dc.dataclass(slots=True)
class SearchConfig:
    """Search provider selection."""

    provider: str = "local"
    options: dict[str, typ.Any] = dc.field(default_factory=dict)

    def as_dict(self) -> dict[str, typ.Any]:
        payload: dict[str, typ.Any] = {"provider": self.provider}
        if self.options:
            payload["options"] = dict(self.options)
        return payload


@dc.dataclass(slots=True)
class ThemeComponent:
    """A UI component registered globally on the theme."""

    name: str
    path: str


@dc.dataclass(slots=True)
class ThemeConfig:
    """Theme extension wiring: base theme, global components, stylesheets."""

    extends: str = "default"
    components: list[ThemeComponent] = dc.field(default_factory=list)
    stylesheets: list[str] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class SiteConfig:
    """Fully resolved site configuration."""

    title: str
    lang: str = "en-US"
    description: str = ""
    docs_root: Path = Path("docs")
    output_dir: Path = Path("docs/.vitepress")
    search: SearchConfig = dc.field(default_factory=SearchConfig)
    nav: list[NavEntry] = dc.field(default_factory=list)
    sidebar: list[SidebarSection] = dc.field(default_factory=list)
    social_links: list[SocialLink] = dc.field(default_factory=list)
    theme: ThemeConfig = dc.field(default_factory=ThemeConfig)


__all__ = [
    "SEARCH_PROVIDERS",
    "SearchConfig",
    "SidebarSection",
    "SiteConfig",
    "SiteConfigError",
    "SocialLink",
    "ThemeComponent",
    "ThemeConfig",
]
