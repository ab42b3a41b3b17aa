"""Utility helpers shared by the site configuration loader."""

from __future__ import annotations

import keyword
import typing as typ
from pathlib import Path, PurePosixPath

from roaring_docs.sidebar import NavEntry

from .models import (
    SEARCH_PROVIDERS,
    SearchConfig,
    SidebarSection,
    SiteConfigError,
    SocialLink,
    ThemeComponent,
    ThemeConfig,
)


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _build_nav_entries(
    entries: list[typ.Mapping[str, object]] | None, *, context: str
) -> list[NavEntry]:
    """Build ``NavEntry`` values from a list of ``{text, link}`` mappings."""
    match entries:
        case None:
            return []
        case list() as items:
            pass
        case _:
            msg = f"{context} must be a list of entries."
            raise SiteConfigError(msg)
    result: list[NavEntry] = []
    for entry in items:
        match entry:
            case {"text": text, "link": link}:
                pass
            case _:
                msg = f"{context} entries require 'text' and 'link'."
                raise SiteConfigError(msg)
        label = _optional_str(text)
        href = _optional_str(link)
        if not label or not href:
            msg = f"{context} entries require 'text' and 'link'."
            raise SiteConfigError(msg)
        result.append(NavEntry(text=label, link=href))
    return result


def _autogenerate_dir(value: object | None, *, section: str) -> Path | None:
    """Validate an ``autogenerate`` directory relative to the docs root."""
    text = _optional_str(value)
    if text is None:
        return None
    candidate = PurePosixPath(text)
    if candidate.is_absolute() or ".." in candidate.parts:
        msg = (
            f"Sidebar section '{section}' autogenerate directory must be "
            f"relative to the docs root, got '{text}'."
        )
        raise SiteConfigError(msg)
    return Path(*candidate.parts)


def _build_sidebar_sections(
    entries: list[typ.Mapping[str, typ.Any]] | None,
) -> list[SidebarSection]:
    """Build sidebar sections, keeping static items and autogenerate hints."""
    match entries:
        case None:
            return []
        case list() as items:
            pass
        case _:
            msg = "Sidebar must be a list of sections."
            raise SiteConfigError(msg)
    sections: list[SidebarSection] = []
    for payload in items:
        if not isinstance(payload, dict):
            msg = "Sidebar sections must be mappings."
            raise SiteConfigError(msg)
        text = _optional_str(payload.get("text"))
        if not text:
            msg = "Sidebar sections require 'text'."
            raise SiteConfigError(msg)
        collapsed = payload.get("collapsed")
        sections.append(
            SidebarSection(
                text=text,
                items=_build_nav_entries(
                    payload.get("items"), context=f"Sidebar section '{text}'"
                ),
                collapsed=None if collapsed is None else bool(collapsed),
                autogenerate=_autogenerate_dir(
                    payload.get("autogenerate"), section=text
                ),
            )
        )
    return sections


def _build_social_links(
    entries: list[typ.Mapping[str, object]] | None,
) -> list[SocialLink]:
    """Build header social links from ``{icon, link}`` mappings."""
    links: list[SocialLink] = []
    match entries:
        case list() as items:
            iterable = items
        case _:
            return links
    for entry in iterable:
        match entry:
            case {"icon": icon, "link": link} if icon and link:
                links.append(SocialLink(icon=str(icon), link=str(link)))
            case _:
                msg = "Social links require 'icon' and 'link'."
                raise SiteConfigError(msg)
    return links


def _build_search_config(payload: typ.Mapping[str, typ.Any] | None) -> SearchConfig:
    """Build the search provider selection, defaulting to local search."""
    if not payload:
        return SearchConfig()
    if not isinstance(payload, dict):
        msg = "Search configuration must be a mapping."
        raise SiteConfigError(msg)
    provider = _optional_str(payload.get("provider")) or "local"
    if provider not in SEARCH_PROVIDERS:
        known = ", ".join(sorted(SEARCH_PROVIDERS))
        msg = f"Unknown search provider '{provider}'. Known providers: {known}"
        raise SiteConfigError(msg)
    options = payload.get("options") or {}
    if not isinstance(options, dict):
        msg = "Search options must be a mapping."
        raise SiteConfigError(msg)
    return SearchConfig(provider=provider, options=dict(options))


def _build_stylesheets(entries: list[object] | None) -> list[str]:
    """Return the non-empty stylesheet import paths."""
    match entries:
        case None:
            return []
        case list() as items:
            pass
        case _:
            msg = "Theme stylesheets must be a list of import paths."
            raise SiteConfigError(msg)
    return [sheet for sheet in (_optional_str(item) for item in items) if sheet]


def _is_component_name(name: str) -> bool:
    return name.isidentifier() and not keyword.iskeyword(name)


def _build_theme_config(payload: typ.Mapping[str, typ.Any] | None) -> ThemeConfig:
    """Build the theme extension config from the provided mapping payload."""
    base = ThemeConfig()
    if not payload:
        return base
    if not isinstance(payload, dict):
        msg = "Theme configuration must be a mapping."
        raise SiteConfigError(msg)
    raw_components = payload.get("components") or {}
    if not isinstance(raw_components, dict):
        msg = "Theme components must be a mapping of name to import path."
        raise SiteConfigError(msg)
    components: list[ThemeComponent] = []
    for name, path in raw_components.items():
        if not _is_component_name(str(name)):
            msg = f"Theme component name '{name}' is not a valid identifier."
            raise SiteConfigError(msg)
        if not _optional_str(path):
            msg = f"Theme component '{name}' requires an import path."
            raise SiteConfigError(msg)
        components.append(ThemeComponent(name=str(name), path=str(path).strip()))
    stylesheets = _build_stylesheets(payload.get("stylesheets"))
    return ThemeConfig(
        extends=_optional_str(payload.get("extends")) or base.extends,
        components=components,
        stylesheets=stylesheets,
    )


__all__ = [
    "_autogenerate_dir",
    "_build_nav_entries",
    "_build_search_config",
    "_build_sidebar_sections",
    "_build_social_links",
    "_build_stylesheets",
    "_build_theme_config",
    "_optional_str",
]
