"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import (
    _build_nav_entries,
    _build_search_config,
    _build_sidebar_sections,
    _build_social_links,
    _build_theme_config,
    _optional_str,
)
from .models import SiteConfig, SiteConfigError


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing the docs site.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/site.yaml``).

    Returns
    -------
    SiteConfig
        Parsed configuration with navigation, sidebar sections (including
        autogenerate hints), social links, search, and theme wiring.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If required sections or fields are missing or invalid.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from roaring_docs.config import load_site_config
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> config.title  # doctest: +SKIP
    'Redis Roaring'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    site = raw.get("site") or {}
    if not isinstance(site, dict):
        msg = "The 'site' section must be a mapping."
        raise SiteConfigError(msg)
    title = _optional_str(site.get("title"))
    if not title:
        msg = "Site configuration requires 'site.title'."
        raise SiteConfigError(msg)

    docs_root = Path(_optional_str(site.get("docs_root")) or "docs")
    output_dir = Path(_optional_str(site.get("output_dir")) or docs_root / ".vitepress")

    return SiteConfig(
        title=title,
        lang=_optional_str(site.get("lang")) or "en-US",
        description=str(site.get("description") or ""),
        docs_root=docs_root,
        output_dir=output_dir,
        search=_build_search_config(raw.get("search")),
        nav=_build_nav_entries(raw.get("nav"), context="Navigation"),
        sidebar=_build_sidebar_sections(raw.get("sidebar")),
        social_links=_build_social_links(raw.get("social_links")),
        theme=_build_theme_config(raw.get("theme")),
    )


__all__ = ["load_site_config"]
