"""Load and validate the docs site configuration YAML.

This subpackage parses ``config/site.yaml`` into typed dataclasses
(:class:`SiteConfig`, :class:`SidebarSection`, etc.) consumed by the VitePress
config builder. Sidebar sections may carry an ``autogenerate`` directory; the
entries for those are derived at build time by
:func:`roaring_docs.sidebar.expand_sidebar`, not by the loader.

Examples
--------
>>> from pathlib import Path
>>> from roaring_docs.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> [section.text for section in site.sidebar]  # doctest: +SKIP
['Guide', 'Commands']
"""

from .loader import load_site_config
from .models import (
    SearchConfig,
    SidebarSection,
    SiteConfig,
    SiteConfigError,
    SocialLink,
    ThemeComponent,
    ThemeConfig,
)

__all__ = [
    "SearchConfig",
    "SidebarSection",
    "SiteConfig",
    "SiteConfigError",
    "SocialLink",
    "ThemeComponent",
    "ThemeConfig",
    "load_site_config",
]
