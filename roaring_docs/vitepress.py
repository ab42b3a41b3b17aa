"""Render the VitePress site config and theme entry from site settings.

This module takes a :class:`~roaring_docs.config.SiteConfig`, expands the
autogenerated sidebar sections once, and writes the two files VitePress reads
at startup:

* ``<output_dir>/config.mjs`` exporting ``defineConfig({...})`` with the
  title, search provider, navbar, sidebar, and social links;
* ``<output_dir>/theme/index.js`` extending the default theme, importing the
  configured stylesheets, and registering global components in
  ``enhanceApp``.

>>> from pathlib import Path
>>> from roaring_docs.config import load_site_config
>>> from roaring_docs.vitepress import VitePressConfigBuilder
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> VitePressConfigBuilder(site).run()  # doctest: +SKIP
[PosixPath('docs/.vitepress/config.mjs'), PosixPath('docs/.vitepress/theme/index.js')]

Templates are read from ``roaring_docs/templates`` unless another directory
is supplied.
"""

from __future__ import annotations

import json
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from ._constants import CONFIG_MODULE_NAME, THEME_ENTRY_PATH
from .sidebar import expand_sidebar

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from .config import SidebarSection, SiteConfig


class VitePressConfigBuilder:
    """Write ``config.mjs`` and the theme entry for a docs site."""

    def __init__(
        self,
        site_config: SiteConfig,
        *,
        templates_dir: Path | None = None,
        output_dir: Path | None = None,
    ) -> None:
        """Initialize the builder and its Jinja environment.

        Parameters
        ----------
        site_config : SiteConfig
            Parsed configuration produced by
            :func:`roaring_docs.config.load_site_config`.
        templates_dir : Path, optional
            Directory containing the Jinja templates. Defaults to
            ``roaring_docs/templates``.
        output_dir : Path, optional
            Override for ``site_config.output_dir``.
        """
        self.site_config = site_config
        self.output_dir = output_dir or site_config.output_dir
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        # Output is JavaScript, so autoescaping stays off.
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["js_string"] = json.dumps
        self.config_template = self.env.get_template("config.mjs.jinja")
        self.theme_template = self.env.get_template("theme_index.js.jinja")

    def run(self) -> list[Path]:
        """Render both files and return their paths in write order."""
        config_path = self.output_dir / CONFIG_MODULE_NAME
        theme_path = self.output_dir / THEME_ENTRY_PATH
        theme_path.parent.mkdir(parents=True, exist_ok=True)

        config_js = self.config_template.render(
            site_json=json.dumps(self.build_payload(), indent=2, ensure_ascii=False)
        )
        config_path.write_text(config_js, encoding="utf-8")

        theme = self.site_config.theme
        theme_js = self.theme_template.render(
            extends=theme.extends,
            components=theme.components,
            stylesheets=theme.stylesheets,
        )
        theme_path.write_text(theme_js, encoding="utf-8")
        return [config_path, theme_path]

    def build_payload(self) -> dict[str, typ.Any]:
        """Return the mapping passed to VitePress ``defineConfig``.

        The command sidebar is derived here, once per call, from the
        directories named by autogenerated sections.
        """
        site = self.site_config
        sidebar = expand_sidebar(site.sidebar, site.docs_root)
        return {
            "title": site.title,
            "lang": site.lang,
            "description": site.description,
            "themeConfig": {
                "search": site.search.as_dict(),
                "nav": [entry.as_dict() for entry in site.nav],
                "sidebar": _sidebar_payload(sidebar),
                "socialLinks": [
                    {"icon": link.icon, "link": link.link}
                    for link in site.social_links
                ],
            },
        }


def _sidebar_payload(sections: list[SidebarSection]) -> list[dict[str, typ.Any]]:
    return [section.as_dict() for section in sections]


__all__ = ["VitePressConfigBuilder"]
