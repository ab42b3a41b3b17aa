"""Tests for rendering the VitePress config module and theme entry.

A temporary docs tree with a handful of command pages is combined with an
in-memory :class:`SiteConfig`. The generated ``config.mjs`` is parsed back by
extracting the JSON literal passed to ``defineConfig``, and the theme entry is
checked for its imports and component registrations.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from roaring_docs.config import (
    SearchConfig,
    SidebarSection,
    SiteConfig,
    SocialLink,
    ThemeComponent,
    ThemeConfig,
)
from roaring_docs.sidebar import NavEntry
from roaring_docs.vitepress import VitePressConfigBuilder


def _extract_define_config(text: str) -> dict[str, object]:
    """Return the object literal passed to ``defineConfig`` as a dict."""
    start = text.index("defineConfig(") + len("defineConfig(")
    end = text.rindex(");")
    return json.loads(text[start:end])


@pytest.fixture
def site_config(tmp_path: Path) -> SiteConfig:
    """Build a site config whose commands section scans a temp docs tree."""
    docs_root = tmp_path / "docs"
    commands = docs_root / "commands"
    commands.mkdir(parents=True)
    for name in ("index", "r.setbit", "r.bitop", "r.getbit"):
        (commands / f"{name}.md").write_text(f"# {name}\n", encoding="utf-8")
    return SiteConfig(
        title="Redis Roaring",
        description="Roaring Bitmaps for Redis",
        docs_root=docs_root,
        output_dir=docs_root / ".vitepress",
        search=SearchConfig(provider="local"),
        nav=[NavEntry("Commands", "/commands")],
        sidebar=[
            SidebarSection(
                text="Guide",
                items=[NavEntry("Getting Started", "/guide/getting-started")],
            ),
            SidebarSection(
                text="Commands",
                items=[NavEntry("Introduction", "/commands/")],
                collapsed=True,
                autogenerate=Path("commands"),
            ),
        ],
        social_links=[
            SocialLink("github", "https://github.com/aviggiano/redis-roaring")
        ],
        theme=ThemeConfig(
            components=[
                ThemeComponent("TheContributors", "./components/TheContributors.vue")
            ],
            stylesheets=["./styles.css"],
        ),
    )


def test_payload_splices_generated_commands(site_config: SiteConfig) -> None:
    """The commands section lists the introduction then each command page."""
    payload = VitePressConfigBuilder(site_config).build_payload()
    sidebar = payload["themeConfig"]["sidebar"]
    assert sidebar[0] == {
        "text": "Guide",
        "items": [{"text": "Getting Started", "link": "/guide/getting-started"}],
    }, f"guide section changed unexpectedly: {sidebar[0]!r}"
    assert sidebar[1] == {
        "text": "Commands",
        "collapsed": True,
        "items": [
            {"text": "Introduction", "link": "/commands/"},
            {"text": "R.BITOP", "link": "/commands/r.bitop"},
            {"text": "R.GETBIT", "link": "/commands/r.getbit"},
            {"text": "R.SETBIT", "link": "/commands/r.setbit"},
        ],
    }, f"unexpected commands section: {sidebar[1]!r}"


def test_run_writes_config_module(site_config: SiteConfig) -> None:
    """``config.mjs`` carries the full site payload."""
    config_path, _ = VitePressConfigBuilder(site_config).run()
    assert config_path == site_config.output_dir / "config.mjs"
    text = config_path.read_text(encoding="utf-8")
    assert 'import { defineConfig } from "vitepress";' in text
    payload = _extract_define_config(text)
    assert payload["title"] == "Redis Roaring"
    assert payload["lang"] == "en-US"
    theme_config = payload["themeConfig"]
    assert theme_config["search"] == {"provider": "local"}
    assert theme_config["nav"] == [{"text": "Commands", "link": "/commands"}]
    assert theme_config["socialLinks"] == [
        {"icon": "github", "link": "https://github.com/aviggiano/redis-roaring"}
    ]


def test_run_writes_theme_entry(site_config: SiteConfig) -> None:
    """The theme entry extends the default theme and registers components."""
    _, theme_path = VitePressConfigBuilder(site_config).run()
    assert theme_path == site_config.output_dir / "theme" / "index.js"
    text = theme_path.read_text(encoding="utf-8")
    assert 'import BaseTheme from "vitepress/theme";' in text
    assert (
        'import TheContributors from "./components/TheContributors.vue";' in text
    ), f"missing component import in:\n{text}"
    assert 'import "./styles.css";' in text, f"missing stylesheet import in:\n{text}"
    assert "extends: BaseTheme," in text
    assert 'app.component("TheContributors", TheContributors);' in text, (
        f"missing component registration in:\n{text}"
    )


def test_missing_commands_directory_keeps_static_items(
    site_config: SiteConfig, tmp_path: Path
) -> None:
    """Without a commands directory only the introduction entry remains."""
    site_config.docs_root = tmp_path / "elsewhere"
    payload = VitePressConfigBuilder(
        site_config, output_dir=tmp_path / "out"
    ).build_payload()
    items = payload["themeConfig"]["sidebar"][1]["items"]
    assert items == [{"text": "Introduction", "link": "/commands/"}], (
        f"expected only the static introduction entry, got {items!r}"
    )


def test_output_dir_override(site_config: SiteConfig, tmp_path: Path) -> None:
    """An explicit output directory takes precedence over the config."""
    target = tmp_path / "custom"
    written = VitePressConfigBuilder(site_config, output_dir=target).run()
    assert written == [target / "config.mjs", target / "theme" / "index.js"]
    assert all(path.exists() for path in written), "expected both files on disk"
