"""Cyclopts CLI entrypoint for building the Redis Roaring docs site config.

The ``roaring-docs`` console script defined here renders the VitePress
``config.mjs`` and theme entry from ``config/site.yaml``, and can print the
command sidebar derived from a directory of markdown pages. Typical usage is
running ``roaring-docs generate`` before ``vitepress build docs``.

Examples
--------
Render the VitePress files for the default configuration:

>>> from roaring_docs.cli import main
>>> main()  # doctest: +SKIP

Inspect the sidebar derived from the command pages:

>>> from roaring_docs.cli import app
>>> app(["sidebar", "--directory", "docs/commands"])  # doctest: +SKIP
"""

from __future__ import annotations

import json
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_site_config
from .sidebar import build_sidebar
from .vitepress import VitePressConfigBuilder

DEFAULT_CONFIG = Path("config/site.yaml")
DEFAULT_COMMANDS_DIR = Path("docs/commands")

app = App(name="roaring-docs", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Render the VitePress config and theme entry from site settings.")
def generate(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
) -> None:
    """Write ``config.mjs`` and ``theme/index.js`` for the configured site.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    output_dir : Path or None, optional
        Directory receiving the VitePress files; defaults to the
        ``site.output_dir`` setting.

    Returns
    -------
    None
        Writes the rendered files and prints their paths.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist.
    SiteConfigError
        If the configuration is invalid.
    """
    site_config = load_site_config(config)
    builder = VitePressConfigBuilder(site_config, output_dir=output_dir)
    for path in builder.run():
        print(f"wrote {_format_path(path)}")


@app.command(help="Print the sidebar entries derived from a directory of pages.")
def sidebar(
    *,
    directory: typ.Annotated[
        Path,
        Parameter(help="Directory of markdown pages", env_var="INPUT_DIRECTORY"),
    ] = DEFAULT_COMMANDS_DIR,
    site_root: typ.Annotated[
        Path | None,
        Parameter(
            help="Site root that links are made absolute against",
            env_var="INPUT_SITE_ROOT",
        ),
    ] = None,
) -> None:
    """Print the derived sidebar entries as a JSON array.

    A missing directory prints an empty array.
    """
    entries = build_sidebar(directory, site_root=site_root)
    print(json.dumps([entry.as_dict() for entry in entries], indent=2))


def main() -> None:
    """Invoke the Cyclopts application that powers ``roaring-docs``."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
