"""Build the VitePress configuration for the Redis Roaring docs site.

This package exposes the CLI entry point used by ``uv run roaring-docs`` to
derive the command sidebar from ``docs/commands`` and render the site config
and theme entry consumed by VitePress.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from roaring_docs import main
>>> main()  # doctest: +SKIP
>>> from roaring_docs import app
>>> app.name[0]
'roaring-docs'
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
