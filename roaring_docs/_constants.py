"""Common literal values used across roaring_docs.

These constants keep file names and reserved markers in one place so the
sidebar builder, config loader, and tests agree on them.

Examples
--------
>>> from roaring_docs import _constants
>>> _constants.INDEX_MARKER + _constants.MARKDOWN_SUFFIX
'index.md'
"""

INDEX_MARKER = "index"
MARKDOWN_SUFFIX = ".md"
CONFIG_MODULE_NAME = "config.mjs"
THEME_ENTRY_PATH = "theme/index.js"
