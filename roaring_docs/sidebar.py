"""Derive sidebar navigation entries from a directory of markdown files.

The command reference lives in ``docs/commands`` as one ``<command>.md`` file
per command plus an ``index.md`` landing page. This module scans that
directory, skips the landing page (it is linked separately as the
"Introduction" entry), and turns each remaining file into a :class:`NavEntry`
whose label is the upper-cased command name and whose link is the
site-absolute page path.

Ordering is decided here rather than by the filesystem: entries are sorted on
their relative path so repeated builds emit identical output.

Examples
--------
>>> from pathlib import Path
>>> from roaring_docs.sidebar import build_sidebar
>>> entries = build_sidebar(Path("docs/commands"), site_root=Path("docs"))  # doctest: +SKIP
>>> entries[0].as_dict()  # doctest: +SKIP
{'text': 'R.APPENDINTARRAY', 'link': '/commands/r.appendintarray'}
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from ._constants import INDEX_MARKER, MARKDOWN_SUFFIX

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    import collections.abc as cabc

    from .config import SidebarSection


@dc.dataclass(frozen=True, slots=True)
class ContentFile:
    """A markdown source file discovered by the directory scan."""

    relative_path: str
    base_name: str


@dc.dataclass(frozen=True, slots=True)
class NavEntry:
    """A single sidebar or navbar item."""

    text: str
    link: str

    def as_dict(self) -> dict[str, str]:
        """Return the ``{text, link}`` mapping consumed by the site renderer."""
        return {"text": self.text, "link": self.link}


def scan_content_files(
    directory: Path,
    *,
    site_root: Path | None = None,
    suffix: str = MARKDOWN_SUFFIX,
) -> list[ContentFile]:
    """List markdown files at the top level of ``directory`` in stable order.

    Parameters
    ----------
    directory : Path
        Directory to scan. Subdirectories are not descended into.
    site_root : Path, optional
        Directory that relative paths are computed against. Defaults to
        ``directory`` itself.
    suffix : str, optional
        File extension to match, including the dot. Defaults to ``".md"``.

    Returns
    -------
    list[ContentFile]
        Matching files sorted lexicographically by ``relative_path`` with the
        suffix removed. The comparison is by code point and therefore
        case-sensitive: ``Zebra`` sorts before ``apple``. Files whose names
        start with a dot are skipped. A directory that does not exist yields
        an empty list.

    Raises
    ------
    OSError
        Propagated from the directory listing for anything other than a
        missing directory (for example ``PermissionError``).
    ValueError
        If ``directory`` does not live under ``site_root``.
    """
    root = directory if site_root is None else site_root
    try:
        children = list(directory.iterdir())
    except FileNotFoundError:
        return []

    files: list[ContentFile] = []
    for child in children:
        # Hidden files are skipped, as a shell glob would.
        if child.name.startswith(".") or child.suffix != suffix:
            continue
        if not child.is_file():
            continue
        relative = child.relative_to(root).as_posix()
        files.append(ContentFile(relative_path=relative, base_name=child.stem))
    files.sort(key=lambda content: _sort_key(content, suffix))
    return files


def _sort_key(content: ContentFile, suffix: str) -> str:
    # Case-sensitive code point order on the extension-less path, so "bit"
    # sorts before "bit-count"; iterdir() order is unspecified.
    return content.relative_path.removesuffix(suffix)


def build_sidebar(
    directory: Path,
    *,
    site_root: Path | None = None,
    index_marker: str = INDEX_MARKER,
    suffix: str = MARKDOWN_SUFFIX,
) -> list[NavEntry]:
    """Build the ordered sidebar entries for every page in ``directory``.

    Parameters
    ----------
    directory : Path
        Directory holding one markdown file per command.
    site_root : Path, optional
        Root of the documentation site; links are made absolute relative to
        it. Defaults to ``directory``, which yields ``/<name>`` links.
    index_marker : str, optional
        Base name reserved for the section landing page and therefore
        skipped. Defaults to ``"index"``.
    suffix : str, optional
        Markdown extension to scan for and strip from links.

    Returns
    -------
    list[NavEntry]
        Entries ordered by relative path. Empty when the directory is missing
        or holds only the index page.

    Examples
    --------
    >>> build_sidebar(Path("docs/commands"))  # doctest: +SKIP
    [NavEntry(text='BITCOUNT', link='/bitcount'), NavEntry(text='SETBIT', link='/setbit')]
    """
    return [
        NavEntry(text=_label_for(content), link=_link_for(content, suffix))
        for content in scan_content_files(directory, site_root=site_root, suffix=suffix)
        if content.base_name != index_marker
    ]


def _label_for(content: ContentFile) -> str:
    """Return the display label for a command page."""
    return content.base_name.upper()


def _link_for(content: ContentFile, suffix: str) -> str:
    """Return the site-absolute link for ``content`` without its extension."""
    stem = content.relative_path.removesuffix(suffix)
    return "/" + stem.lstrip("/")


def expand_sidebar(
    sections: cabc.Iterable[SidebarSection], docs_root: Path
) -> list[SidebarSection]:
    """Return ``sections`` with autogenerated entries appended.

    Sections whose ``autogenerate`` directory is set receive the entries
    produced by :func:`build_sidebar` after their static items, with links
    relative to ``docs_root``. The input sections are left untouched.
    """
    expanded: list[SidebarSection] = []
    for section in sections:
        if section.autogenerate is None:
            expanded.append(section)
            continue
        generated = build_sidebar(docs_root / section.autogenerate, site_root=docs_root)
        expanded.append(
            dc.replace(
                section,
                items=[*section.items, *generated],
                autogenerate=None,
            )
        )
    return expanded


__all__ = [
    "ContentFile",
    "NavEntry",
    "build_sidebar",
    "expand_sidebar",
    "scan_content_files",
]
