#!/usr/bin/env python3
"""Export the bookmark tree to a Netscape bookmark HTML file."""

import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Tuple

from .manager import BookmarkManager
from .models import Bookmark, BookmarkDirectory


class HTMLExporter:
    """Exports a bookmark directory to HTML format."""

    def __init__(self, directory: BookmarkDirectory):
        self.directory = directory

    def export(self) -> str:
        """Export bookmarks to HTML string."""
        logging.info("Converting bookmarks to HTML...")

        html_parts = [
            '<!DOCTYPE NETSCAPE-Bookmark-file-1>',
            '<META HTTP-EQUIV="Content-Type" CONTENT="text/html; charset=UTF-8">',
            '<TITLE>Bookmarks</TITLE>',
            '<H1>Bookmarks</H1>',
            '<DL><p>'
        ]

        html_parts.extend(self._children_to_html(self.directory, level=1))
        html_parts.append('</DL><p>')

        logging.debug("HTML conversion completed")
        return '\n'.join(html_parts)

    def _children_to_html(self, directory: BookmarkDirectory, level: int) -> List[str]:
        indent = '\t' * level
        lines = []
        for node in directory.children():
            if isinstance(node, Bookmark):
                lines.append(
                    f'{indent}<DT><A HREF="{self._escape_html(node.url)}">'
                    f'{self._escape_html(node.display_name)}</A>'
                )
            elif isinstance(node, BookmarkDirectory):
                lines.extend(self._directory_to_html(node, level))
        return lines

    def _directory_to_html(self, directory: BookmarkDirectory, level: int) -> List[str]:
        """Convert a bookmark directory to HTML lines."""
        indent = '\t' * level
        lines = [
            f'{indent}<DT><H3>{self._escape_html(directory.display_name)}</H3>',
            f'{indent}<DL><p>'
        ]
        lines.extend(self._children_to_html(directory, level + 1))
        lines.append(f'{indent}</DL><p>')
        return lines

    def _escape_html(self, text: Optional[str]) -> str:
        """Escape HTML special characters."""
        if text is None:
            text = ""
        return (text.replace("&", "&amp;")
                   .replace("<", "&lt;")
                   .replace(">", "&gt;")
                   .replace('"', "&quot;"))


def count_items(directory: BookmarkDirectory) -> Tuple[int, int]:
    """Count bookmarks and directories below a directory."""
    bookmarks, directories = 0, 0
    for _, node in directory.walk():
        if isinstance(node, Bookmark):
            bookmarks += 1
        else:
            directories += 1
    return bookmarks, directories


def export_to_html(
    manager: BookmarkManager,
    output_path: Optional[Path] = None,
) -> Tuple[int, int]:
    """
    Export the manager's bookmark tree to an HTML file.

    Returns:
        Tuple of (total_bookmarks, total_directories)
    """
    exporter = HTMLExporter(manager.root)
    html_content = exporter.export()

    if output_path is None:
        current_date = datetime.now().strftime("%Y_%m_%d")
        output_path = Path(f"bookmarks_{current_date}.html")

    with output_path.open("w", encoding="utf-8") as f:
        f.write(html_content)

    logging.info(f"Export completed: {output_path}")

    return count_items(manager.root)
