"""Bookmark tree backed by an XML element tree."""

from .errors import (
    BookmarkError,
    BookmarkStorageError,
    InvalidNodeIdError,
    NodeAlreadyAttachedError,
    UnrecognizedNodeTypeError,
)
from .models import (
    Bookmark,
    BookmarkDirectory,
    BookmarkNode,
    Persistable,
    Presentation,
    TreeNode,
    node_from_element,
    validate_node_id,
    xml_safe_uuid,
)
from .manager import BookmarkListener, BookmarkManager
from .storage import BookmarkStorage
from .html_exporter import HTMLExporter, count_items, export_to_html
from .log import Colors, setup_logging

__all__ = [
    # Errors
    "BookmarkError",
    "BookmarkStorageError",
    "InvalidNodeIdError",
    "NodeAlreadyAttachedError",
    "UnrecognizedNodeTypeError",
    # Models
    "Bookmark",
    "BookmarkDirectory",
    "BookmarkNode",
    "Persistable",
    "Presentation",
    "TreeNode",
    "node_from_element",
    "validate_node_id",
    "xml_safe_uuid",
    # Manager
    "BookmarkListener",
    "BookmarkManager",
    # Storage
    "BookmarkStorage",
    # HTML export
    "HTMLExporter",
    "count_items",
    "export_to_html",
    # Console
    "Colors",
    "setup_logging",
]
