#!/usr/bin/env python3
"""Exceptions raised by the bookmark tree."""


class BookmarkError(Exception):
    """Base exception for bookmark tree errors."""
    pass


class UnrecognizedNodeTypeError(BookmarkError):
    """Raised when a child element carries an unknown ``type`` attribute."""

    def __init__(self, node_type: str):
        self.node_type = node_type
        super().__init__(f"{node_type} not recognised")


class BookmarkStorageError(BookmarkError):
    """Raised when the bookmark file cannot be read or parsed."""
    pass


class InvalidNodeIdError(BookmarkError):
    """Raised when a node id cannot be used as an XML tag name."""

    def __init__(self, node_id: str):
        self.node_id = node_id
        super().__init__(f"'{node_id}' is not a valid identifier")


class NodeAlreadyAttachedError(BookmarkError):
    """Raised when adding a node that already sits in a directory."""
    pass
