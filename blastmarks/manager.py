#!/usr/bin/env python3
"""Bookmark manager service and its listener protocol."""

import copy
import logging
import threading
import xml.etree.ElementTree as ET
from typing import List, Optional, Tuple

from .models import Bookmark, BookmarkDirectory, BookmarkNode


class BookmarkListener:
    """Receives tree change notifications. Override the hooks you need."""

    def roots_changed(self):
        pass

    def item_updated(self, node: BookmarkNode):
        pass

    def item_added(self, parent: BookmarkDirectory, node: BookmarkNode):
        pass

    def item_removed(self, parent: BookmarkDirectory, node: BookmarkNode):
        pass

    def parent_changed(self, parent: BookmarkDirectory):
        pass


class BookmarkManager:
    """
    Owns the bookmark root and notifies listeners of every change.

    One manager is created per project and handed to whoever needs it.
    Listeners are kept in a tuple that is replaced, never mutated, so a
    notification in progress always iterates a stable snapshot.
    """

    ROOT_ID = "root"
    ROOT_NAME = "root"

    # Seeded into an empty tree when the first listener registers
    FIXTURES: List[Tuple[str, str, List[Tuple[str, str]]]] = [
        ("Programming", "programming", [
            ("Slashdot", "http://www.slashdot.com"),
            ("Macrumors", "http://www.macrumors.com"),
            ("Stackoverflow", "http://www.stackoverflow.com"),
            ("Google", "http://www.google.com"),
            ("Basecamp", "http://www.basecamp.com"),
        ]),
    ]

    def __init__(self, project: Optional[str] = None):
        self.project = project
        self.root = BookmarkDirectory.create(self.ROOT_NAME, self.ROOT_ID)
        self._listeners: Tuple[BookmarkListener, ...] = ()
        self._lock = threading.Lock()

    @property
    def listeners(self) -> Tuple[BookmarkListener, ...]:
        return self._listeners

    def get_root_element(self) -> BookmarkDirectory:
        return self.root

    # ---- persistence ----

    def get_state(self) -> ET.Element:
        return copy.deepcopy(self.root.element)

    def load_state(self, state: ET.Element):
        """Merge the children of ``state`` into the current root."""
        for child in state:
            self.root.element.append(copy.deepcopy(child))
        logging.debug(f"Loaded {len(state)} top-level nodes into '{self.root.id}'")

    # ---- listeners ----

    def _seed_fixtures(self):
        logging.debug("Bookmark tree is empty, adding default bookmarks")
        for name, node_id, bookmarks in self.FIXTURES:
            directory = BookmarkDirectory.create(name, node_id)
            for title, url in bookmarks:
                directory.add_node(Bookmark.create(title, url))
            self.root.add_node(directory)

    def add_bookmark_listener(self, listener: BookmarkListener):
        if len(self.root.element) == 0:
            self._seed_fixtures()
        with self._lock:
            self._listeners = self._listeners + (listener,)
        listener.roots_changed()

    def remove_bookmark_listener(self, listener: BookmarkListener):
        with self._lock:
            listeners = list(self._listeners)
            if listener in listeners:
                listeners.remove(listener)
            self._listeners = tuple(listeners)

    # ---- mutations ----

    def add_node(self, parent: BookmarkDirectory, node: BookmarkNode):
        parent.add_node(node)
        logging.debug(f"Added '{node.id}' to '{parent.id}'")
        for listener in self._listeners:
            listener.parent_changed(parent)
            listener.item_added(parent, node)

    def remove_node(self, parent: BookmarkDirectory, node: BookmarkNode):
        # Listeners are told even when nothing was removed
        parent.remove_node(node)
        logging.debug(f"Removed '{node.id}' from '{parent.id}'")
        for listener in self._listeners:
            listener.parent_changed(parent)
            listener.item_removed(parent, node)

    def update_node(self, node: BookmarkNode):
        """Announce a node whose attributes were changed in place."""
        logging.debug(f"Updated '{node.id}'")
        for listener in self._listeners:
            listener.item_updated(node)
