"""
Shared pytest fixtures for the bookmark tree tests.
"""

import os
import sys

# Add project root to sys.path so 'blastmarks' and 'main' can be imported
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from blastmarks import Bookmark, BookmarkDirectory, BookmarkListener, BookmarkManager


class RecordingListener(BookmarkListener):
    """Listener that records every notification it receives."""

    def __init__(self):
        self.events = []

    def roots_changed(self):
        self.events.append(("roots_changed",))

    def item_updated(self, node):
        self.events.append(("item_updated", node.id))

    def item_added(self, parent, node):
        self.events.append(("item_added", parent.id, node.id))

    def item_removed(self, parent, node):
        self.events.append(("item_removed", parent.id, node.id))

    def parent_changed(self, parent):
        self.events.append(("parent_changed", parent.id))


@pytest.fixture
def manager():
    """An empty manager."""
    return BookmarkManager(project="test-project")


@pytest.fixture
def listener():
    return RecordingListener()


@pytest.fixture
def populated_manager(manager):
    """
    Manager holding:

        root
        ├── work
        │   ├── Docs (bookmark)
        │   └── tools
        │       └── Tracker (bookmark)
        └── News (bookmark)
    """
    work = BookmarkDirectory.create("Work", "work")
    tools = BookmarkDirectory.create("Tools", "tools")
    manager.root.add_node(work)
    work.add_node(Bookmark.create("Docs", "https://docs.python.org"))
    work.add_node(tools)
    tools.add_node(Bookmark.create("Tracker", "https://bugs.python.org"))
    manager.root.add_node(Bookmark.create("News", "https://news.ycombinator.com"))
    return manager
