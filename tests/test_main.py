"""Tests for the interactive console."""

import pytest

import main
from blastmarks import Bookmark, BookmarkManager, BookmarkStorage


def feed(monkeypatch, *answers):
    """Answer successive input() prompts."""
    replies = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(replies))


@pytest.fixture
def storage(tmp_path):
    return BookmarkStorage(tmp_path / "bookmark.xml")


class TestStorageListener:

    def test_registration_saves_seeded_tree(self, manager, storage):
        manager.add_bookmark_listener(main.StorageListener(storage, manager))

        restored = BookmarkManager()
        storage.load(restored)
        assert [c.id for c in restored.root.children()] == ["programming"]

    def test_mutation_saves(self, populated_manager, storage):
        populated_manager.add_bookmark_listener(main.StorageListener(storage, populated_manager))
        bookmark = Bookmark.create("Site", "http://site")

        populated_manager.add_node(populated_manager.root, bookmark)

        restored = BookmarkManager()
        storage.load(restored)
        assert bookmark.id in [c.id for c in restored.root.children()]


class TestActions:
    """Test menu actions with scripted input."""

    def test_add_bookmark_to_root(self, monkeypatch, populated_manager, listener):
        populated_manager.add_bookmark_listener(listener)
        feed(monkeypatch, "1", "Python", "https://python.org")

        main.add_bookmark(populated_manager)

        last = populated_manager.root.children()[-1]
        assert last.display_name == "Python"
        assert last.url == "https://python.org"
        assert listener.events[-1][0] == "item_added"

    def test_add_directory_to_nested(self, monkeypatch, populated_manager):
        # 1 root, 2 Work, 3 Tools
        feed(monkeypatch, "3", "Reading", "reading")

        main.add_directory(populated_manager)

        tools = populated_manager.root.children()[0].children()[1]
        assert [c.id for c in tools.children()][-1] == "reading"

    def test_add_directory_rejects_invalid_identifier(self, monkeypatch, populated_manager, storage):
        """Test that a bad identifier is asked for again and the saved file still loads."""
        populated_manager.add_bookmark_listener(main.StorageListener(storage, populated_manager))
        feed(monkeypatch, "1", "My Stuff", "my stuff", "1st", "my-stuff")

        main.add_directory(populated_manager)

        restored = BookmarkManager()
        assert storage.load(restored) is True
        last = restored.root.children()[-1]
        assert last.id == "my-stuff"
        assert last.display_name == "My Stuff"

    def test_add_directory_blank_identifier_after_invalid(self, monkeypatch, populated_manager, storage):
        populated_manager.add_bookmark_listener(main.StorageListener(storage, populated_manager))
        feed(monkeypatch, "1", "My Stuff", "my stuff", "")

        main.add_directory(populated_manager)

        restored = BookmarkManager()
        storage.load(restored)
        assert restored.root.children()[-1].id.startswith("id-")

    def test_add_bookmark_requires_url(self, monkeypatch, populated_manager):
        feed(monkeypatch, "1", "Nothing", "")

        main.add_bookmark(populated_manager)

        assert len(populated_manager.root.children()) == 2

    def test_rename(self, monkeypatch, populated_manager, listener):
        populated_manager.add_bookmark_listener(listener)
        feed(monkeypatch, "1", "Job")

        main.rename_node(populated_manager)

        assert populated_manager.root.children()[0].display_name == "Job"
        assert listener.events[-1] == ("item_updated", "work")

    def test_change_url(self, monkeypatch, populated_manager):
        # Bookmarks only: 1 Docs, 2 Tracker, 3 News
        feed(monkeypatch, "2", "https://github.com/python/cpython/issues")

        main.change_url(populated_manager)

        tracker = populated_manager.root.children()[0].children()[1].children()[0]
        assert tracker.url == "https://github.com/python/cpython/issues"

    def test_remove_confirmed(self, monkeypatch, populated_manager, listener):
        populated_manager.add_bookmark_listener(listener)
        # 1 Work, 2 Docs, 3 Tools, 4 Tracker, 5 News
        feed(monkeypatch, "4", "yes")

        main.remove_node(populated_manager)

        tools = populated_manager.root.children()[0].children()[1]
        assert tools.children() == []
        assert listener.events[-1][:2] == ("item_removed", "tools")

    def test_remove_cancelled(self, monkeypatch, populated_manager):
        feed(monkeypatch, "5", "no")

        main.remove_node(populated_manager)

        assert len(populated_manager.root.children()) == 2

    def test_invalid_choice(self, monkeypatch, populated_manager):
        feed(monkeypatch, "abc")

        main.remove_node(populated_manager)

        assert len(populated_manager.root.children()) == 2

    def test_export(self, monkeypatch, tmp_path, populated_manager):
        output = tmp_path / "export.html"
        feed(monkeypatch, str(output))

        main.export_bookmarks(populated_manager)

        assert output.exists()


def test_main_exits_on_zero(monkeypatch, tmp_path):
    path = tmp_path / "bookmark.xml"
    monkeypatch.setattr("sys.argv", ["main.py", str(path)])
    feed(monkeypatch, "0")

    with pytest.raises(SystemExit) as exc_info:
        main.main()

    assert exc_info.value.code == 0
    assert path.exists()


def test_main_handles_ctrl_c(monkeypatch, tmp_path, capsys):
    """Test that Ctrl-C at the prompt exits cleanly from the installed entry point."""
    monkeypatch.setattr("sys.argv", ["blast-bookmarks", str(tmp_path / "bookmark.xml")])

    def interrupt(prompt=""):
        raise KeyboardInterrupt

    monkeypatch.setattr("builtins.input", interrupt)

    with pytest.raises(SystemExit) as exc_info:
        main.main()

    assert exc_info.value.code == 0
    assert "Bye!" in capsys.readouterr().out
