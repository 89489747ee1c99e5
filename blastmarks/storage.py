#!/usr/bin/env python3
"""Read and write the bookmark tree to ``bookmark.xml``."""

import logging
import os
import sys
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional, Union

import lz4.block

from .errors import BookmarkStorageError
from .manager import BookmarkManager


LZ4_MAGIC = b"mozLz40\0"


def read_lz4(path: Path) -> bytes:
    """Read a mozlz4 framed file and return the decompressed payload."""
    with open(path, "rb") as f:
        data = f.read()
    if data[:8] != LZ4_MAGIC:
        raise BookmarkStorageError(f"Invalid mozlz4 format: {path}")
    try:
        return lz4.block.decompress(data[8:])
    except lz4.block.LZ4BlockError as e:
        raise BookmarkStorageError(f"Corrupt mozlz4 data in {path}: {e}") from e


def write_lz4(path: Path, payload: bytes):
    """Write payload as a mozlz4 framed file."""
    compressed = lz4.block.compress(payload)
    with open(path, "wb") as f:
        f.write(LZ4_MAGIC)
        f.write(compressed)


class BookmarkStorage:
    """Persists a manager's state as a ``<component name="bookmarks">`` document."""

    FILENAME = "bookmark.xml"
    APP_DIR_NAME = "blast-browser"
    COMPONENT_TAG = "component"
    COMPONENT_NAME = "bookmarks"
    COMPRESSED_SUFFIX = ".xmllz4"

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = self.resolve_path(path)

    @classmethod
    def get_app_data_path(cls) -> Path:
        """Get the default bookmark file location for this platform."""
        if sys.platform == "darwin":
            base = Path.home() / "Library" / "Application Support"
        elif sys.platform == "win32":
            base = Path(os.environ.get("APPDATA", ""))
        else:
            base = Path.home() / ".config"
        return base / cls.APP_DIR_NAME / cls.FILENAME

    @classmethod
    def resolve_path(cls, path: Optional[Union[str, Path]] = None) -> Path:
        if path is not None:
            return Path(path)

        # Check current directory first
        current_file = Path(cls.FILENAME)
        if current_file.exists():
            logging.debug(f"Found {cls.FILENAME} in current directory")
            return current_file

        return cls.get_app_data_path()

    @property
    def compressed(self) -> bool:
        return self.path.suffix == self.COMPRESSED_SUFFIX

    def to_document(self, state: ET.Element) -> ET.Element:
        """Wrap a root state element in the component element."""
        component = ET.Element(self.COMPONENT_TAG, {"name": self.COMPONENT_NAME})
        for key, value in state.attrib.items():
            component.set(key, value)
        component.extend(list(state))
        return component

    def from_document(self, document: ET.Element) -> ET.Element:
        if document.tag != self.COMPONENT_TAG:
            raise BookmarkStorageError(
                f"Expected <{self.COMPONENT_TAG}> root element in {self.path}, got <{document.tag}>"
            )
        name = document.get("name")
        if name != self.COMPONENT_NAME:
            raise BookmarkStorageError(f"Unexpected component '{name}' in {self.path}")

        # Indentation is not part of the tree
        for element in document.iter():
            element.text = None
            element.tail = None
        return document

    def save(self, manager: BookmarkManager):
        document = self.to_document(manager.get_state())
        ET.indent(document)
        payload = ET.tostring(document, encoding="utf-8", xml_declaration=True)

        self.path.parent.mkdir(parents=True, exist_ok=True)
        if self.compressed:
            write_lz4(self.path, payload)
        else:
            with self.path.open("wb") as f:
                f.write(payload)

        logging.info(f"Saved bookmarks: {self.path}")

    def load(self, manager: BookmarkManager) -> bool:
        """Merge the stored tree into the manager. Returns False if there is no file."""
        if not self.path.exists():
            logging.debug(f"No bookmark file at {self.path}")
            return False

        if self.compressed:
            payload = read_lz4(self.path)
        else:
            payload = self.path.read_bytes()

        try:
            document = ET.fromstring(payload)
        except ET.ParseError as e:
            raise BookmarkStorageError(f"Malformed bookmark file {self.path}: {e}") from e

        manager.load_state(self.from_document(document))
        logging.info(f"Loaded bookmarks: {self.path}")
        return True
