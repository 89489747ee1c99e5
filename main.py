#!/usr/bin/env python3
"""
Blast Bookmarks

Browse and edit the bookmark tree stored in bookmark.xml.
"""

import sys
from pathlib import Path
from typing import List, Optional

from blastmarks import (
    Bookmark,
    BookmarkDirectory,
    BookmarkError,
    BookmarkListener,
    BookmarkManager,
    BookmarkStorage,
    Colors,
    InvalidNodeIdError,
    export_to_html,
    setup_logging,
)
from blastmarks.models import BookmarkNode, Presentation, validate_node_id, xml_safe_uuid


class ConsoleListener(BookmarkListener):
    """Prints tree changes."""

    def item_added(self, parent, node):
        print(f"  {Colors.GREEN}+{Colors.RESET} {node.display_name} -> {parent.display_name}")

    def item_removed(self, parent, node):
        print(f"  {Colors.RED}-{Colors.RESET} {node.display_name} <- {parent.display_name}")

    def item_updated(self, node):
        print(f"  {Colors.YELLOW}~{Colors.RESET} {node.display_name}")


class StorageListener(BookmarkListener):
    """Saves the tree after every change."""

    def __init__(self, storage: BookmarkStorage, manager: BookmarkManager):
        self.storage = storage
        self.manager = manager

    def save(self):
        self.storage.save(self.manager)

    def roots_changed(self):
        self.save()

    def item_added(self, parent, node):
        self.save()

    def item_removed(self, parent, node):
        self.save()

    def item_updated(self, node):
        self.save()


def print_header(storage: BookmarkStorage):
    """Print application header."""
    print()
    print("=" * 60)
    print(f"{Colors.BOLD}Blast Bookmarks{Colors.RESET}")
    print(f"{Colors.GREY}{storage.path}{Colors.RESET}")
    print("=" * 60)


def print_menu():
    """Print main menu."""
    print()
    print("Choose an option:")
    print()
    print(f"  {Colors.CYAN}1{Colors.RESET}. Show bookmarks")
    print(f"  {Colors.CYAN}2{Colors.RESET}. Add bookmark")
    print(f"  {Colors.CYAN}3{Colors.RESET}. Add directory")
    print(f"  {Colors.CYAN}4{Colors.RESET}. Rename")
    print(f"  {Colors.CYAN}5{Colors.RESET}. Change bookmark URL")
    print()
    print(f"  {Colors.YELLOW}6{Colors.RESET}. Remove")
    print(f"  {Colors.YELLOW}7{Colors.RESET}. Export to HTML file")
    print()
    print(f"  {Colors.GREY}0{Colors.RESET}. Exit")
    print()


def print_section(title: str):
    print()
    print("-" * 60)
    print(title)
    print("-" * 60)


def format_node(node: BookmarkNode) -> str:
    presentation = Presentation()
    node.update(presentation)
    if presentation.icon == "folder":
        return f"{Colors.BOLD}{presentation.presentable_text}/{Colors.RESET}"
    return f"{presentation.presentable_text} {Colors.GREY}{presentation.location_string}{Colors.RESET}"


def list_nodes(manager: BookmarkManager, directories_only: bool = False,
               include_root: bool = False) -> List[BookmarkNode]:
    """Print the tree numbered from 1 and return the nodes in that order."""
    nodes: List[BookmarkNode] = []
    if include_root:
        nodes.append(manager.root)
        print(f"  {Colors.CYAN}{len(nodes)}{Colors.RESET}. {format_node(manager.root)}")

    for depth, node in manager.root.walk():
        if directories_only and not isinstance(node, BookmarkDirectory):
            continue
        nodes.append(node)
        indent = "  " * depth
        print(f"{indent}{Colors.CYAN}{len(nodes)}{Colors.RESET}. {format_node(node)}")
    return nodes


def choose_node(nodes: List[BookmarkNode], prompt: str) -> Optional[BookmarkNode]:
    if not nodes:
        print(f"\n{Colors.YELLOW}Nothing to choose from.{Colors.RESET}")
        return None

    choice = input(f"\n{prompt}: ").strip()
    try:
        idx = int(choice) - 1
    except ValueError:
        print(f"{Colors.RED}Invalid input.{Colors.RESET}")
        return None

    if 0 <= idx < len(nodes):
        return nodes[idx]
    print(f"{Colors.RED}Invalid number.{Colors.RESET}")
    return None


def show_bookmarks(manager: BookmarkManager):
    print_section("Bookmarks")
    if not list_nodes(manager):
        print(f"\n{Colors.YELLOW}No bookmarks.{Colors.RESET}")


def choose_directory(manager: BookmarkManager) -> Optional[BookmarkDirectory]:
    nodes = list_nodes(manager, directories_only=True, include_root=True)
    return choose_node(nodes, "Select directory")


def add_bookmark(manager: BookmarkManager):
    print_section("Add Bookmark")
    parent = choose_directory(manager)
    if parent is None:
        return

    name = input("Name: ").strip()
    url = input("URL: ").strip()
    if not url:
        print(f"{Colors.RED}URL is required.{Colors.RESET}")
        return

    manager.add_node(parent, Bookmark.create(name or url, url))


def add_directory(manager: BookmarkManager):
    print_section("Add Directory")
    parent = choose_directory(manager)
    if parent is None:
        return

    name = input("Name: ").strip()
    if not name:
        print(f"{Colors.RED}Name is required.{Colors.RESET}")
        return

    while True:
        node_id = input("Identifier (Enter for auto): ").strip()
        if not node_id:
            node_id = xml_safe_uuid()
        try:
            validate_node_id(node_id)
            break
        except InvalidNodeIdError as e:
            print(f"{Colors.RED}{e}.{Colors.RESET} Use letters, digits, '-' or '_', starting with a letter.")

    manager.add_node(parent, BookmarkDirectory.create(name, node_id))


def rename_node(manager: BookmarkManager):
    print_section("Rename")
    node = choose_node(list_nodes(manager), "Select item")
    if node is None:
        return

    name = input(f"New name [{node.display_name}]: ").strip()
    if not name:
        print("Cancelled.")
        return

    node.display_name = name
    manager.update_node(node)


def change_url(manager: BookmarkManager):
    print_section("Change URL")
    nodes = [node for _, node in manager.root.walk() if isinstance(node, Bookmark)]
    for i, node in enumerate(nodes, 1):
        print(f"  {Colors.CYAN}{i}{Colors.RESET}. {format_node(node)}")

    node = choose_node(nodes, "Select bookmark")
    if node is None:
        return

    url = input(f"New URL [{node.url}]: ").strip()
    if not url:
        print("Cancelled.")
        return

    node.url = url
    manager.update_node(node)


def remove_node(manager: BookmarkManager):
    print_section("Remove")
    node = choose_node(list_nodes(manager), "Select item")
    if node is None:
        return

    confirm = input(f"{Colors.YELLOW}Remove '{node.display_name}'? (yes/no):{Colors.RESET} ").strip().lower()
    if confirm != "yes":
        print("Cancelled.")
        return

    manager.remove_node(node.parent, node)


def export_bookmarks(manager: BookmarkManager):
    """Export bookmarks to HTML file."""
    print_section("Export to HTML")

    output_input = input("\nOutput filename (Enter for auto): ").strip()
    output_path = Path(output_input) if output_input else None

    bookmarks, directories = export_to_html(manager, output_path=output_path)
    print()
    print(f"{Colors.GREEN}Export completed!{Colors.RESET}")
    print(f"  Bookmarks: {bookmarks}")
    print(f"  Directories: {directories}")


ACTIONS = {
    "1": show_bookmarks,
    "2": add_bookmark,
    "3": add_directory,
    "4": rename_node,
    "5": change_url,
    "6": remove_node,
    "7": export_bookmarks,
}


def run():
    """Run the menu loop."""
    setup_logging(verbose="-v" in sys.argv[1:])
    args = [arg for arg in sys.argv[1:] if arg != "-v"]

    storage = BookmarkStorage(args[0] if args else None)
    manager = BookmarkManager(project=Path.cwd().name)

    print_header(storage)
    try:
        storage.load(manager)
    except BookmarkError as e:
        print(f"\n{Colors.RED}Error:{Colors.RESET} {e}")
        sys.exit(1)

    manager.add_bookmark_listener(StorageListener(storage, manager))
    manager.add_bookmark_listener(ConsoleListener())

    while True:
        print_menu()

        choice = input("Select option: ").strip()

        if choice == "0" or choice.lower() == "q":
            print("\nBye!")
            sys.exit(0)

        action = ACTIONS.get(choice)
        if action is None:
            print(f"\n{Colors.RED}Invalid option.{Colors.RESET}")
            continue

        try:
            action(manager)
        except BookmarkError as e:
            print(f"\n{Colors.RED}Error:{Colors.RESET} {e}")
        except OSError as e:
            print(f"\n{Colors.RED}Unexpected error:{Colors.RESET} {e}")


def main():
    """Main entry point."""
    try:
        run()
    except KeyboardInterrupt:
        print("\n\nBye!")
        sys.exit(0)


if __name__ == "__main__":
    main()
