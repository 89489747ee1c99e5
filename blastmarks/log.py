#!/usr/bin/env python3
"""Console colors and logging setup."""

import logging


class Colors:
    """ANSI color codes for terminal output."""
    RESET = "\033[0m"
    BOLD = "\033[1m"
    GREY = "\033[90m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    CYAN = "\033[36m"
    RED_BACKGROUND = "\033[41m"


class CustomFormatter(logging.Formatter):
    """Formatter printing a short colored level tag after the time."""

    LEVEL_TAGS = {
        logging.DEBUG: (Colors.CYAN, "DEBG"),
        logging.INFO: (Colors.GREEN, "INFO"),
        logging.WARNING: (Colors.YELLOW, "WARN"),
        logging.ERROR: (Colors.RED, "ERRR"),
        logging.CRITICAL: (Colors.RED_BACKGROUND, "CRIT"),
    }

    def __init__(self):
        super().__init__()
        time_format = f"{Colors.GREY}%(asctime)s{Colors.RESET}"
        self.formatters = {
            level: logging.Formatter(
                f"{time_format} {Colors.BOLD}{color}{tag}{Colors.RESET} %(message)s",
                datefmt="%H:%M",
            )
            for level, (color, tag) in self.LEVEL_TAGS.items()
        }
        self.fallback = logging.Formatter("%(message)s")

    def format(self, record: logging.LogRecord) -> str:
        return self.formatters.get(record.levelno, self.fallback).format(record)


def setup_logging(verbose: bool = False, silent: bool = False):
    """Configure logging with custom formatting."""
    if silent:
        logging.disable(logging.CRITICAL)
        return

    logging.disable(logging.NOTSET)
    handler = logging.StreamHandler()
    handler.setFormatter(CustomFormatter())

    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, handlers=[handler], force=True)
