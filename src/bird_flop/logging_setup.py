"""
logging_setup.py: One-time logger configuration for the command line entry point.
"""

import logging
import sys
from datetime import datetime


class HumanFormatter(logging.Formatter):
    """Compact one-line format for terminal display."""

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.now().strftime("%H:%M:%S")
        name = record.name.replace("bird_flop.", "")
        line = f"{ts} [{record.levelname[0]}] {name}: {record.getMessage()}"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def setup_logging(level: str = "info") -> None:
    """Configure the bird_flop package logger."""
    root = logging.getLogger("bird_flop")
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(HumanFormatter())
    root.addHandler(console)
    root.propagate = False
