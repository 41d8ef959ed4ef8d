"""
common/io_utils.py
------------------
General-purpose I/O and logging utilities used across
the tilemap pipeline modules (tilemap, furnishing, floors).
"""

import os
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union, Optional


LOGGER_NAME = "izakaya_tilemap"


# -------------------------------------------------------
# Logging utilities
# -------------------------------------------------------

def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None
) -> None:
    """Configure logging with optional file output"""
    format_str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(),
            *([] if not log_file else [logging.FileHandler(log_file)])
        ]
    )


def parse_log_level(name: Optional[str], default: int = logging.INFO) -> int:
    """Map a level name ("debug", "WARNING", ...) to a logging constant."""
    if not name:
        return default
    value = logging.getLevelName(name.strip().upper())
    return value if isinstance(value, int) else default


def log(message: str, level: str = "INFO") -> None:
    """Unified logging with emoji support"""
    logger = logging.getLogger(LOGGER_NAME)
    level_map = {
        "INFO": logging.INFO,
        "ERROR": logging.ERROR,
        "WARNING": logging.WARNING,
        "WARN": logging.WARNING,
        "DEBUG": logging.DEBUG,
        "OK": logging.INFO
    }
    logger.log(level_map.get(level, logging.INFO), message)


# -------------------------------------------------------
# JSON / file utilities
# -------------------------------------------------------

def read_json(filepath: Union[str, Path]) -> Dict[str, Any]:
    """Read JSON file with UTF-8 encoding"""
    with open(filepath, 'r', encoding='utf-8') as f:
        return json.load(f)


def read_text(filepath: Union[str, Path]) -> str:
    """Read a whole text file (raw LLM answers, zone maps) with UTF-8 encoding"""
    with open(filepath, 'r', encoding='utf-8') as f:
        return f.read()


def write_json(
    data: Dict[str, Any],
    filepath: Union[str, Path],
    pretty: bool = True
) -> None:
    """Write JSON file with UTF-8 encoding and optional pretty printing"""
    parent = os.path.dirname(str(filepath))
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(filepath, 'w', encoding='utf-8') as f:
        json.dump(
            data,
            f,
            indent=2 if pretty else None,
            ensure_ascii=False
        )


# -------------------------------------------------------
# Misc helpers
# -------------------------------------------------------

def format_grid(rows: List[str]) -> str:
    """Join grid rows into a printable block (used in debug logs)."""
    return "\n".join(rows)


def safe_name(name: str) -> str:
    """Normalize floor keys or themes into file-name friendly tokens."""
    n = name.strip().replace("-", "_").replace(".", "_").replace(" ", "_")
    if n and n[0].isdigit():
        n = "floor_" + n
    return n
