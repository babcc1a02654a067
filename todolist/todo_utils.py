"""
Common functions: reading configuration, resolving the TODO file location,
writing files atomically.
Single-source to avoid duplication in other modules.

ROOT is the directory that contains the `todolist` package. For a source
checkout or an editable install (`pip install -e .`) that is the repository
root, where todo.toml ships. For a regular install ROOT is `site-packages`:
todo.toml is not installed there, so DEFAULT_CFG applies and todo.txt is
written into `site-packages`. Put a todo.toml in ROOT with an absolute
`[storage] file` path to keep the list somewhere else.
"""
from __future__ import annotations
import copy
import logging
import pathlib
import typing as _t

import tomli

# ───────────────────────────────────────── Logging Setup ────
# Library functions only log; the CLI sets its own basicConfig.

# ───────────────────────────────────────── Constants & Config ────
ROOT = pathlib.Path(__file__).resolve().parents[1]
CFG_PATH = ROOT / "todo.toml"

DEFAULT_TODO_FILE = "todo.txt"

DEFAULT_CFG = {
    "storage": {
        # Path to the TODO list, relative to ROOT unless absolute.
        "file": DEFAULT_TODO_FILE,
    },
}


def load_cfg(cfg_path: _t.Optional[pathlib.Path] = None) -> dict:
    """Load todo.toml, falling back to DEFAULT_CFG when it is missing or broken."""
    path = pathlib.Path(cfg_path) if cfg_path is not None else CFG_PATH
    if not path.exists():
        logging.info(f"Config file {path} not found, using default configuration.")
        return copy.deepcopy(DEFAULT_CFG)
    try:
        with path.open("rb") as f:
            return tomli.load(f)
    except tomli.TOMLDecodeError as e:
        logging.error(f"Error parsing {path}: {e}. Using default configuration.")
        return copy.deepcopy(DEFAULT_CFG)
    except OSError as e:
        logging.error(f"Error reading {path}: {e}. Using default configuration.")
        return copy.deepcopy(DEFAULT_CFG)


def get_todo_file_path(cfg: _t.Optional[dict] = None) -> pathlib.Path:
    """Get the path to the TODO list file.

    Args:
        cfg: Optional configuration dictionary. If None, loads from todo.toml.

    Returns:
        Absolute path of the TODO file. Relative paths are taken from ROOT.
    """
    if cfg is None:
        cfg = load_cfg()

    file_setting = cfg.get("storage", {}).get("file") or DEFAULT_TODO_FILE
    path = pathlib.Path(file_setting).expanduser()
    if not path.is_absolute():
        path = ROOT / path
    return path


# ───────────────────────────────────────── Atomic Writes ────
def atomic_write(file_path: pathlib.Path, content: str, encoding: str = "utf-8"):
    """
    Write content to a file atomically.
    Uses a temporary file in the same directory and an atomic rename,
    so a failed write never leaves the original half-written.
    """
    file_path = pathlib.Path(file_path)
    temp_path = file_path.with_name(file_path.name + ".tmp")

    try:
        # newline="" keeps the line endings exactly as given
        with open(temp_path, "w", encoding=encoding, newline="") as f:
            f.write(content)
        temp_path.replace(file_path)
    except OSError:
        if temp_path.exists():
            try:
                temp_path.unlink()
            except OSError as cleanup_error:
                logging.warning(f"Could not remove temporary file {temp_path}: {cleanup_error}")
        raise
