#!/usr/bin/env python
"""
Manages loading and saving TODO items from/to a plain text file.

Each line of the file holds one item:

    <index>. <text>[ -s]

The trailing " -s" marks the item as done. Lines whose index cannot be
parsed are kept as they are and ignored by index-based operations.
"""
import re
import pathlib
import logging
import typing as _t
from dataclasses import dataclass, replace

from .todo_utils import load_cfg, get_todo_file_path, atomic_write

DONE_MARKER = " -s"
STRIKETHROUGH_START = "\x1b[9m"
STRIKETHROUGH_END = "\x1b[0m"

INDEX_RE = re.compile(r"[0-9]+")


# ───────────────────────────────────────── Error Classes ────
class ItemNotFoundError(LookupError):
    """Raised when no item in the TODO file has the requested index."""

    def __init__(self, index: int):
        self.index = index
        super().__init__(f"Item with index {index} not found.")


# ───────────────────────────────────────── Line Helpers ────
def parse_line_index(line: str) -> _t.Optional[int]:
    """Return the index in front of the first period, or None if there is none."""
    head, sep, _ = line.partition(".")
    if not sep:
        return None
    token = head.strip()
    if not INDEX_RE.fullmatch(token):
        return None
    return int(token)


def format_line(line: str) -> _t.Optional[str]:
    """Format a stored line for display, striking through finished items.

    Returns None for lines without a space, which are left out of the listing.
    """
    head, sep, rest = line.partition(" ")
    if not sep:
        return None
    if rest.endswith(DONE_MARKER):
        text = rest[:-len(DONE_MARKER)].strip()
        return f"{head} {STRIKETHROUGH_START}{text}{STRIKETHROUGH_END}"
    return f"{head} {rest.lstrip()}"


def split_lines(content: str) -> _t.List[str]:
    """Split file content into lines, without the newline characters."""
    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def join_lines(lines: _t.List[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


# ───────────────────────────────────────── TodoItem Class Definition ────
@dataclass
class TodoItem:
    """
    Represents a single line of the TODO list.
    """
    index: int
    text: str
    done: bool = False

    def to_line(self) -> str:
        """Convert to the stored line format (without the newline)."""
        suffix = DONE_MARKER if self.done else ""
        return f"{self.index}. {self.text}{suffix}"

    @classmethod
    def from_line(cls, line: str) -> _t.Optional["TodoItem"]:
        """Create a TodoItem from a stored line, or None if it has no index."""
        index = parse_line_index(line)
        if index is None:
            return None
        rest = line.partition(".")[2]
        # Only the single separating space belongs to the prefix
        if rest.startswith(" "):
            rest = rest[1:]
        done = rest.endswith(DONE_MARKER)
        text = rest[:-len(DONE_MARKER)] if done else rest
        return cls(index=index, text=text.lstrip(), done=done)


# ───────────────────────────────────────── TODO Store Class ────
class TodoStore:
    """
    Manages the TODO list file.

    Nothing is cached between calls: every operation reads the whole file
    and mutating operations write it back.
    """
    def __init__(self, file_path=None):
        """Initialize the store with the given path or the one from config."""
        if file_path is None:
            self.file_path = get_todo_file_path(load_cfg())
        else:
            self.file_path = pathlib.Path(file_path)

    # ─── file access ───
    def _read(self) -> str:
        """Read the whole file. A missing file reads as an empty list."""
        if not self.file_path.exists():
            logging.info(f"TODO file {self.file_path} does not exist yet. Treating it as empty.")
            return ""
        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                return f.read()
        except OSError as e:
            logging.error(f"File access error reading TODO list from {self.file_path}: {e}")
            raise

    def _append_line(self, line: str, needs_separator: bool = False):
        """Append one line, leaving existing content untouched."""
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.file_path, "a", encoding="utf-8") as f:
                if needs_separator:
                    f.write("\n")
                f.write(f"{line}\n")
        except OSError as e:
            logging.error(f"File access error appending to {self.file_path}: {e}")
            raise

    def _rewrite(self, lines: _t.List[str]):
        """Replace the whole file with the given lines."""
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            atomic_write(self.file_path, join_lines(lines))
            logging.info(f"Saved {len(lines)} lines to {self.file_path}")
        except OSError as e:
            logging.error(f"File access error saving TODO list to {self.file_path}: {e}")
            raise

    # ─── queries ───
    def list_items(self) -> _t.List[TodoItem]:
        """Get all indexed items in file order."""
        items = []
        for line in split_lines(self._read()):
            item = TodoItem.from_line(line)
            if item is not None:
                items.append(item)
        return items

    def get_item(self, index: int) -> _t.Optional[TodoItem]:
        """Get an item by its index."""
        for item in self.list_items():
            if item.index == index:
                return item
        return None

    def next_index(self) -> int:
        """One more than the highest index in the file, or 1 for an empty list."""
        return max((item.index for item in self.list_items()), default=0) + 1

    # ─── operations ───
    def add_item(self, text: str) -> TodoItem:
        """Append a new item with the next free index."""
        content = self._read()
        indices = [parse_line_index(line) for line in split_lines(content)]
        next_index = max((i for i in indices if i is not None), default=0) + 1

        if text.endswith(DONE_MARKER):
            logging.warning(f"Item text ends with '{DONE_MARKER.strip()}' and will be read back as done: {text!r}")

        item = TodoItem(index=next_index, text=text)
        self._append_line(
            f"{next_index}. {text}",
            needs_separator=bool(content) and not content.endswith("\n"),
        )
        logging.info(f"Added item #{next_index} to {self.file_path}")
        return item

    def remove_item(self, index: int):
        """Remove every line carrying the given index."""
        lines = split_lines(self._read())
        kept = [line for line in lines if parse_line_index(line) != index]

        if len(kept) == len(lines):
            logging.warning(f"Item #{index} not found in {self.file_path}")
            raise ItemNotFoundError(index)

        self._rewrite(kept)

    def set_done(self, index: int, done: bool) -> TodoItem:
        """Mark an item as done or not done.

        A line already in the requested state is left byte-for-byte unchanged.
        Returns the item as stored after the call.
        """
        lines = split_lines(self._read())
        updated_item = None
        changed = False
        new_lines = []

        for line in lines:
            item = TodoItem.from_line(line)
            if item is None or item.index != index:
                new_lines.append(line)
                continue
            updated_item = replace(item, done=done)
            if item.done == done:
                new_lines.append(line)
            else:
                new_lines.append(updated_item.to_line())
                changed = True

        if updated_item is None:
            logging.warning(f"Item #{index} not found in {self.file_path}")
            raise ItemNotFoundError(index)

        if changed:
            self._rewrite(new_lines)
        return updated_item

    def render(self) -> str:
        """Format the whole list for the terminal. Empty string means no items."""
        formatted = []
        for line in split_lines(self._read()):
            display = format_line(line)
            if display is not None:
                formatted.append(display)
        return "\n".join(formatted)

    def clear(self):
        """Truncate the TODO file to zero bytes."""
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.file_path, "w", encoding="utf-8"):
                pass
            logging.info(f"Cleared TODO list at {self.file_path}")
        except OSError as e:
            logging.error(f"File access error clearing {self.file_path}: {e}")
            raise
