#!/usr/bin/env python
"""
CLI for managing the plain text TODO list.

Usage examples:
  - Add an item: todo add -M "Water the plants"
  - List items: todo list
  - Check off an item: todo done -I 3
  - Uncheck an item: todo undone -I 3
  - Remove an item: todo rm -I 3
  - Remove everything: todo clear
"""
import sys
import argparse
import logging

from . import __version__
from . import todo_store
from .todo_utils import load_cfg, get_todo_file_path

# ───────────────────────────────────────── Logging Setup ────
logging.basicConfig(level=logging.WARNING, format='%(asctime)s - %(levelname)s - %(message)s')

ABOUT_MESSAGE = """todo
----
todo is a CLI TODO list that keeps your items in a plain
text file next to the installed program.
------
supported commands: add, rm, done, undone, list, clear"""


# ───────────────────────────────────────── Errors ────
class IndexParseError(ValueError):
    """Raised when an --index value is not a non-negative integer."""
    pass


def parse_index(value: str) -> int:
    """Parse an --index value the way the store expects it."""
    if not value:
        raise IndexParseError("cannot parse index from empty string")
    if not todo_store.INDEX_RE.fullmatch(value):
        raise IndexParseError(f"invalid digit found in '{value}'")
    return int(value)


def _require_index(args) -> int:
    if args.index is None:
        raise IndexParseError(f"'{args.command}' requires an index (-I/--index)")
    return parse_index(args.index)


# ───────────────────────────────────────── Commands ────
def cmd_add(args, ts):
    """Add an item."""
    if args.message is None:
        print(f"❌ Error: '{args.command}' requires a message (-M/--message).", file=sys.stderr)
        return 1
    ts.add_item(args.message)
    print(f"✅ Added to your TODO list: {args.message}")
    return 0


def cmd_rm(args, ts):
    """Remove an item by index."""
    index = _require_index(args)
    ts.remove_item(index)
    print(f"🗑️ Removed from your TODO list: {index}")
    return 0


def cmd_done(args, ts):
    """Check off an item."""
    index = _require_index(args)
    ts.set_done(index, True)
    print(f"✅ Checked off item from your TODO list: {index}")
    return 0


def cmd_undone(args, ts):
    """Uncheck an item."""
    index = _require_index(args)
    ts.set_done(index, False)
    print(f"↩️ Unchecked item from your TODO list: {index}")
    return 0


def cmd_list(args, ts):
    """Print the formatted list."""
    rendered = ts.render()
    if not rendered:
        print("Nothing was found in your TODO list! 😊")
    else:
        print(f"TODO list:\n{rendered}")
    return 0


def cmd_clear(args, ts):
    """Remove every item."""
    ts.clear()
    print("🧹 Your TODO list has been cleared!")
    return 0


COMMANDS = {
    "add": cmd_add,
    "rm": cmd_rm,
    "done": cmd_done,
    "undone": cmd_undone,
    "list": cmd_list,
    "clear": cmd_clear,
}


# ───────────────────────────────────────── Argument Parser ────
def build_parser():
    parser = argparse.ArgumentParser(
        prog="todo",
        description="Manage your TODO list",
        epilog=ABOUT_MESSAGE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("command", nargs="?", help="One of: add, rm, done, undone, list, clear")
    parser.add_argument("-M", "--message", default=None,
                        help="Add a message to your command, used for 'add'")
    parser.add_argument("-I", "--index", default=None,
                        help="Add an index value to your command, used for 'rm', 'done' and 'undone'")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


# ───────────────────────────────────────── Main Function ────
def main(args=None):
    """Main entry point for the script."""
    parser = build_parser()
    parsed_args = parser.parse_args(args)

    if parsed_args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if not parsed_args.command:
        parser.print_help()
        return 0

    func = COMMANDS.get(parsed_args.command)
    if func is None:
        print(f"`{parsed_args.command}` is not a valid command, run todo --help for more information.")
        return 0

    try:
        ts = todo_store.TodoStore(get_todo_file_path(load_cfg()))
        return func(parsed_args, ts)
    except IndexParseError as e:
        print(f"❌ Error parsing index: {e}", file=sys.stderr)
        return 1
    except todo_store.ItemNotFoundError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        logging.error(f"An error occurred while executing command '{parsed_args.command}': {e}")
        print(f"❌ Error accessing TODO file: {e}", file=sys.stderr)
        return 1


# ───────────────────────────────────────── Main Execution ────
if __name__ == "__main__":
    sys.exit(main())
