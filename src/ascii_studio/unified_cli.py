# unified_cli.py
"""`ascii-studio <command>` dispatcher; each command is a module with main()."""

import sys
import importlib
import inspect
from typing import Sequence, List, Optional

PROG = "ascii-studio"

COMMANDS = {
    "charsets": "ascii_studio.palettes",
    "image": "ascii_studio.image_to_ascii",
    "text": "ascii_studio.text_to_ascii",
}

DESCRIPTIONS = {
    "charsets": "list glyph palettes",
    "image": "convert an image file",
    "text": "render text and convert it",
}


def usage(file=None) -> None:
    file = file or sys.stdout
    print(f"Usage: {PROG} <command> [args...]", file=file)
    print("Commands:", file=file)
    width = max(len(c) for c in COMMANDS)
    for cmd in sorted(COMMANDS):
        print(f"  {cmd.ljust(width)}  {DESCRIPTIONS.get(cmd, '')}", file=file)
    print(f"Run '{PROG} <command> --help' for command options.", file=file)


def _call_entry(entry, argv: List[str], module_prog: Optional[str] = None) -> int:
    try:
        # Entries taking a parameter get argv; others parse sys.argv themselves.
        if inspect.signature(entry).parameters:
            return entry(argv) or 0

        old_argv = list(sys.argv)
        try:
            sys.argv = [module_prog or old_argv[0]] + list(argv)
            return entry() or 0
        finally:
            sys.argv = old_argv
    except SystemExit as se:
        code = se.code
        if code is None:
            return 0
        return code if isinstance(code, int) else 1
    except Exception as e:
        print(f"Error running command: {e}", file=sys.stderr)
        return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    if not argv or argv[0] in ("-h", "--help"):
        usage()
        return 0
    if argv[0] == "--version":
        from . import __version__

        print(f"{PROG} {__version__}")
        return 0

    cmd, *args = argv
    module_path = COMMANDS.get(cmd)
    if not module_path:
        print(f"Unknown command: {cmd}", file=sys.stderr)
        usage()
        return 2

    try:
        module = importlib.import_module(module_path)
    except Exception as e:
        print(f"Failed to import command '{cmd}' ({module_path}): {e}", file=sys.stderr)
        return 3

    entry = getattr(module, "main", None)
    if not callable(entry):
        print(f"Command module '{module_path}' has no callable 'main'", file=sys.stderr)
        return 4

    return _call_entry(entry, args, module_prog=f"{PROG} {cmd}")


if __name__ == "__main__":
    raise SystemExit(main())
