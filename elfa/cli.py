"""Command line entry point for inspecting ELF files."""

from __future__ import annotations

import re
import sys
from pathlib import Path

from elfa.printer import print_elf_header, print_program_header, print_section_header, print_symbol
from elfa.structures import check_magic

_INDEX = re.compile(r"\+?[0-9]+")
_U16_MAX = 0xFFFF

_HELP_LINES = [
    "Elf Analyzer is a program that can be used to view information about ELF binaries.",
    "",
    "Usage: elfa [OPTIONS] [FILE PATH]",
    "",
    "You must pass a file path as the final argument.",
    "If you do not provide any other arugments, the ELF header will be printed.",
    "",
    "Options:",
    "-h, --help: print this menu.",
    "-eh, --elf-header: display information from the file's ELF header.",
    "-ph, --program-header [INDEX]: display information about a program header by index. "
    "If no index is provided, all program headers will be printed.",
    "-sh, --section-header [INDEX]: display information about a section header by index. "
    "If no index is provided, all section headers will be printed.",
    "-s, --symbols [NAME]: find a symbol by its name. "
    "If no name is provided, all symbols will be printed.",
]


def help_text() -> str:
    """Return the usage message."""
    return "".join(f"{line}\n" for line in _HELP_LINES)


def _parse_index(text: str) -> int | None:
    """Parse an unsigned 16-bit index; anything else selects every entry."""
    if not _INDEX.fullmatch(text):
        return None
    value = int(text)
    if value >= _U16_MAX:
        return None
    return value


def main(argv: list[str] | None = None) -> int:
    """Run the command with argv (defaults to the process arguments)."""
    args = list(sys.argv[1:] if argv is None else argv)

    if not args:
        print("Please pass a path to a file. Use -h or --help for help.")
        return 0

    option = args[0]
    if option in ("-h", "--help"):
        sys.stdout.write(help_text())
        return 0

    try:
        data = Path(args[-1]).read_bytes()
    except OSError:
        print("Failed to read file.", file=sys.stderr)
        return 1

    if not check_magic(data):
        print("Invalid ELF binary.")
        return 0

    if len(args) == 1 or option in ("-eh", "--elf-header"):
        print_elf_header(data)
    elif option in ("-ph", "--program-header"):
        print_program_header(data, _parse_index(args[1]))
    elif option in ("-sh", "--section-header"):
        print_section_header(data, _parse_index(args[1]))
    elif option in ("-s", "--symbols"):
        print_symbol(data, args[1] if len(args) == 3 else "")
    return 0


if __name__ == "__main__":
    sys.exit(main())