"""Text reports of ELF headers, program headers, section headers and symbols."""

from __future__ import annotations

import sys
from typing import Callable, TextIO

from elfa import meanings
from elfa.structures import ElfError, ElfFile, ElfHeader, ProgramHeader, SectionHeader, Symbol

_ALL = 0xFFFF


def _hex(value: int, width: int = 4) -> str:
    """Format like an alternate upper-hex field of the given total width."""
    return "0x" + format(value, "X").rjust(width - 2, "0")


def _block(lines: list[str]) -> str:
    return "".join(f"{line}\n" for line in ["", *lines, ""])


def format_elf_header(header: ElfHeader) -> str:
    """Render the ELF file header as a block of text."""
    bits = header.bits
    return _block(
        [
            f"ELF header {bits}-bit (Elf{bits}_Ehdr)",
            "Magic (e_ident[0..4]): 0x7F ELF",
            "Architecture (e_ident[EI_CLASS]): "
            f"{meanings.ei_class_meaning(header.elf_class)} ({_hex(header.elf_class)})",
            "Data encoding (e_ident[EI_DATA]): "
            f"{meanings.ei_data_meaning(header.data_encoding)} ({_hex(header.data_encoding)})",
            "ELF specification version (e_ident[EI_VERSION]): "
            f"{meanings.ei_version_meaning(header.ident_version)} ({_hex(header.ident_version)})",
            "Target OS and ABI (e_ident[EI_OSABI]): "
            f"{meanings.ei_osabi_meaning(header.osabi)} ({_hex(header.osabi)})",
            f"ABI version: (e_ident[EI_ABIVERSRION]): {_hex(header.abi_version)}",
            f"Start of padding (e_ident[EI_PAD]): {_hex(header.pad)}",
            "Object file type (e_type): "
            f"{meanings.e_type_meaning(header.e_type)} ({_hex(header.e_type, 6)})",
            "Required architecture (e_machine): "
            f"{meanings.e_machine_meaning(header.e_machine)} ({_hex(header.e_machine, 6)})",
            "File version (e_version): "
            f"{meanings.ei_version_meaning(header.e_version & 0xFF)} ({_hex(header.e_version)})",
            f"Entry point VA (e_entry): {_hex(header.e_entry)}",
            f"Program header table file offset (e_phoff): {_hex(header.e_phoff)}",
            f"Section header table file offset (e_shoff): {_hex(header.e_shoff)}",
            f"Processor-specific flags (e_flags): {_hex(header.e_flags)}",
            f"ELF header size (e_ehsize): {_hex(header.e_ehsize)}",
            f"Size of a program header entry (e_phentsize): {_hex(header.e_phentsize)}",
            f"Number of program header entries (e_phnum): {header.e_phnum}",
            f"Size of a section header entry (e_shentsize): {_hex(header.e_shentsize)}",
            f"Number of section header entries (e_shnum): {header.e_shnum}",
            "Section header table index of section name string table (e_shstrndx): "
            f"{header.e_shstrndx}",
        ]
    )


def format_program_header(header: ProgramHeader) -> str:
    """Render one program header as a block of text."""
    bits = header.bits
    return _block(
        [
            f"Program header {bits}-bit (Elf{bits}_Phdr)",
            f"Index: {header.index}",
            "Segment type (p_type): "
            f"{meanings.p_type_meaning(header.p_type)} ({_hex(header.p_type)})",
            f"File offset (p_offset): {_hex(header.p_offset)}",
            f"Virtual address (p_vaddr): {_hex(header.p_vaddr)}",
            f"Physical address (p_paddr): {_hex(header.p_paddr)}",
            f"Size of file image (p_filesz): {_hex(header.p_filesz)}",
            f"Size of memory image (p_memsz): {_hex(header.p_memsz)}",
            "Flags (p_flags): "
            f"{meanings.p_flags_meaning(header.p_flags)} ({_hex(header.p_flags)})",
            f"Alignment (p_align): {_hex(header.p_align)}",
        ]
    )


def format_section_header(header: SectionHeader) -> str:
    """Render one section header as a block of text."""
    bits = header.bits
    return _block(
        [
            f"Section header {bits}-bit (Elf{bits}_Shdr)",
            f"Index: {header.index}",
            f"Name index (sh_name): {header.sh_name}",
            f"Section name: '{header.name}' ({meanings.section_name_meaning(header.name)})",
            "Section type (sh_type): "
            f"{meanings.sh_type_meaning(header.sh_type)} ({_hex(header.sh_type)})",
            "Section flags (sh_flags): "
            f"{meanings.sh_flags_meaning(header.sh_flags)} ({_hex(header.sh_flags)})",
            f"Address (sh_addr): {_hex(header.sh_addr)}",
            f"File offset (sh_offset): {_hex(header.sh_offset)}",
            f"Size (sh_size): {_hex(header.sh_size)}",
            f"Section header table index link (sh_link): {header.sh_link}",
            f"Extra info (sh_info): {_hex(header.sh_info)}",
            f"Alignment (sh_addralign): {_hex(header.sh_addralign)}",
            f"Size of an entry (sh_entsize): {_hex(header.sh_entsize)}",
        ]
    )


def format_symbol(symbol: Symbol) -> str:
    """Render one symbol table entry as a block of text."""
    bits = symbol.bits
    return _block(
        [
            f"Symbol {bits}-bit (Elf{bits}_Sym)",
            f"Index: {symbol.index}",
            f"Name index (st_name): {symbol.st_name}",
            f"Symbol name: {symbol.name}",
            f"Value (st_value): {_hex(symbol.st_value)}",
            f"Size (st_size): {_hex(symbol.st_size)}",
            "Type (st_info): "
            f"{meanings.st_info_meaning(symbol.st_info)} ({_hex(symbol.st_info)})",
            "Visibility (st_other): "
            f"{meanings.st_other_meaning(symbol.st_other)} ({_hex(symbol.st_other)})",
            f"Relevant section header table index (st_shndx): {symbol.st_shndx}",
        ]
    )


def _report(out: TextIO | None, produce: Callable[[], str]) -> None:
    stream = out if out is not None else sys.stdout
    try:
        text = produce()
    except ElfError as exc:
        text = f"{exc}\n"
    stream.write(text)


def _wants_all(index: int | None) -> bool:
    return index is None or index == _ALL


def print_elf_header(data: bytes, out: TextIO | None = None) -> None:
    """Write the ELF header of data, or the reason it cannot be read."""
    _report(out, lambda: format_elf_header(ElfFile(data).header))


def print_program_header(data: bytes, index: int | None = None, out: TextIO | None = None) -> None:
    """Write one program header, or all of them when index is None."""

    def produce() -> str:
        elf = ElfFile(data)
        if _wants_all(index):
            return "".join(format_program_header(h) for h in elf.program_headers())
        return format_program_header(elf.program_header(index))

    _report(out, produce)


def print_section_header(data: bytes, index: int | None = None, out: TextIO | None = None) -> None:
    """Write one section header, or all of them when index is None."""

    def produce() -> str:
        elf = ElfFile(data)
        if _wants_all(index):
            return "".join(format_section_header(h) for h in elf.section_headers())
        return format_section_header(elf.section_header(index))

    _report(out, produce)


def print_symbol(data: bytes, name: str = "", out: TextIO | None = None) -> None:
    """Write the symbols called name, or every symbol when name is empty."""
    _report(out, lambda: "".join(format_symbol(s) for s in ElfFile(data).symbols(name)))