"""Parsing of ELF headers, program headers, section headers and symbols."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from elfa.meanings import (
    EI_ABIVERSION,
    EI_CLASS,
    EI_DATA,
    EI_OSABI,
    EI_PAD,
    EI_VERSION,
    ELFCLASS32,
    ELFCLASS64,
    ELFDATA2MSB,
)

UNKNOWN_ARCHITECTURE = "File has unknown architecture or bytes buffer is too small."
NO_PROGRAM_HEADERS = "File has no program header table."
NO_SECTION_HEADERS = "File has no program header table."
NOT_ENOUGH_BYTES = "Not enough bytes in buffer."
INVALID_INDEX = "Invalid index."
NO_SYMBOL_TABLE = "Failed to get .strtab or .symtab section."
BAD_STRING = "Error converting bytes to string."


class ElfError(Exception):
    """Raised when an ELF image cannot be read as requested."""


@dataclass(frozen=True)
class _Layout:
    ehdr: str
    phdr: str
    shdr: str
    sym: str

    @property
    def ehdr_size(self) -> int:
        return struct.calcsize("<" + self.ehdr)

    @property
    def sym_size(self) -> int:
        return struct.calcsize("<" + self.sym)


_LAYOUTS = {
    64: _Layout(ehdr="16sHHIQQQIHHHHHH", phdr="IIQQQQQQ", shdr="IIQQQQIIQQ", sym="IBBHQQ"),
    32: _Layout(ehdr="16sHHIIIIIHHHHHH", phdr="IIIIIIII", shdr="IIIIIIIIII", sym="IIIBBH"),
}


@dataclass(frozen=True)
class ElfHeader:
    """The ELF file header (Elf32_Ehdr / Elf64_Ehdr)."""

    bits: int
    ident: bytes
    e_type: int
    e_machine: int
    e_version: int
    e_entry: int
    e_phoff: int
    e_shoff: int
    e_flags: int
    e_ehsize: int
    e_phentsize: int
    e_phnum: int
    e_shentsize: int
    e_shnum: int
    e_shstrndx: int

    @property
    def elf_class(self) -> int:
        return self.ident[EI_CLASS]

    @property
    def data_encoding(self) -> int:
        return self.ident[EI_DATA]

    @property
    def ident_version(self) -> int:
        return self.ident[EI_VERSION]

    @property
    def osabi(self) -> int:
        return self.ident[EI_OSABI]

    @property
    def abi_version(self) -> int:
        return self.ident[EI_ABIVERSION]

    @property
    def pad(self) -> int:
        return self.ident[EI_PAD]


@dataclass(frozen=True)
class ProgramHeader:
    """One entry of the program header table."""

    bits: int
    index: int
    p_type: int
    p_offset: int
    p_vaddr: int
    p_paddr: int
    p_filesz: int
    p_memsz: int
    p_flags: int
    p_align: int


@dataclass(frozen=True)
class SectionHeader:
    """One entry of the section header table, with its resolved name."""

    bits: int
    index: int
    name: str
    sh_name: int
    sh_type: int
    sh_flags: int
    sh_addr: int
    sh_offset: int
    sh_size: int
    sh_link: int
    sh_info: int
    sh_addralign: int
    sh_entsize: int


@dataclass(frozen=True)
class Symbol:
    """One entry of the .symtab section, with its resolved name."""

    bits: int
    index: int
    name: str
    st_name: int
    st_value: int
    st_size: int
    st_info: int
    st_other: int
    st_shndx: int


def check_magic(data: bytes) -> bool:
    """Return True if data starts with the ELF magic number."""
    return len(data) >= 4 and data[:4] == b"\x7fELF"


def read_string(data: bytes, start: int) -> str:
    """Read a NUL-terminated UTF-8 string starting at start."""
    if start < 0 or start > len(data):
        raise ElfError(NOT_ENOUGH_BYTES)
    end = data.find(b"\0", start)
    if end == -1:
        end = len(data)
    try:
        return data[start:end].decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ElfError(BAD_STRING) from exc


class ElfFile:
    """A parsed view over the bytes of an ELF image."""

    def __init__(self, data: bytes):
        self.data = bytes(data)
        elf_class = self.data[EI_CLASS] if len(self.data) > EI_CLASS else None
        if elf_class == ELFCLASS64 and len(self.data) >= _LAYOUTS[64].ehdr_size:
            bits = 64
        elif elf_class == ELFCLASS32 and len(self.data) >= _LAYOUTS[32].ehdr_size:
            bits = 32
        else:
            raise ElfError(UNKNOWN_ARCHITECTURE)
        self.bits = bits
        self._layout = _LAYOUTS[bits]
        self._endian = ">" if self.data[EI_DATA] == ELFDATA2MSB else "<"
        self.header = ElfHeader(bits, *self._unpack(self._layout.ehdr, 0))

    def _unpack(self, fmt: str, offset: int) -> tuple:
        try:
            return struct.unpack_from(self._endian + fmt, self.data, offset)
        except struct.error:
            raise ElfError(NOT_ENOUGH_BYTES) from None

    # Program headers

    def _check_program_table(self) -> None:
        header = self.header
        if header.e_phoff == 0:
            raise ElfError(NO_PROGRAM_HEADERS)
        if len(self.data) < header.e_phnum * header.e_phentsize:
            raise ElfError(NOT_ENOUGH_BYTES)

    def _program_header_at(self, index: int) -> ProgramHeader:
        header = self.header
        offset = header.e_phoff + index * header.e_phentsize
        fields = self._unpack(self._layout.phdr, offset)
        if self.bits == 64:
            p_type, p_flags, p_offset, p_vaddr, p_paddr, p_filesz, p_memsz, p_align = fields
        else:
            p_type, p_offset, p_vaddr, p_paddr, p_filesz, p_memsz, p_flags, p_align = fields
        return ProgramHeader(
            bits=self.bits,
            index=index,
            p_type=p_type,
            p_offset=p_offset,
            p_vaddr=p_vaddr,
            p_paddr=p_paddr,
            p_filesz=p_filesz,
            p_memsz=p_memsz,
            p_flags=p_flags,
            p_align=p_align,
        )

    def program_headers(self) -> list[ProgramHeader]:
        """Return every entry of the program header table."""
        self._check_program_table()
        return [self._program_header_at(i) for i in range(self.header.e_phnum)]

    def program_header(self, index: int) -> ProgramHeader:
        """Return the program header at index."""
        self._check_program_table()
        if not 0 <= index < self.header.e_phnum:
            raise ElfError(INVALID_INDEX)
        return self._program_header_at(index)

    # Section headers

    def _check_section_table(self) -> int:
        """Validate the section table and return the offset of the name strings."""
        header = self.header
        if header.e_shoff == 0:
            raise ElfError(NO_SECTION_HEADERS)
        if len(self.data) < header.e_shnum * header.e_shentsize:
            raise ElfError(NOT_ENOUGH_BYTES)
        return self._raw_section(header.e_shstrndx)[4]

    def _raw_section(self, index: int) -> tuple:
        header = self.header
        offset = header.e_shoff + index * header.e_shentsize
        return self._unpack(self._layout.shdr, offset)

    def _section_header_at(self, index: int, names_offset: int) -> SectionHeader:
        (
            sh_name,
            sh_type,
            sh_flags,
            sh_addr,
            sh_offset,
            sh_size,
            sh_link,
            sh_info,
            sh_addralign,
            sh_entsize,
        ) = self._raw_section(index)
        return SectionHeader(
            bits=self.bits,
            index=index,
            name=read_string(self.data, names_offset + sh_name),
            sh_name=sh_name,
            sh_type=sh_type,
            sh_flags=sh_flags,
            sh_addr=sh_addr,
            sh_offset=sh_offset,
            sh_size=sh_size,
            sh_link=sh_link,
            sh_info=sh_info,
            sh_addralign=sh_addralign,
            sh_entsize=sh_entsize,
        )

    def section_headers(self) -> list[SectionHeader]:
        """Return every entry of the section header table."""
        names_offset = self._check_section_table()
        return [
            self._section_header_at(i, names_offset) for i in range(self.header.e_shnum)
        ]

    def section_header(self, index: int) -> SectionHeader:
        """Return the section header at index."""
        names_offset = self._check_section_table()
        if not 0 <= index < self.header.e_shnum:
            raise ElfError(INVALID_INDEX)
        return self._section_header_at(index, names_offset)

    # Symbols

    def symbols(self, name: str = "") -> list[Symbol]:
        """Return the .symtab symbols, all of them or only those called name."""
        names_offset = self._check_section_table()

        def size(section: SectionHeader | None) -> int:
            return section.sh_size if section is not None else 0

        strtab: SectionHeader | None = None
        symtab: SectionHeader | None = None
        for i in range(self.header.e_shnum):
            if size(strtab) and size(symtab):
                break
            section = self._section_header_at(i, names_offset)
            if section.name == ".strtab":
                strtab = section
            elif section.name == ".symtab":
                symtab = section

        if not size(strtab) or not size(symtab):
            raise ElfError(NO_SYMBOL_TABLE)

        sym_size = self._layout.sym_size
        found = []
        for offset in range(0, symtab.sh_size, sym_size):
            fields = self._unpack(self._layout.sym, symtab.sh_offset + offset)
            if self.bits == 64:
                st_name, st_info, st_other, st_shndx, st_value, st_size = fields
            else:
                st_name, st_value, st_size, st_info, st_other, st_shndx = fields
            symbol_name = read_string(self.data, strtab.sh_offset + st_name)
            if not name or name == symbol_name:
                found.append(
                    Symbol(
                        bits=self.bits,
                        index=offset // sym_size,
                        name=symbol_name,
                        st_name=st_name,
                        st_value=st_value,
                        st_size=st_size,
                        st_info=st_info,
                        st_other=st_other,
                        st_shndx=st_shndx,
                    )
                )
        return found