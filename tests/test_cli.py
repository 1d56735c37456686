import struct

import pytest

from elfa.cli import help_text, main

ENTRY = 0x401000


def build_elf64():
    ident = (b"\x7fELF" + bytes([2, 1, 1, 0, 0])).ljust(16, b"\0")
    names = [".text", ".symtab", ".strtab", ".shstrtab"]
    shstrtab = b"\0" + b"".join(n.encode() + b"\0" for n in names)
    name_off = {n: shstrtab.index(b"\0" + n.encode() + b"\0") + 1 for n in names}
    strtab = b"\0main\0helper\0"
    text = b"\x90" * 16

    text_off = 64 + 2 * 56
    symtab = b"".join(
        [
            struct.pack("<IBBHQQ", 0, 0, 0, 0, 0, 0),
            struct.pack("<IBBHQQ", strtab.index(b"main"), 2, 0, 1, ENTRY, 8),
            struct.pack("<IBBHQQ", strtab.index(b"helper"), 1, 2, 1, ENTRY + 8, 4),
        ]
    )
    symtab_off = text_off + len(text)
    strtab_off = symtab_off + len(symtab)
    shstrtab_off = strtab_off + len(strtab)
    body_end = shstrtab_off + len(shstrtab)
    shoff = (body_end + 7) // 8 * 8

    shdr = "<IIQQQQIIQQ"
    sections = [
        struct.pack(shdr, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        struct.pack(shdr, name_off[".text"], 1, 6, ENTRY, text_off, len(text), 0, 0, 16, 0),
        struct.pack(shdr, name_off[".symtab"], 2, 0, 0, symtab_off, len(symtab), 3, 1, 8, 24),
        struct.pack(shdr, name_off[".strtab"], 3, 0, 0, strtab_off, len(strtab), 0, 0, 1, 0),
        struct.pack(shdr, name_off[".shstrtab"], 3, 0, 0, shstrtab_off, len(shstrtab), 0, 0, 1, 0),
    ]
    ehdr = struct.pack(
        "<16sHHIQQQIHHHHHH", ident, 2, 62, 1, ENTRY, 64, shoff, 0, 64, 56, 2, 64, len(sections), 4
    )
    phdrs = struct.pack("<IIQQQQQQ", 6, 4, 64, 0x400040, 0x400040, 112, 112, 8) + struct.pack(
        "<IIQQQQQQ", 1, 5, 0, 0x400000, 0x400000, body_end, body_end, 0x1000
    )
    data = (ehdr + phdrs + text + symtab + strtab + shstrtab).ljust(shoff, b"\0")
    return data + b"".join(sections)


@pytest.fixture
def elf_path(tmp_path):
    path = tmp_path / "sample.elf"
    path.write_bytes(build_elf64())
    return str(path)


def test_no_arguments(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "Please pass a path to a file. Use -h or --help for help.\n"


@pytest.mark.parametrize("flag", ["-h", "--help"])
def test_help(flag, capsys):
    assert main([flag]) == 0
    assert capsys.readouterr().out == help_text()


def test_help_text_mentions_options():
    text = help_text()
    assert text.startswith("Elf Analyzer is a program")
    assert "Usage: elfa [OPTIONS] [FILE PATH]\n" in text
    assert "-s, --symbols [NAME]" in text


@pytest.mark.parametrize("flag", ["-eh", "--elf-header"])
def test_elf_header_flag(flag, elf_path, capsys):
    main([flag, elf_path])
    assert "Magic (e_ident[0..4]): 0x7F ELF" in capsys.readouterr().out


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent")]) == 1
    assert "Failed to read file." in capsys.readouterr().err


def test_not_elf(tmp_path, capsys):
    path = tmp_path / "plain.txt"
    path.write_bytes(b"hello world")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "Invalid ELF binary.\n"


def test_all_program_headers(elf_path, capsys):
    main(["-ph", elf_path])
    assert capsys.readouterr().out.count("Program header 64-bit") == 2


def test_one_program_header(elf_path, capsys):
    main(["--program-header", "1", elf_path])
    out = capsys.readouterr().out
    assert out.count("Program header 64-bit") == 1
    assert "Index: 1\n" in out
    assert "Loadable program segment" in out


def test_non_numeric_index_prints_all(elf_path, capsys):
    main(["-sh", "abc", elf_path])
    assert capsys.readouterr().out.count("Section header 64-bit") == 5


def test_one_section_header(elf_path, capsys):
    main(["-sh", "1", elf_path])
    out = capsys.readouterr().out
    assert out.count("Section header 64-bit") == 1
    assert "Section name: '.text' (executable instructions)" in out


def test_section_index_out_of_range(elf_path, capsys):
    main(["-sh", "9", elf_path])
    assert capsys.readouterr().out == "Invalid index.\n"


def test_all_symbols(elf_path, capsys):
    main(["-s", elf_path])
    assert capsys.readouterr().out.count("Symbol 64-bit") == 3


def test_symbol_by_name(elf_path, capsys):
    main(["--symbols", "main", elf_path])
    out = capsys.readouterr().out
    assert out.count("Symbol 64-bit") == 1
    assert "Symbol name: main\n" in out


def test_unknown_option_prints_nothing(elf_path, capsys):
    assert main(["--bogus", elf_path]) == 0
    assert capsys.readouterr().out == ""