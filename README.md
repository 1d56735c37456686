# elfa

`elfa` shows what is inside ELF binaries. It can show the ELF header, the
program headers, the section headers and the symbols in `.symtab`. Each field
is printed with its raw value. Where the value has a known meaning, a short
description follows. Both 32-bit and 64-bit files work, in either byte order.

## Installation

```
pip install .
```

## Usage

```
elfa [OPTIONS] FILE
```

The file path always comes last. If you give only a path, `elfa` prints the
ELF header.

| Option | What it shows |
| --- | --- |
| `-h`, `--help` | The help text. |
| `-eh`, `--elf-header` | The file's ELF header. |
| `-ph`, `--program-header [INDEX]` | The program header at INDEX. If INDEX is missing or is not a number from 0 to 65534, all program headers. |
| `-sh`, `--section-header [INDEX]` | The section header at INDEX. If INDEX is missing or is not a number from 0 to 65534, all section headers. |
| `-s`, `--symbols [NAME]` | The `.symtab` symbols called NAME. If NAME is missing, every symbol. |

Examples:

```
elfa /bin/ls
elfa -ph 0 /bin/ls
elfa -sh /bin/ls
elfa -s main ./a.out
```

If the file does not start with the ELF magic number, `elfa` prints
`Invalid ELF binary.` If the file cannot be read, `elfa` writes
`Failed to read file.` to standard error and exits with status 1. Some
problems can stop a request: the class is unknown, a table is missing, an
index is out of range, or `.strtab` or `.symtab` cannot be found. In those
cases `elfa` prints a one-line message instead of the report, such as
`Invalid index.` or `Failed to get .strtab or .symtab section.`

## Library use

The package can also be used from Python.

```python
from elfa.structures import ElfFile, ElfError, check_magic
from elfa.printer import format_section_header

with open("a.out", "rb") as f:
    data = f.read()

if check_magic(data):
    try:
        elf = ElfFile(data)
        for section in elf.section_headers():
            print(format_section_header(section), end="")
    except ElfError as exc:
        print(exc)
```

- `elfa.structures` reads the bytes.
  - `ElfFile(data)` parses the file header, which is available as `.header`.
  - `program_headers()` and `program_header(index)` return the program headers.
  - `section_headers()` and `section_header(index)` return the section headers.
  - `symbols(name="")` returns the symbols.
  - Results are the frozen dataclasses `ElfHeader`, `ProgramHeader`, `SectionHeader` and `Symbol`.
  - Problems raise `ElfError`.
  - `check_magic(data)` tests for the ELF magic number.
  - `read_string(data, start)` reads a NUL-terminated string.
- `elfa.printer` builds the text reports.
  - `format_elf_header`, `format_program_header`, `format_section_header` and `format_symbol` return the report as a string.
  - `print_elf_header(data, out=None)` writes the report to a text stream, or to standard output when `out` is not given.
  - `print_program_header(data, index=None, out=None)`, `print_section_header(data, index=None, out=None)` and `print_symbol(data, name="", out=None)` do the same. When the request fails, they write the error message instead.
- `elfa.meanings` turns raw field values into descriptions. For example, `e_machine_meaning(62)` returns `"AMD x86-64 architecture"` and `sh_flags_meaning(0)` returns `"None"`.
- `elfa.cli.main(argv=None)` is the `elfa` command.

## What it does not do

`elfa` only reports header tables and `.symtab` entries. It does not:

- disassemble code
- dump the contents of sections
- read `.dynsym`, relocations, notes or the dynamic section
- demangle symbol names

## Running the tests

```
pip install .[test]
pytest
```