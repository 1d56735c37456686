import pytest

from elfa import meanings


@pytest.mark.parametrize(
    "val, expected",
    [
        (0, "Invalid class"),
        (1, "32-bit architecture"),
        (2, "64-bit architecture"),
        (3, ""),
    ],
)
def test_ei_class(val, expected):
    assert meanings.ei_class_meaning(val) == expected


@pytest.mark.parametrize(
    "val, expected",
    [
        (0, "Unknown data format"),
        (1, "Two's complement little-endian"),
        (2, "Two's complement big-endian"),
        (7, ""),
    ],
)
def test_ei_data(val, expected):
    assert meanings.ei_data_meaning(val) == expected


def test_ei_version():
    assert meanings.ei_version_meaning(0) == "Invalid version"
    assert meanings.ei_version_meaning(1) == "Current version"
    assert meanings.ei_version_meaning(2) == ""


def test_ei_osabi():
    assert meanings.ei_osabi_meaning(0) == "UNIX System V"
    assert meanings.ei_osabi_meaning(3) == "Linux"
    assert meanings.ei_osabi_meaning(9) == "FreeBSD"
    assert meanings.ei_osabi_meaning(200) == ""


def test_e_type():
    assert meanings.e_type_meaning(2) == "Executable file"
    assert meanings.e_type_meaning(3) == "Shared object file"
    assert meanings.e_type_meaning(0xFE00) == "Operating system-specific"
    assert meanings.e_type_meaning(0xFFFF) == "Processor-specific"
    # Only the range bounds are listed, not values in between.
    assert meanings.e_type_meaning(0xFE01) == ""


def test_e_machine():
    assert meanings.e_machine_meaning(0) == "No machine"
    assert meanings.e_machine_meaning(3) == "Intel 80386"
    assert meanings.e_machine_meaning(62) == "AMD x86-64 architecture"
    assert meanings.e_machine_meaning(183) == "ARM 64-bit architecture (AARCH64)"
    assert meanings.e_machine_meaning(243) == "RISC-V"
    assert meanings.e_machine_meaning(11) == ""


def test_p_type():
    assert meanings.p_type_meaning(1) == "Loadable program segment"
    assert meanings.p_type_meaning(5) == "Unused"
    assert meanings.p_type_meaning(0x6474E551) == "Indicates stack executability"
    assert meanings.p_type_meaning(0x60000001) == "Operating system-specific semantics"
    assert meanings.p_type_meaning(0x70000000) == "Processor-specific semantics"
    assert meanings.p_type_meaning(0x80000000) == ""


def test_p_flags():
    assert meanings.p_flags_meaning(0) == ""
    assert meanings.p_flags_meaning(meanings.PF_X) == "Executable"
    assert meanings.p_flags_meaning(meanings.PF_W) == "Writable"
    assert meanings.p_flags_meaning(meanings.PF_R | meanings.PF_W) == "Readable, writable"
    assert (
        meanings.p_flags_meaning(meanings.PF_R | meanings.PF_W | meanings.PF_X)
        == "Executable, readable, writable"
    )


def test_sh_type():
    assert meanings.sh_type_meaning(2) == "Section data contains a symbol table"
    assert meanings.sh_type_meaning(0x6FFFFFF6) == "GNU-style hash section"
    assert meanings.sh_type_meaning(0x6FFFFFFF) == "Version symbol table"
    assert meanings.sh_type_meaning(0x70000000) == "IA_64 extension bits"
    assert (
        meanings.sh_type_meaning(0x60000000)
        == "Reserved for operating system-specific semantics"
    )
    assert (
        meanings.sh_type_meaning(0x70000005)
        == "Reserved for processor-specific semantics"
    )
    assert (
        meanings.sh_type_meaning(0xFFFFFFFF)
        == "Reserved for application-specific semantics"
    )
    assert meanings.sh_type_meaning(12) == ""


def test_sh_flags_none():
    assert meanings.sh_flags_meaning(0) == "None"
    assert meanings.sh_flags_meaning(1 << 32) == "None"


def test_sh_flags_combinations():
    assert (
        meanings.sh_flags_meaning(meanings.SHF_ALLOC | meanings.SHF_EXECINSTR)
        == "Allocated, executable"
    )
    assert (
        meanings.sh_flags_meaning(meanings.SHF_WRITE | meanings.SHF_ALLOC)
        == "Writable, allocated"
    )
    assert (
        meanings.sh_flags_meaning(meanings.SHF_MERGE | meanings.SHF_STRINGS)
        == "Mergeable, contains null-terminated strings"
    )
    assert meanings.sh_flags_meaning(meanings.SHF_INFO_LINK) == "sh_info is populated"
    assert (
        meanings.sh_flags_meaning(meanings.SHF_LINK_ORDER)
        == "Has special orderings requirements"
    )
    assert meanings.sh_flags_meaning(meanings.SHF_COMPRESSED) == "Compressed"


def test_sh_flags_every_bit_counted_once():
    all_bits = (
        meanings.SHF_WRITE
        | meanings.SHF_ALLOC
        | meanings.SHF_EXECINSTR
        | meanings.SHF_MERGE
        | meanings.SHF_STRINGS
        | meanings.SHF_INFO_LINK
        | meanings.SHF_LINK_ORDER
        | meanings.SHF_OS_NONCONFORMING
        | meanings.SHF_GROUP
        | meanings.SHF_TLS
        | meanings.SHF_COMPRESSED
    )
    text = meanings.sh_flags_meaning(all_bits)
    assert len(text.split(", ")) == 11
    assert text.startswith("Writable, allocated")
    assert text.endswith("holds thread-local storage, compressed")


@pytest.mark.parametrize(
    "name, expected",
    [
        (".text", "executable instructions"),
        (".strtab", "symbol table entry names"),
        (".dynstr", "symbol table entry names"),
        (".data1", "initialized data"),
        (".shstrtab", "section names"),
        (".symtab", "symbol table"),
        (".custom", "other"),
        ("", "other"),
    ],
)
def test_section_name(name, expected):
    assert meanings.section_name_meaning(name) == expected


def test_st_info():
    assert meanings.st_info_meaning(0) == "Unspecified symbol type"
    assert meanings.st_info_meaning(2) == "Code object symbol"
    assert meanings.st_info_meaning(4) == "File name symbol"
    assert meanings.st_info_meaning(10) == "Indirect code object symbol"
    assert meanings.st_info_meaning(11) == "Operating system-specific semantics"
    assert meanings.st_info_meaning(15) == "For processor-specific semantics"
    assert meanings.st_info_meaning(0x12) == ""


def test_st_other():
    assert meanings.st_other_meaning(0) == "Specified by symbol type"
    assert meanings.st_other_meaning(2) == "Not visible to other components"
    assert (
        meanings.st_other_meaning(3)
        == "Visible to other components but not preemptable"
    )
    assert meanings.st_other_meaning(4) == ""