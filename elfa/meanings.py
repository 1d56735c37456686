"""Human-readable descriptions of ELF header, segment, section and symbol values."""

from __future__ import annotations

# Indexes into e_ident.
EI_CLASS = 4
EI_DATA = 5
EI_VERSION = 6
EI_OSABI = 7
EI_ABIVERSION = 8
EI_PAD = 9

ELFCLASSNONE = 0
ELFCLASS32 = 1
ELFCLASS64 = 2

ELFDATANONE = 0
ELFDATA2LSB = 1
ELFDATA2MSB = 2

EV_NONE = 0
EV_CURRENT = 1

PF_X = 0x1
PF_W = 0x2
PF_R = 0x4

SHF_WRITE = 0x1
SHF_ALLOC = 0x2
SHF_EXECINSTR = 0x4
SHF_MERGE = 0x10
SHF_STRINGS = 0x20
SHF_INFO_LINK = 0x40
SHF_LINK_ORDER = 0x80
SHF_OS_NONCONFORMING = 0x100
SHF_GROUP = 0x200
SHF_TLS = 0x400
SHF_COMPRESSED = 0x800

_EI_CLASS = {
    ELFCLASSNONE: "Invalid class",
    ELFCLASS32: "32-bit architecture",
    ELFCLASS64: "64-bit architecture",
}

_EI_DATA = {
    ELFDATANONE: "Unknown data format",
    ELFDATA2LSB: "Two's complement little-endian",
    ELFDATA2MSB: "Two's complement big-endian",
}

_EI_VERSION = {
    EV_NONE: "Invalid version",
    EV_CURRENT: "Current version",
}

_EI_OSABI = {
    0: "UNIX System V",
    1: "HP-UX",
    2: "NetBSD",
    3: "Linux",
    6: "Solaris",
    7: "AIX",
    8: "IRIX",
    9: "FreeBSD",
    10: "Compaq TRU64 UNIX",
    11: "Novell Modesto",
    12: "Open BSD",
    13: "Open VMS",
    14: "HP Non-Stop Kernel",
    15: "Amiga Research OS",
    16: "FenixOS",
    17: "Nuxi CloudABI",
    18: "Stratus Technologies OpenVOS",
}

_E_TYPE = {
    0: "No file type",
    1: "Relocatable file",
    2: "Executable file",
    3: "Shared object file",
    4: "Core file",
    0xFE00: "Operating system-specific",
    0xFEFF: "Operating system-specific",
    0xFF00: "Processor-specific",
    0xFFFF: "Processor-specific",
}

_E_MACHINE = {
    0: "No machine",
    1: "AT&T WE 32100",
    2: "SPARC",
    3: "Intel 80386",
    4: "Motorola 68000",
    5: "Motorola 88000",
    6: "Intel MCU",
    7: "Intel 80860",
    8: "MIPS I Architecture",
    9: "IBM System/370 Processor",
    10: "MIPS RS3000 Little-endian",
    15: "HP PA-RISC",
    17: "Fujitsu VPP500",
    18: "Enhanced instruction set SPARC",
    19: "Intel 80960",
    20: "PowerPC",
    21: "PowerPC 64-bit",
    22: "IBM System/390 Processor",
    23: "IBM SPU/SPC",
    36: "NEC V800",
    37: "Fujitsu FR20",
    38: "TRW RH-32",
    39: "Motorola RCE",
    40: "ARM 32-bit architecture (AARCH32)",
    41: "Digital Alpha",
    42: "Hitachi SH",
    43: "SPARC Version 9",
    44: "Siemens TriCore embedded processor",
    45: "Argonaut RISC Core, Argonaut Technologies Inc.",
    46: "Hitachi H8/300",
    47: "Hitachi H8/300H",
    48: "Hitachi H8S",
    49: "Hitachi H8/500",
    50: "Intel IA-64 processor architecture",
    51: "Stanford MIPS-X",
    52: "Motorola ColdFire",
    53: "Motorola M68HC12",
    54: "Fujitsu MMA Multimedia Accelerator",
    55: "Siemens PCP",
    56: "Sony nCPU embedded RISC processor",
    57: "Denso NDR1 microprocessor",
    58: "Motorola Star*Core processor",
    59: "Toyota ME16 processor",
    60: "STMicroelectronics ST100 processor",
    61: "Advanced Logic Corp. TinyJ embedded processor family",
    62: "AMD x86-64 architecture",
    63: "Sony DSP Processor",
    64: "Digital Equipment Corp. PDP-10",
    65: "Digital Equipment Corp. PDP-11",
    66: "Siemens FX66 microcontroller",
    67: "STMicroelectronics ST9+ 8/16 bit microcontroller",
    68: "STMicroelectronics ST7 8-bit microcontroller",
    69: "Motorola MC68HC16 Microcontroller",
    70: "Motorola MC68HC11 Microcontroller",
    71: "Motorola MC68HC08 Microcontroller",
    72: "Motorola MC68HC05 Microcontroller",
    73: "Silicon Graphics SVx",
    74: "STMicroelectronics ST19 8-bit microcontroller",
    75: "Digital VAX",
    76: "Axis Communications 32-bit embedded processor",
    77: "Infineon Technologies 32-bit embedded processor",
    78: "Element 14 64-bit DSP Processor",
    79: "LSI Logic 16-bit DSP Processor",
    80: "Donald Knuth's educational 64-bit processor",
    81: "Harvard University machine-independent object files",
    82: "SiTera Prism",
    83: "Atmel AVR 8-bit microcontroller",
    84: "Fujitsu FR30",
    85: "Mitsubishi D10V",
    86: "Mitsubishi D30V",
    87: "NEC v850",
    88: "Mitsubishi M32R",
    89: "Matsushita MN10300",
    90: "Matsushita MN10200",
    91: "picoJava",
    92: "OpenRISC 32-bit embedded processor",
    93: "ARC International ARCompact processor (old spelling/synonym: EM_ARC_A5)",
    94: "Tensilica Xtensa Architecture",
    95: "Alphamosaic VideoCore processor",
    96: "Thompson Multimedia General Purpose Processor",
    97: "National Semiconductor 32000 series",
    98: "Tenor Network TPC processor",
    99: "Trebia SNP 1000 processor",
    100: "STMicroelectronics (www.st.com) ST200 microcontroller",
    101: "Ubicom IP2xxx microcontroller family",
    102: "MAX Processor",
    103: "National Semiconductor CompactRISC microprocessor",
    104: "Fujitsu F2MC16",
    105: "Texas Instruments embedded microcontroller msp430",
    106: "Analog Devices Blackfin (DSP) processor",
    107: "S1C33 Family of Seiko Epson processors",
    108: "Sharp embedded microprocessor",
    109: "Arca RISC Microprocessor",
    110: "Microprocessor series from PKU-Unity Ltd. and MPRC of Peking University",
    111: "eXcess: 16/32/64-bit configurable embedded CPU",
    112: "Icera Semiconductor Inc. Deep Execution Processor",
    113: "Altera Nios II soft-core processor",
    114: "National Semiconductor CompactRISC CRX microprocessor",
    115: "Motorola XGATE embedded processor",
    116: "Infineon C16x/XC16x processor",
    117: "Renesas M16C series microprocessors",
    118: "Microchip Technology dsPIC30F Digital Signal Controller",
    119: "Freescale Communication Engine RISC core",
    120: "Renesas M32C series microprocessors",
    131: "Altium TSK3000 core",
    132: "Freescale RS08 embedded processor",
    133: "Analog Devices SHARC family of 32-bit DSP processors",
    134: "Cyan Technology eCOG2 microprocessor",
    135: "Sunplus S+core7 RISC processor",
    136: "New Japan Radio (NJR) 24-bit DSP Processor",
    137: "Broadcom VideoCore III processor",
    138: "RISC processor for Lattice FPGA architecture",
    139: "Seiko Epson C17 family",
    140: "The Texas Instruments TMS320C6000 DSP family",
    141: "The Texas Instruments TMS320C2000 DSP family",
    142: "The Texas Instruments TMS320C55x DSP family",
    143: "Texas Instruments Application Specific RISC Processor, 32bit fetch",
    144: "Texas Instruments Programmable Realtime Unit",
    160: "STMicroelectronics 64bit VLIW Data Signal Processor",
    161: "Cypress M8C microprocessor",
    162: "Renesas R32C series microprocessors",
    163: "NXP Semiconductors TriMedia architecture family",
    164: "QUALCOMM DSP6 Processor",
    165: "Intel 8051 and variants",
    166: "STMicroelectronics STxP7x family of configurable and extensible RISC processors",
    167: "Andes Technology compact code size embedded RISC processor family",
    168: "Cyan Technology eCOG1X family",
    169: "Dallas Semiconductor MAXQ30 Core Micro-controllers",
    170: "New Japan Radio (NJR) 16-bit DSP Processor",
    171: "M2000 Reconfigurable RISC Microprocessor",
    172: "Cray Inc. NV2 vector architecture",
    173: "Renesas RX family",
    174: "Imagination Technologies META processor architecture",
    175: "MCST Elbrus general purpose hardware architecture",
    176: "Cyan Technology eCOG16 family",
    177: "National Semiconductor CompactRISC CR16 16-bit microprocessor",
    178: "Freescale Extended Time Processing Unit",
    179: "Infineon Technologies SLE9X core",
    180: "Intel L10M",
    181: "Intel K10M",
    183: "ARM 64-bit architecture (AARCH64)",
    185: "Atmel Corporation 32-bit microprocessor family",
    186: "STMicroeletronics STM8 8-bit microcontroller",
    187: "Tilera TILE64 multicore architecture family",
    188: "Tilera TILEPro multicore architecture family",
    189: "Xilinx MicroBlaze 32-bit RISC soft processor core",
    190: "NVIDIA CUDA architecture",
    191: "Tilera TILE-Gx multicore architecture family",
    192: "CloudShield architecture family",
    193: "KIPO-KAIST Core-A 1st generation processor family",
    194: "KIPO-KAIST Core-A 2nd generation processor family",
    195: "Synopsys ARCompact V2",
    196: "Open8 8-bit RISC soft processor core",
    197: "Renesas RL78 family",
    198: "Broadcom VideoCore V processor",
    199: "Renesas 78KOR family",
    200: "Freescale 56800EX Digital Signal Controller (DSC)",
    201: "Beyond BA1 CPU architecture",
    202: "Beyond BA2 CPU architecture",
    203: "XMOS xCORE processor family",
    204: "Microchip 8-bit PIC(r) family",
    205: "Reserved by Intel",
    206: "Reserved by Intel",
    207: "Reserved by Intel",
    208: "Reserved by Intel",
    209: "Reserved by Intel",
    210: "KM211 KM32 32-bit processor",
    211: "KM211 KMX32 32-bit processor",
    212: "KM211 KMX16 16-bit processor",
    213: "KM211 KMX8 8-bit processor",
    214: "KM211 KVARC processor",
    215: "Paneve CDP architecture family",
    216: "Cognitive Smart Memory Processor",
    217: "Bluechip Systems CoolEngine",
    218: "Nanoradio Optimized RISC",
    219: "CSR Kalimba architecture family",
    220: "Zilog Z80",
    221: "Controls and Data Services VISIUMcore processor",
    222: "FTDI Chip FT32 high performance 32-bit RISC architecture",
    223: "Moxie processor family",
    224: "AMD GPU architecture",
    243: "RISC-V",
    247: "Linux BPF",
}

_P_TYPE = {
    0: "Unused",
    1: "Loadable program segment",
    2: "Dynamic linking information",
    3: "Program interpreter",
    4: "Auxiliary information",
    5: "Unused",
    6: "The program header table",
    7: "Thread-local storage segment",
    0x6474E550: "GCC .eh_frame_hdr segment",
    0x6474E551: "Indicates stack executability",
    0x6474E552: "Read-only after relocation",
    0x6474E553: "The segment contains .note.gnu.property section",
}

_P_TYPE_RANGES = (
    (0x60000000, 0x6FFFFFFF, "Operating system-specific semantics"),
    (0x70000000, 0x7FFFFFFF, "Processor-specific semantics"),
)

_SH_TYPE = {
    0: "Inactive section with undefined values",
    1: "Information defined by the program, includes executable code and data",
    2: "Section data contains a symbol table",
    3: "Section data contains a string table",
    4: "Section data contains relocation entries with explicit addends",
    5: "Section data contains a symbol hash table. Must be present for dynamic linking",
    6: "Section data contains information for dynamic linking",
    7: "Section data contains information that marks the file in some way",
    8: "Section data occupies no space in the file but otherwise resembles SHT_PROGBITS",
    9: "Section data contains relocation entries without explicit addends",
    10: "Section is reserved but has unspecified semantics",
    11: "Section data contains a minimal set of dynamic linking symbols",
    14: "Section data contains an array of constructors",
    15: "Section data contains an array of destructors",
    16: "Section data contains an array of pre-constructors",
    17: "Section group",
    18: "Extended symbol table section index",
    0x6FFFFFF5: "Object attributes",
    0x6FFFFFF6: "GNU-style hash section",
    0x6FFFFFF7: "Pre-link library list",
    0x6FFFFFFD: "Version definition section",
    0x6FFFFFFE: "Version needs section",
    0x6FFFFFFF: "Version symbol table",
    0x70000000: "IA_64 extension bits",
    0x70000001: "IA_64 unwind section",
}

_SH_TYPE_RANGES = (
    (0x60000000, 0x6FFFFFFF, "Reserved for operating system-specific semantics"),
    (0x70000000, 0x7FFFFFFF, "Reserved for processor-specific semantics"),
    (0x80000000, 0xFFFFFFFF, "Reserved for application-specific semantics"),
)

_P_FLAGS = (
    (PF_X, "Executable", "executable"),
    (PF_R, "Readable", "readable"),
    (PF_W, "Writable", "writable"),
)

_SH_FLAGS = (
    (SHF_WRITE, "Writable", "writable"),
    (SHF_ALLOC, "Allocated", "allocated"),
    (SHF_EXECINSTR, "Executable", "executable"),
    (SHF_MERGE, "Mergeable", "mergeable"),
    (SHF_STRINGS, "Contains null-terminated strings", "contains null-terminated strings"),
    (SHF_INFO_LINK, "sh_info is populated", "sh_info is populated"),
    (SHF_LINK_ORDER, "Has special orderings requirements", "has special ordering requirements"),
    (
        SHF_OS_NONCONFORMING,
        "Requires special OS-specific processing",
        "requires special OS-specific processing",
    ),
    (SHF_GROUP, "Member of section group", "member of section group"),
    (SHF_TLS, "Holds thread-local storage", "holds thread-local storage"),
    (SHF_COMPRESSED, "Compressed", "compressed"),
)

_SECTION_NAMES = {
    ".bss": "uninitialized data",
    ".comment": "version control information",
    ".ctors": "initialized pointers to C++ constructors",
    ".data": "initialized data",
    ".data1": "initialized data",
    ".debug": "information for symbolic debugging",
    ".dtors": "initialized pointers to C++ destructors",
    ".dynamic": "dynamic linking information",
    ".dynstr": "symbol table entry names",
    ".strtab": "symbol table entry names",
    ".fini": "executable instructions for program termination",
    ".gnu.version": "version symbol table",
    ".gnu.version_d": "version symbol definitions",
    ".gnu.version_r": "version symbol needed elements",
    ".got": "global offset table",
    ".hash": "symbol hash table",
    ".init": "executable instructions for program initialization",
    ".interp": "pathname of a program interpreter",
    ".line": "line number information for symbolic debugging",
    ".note": "notes",
    ".note.ABI-tag": "expected run-time ABI",
    ".note.gnu.build-id": "unique build ID",
    ".note.GNU-stack": "stack attributes",
    ".note.openbsd.ident": "OpenBSD native executable marker",
    ".plt": "procedure linkage table",
    ".relNAME": "relocation information",
    ".relaNAME": "relocation information",
    ".rodata": "read-only data",
    ".rodata1": "read-only data",
    ".shstrtab": "section names",
    ".symtab": "symbol table",
    ".text": "executable instructions",
}

_ST_INFO = {
    0: "Unspecified symbol type",
    1: "Data object symbol",
    2: "Code object symbol",
    3: "Section symbol",
    4: "File name symbol",
    5: "Common data object symbol",
    6: "Thread-local data object symbol",
    10: "Indirect code object symbol",
}

_ST_INFO_RANGES = (
    (10, 12, "Operating system-specific semantics"),
    (13, 15, "For processor-specific semantics"),
)

_ST_OTHER = {
    0: "Specified by symbol type",
    1: "Defined by processor supplements",
    2: "Not visible to other components",
    3: "Visible to other components but not preemptable",
}


def _lookup(table: dict[int, str], val: int, ranges=()) -> str:
    if val in table:
        return table[val]
    for low, high, meaning in ranges:
        if low <= val <= high:
            return meaning
    return ""


def _describe_flags(val: int, flags) -> str:
    parts = []
    for bit, first, later in flags:
        if val & bit:
            parts.append(later if parts else first)
    return ", ".join(parts)


def ei_class_meaning(val: int) -> str:
    """Describe the e_ident[EI_CLASS] byte."""
    return _lookup(_EI_CLASS, val)


def ei_data_meaning(val: int) -> str:
    """Describe the e_ident[EI_DATA] byte."""
    return _lookup(_EI_DATA, val)


def ei_version_meaning(val: int) -> str:
    """Describe an ELF version value."""
    return _lookup(_EI_VERSION, val)


def ei_osabi_meaning(val: int) -> str:
    """Describe the e_ident[EI_OSABI] byte."""
    return _lookup(_EI_OSABI, val)


def e_type_meaning(val: int) -> str:
    """Describe the object file type (e_type)."""
    return _lookup(_E_TYPE, val)


def e_machine_meaning(val: int) -> str:
    """Describe the target machine (e_machine)."""
    return _lookup(_E_MACHINE, val)


def p_type_meaning(val: int) -> str:
    """Describe a segment type (p_type)."""
    return _lookup(_P_TYPE, val, _P_TYPE_RANGES)


def p_flags_meaning(val: int) -> str:
    """Describe segment permission flags (p_flags)."""
    return _describe_flags(val, _P_FLAGS)


def sh_type_meaning(val: int) -> str:
    """Describe a section type (sh_type)."""
    return _lookup(_SH_TYPE, val, _SH_TYPE_RANGES)


def sh_flags_meaning(val: int) -> str:
    """Describe section flags (sh_flags); only the low 32 bits are considered."""
    val &= 0xFFFFFFFF
    if val == 0:
        return "None"
    return _describe_flags(val, _SH_FLAGS)


def section_name_meaning(name: str) -> str:
    """Describe a well-known section name, or 'other'."""
    return _SECTION_NAMES.get(name, "other")


def st_info_meaning(val: int) -> str:
    """Describe a symbol's st_info byte."""
    return _lookup(_ST_INFO, val, _ST_INFO_RANGES)


def st_other_meaning(val: int) -> str:
    """Describe a symbol's visibility (st_other)."""
    return _lookup(_ST_OTHER, val)