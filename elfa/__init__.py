"""Inspect ELF headers, program headers, section headers and symbols."""

__version__ = "0.1.2"