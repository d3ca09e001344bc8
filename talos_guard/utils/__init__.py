"""Utility helpers for the scanner."""

from .fileio import read_text_file, read_yaml_file
from .markdown import CodeBlock, extract_code_blocks

__all__ = [
    "read_yaml_file",
    "read_text_file",
    "CodeBlock",
    "extract_code_blocks",
]
