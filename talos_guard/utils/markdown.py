"""Markdown helpers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List

FENCE_PATTERN = re.compile(r"```(\w*)\n(.*?)```", re.DOTALL)


@dataclass(frozen=True)
class CodeBlock:
    """A fenced code block and where its body starts in the document."""

    lang: str
    code: str
    start: int

    @property
    def first_line(self) -> int:
        """1-based document line number of the first line of ``code``."""

        return self.start + 1


def extract_code_blocks(markdown: str) -> List[CodeBlock]:
    """Return every fenced code block in ``markdown`` in document order.

    Blocks without an info string are tagged ``txt``. ``start`` is the
    0-based line index of the block body, so line ``n`` of ``code``
    (1-based) sits on document line ``start + n``.
    """

    blocks: List[CodeBlock] = []
    for match in FENCE_PATTERN.finditer(markdown):
        body_offset = match.start(2)
        blocks.append(
            CodeBlock(
                lang=match.group(1) or "txt",
                code=match.group(2),
                start=markdown.count("\n", 0, body_offset),
            )
        )
    return blocks
