"""Heuristic table recovery from plain text.

Used for decoders that have no native table structure (PDF). Lines whose
cells are separated by wide gaps or tabs are grouped into blocks, and a
block of at least two such lines becomes a table.
"""

import re
from typing import List, Optional, Tuple

from ..models.content import TableGrid


class TableHeuristicDetector:
    """
    Groups consecutive multi-column-looking lines into table blocks.

    Header detection is deliberately permissive: a first row with any
    cell lacking a digit is treated as a header.
    """

    CELL_SEPARATOR = re.compile(r'\s{2,}|\t+')
    HEADER_TOKENS = ("name", "type", "description", "value")
    DIGIT = re.compile(r'\d')
    MIN_CELLS = 2
    MIN_ROWS = 2

    def detect(self, text: str) -> List[TableGrid]:
        """
        Detect table-like blocks in text.

        Args:
            text: Raw page text with line structure intact.

        Returns:
            One TableGrid per qualifying block, in document order.
        """
        tables, _ = self.split_tables(text)
        return tables

    def split_tables(self, text: str) -> Tuple[List[TableGrid], str]:
        """
        Detect tables and remove their lines from the text.

        Each removed block is replaced by a paragraph break so the prose
        around it is not joined into one paragraph. Lines of a block too
        short to become a table stay in the text.

        Returns:
            Tuple of (tables in document order, remaining text).
        """
        tables: List[TableGrid] = []
        remaining: List[str] = []
        block: List[List[str]] = []
        block_lines: List[str] = []

        for line in text.split('\n'):
            cells = self.split_table_row(line)

            if len(cells) >= self.MIN_CELLS:
                block.append(cells)
                block_lines.append(line)
                continue

            self._close_block(block, block_lines, tables, remaining)
            block, block_lines = [], []
            remaining.append(line)

        self._close_block(block, block_lines, tables, remaining)

        return tables, '\n'.join(remaining)

    def split_table_row(self, line: str) -> List[str]:
        """Split a line into cell candidates on wide gaps or tabs."""
        cells = (cell.strip() for cell in self.CELL_SEPARATOR.split(line.strip()))
        return [cell for cell in cells if cell]

    def detect_headers(self, block: List[List[str]]) -> Optional[List[str]]:
        """Return the first row if it looks like a header row."""
        if not block:
            return None

        first_row = block[0]
        looks_like_header = any(
            self._has_header_token(cell) or not self.DIGIT.search(cell)
            for cell in first_row
        )
        return first_row if looks_like_header else None

    def _has_header_token(self, cell: str) -> bool:
        lowered = cell.lower()
        return any(token in lowered for token in self.HEADER_TOKENS)

    def _close_block(
        self,
        block: List[List[str]],
        block_lines: List[str],
        tables: List[TableGrid],
        remaining: List[str],
    ) -> None:
        """Turn an accumulated block into a table if it has enough rows."""
        if len(block) < self.MIN_ROWS:
            remaining.extend(block_lines)
            return

        headers = self.detect_headers(block)
        rows = block[1:] if headers else list(block)
        tables.append(TableGrid(rows=rows, headers=headers))
        remaining.append('')
