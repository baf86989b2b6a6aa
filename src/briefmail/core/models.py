"""Intermediate data models for the classify and render pipeline"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class BlockKind(str, Enum):
    heading   = "heading"
    rule      = "rule"
    table_row = "table_row"
    list_item = "list_item"
    paragraph = "paragraph"
    blank     = "blank"


class GroupKind(str, Enum):
    heading   = "heading"
    rule      = "rule"
    table     = "table"
    list      = "list"
    paragraph = "paragraph"
    blank     = "blank"


class Severity(str, Enum):
    """Closed set of severity tiers used by badges and table cells."""
    high   = "high"
    medium = "medium"
    low    = "low"


class Block(BaseModel):
    """One classified source line."""
    kind: BlockKind
    line: int                          # 1-based source line number
    text: str = ""                     # heading/list/paragraph text, markers removed
    level: Optional[int] = None        # heading tier (1-3); None for non-headings
    depth: int = 0                     # list nesting (0 or 1)
    cells: list[str] = Field(default_factory=list)
    separator: bool = False            # table header-separator row


class GroupedBlock(BaseModel):
    """A maximal run of same-kind blocks rendered as one unit."""
    kind: GroupKind
    blocks: list[Block]

    @property
    def first_line(self) -> int:
        return self.blocks[0].line
