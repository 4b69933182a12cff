"""
3x3 grid component used by the replay tests.

down/up/tab move the cursor, enter marks the cell and schedules a recount,
text sets the status line. init schedules a Ready event.
"""

from dataclasses import dataclass, replace
from typing import Tuple

from goldenview.core.events import KeyEvent, KeyType

BLANK = "."


@dataclass(frozen=True)
class Ready:
    pass


@dataclass(frozen=True)
class Recount:
    pass


def _blank_cells() -> Tuple[Tuple[str, ...], ...]:
    return tuple(tuple(BLANK for _ in range(3)) for _ in range(3))


@dataclass(frozen=True)
class Grid:
    cells: Tuple[Tuple[str, ...], ...] = _blank_cells()
    row: int = 0
    col: int = 0
    status: str = "starting"
    moves: int = 0

    def init(self):
        return Ready

    def update(self, event):
        if isinstance(event, Ready):
            return replace(self, status="ready"), None
        if isinstance(event, Recount):
            marked = sum(cell != BLANK for line in self.cells for cell in line)
            return replace(self, moves=marked), None
        if not isinstance(event, KeyEvent):
            return self, None
        if event.type is KeyType.DOWN:
            return replace(self, row=min(self.row + 1, 2)), None
        if event.type is KeyType.UP:
            return replace(self, row=max(self.row - 1, 0)), None
        if event.type is KeyType.TAB:
            return replace(self, col=(self.col + 1) % 3), None
        if event.type is KeyType.ESC:
            return replace(self, cells=_blank_cells()), Recount
        if event.type is KeyType.ENTER:
            line = list(self.cells[self.row])
            line[self.col] = "x"
            cells = self.cells[: self.row] + (tuple(line),) + self.cells[self.row + 1 :]
            return replace(self, cells=cells), Recount
        return replace(self, status=event.text), None

    def view(self) -> str:
        lines = ["".join(line) for line in self.cells]
        lines.append(f"cursor: {self.row},{self.col}")
        lines.append(f"status: {self.status} moves: {self.moves}")
        return "\n".join(lines) + "\n"
