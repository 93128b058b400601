"""Cell representations for generation grids.

Defines the small capability contract every cell type must satisfy and
the default two-state implementation used by SimpleGeneration.
"""

from enum import Enum
from typing import Protocol, runtime_checkable


@runtime_checkable
class Cell(Protocol):
    """Capability contract for grid cells.

    Implementations must default-construct to the dead state. Spawning an
    alive cell or killing a dead one leaves it unchanged.
    """

    def is_alive(self) -> bool: ...

    def spawn(self) -> None: ...

    def kill(self) -> None: ...


class CellState(Enum):
    """Logical states of a SimpleCell."""
    ALIVE = 1
    DEAD = 0


class SimpleCell:
    """Default cell implementation backed by CellState."""

    __slots__ = ('state',)

    def __init__(self, alive: bool = False):
        """Create a cell, dead unless alive is True."""
        self.state = CellState.ALIVE if alive else CellState.DEAD

    def is_alive(self) -> bool:
        return self.state is CellState.ALIVE

    def spawn(self) -> None:
        self.state = CellState.ALIVE

    def kill(self) -> None:
        self.state = CellState.DEAD

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SimpleCell):
            return NotImplemented
        return self.state is other.state

    def __repr__(self) -> str:
        return f"SimpleCell({self.state.name})"
