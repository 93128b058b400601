"""Generation grid container for cellular automaton simulation.

A Generation is one time-step snapshot of the automaton: a fixed-size
2D grid of cells stored as a flat row-major numpy object array, so the
cell at (x, y) lives at index ``y * width + x``. Dimensions never change
after construction; a simulation step builds a fresh Generation rather
than resizing or advancing one in place.
"""

import numpy as np
from typing import Callable, Generic, Iterator, Optional, Tuple, TypeVar
import logging

from .cell import Cell, SimpleCell
from .errors import InvalidDimensionError, MIN_DIMENSION

logger = logging.getLogger(__name__)

T = TypeVar('T', bound=Cell)


class Generation(Generic[T]):
    """2D grid of cells with coordinate-addressed access.

    Attributes:
        width: Grid width in cells (>= 3)
        height: Grid height in cells (>= 3)
        cell_factory: Callable producing a default (dead) cell
    """

    def __init__(self, width: int, height: int, cell_factory: Callable[[], T] = SimpleCell):
        """Allocate width*height dead cells.

        Args:
            width: Grid width (cells)
            height: Grid height (cells)
            cell_factory: Called once per slot to build a dead cell

        Raises:
            InvalidDimensionError: If width or height is below 3
        """
        if width < MIN_DIMENSION or height < MIN_DIMENSION:
            raise InvalidDimensionError(width, height)

        self._width = int(width)
        self._height = int(height)
        self.cell_factory = cell_factory

        self._cells = np.empty(self._width * self._height, dtype=object)
        for i in range(self._cells.size):
            self._cells[i] = cell_factory()

        logger.debug(f"Created generation {self._width}x{self._height}")

    @classmethod
    def from_array(cls, pattern: np.ndarray,
                   cell_factory: Callable[[], T] = SimpleCell) -> 'Generation[T]':
        """Create a generation from a 2D boolean array.

        Args:
            pattern: Array of shape (height, width), True = alive
            cell_factory: Cell constructor for every slot

        Returns:
            Generation: New generation with the pattern's live cells spawned
        """
        if pattern.ndim != 2:
            raise ValueError(f"Pattern must be 2D, got shape {pattern.shape}")
        if pattern.dtype != bool:
            pattern = pattern.astype(bool)

        height, width = pattern.shape
        generation = cls(width, height, cell_factory)
        for y, x in np.argwhere(pattern):
            generation._cells[y * width + x].spawn()
        return generation

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> int:
        """Total number of cells."""
        return self._cells.size

    def _position(self, x: int, y: int) -> Optional[int]:
        # Linear row-major index, or None when outside the allocated range.
        if x < 0 or y < 0:
            return None
        position = y * self._width + x
        if position >= self._cells.size:
            return None
        return position

    def cell(self, x: int, y: int) -> Optional[T]:
        """Get the cell at (x, y).

        Args:
            x: X coordinate (column)
            y: Y coordinate (row)

        Returns:
            The cell, or None if the linear position is out of range
        """
        position = self._position(x, y)
        if position is None:
            return None
        return self._cells[position]

    def cell_mut(self, x: int, y: int) -> Optional[T]:
        """Get the cell at (x, y) for mutation.

        Same indexing and bounds policy as cell(). The caller is the single
        writer for the returned cell while it holds it.
        """
        return self.cell(x, y)

    def coordinates(self) -> Iterator[Tuple[int, int]]:
        """Iterate (x, y) over every cell in row-major order."""
        for y in range(self._height):
            for x in range(self._width):
                yield x, y

    def count_alive(self) -> int:
        """Count total number of alive cells."""
        return sum(1 for c in self._cells if c.is_alive())

    def is_empty(self) -> bool:
        """Check if all cells are dead."""
        return not any(c.is_alive() for c in self._cells)

    def to_array(self) -> np.ndarray:
        """Get alive states as a (height, width) boolean array."""
        alive = np.fromiter((c.is_alive() for c in self._cells), dtype=bool, count=self._cells.size)
        return alive.reshape(self._height, self._width)

    def copy(self) -> 'Generation[T]':
        """Create a copy with fresh cells in the same alive pattern."""
        return Generation.from_array(self.to_array(), self.cell_factory)

    def __eq__(self, other: object) -> bool:
        """Check equality of dimensions and alive pattern."""
        if not isinstance(other, Generation):
            return False
        return (self._width == other._width and
                self._height == other._height and
                np.array_equal(self.to_array(), other.to_array()))

    def __str__(self) -> str:
        """String representation showing live cells as X."""
        lines = []
        for row in self.to_array():
            lines.append(''.join('X' if alive else '.' for alive in row))
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"Generation({self._width}x{self._height}, alive={self.count_alive()})"


# Generation made of SimpleCells.
SimpleGeneration = Generation[SimpleCell]
