"""Generation evolution rulesets.

A ruleset is any callable ``(x, y, generation) -> bool`` answering
"should the cell at (x, y) be alive in the next generation". Rulesets
only read the generation, so a driver may evaluate coordinates in any
order before writing the results into a new Generation.

Neighborhoods use toroidal boundaries: the grid's edges connect to the
opposite edge, so every cell has exactly 8 neighbors.
"""

from itertools import product
from typing import Callable, Optional, Set
import logging

from .cell import Cell
from .errors import GridInvariantError
from .generation import Generation

logger = logging.getLogger(__name__)

# Type of functions used to calculate generations.
RulesetFn = Callable[[int, int, Generation], bool]

# Standard Conway rules
SURVIVAL_SET: Set[int] = {2, 3}  # Live cells survive with 2-3 neighbors
BIRTH_SET: Set[int] = {3}        # Dead cells born with exactly 3 neighbors


def wrap_coord(c: int, lower: int, upper: int) -> int:
    """Wrap a coordinate one step around the [lower, upper] range.

    Only correct for offsets of at most one cell past either bound, which
    always holds for a 3x3 neighborhood on a grid of at least 3x3.

    Args:
        c: Coordinate, possibly one past either bound
        lower: Lowest valid coordinate
        upper: Highest valid coordinate

    Returns:
        upper if c < lower, lower if c > upper, else c
    """
    if c < lower:
        return upper
    if c > upper:
        return lower
    return c


def alive_neighbors(x: int, y: int, generation: Generation) -> int:
    """Count live cells among the 8 toroidal neighbors of (x, y).

    Args:
        generation: Generation to read
        x: X coordinate of cell (column)
        y: Y coordinate of cell (row)

    Returns:
        Number of live neighbors (0-8)

    Raises:
        GridInvariantError: If a wrapped coordinate has no cell
    """
    upper_x = generation.width - 1
    upper_y = generation.height - 1
    count = 0

    for ix, iy in product(range(x - 1, x + 2), range(y - 1, y + 2)):
        fixed_x = wrap_coord(ix, 0, upper_x)
        fixed_y = wrap_coord(iy, 0, upper_y)
        if fixed_x == x and fixed_y == y:
            continue  # Skip center cell

        cell = generation.cell(fixed_x, fixed_y)
        if cell is None:
            raise GridInvariantError(
                f"No cell at wrapped coordinates ({fixed_x}, {fixed_y}) "
                f"for {generation.width}x{generation.height} generation"
            )
        if cell.is_alive():
            count += 1

    return count


def apply_conway_ruleset(x: int, y: int, generation: Generation) -> bool:
    """Ruleset applying Conway's evolution rules.

    A live cell survives with 2 or 3 live neighbors; any cell with exactly
    3 live neighbors is alive next. Coordinates outside the grid are dead.
    """
    if not (0 <= x < generation.width and 0 <= y < generation.height):
        return False

    neighbors = alive_neighbors(x, y, generation)
    cell = generation.cell(x, y)
    return (cell.is_alive() and neighbors == 2) or neighbors == 3


class RuleParams:
    """Birth/survival parameters for life-like rulesets.

    Defaults to Conway's B3/S23. Use as_ruleset() to plug other life-like
    rules into next_generation() without touching Generation.
    """

    def __init__(self,
                 birth_set: Optional[Set[int]] = None,
                 survival_set: Optional[Set[int]] = None):
        """Initialize rule parameters.

        Args:
            birth_set: Neighbor counts for dead cell birth (default {3})
            survival_set: Neighbor counts for live cell survival (default {2,3})

        Raises:
            ValueError: If any count lies outside 0-8
        """
        self.birth_set: Set[int] = set(birth_set) if birth_set is not None else BIRTH_SET.copy()
        self.survival_set: Set[int] = set(survival_set) if survival_set is not None else SURVIVAL_SET.copy()

        for count in self.birth_set | self.survival_set:
            if not 0 <= count <= 8:
                raise ValueError(f"Neighbor count {count} outside 0-8")

    @classmethod
    def conway(cls) -> 'RuleParams':
        """Create standard Conway rules."""
        return cls(BIRTH_SET.copy(), SURVIVAL_SET.copy())

    def update_cell(self, alive: bool, live_neighbors: int) -> bool:
        """Apply these rule parameters to a cell.

        Args:
            alive: Current cell state
            live_neighbors: Number of live neighbors

        Returns:
            Next cell state
        """
        if alive:
            return live_neighbors in self.survival_set
        return live_neighbors in self.birth_set

    def as_ruleset(self) -> RulesetFn:
        """Get a ruleset function applying these parameters."""
        def ruleset(x: int, y: int, generation: Generation) -> bool:
            if not (0 <= x < generation.width and 0 <= y < generation.height):
                return False
            cell = generation.cell(x, y)
            return self.update_cell(cell.is_alive(), alive_neighbors(x, y, generation))

        return ruleset

    def __repr__(self) -> str:
        return f"RuleParams(birth={sorted(self.birth_set)}, survival={sorted(self.survival_set)})"


def next_generation(generation: Generation, ruleset: RulesetFn = apply_conway_ruleset) -> Generation:
    """Compute the next generation without mutating the current one.

    Args:
        generation: Current generation (read only)
        ruleset: Function deciding each cell's next state

    Returns:
        New generation with the same dimensions and cell factory
    """
    new_generation = Generation(generation.width, generation.height, generation.cell_factory)

    for x, y in generation.coordinates():
        if ruleset(x, y, generation):
            cell: Cell = new_generation.cell_mut(x, y)
            cell.spawn()

    logger.debug(f"Computed next generation, alive={new_generation.count_alive()}")
    return new_generation
