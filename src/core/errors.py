"""Error types raised by the generation core."""

MIN_DIMENSION = 3


class InvalidDimensionError(ValueError):
    """Raised when a Generation is created with a dimension below the minimum."""

    def __init__(self, width: int, height: int):
        super().__init__(
            f"Generation's width and height must be equal or greater than {MIN_DIMENSION}."
        )
        self.width = width
        self.height = height


class GridInvariantError(RuntimeError):
    """Raised when a wrapped neighbor lookup lands outside the grid.

    Wrapping keeps lookups in range for any valid Generation, so this only
    fires if the minimum-size invariant was bypassed.
    """
