"""Terminal viewport dimensions and border geometry."""

from __future__ import annotations

from dataclasses import dataclass

# Border on both sides plus one interior cell.
MIN_SIZE = 3


@dataclass(frozen=True)
class Viewport:
    """Immutable terminal size in character cells.

    Coordinates use (x, y) ordering: ``x`` is the column, ``y`` the row.
    Row 0, row ``height - 1``, column 0, and column ``width - 1`` form the
    border; everything else is the play area.
    """

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < MIN_SIZE or self.height < MIN_SIZE:
            raise ValueError(
                f"Viewport must be at least {MIN_SIZE}×{MIN_SIZE}, "
                f"got {self.width}×{self.height}."
            )

    def is_interior(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies strictly inside the border."""
        return 0 < x < self.width - 1 and 0 < y < self.height - 1

    def border_cells(self) -> list[tuple[int, int]]:
        """Return every border cell, each exactly once."""
        cells: list[tuple[int, int]] = []
        for x in range(self.width):
            cells.append((x, 0))
            cells.append((x, self.height - 1))
        for y in range(1, self.height - 1):
            cells.append((0, y))
            cells.append((self.width - 1, y))
        return cells

    def to_dict(self) -> dict:
        """Serialize viewport dimensions to a dictionary."""
        return {"width": self.width, "height": self.height}
