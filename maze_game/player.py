"""Player entity for the maze game."""

from dataclasses import dataclass


@dataclass
class Player:
    """A player standing on one cell of the maze."""

    x: int
    y: int

    @property
    def position(self) -> tuple[int, int]:
        """Current (x, y) coordinates."""
        return self.x, self.y

    def move(self, new_x: int, new_y: int) -> None:
        """Move to a new position. Validity is checked by the caller."""
        self.x = new_x
        self.y = new_y
