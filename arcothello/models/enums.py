from enum import IntEnum

class Cell(IntEnum):
    """Cell occupancy. Values double as the wire encoding."""
    EMPTY = -1
    SIDE_A = 0  # white
    SIDE_B = 1  # black

    @property
    def opponent(self) -> "Cell":
        if self is Cell.SIDE_A:
            return Cell.SIDE_B
        if self is Cell.SIDE_B:
            return Cell.SIDE_A
        raise ValueError("EMPTY has no opponent")

    @classmethod
    def from_turn(cls, is_white: bool) -> "Cell":
        return cls.SIDE_A if is_white else cls.SIDE_B
