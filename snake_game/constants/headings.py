from enum import Enum


class Heading(Enum):
    # ! Do not change member order, it is being used for checking if the
    # ! snake is doing a 180 degrees turn
    UP = (0, -1)
    LEFT = (-1, 0)
    DOWN = (0, 1)
    RIGHT = (1, 0)

    @property
    def offset(self) -> tuple[int, int]:
        return self.value

    @property
    def opposite(self) -> "Heading":
        # Opposite heading is 2 places away, wrapping around the member list
        indexed_headings = list(Heading)
        opposite_index = (indexed_headings.index(self) + 2) % len(indexed_headings)
        return indexed_headings[opposite_index]

    def is_opposite(self, other: "Heading") -> bool:
        return other is self.opposite
