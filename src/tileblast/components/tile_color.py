from enum import Enum


class TileColor(Enum):
    """Closed set of tile colors.

    Values are the single-letter ids used by level files. Empty cells carry
    ``None`` rather than a member of this enum.
    """
    RED = "R"
    GREEN = "G"
    BLUE = "B"
    YELLOW = "Y"
    ORANGE = "O"
    VIOLET = "V"

    @property
    def letter(self) -> str:
        return self.value
