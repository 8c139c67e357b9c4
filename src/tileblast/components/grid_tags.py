from dataclasses import dataclass

@dataclass(slots=True)
class MainGrid:
    """Empty tag component marking the entity whose Board is the playable grid."""
    pass


@dataclass(slots=True)
class RefillGrid:
    """Empty tag component marking the entity whose Board stages incoming tiles.

    The refill board is the structural complement of the holes in the main grid
    after gravity has run.
    """
    pass
