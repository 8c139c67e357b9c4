from __future__ import annotations


class TileblastError(Exception):
    """Base class for all engine errors."""


class LevelConfigError(TileblastError, ValueError):
    """Level data could not be decoded into a playable configuration."""


class UnsolvableBoardError(TileblastError, RuntimeError):
    """The board still has no legal move after the reshuffle budget ran out."""

    def __init__(self, attempts: int, board_dump: str = "") -> None:
        message = f"Board has no legal move after {attempts} shuffle attempts"
        if board_dump:
            message = f"{message}:\n{board_dump}"
        super().__init__(message)
        self.attempts = attempts
        self.board_dump = board_dump


class GravityInvariantError(TileblastError, RuntimeError):
    """A falling cell was routed into a slot that gravity analysis did not leave empty."""

    def __init__(self, source: tuple[int, int], target: tuple[int, int]) -> None:
        super().__init__(f"Cell at {source} cannot fall into occupied or invalid slot {target}")
        self.source = source
        self.target = target
