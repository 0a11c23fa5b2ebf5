"""Base class for anything that can be placed on the board."""

from __future__ import annotations

from typing import ClassVar, Iterable, Optional

from quassimodo.errors import PieceAlreadyPlaced, PieceOffBoard


class Piece:
    """A piece with a board position and a flag telling whether it is placed."""

    SIZE_X: ClassVar[int] = 9
    SIZE_Y: ClassVar[int] = 9

    def __init__(self, position: Optional[Iterable[int]] = None) -> None:
        self._placed = False
        if position is None:
            self._position: tuple[int, int] = (-1, -1)
        else:
            x, y = position
            self._position = (int(x), int(y))

    @property
    def is_placed(self) -> bool:
        return self._placed

    @property
    def position(self) -> tuple[int, int]:
        return self._position

    def place(self, x: int, y: int) -> None:
        """Put a piece that is not yet on the board at ``(x, y)``."""
        if self._placed:
            raise PieceAlreadyPlaced(
                f"Tried to place a piece that was already placed, at: ({x},{y})."
            )
        if x >= self.SIZE_X or y >= self.SIZE_Y:
            raise PieceOffBoard(
                f"Tried to place the piece at an invalid position: ({x},{y})."
            )
        self._position = (x, y)
        self._placed = True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Piece):
            return NotImplemented
        return self._position == other._position

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(position={self._position!r}, "
            f"placed={self._placed})"
        )