"""Exceptions raised by the game rules."""


class RulesError(Exception):
    """Base class of every error raised by the rules of the game."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class PieceOffBoard(RulesError):
    """A piece was given a position outside the board."""


class CellOffBoard(PieceOffBoard):
    """A cell was requested at a position outside the board."""


class BadParameters(RulesError):
    """Arguments did not meet the expected requirements."""


class PlayerWithoutBarriers(RulesError):
    """A player with no barriers left tried to use one."""


class PieceNotPlaced(RulesError):
    """A piece was used before being placed on the board."""


class PieceAlreadyPlaced(RulesError):
    """A piece that is already on the board was placed again."""


class PlayerNotPlaced(PieceNotPlaced):
    """A player was moved before being placed on the board."""


class PlayerAlreadyPlaced(PieceAlreadyPlaced):
    """A player that is already on the board was placed again."""


class RulesBroken(RulesError):
    """A move breaks the rules of the game."""


class GameOver(RulesError):
    """A move was requested from a game that has finished."""


class GameNotStarted(RulesError):
    """A move was attempted in a game that has not started."""


class NoChild(RulesError):
    """A cell has no neighbour in the requested direction."""