class GameError(ValueError):
    """
    base for every recoverable game/menu error
    """


class InvalidSize(GameError):
    """
    board or setting size outside what is allowed
    """


class OutOfBounds(GameError):
    """
    coordinates not on the current board
    """


class CellOccupied(GameError):
    """
    move onto a cell that already has a mark
    """


class MatchFinished(GameError):
    """
    move attempted after win or draw
    """


class InvalidAction(GameError):
    """
    menu action not valid on the current screen
    """
