class MalformedLevel(ValueError):
    """Level text that cannot be turned into a playable grid."""


class NoPlayer(MalformedLevel):
    pass


class OutOfBounds(IndexError):
    """Coordinate query outside the grid extent."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"({x}, {y}) is outside the {width}x{height} grid")
        self.x = x
        self.y = y
