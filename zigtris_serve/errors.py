"""Exceptions raised by the server."""


class ZigtrisServeError(Exception):
    """Base class for zigtris-serve errors."""


class ServerStartError(ZigtrisServeError):
    """The server could not be started (missing root, bind failure)."""


class RangeNotSatisfiable(ZigtrisServeError):
    """A byte range lies outside the requested file."""

    def __init__(self, size: int):
        super().__init__(f"Range not satisfiable for a file of {size} bytes")
        self.size = size
