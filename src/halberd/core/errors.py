class HalError(Exception):
    """Base error for HAL model failures."""


class HalValidationError(HalError, ValueError):
    """Raised when input cannot be turned into a Link or Resource."""


class LinkValidationError(HalValidationError):
    pass


class HalParseError(HalError):
    """Raised when a HAL+JSON document cannot be decoded."""


class CyclicGraphError(HalError):
    def __init__(self, *, rel: str, depth: int):
        super().__init__(
            f"Embedded resource under {rel!r} at depth {depth} "
            "refers back to one of its ancestors"
        )
        self.rel = rel
        self.depth = depth


__all__ = [
    "HalError",
    "HalValidationError",
    "LinkValidationError",
    "HalParseError",
    "CyclicGraphError",
]
