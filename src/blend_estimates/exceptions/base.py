class BlendError(Exception):
    """
    Parent of every exception raised by `blend_estimates`.

    Arithmetic, ledger and estimation failures each have their own subclass, so callers can handle
    a bad ledger read differently from an unpriced position and still catch `BlendError` for the
    rest. The human-readable description, when given, is kept on `.message`.
    """

    message: str | None = None

    def __init__(self, message: str | None = None) -> None:
        if message:
            self.message = message
            super().__init__(message)


class BlendValueError(BlendError):
    """
    Raised when ledger values are individually well formed but cannot describe a real pool, e.g.
    an LP token without shares.
    """
