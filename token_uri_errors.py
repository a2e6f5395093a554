"""Exceptions raised by the token URI resolver, its configuration and the simulation."""


class TokenUriError(ValueError):
    """Base class for every resolver failure."""


class InvalidAmount(TokenUriError):
    """Locked amount is not a positive integer."""

    def __init__(self, amount, reason: str = "must be an integer >= 1"):
        self.amount = amount
        super().__init__(f"INSUFFICIENT_BALANCE: amount {amount!r} {reason}")


class InvalidDuration(TokenUriError):
    """Duration is not positive or does not match a configured staking period."""

    def __init__(self, duration, reason: str):
        self.duration = duration
        super().__init__(f"INVALID_DURATION: duration {duration!r} {reason}")


class InvalidRangeTable(TokenUriError):
    """Token range table has a gap, an overlap or bad indices."""


class InvalidDurationTable(TokenUriError):
    """Duration table is not five strictly ascending positive integers."""


class ResolverConfigError(TokenUriError):
    """An environment setting could not be parsed."""


class SimulationError(TokenUriError):
    """A simulated (amount, duration) pair failed to resolve."""

    def __init__(self, amount, duration, cause: Exception):
        self.amount = amount
        self.duration = duration
        super().__init__(f"simulation aborted at [{amount}|{duration}]: {cause}")
