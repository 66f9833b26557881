"""Exception types raised by the evolutio package."""


class EvolutioError(Exception):
    """Base class for all evolutio errors."""


class InvalidParameterError(EvolutioError, ValueError):
    """A simulation parameter is outside its allowed range."""


class UnknownStrategyError(EvolutioError, KeyError):
    """A strategy identifier is not part of the roster."""

    def __init__(self, identifier: str, available: list):
        self.identifier = identifier
        self.available = list(available)
        super().__init__(
            f"Strategy '{identifier}' not found. Available strategies: "
            f"{', '.join(self.available)}"
        )

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class PopulationSizeError(EvolutioError, ValueError):
    """An initial population vector does not match the roster size."""

    def __init__(self, got: int, expected: int):
        self.got = got
        self.expected = expected
        super().__init__(
            f"Expected {expected} population entries (one per strategy), got {got}"
        )


class UnknownCommandError(EvolutioError, KeyError):
    """A command name is not registered with the command surface."""

    def __str__(self) -> str:
        return self.args[0]
