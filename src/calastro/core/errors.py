class CalastroError(Exception):
    """Base error."""

class SearchExhaustedError(CalastroError, RuntimeError):
    """Raised when a bounded search runs out of steps before its predicate holds."""

    def __init__(self, what: str, steps: int):
        super().__init__(f"{what}: no result after {steps} steps")
        self.what = what
        self.steps = steps

class DomainError(CalastroError, ValueError):
    """Raised when an input violates a precondition (e.g. lo > hi in a bisection)."""

class ConfigError(CalastroError, ValueError):
    """Raised for an invalid configuration value."""
