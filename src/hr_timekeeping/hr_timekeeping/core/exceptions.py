class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidDateError(ValidationError):
    """Raised when a calendar component is out of range."""


class InvalidTimeError(ValidationError):
    """Raised when an hour/minute or a timestamp value is invalid."""


class NegativeDurationError(DomainError):
    """An interval whose end precedes its start.

    Not raised: returned as a tagged result so batch computations can go on.
    """

    def __init__(self, start, end):
        super().__init__(f"Interval ends before it starts ({start.isoformat()} > {end.isoformat()})")
        self.start = start
        self.end = end
