"""Domain-level exceptions."""


class InvalidMergeInputError(ValueError):
    """Raised when merge bonus inputs violate the calculator's preconditions."""
