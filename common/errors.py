"""Error types raised by the aggregation engine."""


class InvalidArgumentError(ValueError):
    """Raised when an operation receives an argument it cannot work with.

    The engine raises this for empty point sets and for malformed solver
    configuration. Coordinate ranges are not checked here; see
    `validation.coordinate_checks` for the caller-side checks.
    """
