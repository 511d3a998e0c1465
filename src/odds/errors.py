class ConfigurationError(ValueError):
    """
    Raised when a simulation parameter is out of range (non-positive
    trial count, group size, population size, bound, ...).

    Always raised before any trial runs.
    """


class UndefinedEstimate(ArithmeticError):
    """
    Raised when an estimate would divide by zero, e.g. a diagnostic-test
    run in which nobody was diagnosed.
    """
