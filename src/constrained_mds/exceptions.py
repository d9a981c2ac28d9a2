class InvalidProblemError(ValueError):
    """Raised when inputs to a solve cannot describe a valid problem."""
