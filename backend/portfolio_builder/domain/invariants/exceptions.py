class InvariantViolation(Exception):
    """Raised when a domain rule would be broken by a requested change."""
