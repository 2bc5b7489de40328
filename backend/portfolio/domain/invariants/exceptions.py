class InvariantViolation(Exception):
    """Raised when a record breaks a domain rule (missing field, bad enum)."""
