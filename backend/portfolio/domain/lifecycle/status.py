from typing import Sequence
from portfolio.domain.invariants.exceptions import InvariantViolation


def assert_status(status: str, allowed: Sequence[str]) -> None:
    """
    Any status in `allowed` may follow any other; admins move messages
    and quotes back and forth freely.
    """
    if status not in allowed:
        raise InvariantViolation(
            f"Illegal status '{status}'. Expected one of: {', '.join(allowed)}"
        )
