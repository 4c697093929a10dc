"""
Validation rules for incoming risks.

Rules are kept in a small table and all of them are evaluated, so a
rejected payload reports every problem at once rather than only the
first one.  The resulting message is returned to the client as is.
"""

from typing import Callable, List, Optional, Tuple

from risk_registry_api.app.schemas.risk import RiskPayload, RiskState

ALLOWED_STATES: Tuple[str, ...] = tuple(state.value for state in RiskState)


class RiskValidationError(ValueError):
    """Raised when a payload breaks one or more validation rules.

    ``problems`` holds ``(field, rule)`` pairs in rule order.
    """

    def __init__(self, problems: List[Tuple[str, str]]) -> None:
        self.problems = problems
        super().__init__(
            "validation failed: " + "; ".join(f"{field} {rule}" for field, rule in problems)
        )


def _required(value: Optional[str]) -> Optional[str]:
    if not value:
        return "is required"
    return None


def _one_of_states(value: Optional[str]) -> Optional[str]:
    if not value:
        return "is required"
    if value not in ALLOWED_STATES:
        return "must be one of " + ", ".join(ALLOWED_STATES)
    return None


_RULES: List[Tuple[str, Callable[[Optional[str]], Optional[str]]]] = [
    ("state", _one_of_states),
    ("title", _required),
    ("description", _required),
]


def validate_risk(payload: RiskPayload) -> None:
    """Check ``payload`` against every rule.

    Raises
    ------
    RiskValidationError
        If any rule fails.  ``id`` is never checked; it is always
        replaced by a server generated value.
    """
    problems = []
    for field, rule in _RULES:
        failure = rule(getattr(payload, field))
        if failure is not None:
            problems.append((field, failure))
    if problems:
        raise RiskValidationError(problems)
