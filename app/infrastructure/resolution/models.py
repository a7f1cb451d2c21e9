"""Resolution model.

A Resolution is the outcome of one resolver step as it travels through the
middleware pipeline: the payload, the raw errors, the state and the
request context (locale, translator, ...).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class ResolutionState(Enum):
    """Resolution lifecycle states.

    Attributes:
        UNRESOLVED: Resolver has not run yet
        RESOLVED: Resolver finished, successfully or with errors
    """

    UNRESOLVED = "unresolved"
    RESOLVED = "resolved"


@dataclass
class Resolution:
    """Outcome of a resolver step.

    Attributes:
        value: Successful payload, if any
        errors: Raw error entries (strings, ValidationNode trees, Message/Tree)
        state: ResolutionState
        context: Request context; may carry ``locale`` and ``translator``
    """

    value: Optional[Any] = None
    errors: List[Any] = field(default_factory=list)
    state: ResolutionState = ResolutionState.UNRESOLVED
    context: Dict[str, Any] = field(default_factory=dict)

    @property
    def has_errors(self) -> bool:
        """True if the resolver reported at least one error."""
        return bool(self.errors)

    def put_result(self, result: Tuple[str, Any]) -> "Resolution":
        """Apply a resolver return value and mark the resolution resolved.

        Args:
            result: ``("ok", value)`` or ``("error", reason)``, where reason
                is one error entry or a list of them.

        Returns:
            The same resolution, for chaining.

        Raises:
            ValueError: If the result tag is neither "ok" nor "error".
        """
        tag, payload = result
        if tag == "ok":
            self.value = payload
        elif tag == "error":
            if isinstance(payload, list):
                self.errors.extend(payload)
            else:
                self.errors.append(payload)
        else:
            raise ValueError(f"Unknown resolver result tag: {tag!r}")

        self.state = ResolutionState.RESOLVED
        return self
