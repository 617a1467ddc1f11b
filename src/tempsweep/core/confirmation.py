"""Decision point between the scan report and the deletion phase."""

from __future__ import annotations

import enum
import logging
from typing import Callable

from tempsweep.models.scan_result import RunSummary

log = logging.getLogger(__name__)

# Returns the operator's raw answer for a summary
PromptFunc = Callable[[RunSummary], str]

_AFFIRMATIVE = frozenset({"y", "yes"})


class GateState(enum.Enum):
    AWAITING_DECISION = "awaiting_decision"
    DECIDED = "decided"


def is_affirmative(answer: str | None) -> bool:
    """Check whether an answer means "go ahead"."""
    if answer is None:
        return False
    return answer.strip().lower() in _AFFIRMATIVE


class ConfirmationGate:
    """Decides whether the deletion phase may run.

    In unattended mode the gate approves without asking. Otherwise
    ``prompt`` is called once with the run summary and only an
    affirmative answer approves; anything else, including an empty
    answer, declines.
    """

    def __init__(self, prompt: PromptFunc | None = None, *, unattended: bool = False) -> None:
        if prompt is None and not unattended:
            raise ValueError("Interactive mode requires a prompt function")
        self._prompt = prompt
        self.unattended = unattended
        self.state = GateState.AWAITING_DECISION
        self.proceed: bool | None = None

    def decide(self, summary: RunSummary) -> bool:
        """Return True if deletion should proceed. Repeated calls reuse the first decision."""
        if self.state is GateState.DECIDED:
            return bool(self.proceed)

        if self.unattended:
            self.proceed = True
        else:
            answer = self._prompt(summary)
            self.proceed = is_affirmative(answer)
            log.debug("Confirmation answer %r -> %s", answer, self.proceed)

        self.state = GateState.DECIDED
        return self.proceed
