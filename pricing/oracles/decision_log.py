"""In-memory record of oracle decisions, for transparency and debugging."""

import logging
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from django.utils import timezone

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OracleDecision:
    system: str
    model: str
    prompt: str
    response: str
    context: dict[str, Any] = field(default_factory=dict)
    failed: bool = False
    timestamp: datetime = field(default_factory=timezone.now)


class DecisionLog:
    """Keeps the most recent decisions and logs a summary of each one."""

    def __init__(self, max_entries: int = 100) -> None:
        self._entries: deque[OracleDecision] = deque(maxlen=max_entries)

    def record(self, decision: OracleDecision) -> None:
        self._entries.append(decision)
        logger.info(
            "Oracle decision system=%s model=%s failed=%s prompt_length=%d response_length=%d context=%s",
            decision.system,
            decision.model,
            decision.failed,
            len(decision.prompt),
            len(decision.response),
            decision.context,
        )

    def entries(self, system: str | None = None) -> list[OracleDecision]:
        if system is None:
            return list(self._entries)
        return [entry for entry in self._entries if entry.system == system]

    def recent(self, count: int = 10) -> list[OracleDecision]:
        return list(self._entries)[-count:]

    def clear(self) -> None:
        self._entries.clear()
