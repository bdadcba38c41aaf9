"""
Log rate limiting processor for structlog.

Throttles repeated log events so a hot loop cannot flood stdout.
"""

import threading
import time
from typing import Callable

import structlog

# Níveis que nunca são descartados
_ALWAYS_EMIT = frozenset({"error", "critical", "exception"})

# Campos que mudam a cada evento e não identificam a mensagem
_VOLATILE_KEYS = frozenset({"event", "level", "timestamp"})


class LogRateLimiter:
    """
    structlog processor that drops an event when the same message and context
    was emitted less than ``1 / max_per_second`` seconds ago.
    """

    def __init__(
        self,
        max_per_second: float = 5,
        clock: Callable[[], float] = time.monotonic,
    ):
        if max_per_second <= 0:
            raise ValueError("max_per_second must be > 0")
        self.min_interval = 1.0 / max_per_second
        self.clock = clock
        self._last_emitted: dict[tuple, float] = {}
        self._lock = threading.Lock()

    def __call__(self, logger, method_name: str, event_dict: dict) -> dict:
        level = event_dict.get("level", method_name)
        if level in _ALWAYS_EMIT:
            return event_dict

        key = self._throttle_key(event_dict)
        now = self.clock()

        with self._lock:
            last = self._last_emitted.get(key)
            if last is not None and now - last < self.min_interval:
                raise structlog.DropEvent
            self._last_emitted[key] = now

        return event_dict

    @staticmethod
    def _throttle_key(event_dict: dict) -> tuple:
        """Mensagem + contexto: mesma mensagem para providers diferentes não colide."""
        context = tuple(sorted(
            (name, repr(value))
            for name, value in event_dict.items()
            if name not in _VOLATILE_KEYS
        ))
        return str(event_dict.get("event", "unknown")), context

    def reset(self) -> None:
        """Limpa o histórico de eventos emitidos."""
        with self._lock:
            self._last_emitted.clear()
