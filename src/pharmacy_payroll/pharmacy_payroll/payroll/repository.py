from __future__ import annotations

from typing import Protocol

from .model import PayParameters


class PayParametersRepository(Protocol):
    def get_current(self) -> PayParameters:
        """Raises ConfigurationError when no configuration row exists."""

        raise NotImplementedError

    def update_exchange_rate(self, rate: float) -> None:
        raise NotImplementedError
