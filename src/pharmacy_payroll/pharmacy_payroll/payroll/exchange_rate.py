"""Official VES/USD rate lookup (DolarAPI, BCV reference).

The client never raises for network or payload problems: it logs and hands
back the fallback rate so a payroll preview is never blocked by the lookup.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from ..core.constants import DEFAULT_EXCHANGE_RATE_TIMEOUT, DEFAULT_FALLBACK_EXCHANGE_RATE

logger = logging.getLogger(__name__)

DEFAULT_RATE_URL = "https://ve.dolarapi.com/v1/dolares/oficial"


def _positive_number(value: Any) -> Optional[float]:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if number > 0 else None


class DolarApiRateClient:
    def __init__(
        self,
        url: str = DEFAULT_RATE_URL,
        *,
        timeout: float = DEFAULT_EXCHANGE_RATE_TIMEOUT,
        default_fallback: float = DEFAULT_FALLBACK_EXCHANGE_RATE,
        session: Optional[requests.Session] = None,
    ):
        self._url = url
        self._timeout = timeout
        self._default_fallback = default_fallback
        self._session = session or requests.Session()

    def fetch_rate(self, fallback: Optional[float] = None) -> float:
        if fallback is None:
            fallback = self._default_fallback
        try:
            response = self._session.get(self._url, timeout=self._timeout)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            logger.warning("Exchange rate lookup failed (%s); using fallback %s", e, fallback)
            return fallback
        except ValueError:
            logger.warning("Exchange rate response is not JSON; using fallback %s", fallback)
            return fallback

        if not isinstance(data, dict):
            logger.warning("Unexpected exchange rate payload %r; using fallback %s", data, fallback)
            return fallback

        rate = _positive_number(data.get("promedio")) or _positive_number(data.get("price"))
        if rate is None:
            logger.warning("Exchange rate payload has no usable rate; using fallback %s", fallback)
            return fallback

        logger.info("Exchange rate refreshed: %s", rate)
        return rate
