"""Refresh the configured exchange rate from the official lookup.

Note: Meant for a cron job before the payroll preview is opened. If the lookup
fails the configured rate is kept.
"""

from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from config import get_settings_module

from src.pharmacy_payroll.pharmacy_payroll.container import build_container


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"))

    container = build_container(
        db_config=settings.DB_CONFIG,
        rate_url=settings.EXCHANGE_RATE_URL,
        rate_timeout=settings.EXCHANGE_RATE_TIMEOUT,
        fallback_rate=settings.FALLBACK_EXCHANGE_RATE,
    )
    rate = container.payroll_service.refresh_exchange_rate()
    print(f"Exchange rate: Bs. {rate:.4f}")


if __name__ == "__main__":
    main()
