"""Runtime configuration defaults for pricing and debug logging."""

from __future__ import annotations

import os
from decimal import Decimal, InvalidOperation

_TAX_RATE_ENV = "LUNCH_TRAY_TAX_RATE"
_DEBUG_LOG_ENV = "LUNCH_TRAY_DEBUG_LOG"

DEFAULT_TAX_RATE = Decimal("0.08")
CURRENCY_SYMBOL = "$"
DEFAULT_DEBUG_LOG_PATH = "/tmp/lunch-tray-debug.log"


def resolve_tax_rate() -> Decimal:
    """
    Resolve the sales tax rate.

    Resolution order:
    1. LUNCH_TRAY_TAX_RATE (if set)
    2. DEFAULT_TAX_RATE
    """
    raw = os.environ.get(_TAX_RATE_ENV, "").strip()
    if not raw:
        return DEFAULT_TAX_RATE
    try:
        rate = Decimal(raw)
    except InvalidOperation as exc:
        raise RuntimeError(f"{_TAX_RATE_ENV} must be a decimal number, got {raw!r}") from exc
    if not rate.is_finite() or rate < 0:
        raise RuntimeError(f"{_TAX_RATE_ENV} must be a non-negative decimal, got {raw!r}")
    return rate


def resolve_debug_log_path() -> str:
    """Resolve the debug log path, honoring LUNCH_TRAY_DEBUG_LOG."""
    return os.environ.get(_DEBUG_LOG_ENV, "").strip() or DEFAULT_DEBUG_LOG_PATH


TAX_RATE = resolve_tax_rate()
