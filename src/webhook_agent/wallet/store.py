"""Wallet data file persistence.

The file holds whatever :meth:`Wallet.export` produced.  It is read once at
startup (a missing or unreadable file means "create a new wallet") and
written once after the agent is initialised.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger("webhook_agent.wallet.store")


def load_wallet_data(path: Path) -> str | None:
    """Return the stored wallet blob, or ``None`` if there is none."""
    if not path.exists():
        return None
    try:
        data = path.read_text(encoding="utf-8")
    except OSError as exc:
        logger.error(f"Error reading wallet data from {path}: {exc}")
        return None
    return data or None


def save_wallet_data(path: Path, data: str) -> None:
    """Overwrite the wallet data file with *data*."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(data, encoding="utf-8")
    logger.info(f"Wallet data saved to {path}")
