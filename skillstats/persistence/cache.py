"""Per-context memoization of loaded skill records.

A cache lives for exactly one processing context (one render or request
turn). Create a fresh one per context and discard it afterwards; it is not
thread-safe and must not be shared between concurrent contexts.
"""

import logging
from typing import Callable

from skillstats.persistence.models import PlayerSkillRecord

logger = logging.getLogger(__name__)


class RecordCache:
    """Memoizes one record per account id until the context is torn down.

    Usable as a context manager; leaving the ``with`` block clears it.
    """

    def __init__(self) -> None:
        self._records: dict[int, PlayerSkillRecord] = {}

    def __enter__(self) -> "RecordCache":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.clear()

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, account_id: int) -> bool:
        return account_id in self._records

    def get(
        self, account_id: int, loader: Callable[[int], PlayerSkillRecord]
    ) -> PlayerSkillRecord:
        """Return the cached record, calling ``loader`` on first access."""
        record = self._records.get(account_id)
        if record is not None:
            logger.debug(f"Skill record cache hit for account {account_id}")
            return record
        record = loader(account_id)
        self._records[account_id] = record
        return record

    def invalidate(self, account_id: int) -> None:
        """Drop the cached record for one account."""
        self._records.pop(account_id, None)

    def clear(self) -> None:
        self._records.clear()
