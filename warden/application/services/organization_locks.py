"""Per-organization locks shared by the services that mutate organizations.

OrganizationService and IterationRecorderService both read, change and
replace whole organization documents. Holding the same lock for a key in
both keeps their writes from interleaving inside one process.

A lock exists only while someone holds or waits for it, so keys of
organizations that no longer see traffic (or never existed) do not
accumulate.
"""

from __future__ import annotations

import asyncio
import contextlib
from collections.abc import AsyncIterator
from uuid import UUID


class OrganizationLocks:
    """Registry of asyncio locks keyed by organization (or owner) id.

    Attributes:
        enabled: Whether hold() locks at all. When False every hold() is
            a no-op and concurrent writers are left to the conditional
            replace of the repository.
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._locks: dict[UUID, asyncio.Lock] = {}
        self._holders: dict[UUID, int] = {}

    @contextlib.asynccontextmanager
    async def hold(self, key: UUID) -> AsyncIterator[None]:
        """Hold the lock for key for the duration of the block."""
        if not self.enabled:
            yield
            return

        lock = self._locks.get(key)
        if lock is None:
            lock = self._locks[key] = asyncio.Lock()
        self._holders[key] = self._holders.get(key, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._holders[key] -= 1
            if not self._holders[key]:
                del self._holders[key]
                del self._locks[key]

    def __len__(self) -> int:
        """Number of keys currently held or waited for."""
        return len(self._locks)
