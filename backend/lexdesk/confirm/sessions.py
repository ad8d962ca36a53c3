"""
Per-session confirm arbiters.

Each signed-in user gets one arbiter, created the first time a confirmation
is requested, and closed when the session ends or the application shuts
down. Reads go through peek and never create one.
"""

import logging

from lexdesk.confirm.arbiter import ConfirmArbiter

logger = logging.getLogger(__name__)


class ConfirmSessions:
    def __init__(self):
        self._arbiters: dict[str, ConfirmArbiter] = {}

    def __len__(self) -> int:
        return len(self._arbiters)

    def __contains__(self, key: str) -> bool:
        return key in self._arbiters

    def peek(self, key: str) -> ConfirmArbiter | None:
        return self._arbiters.get(key)

    def get(self, key: str) -> ConfirmArbiter:
        arbiter = self._arbiters.get(key)
        if arbiter is None:
            arbiter = ConfirmArbiter(name=key)
            self._arbiters[key] = arbiter
            logger.debug("Confirm session started for %s", key)
        return arbiter

    def end(self, key: str) -> bool:
        arbiter = self._arbiters.pop(key, None)
        if arbiter is None:
            return False
        arbiter.close()
        logger.debug("Confirm session ended for %s", key)
        return True

    def close_all(self) -> None:
        for key in list(self._arbiters):
            self.end(key)
