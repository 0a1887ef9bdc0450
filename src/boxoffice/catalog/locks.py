"""Per-ticket-category mutual exclusion.

Within one shopper session everything runs synchronously. When several
sessions share one catalogue, every cart mutation and checkout holds the locks
of the categories it touches. Locks are always taken in sorted id order.

The lock table is fixed when the catalogue is built; only known ticket
categories ever get a lock.
"""

import threading
from collections.abc import Iterable, Iterator
from contextlib import ExitStack, contextmanager

from boxoffice.exceptions import NotFound


class InventoryLocks:
    def __init__(self, category_ids: Iterable[str] = ()) -> None:
        self._locks: dict[str, threading.RLock] = {str(category_id): threading.RLock() for category_id in category_ids}

    def __len__(self) -> int:
        return len(self._locks)

    def lock_for(self, category_id: str) -> threading.RLock:
        try:
            return self._locks[category_id]
        except KeyError:
            raise NotFound("ticket_category", category_id) from None

    @contextmanager
    def hold(self, category_ids: Iterable[str]) -> Iterator[None]:
        with ExitStack() as stack:
            for category_id in sorted(set(category_ids)):
                stack.enter_context(self.lock_for(category_id))
            yield
