"""
Favorite sets

Favorites are a set of ``FavoriteKey(user_id, item_type, item_id)``.
Membership is O(1); toggling flips membership and is serialized per key,
so two concurrent toggles of one key always land in opposite states and
never leave a duplicate.
"""

import threading
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, Hashable, Iterable, List, Set

from shared.domain.value_objects import ValueObject


@dataclass(frozen=True)
class FavoriteKey(ValueObject):
    user_id: Hashable
    item_type: str
    item_id: Hashable

    def __str__(self):
        return f"{self.user_id}:{self.item_type}:{self.item_id}"


class FavoriteSet:
    """
    In-memory favorite membership.

    Usage:
        favorites = FavoriteSet(keys_from_store)
        if favorites.toggle(FavoriteKey(user.id, 'room', 42)):
            ...  # now a favorite
    """

    def __init__(self, keys: Iterable[FavoriteKey] = ()):
        self._keys: Set[FavoriteKey] = set(keys)
        self._guard = threading.Lock()
        self._locks: Dict[FavoriteKey, threading.Lock] = defaultdict(threading.Lock)

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self):
        return iter(list(self._keys))

    def __contains__(self, key: FavoriteKey) -> bool:
        return self.contains(key)

    def _lock_for(self, key: FavoriteKey) -> threading.Lock:
        with self._guard:
            return self._locks[key]

    def contains(self, key: FavoriteKey) -> bool:
        return key in self._keys

    def toggle(self, key: FavoriteKey) -> bool:
        """Flip membership of ``key``; returns True when it is now a favorite"""
        with self._lock_for(key):
            if key in self._keys:
                self._keys.discard(key)
                return False
            self._keys.add(key)
            return True

    def add(self, key: FavoriteKey) -> None:
        with self._lock_for(key):
            self._keys.add(key)

    def discard(self, key: FavoriteKey) -> None:
        with self._lock_for(key):
            self._keys.discard(key)

    def item_ids(self, user_id: Hashable, item_type: str) -> List[Hashable]:
        """Item ids a user has favorited for one item type"""
        return [
            key.item_id
            for key in list(self._keys)
            if key.user_id == user_id and key.item_type == item_type
        ]
