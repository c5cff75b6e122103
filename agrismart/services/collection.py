"""Ordered, keyed in-memory collection shared by every mutable dashboard page."""

from __future__ import annotations

import threading
from collections.abc import Callable, Hashable, Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)

Predicate = Callable[[T], bool]


class ManagedCollection(Generic[K, T]):
	"""Insertion-ordered items addressed by a key, with filtered views.

	Mutations and reads take a lock, so every caller observes a consistent
	snapshot. Returned lists are copies; items themselves should be immutable.
	"""

	def __init__(self, key: Callable[[T], K], items: Iterable[T] = ()):
		self._key = key
		self._items: dict[K, T] = {}
		self._lock = threading.Lock()
		for item in items:
			self.add(item)

	def add(self, item: T) -> T:
		key = self._key(item)
		with self._lock:
			if key in self._items:
				raise ValueError(f"{key!r} already exists")
			self._items[key] = item
		return item

	def replace(self, item: T) -> T:
		key = self._key(item)
		with self._lock:
			if key not in self._items:
				raise LookupError(f"{key!r} not found")
			self._items[key] = item
		return item

	def remove(self, key: K) -> T:
		with self._lock:
			try:
				return self._items.pop(key)
			except KeyError:
				raise LookupError(f"{key!r} not found") from None

	def get(self, key: K) -> T:
		with self._lock:
			try:
				return self._items[key]
			except KeyError:
				raise LookupError(f"{key!r} not found") from None

	def keys(self) -> list[K]:
		with self._lock:
			return list(self._items)

	def items(self) -> list[T]:
		with self._lock:
			return list(self._items.values())

	def filter(self, *predicates: Predicate[T]) -> list[T]:
		"""Items satisfying every predicate, in insertion order."""
		snapshot = self.items()
		return [item for item in snapshot if all(check(item) for check in predicates)]

	def __contains__(self, key: object) -> bool:
		with self._lock:
			return key in self._items

	def __len__(self) -> int:
		with self._lock:
			return len(self._items)

	def __iter__(self) -> Iterator[T]:
		return iter(self.items())
