from __future__ import annotations

from dataclasses import dataclass

import pytest

from agrismart.services.collection import ManagedCollection


@dataclass(frozen=True)
class Item:
	key: str
	size: int


def _collection() -> ManagedCollection[str, Item]:
	return ManagedCollection(key=lambda item: item.key, items=[Item("a", 1), Item("b", 5), Item("c", 3)])


def test_preserves_insertion_order() -> None:
	collection = _collection()
	assert collection.keys() == ["a", "b", "c"]
	assert [item.size for item in collection] == [1, 5, 3]
	assert len(collection) == 3
	assert "b" in collection


def test_add_rejects_duplicate_key() -> None:
	collection = _collection()
	with pytest.raises(ValueError):
		collection.add(Item("a", 9))
	assert collection.get("a").size == 1


def test_remove_and_get_missing_raise_lookup_error() -> None:
	collection = _collection()
	removed = collection.remove("b")
	assert removed == Item("b", 5)
	assert "b" not in collection

	with pytest.raises(LookupError):
		collection.remove("b")
	with pytest.raises(LookupError):
		collection.get("zzz")


def test_replace_requires_existing_key() -> None:
	collection = _collection()
	collection.replace(Item("c", 30))
	assert collection.get("c").size == 30
	assert collection.keys() == ["a", "b", "c"]

	with pytest.raises(LookupError):
		collection.replace(Item("d", 1))


def test_filter_combines_predicates_with_and() -> None:
	collection = _collection()
	assert collection.filter() == collection.items()
	assert collection.filter(lambda item: item.size > 1) == [Item("b", 5), Item("c", 3)]
	assert collection.filter(lambda item: item.size > 1, lambda item: item.key != "b") == [Item("c", 3)]


def test_items_returns_a_copy() -> None:
	collection = _collection()
	snapshot = collection.items()
	snapshot.clear()
	assert len(collection) == 3
