"""A set of identifiers with the set operations the AST code relies on."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class IdentifierSet:
    """An unordered collection of distinct identifier names."""

    def __init__(self, items: Iterable[str] = ()) -> None:
        self._items: set[str] = set(items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IdentifierSet):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"IdentifierSet({sorted(self._items)!r})"

    def add(self, item: str) -> bool:
        """Add ``item``; return False if it was already present."""
        found = item in self._items
        self._items.add(item)
        return not found

    def add_identifiers(self, idents: Iterable[str]) -> None:
        self._items.update(idents)

    def contains(self, item: str) -> bool:
        return item in self._items

    def contains_all(self, *args: str) -> bool:
        return all(item in self._items for item in args)

    def is_subset(self, other: IdentifierSet) -> bool:
        """Whether every item of this set is in ``other``."""
        return self._items <= other._items

    def is_superset(self, other: IdentifierSet) -> bool:
        """Whether every item of ``other`` is in this set."""
        return other.is_subset(self)

    def union(self, other: IdentifierSet) -> IdentifierSet:
        return IdentifierSet(self._items | other._items)

    def intersect(self, other: IdentifierSet) -> IdentifierSet:
        return IdentifierSet(self._items & other._items)

    def difference(self, other: IdentifierSet) -> IdentifierSet:
        return IdentifierSet(self._items - other._items)

    def symmetric_difference(self, other: IdentifierSet) -> IdentifierSet:
        return IdentifierSet(self._items ^ other._items)

    def clear(self) -> None:
        self._items = set()

    def remove(self, item: str) -> None:
        """Remove ``item`` if present."""
        self._items.discard(item)

    def clone(self) -> IdentifierSet:
        return IdentifierSet(self._items)

    def to_slice(self) -> list[str]:
        """The items as a list in no particular order."""
        return list(self._items)

    def to_ordered_slice(self) -> list[str]:
        """The items as a sorted list."""
        return sorted(self._items)