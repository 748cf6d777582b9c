from typing import (
	Any, Callable, Dict, Generic, Iterable, Iterator, List, Mapping, Optional, Tuple, TypeVar,
	Union
)

from .utils import normalize_key


V = TypeVar("V")

Pairs = Union[Mapping[str, V], Iterable[Tuple[str, V]]]


class OrderedMap(Generic[V]):
	"""
	An associative container that keeps keys in order of first insertion.

	Keys are normalized (trimmed and ASCII lower-cased) by every entry point,
	so "Key", " key " and "KEY" all refer to the same slot. Re-setting an
	existing key replaces its value without moving it.

	`factory` produces the default value handed out for missing keys.
	"""

	def __init__(self, factory: Callable[[], V] = str, pairs: Optional[Pairs] = None) -> None:
		self.factory = factory
		self._items: List[Tuple[str, V]] = []
		self._index: Dict[str, int] = {}
		if pairs is not None:
			self.update(pairs)

	def __repr__(self):
		return f"<{self.__class__.__name__}: {dict(self._items)!r}>"

	def __len__(self) -> int:
		return len(self._items)

	def __bool__(self) -> bool:
		return bool(self._items)

	def __iter__(self) -> Iterator[str]:
		return (key for key, _ in self._items)

	def __contains__(self, key: Any) -> bool:
		if not isinstance(key, str):
			return False
		return normalize_key(key) in self._index

	def __eq__(self, other: Any) -> bool:
		if not isinstance(other, OrderedMap):
			return NotImplemented
		return self._items == other._items

	def __getitem__(self, key: str) -> V:
		index = self._index.get(normalize_key(key))
		if index is None:
			raise KeyError(key)
		return self._items[index][1]

	def __setitem__(self, key: str, value: V) -> None:
		self.set(key, value)

	def _append(self, key: str, value: V) -> None:
		self._index[key] = len(self._items)
		self._items.append((key, value))

	def get(self, key: str, default: Optional[V] = None) -> V:
		index = self._index.get(normalize_key(key))
		if index is None:
			return self.factory() if default is None else default
		return self._items[index][1]

	def try_get(self, key: str) -> Optional[V]:
		index = self._index.get(normalize_key(key))
		if index is None:
			return None
		return self._items[index][1]

	def set(self, key: str, value: V) -> None:
		key = normalize_key(key)
		index = self._index.get(key)
		if index is None:
			self._append(key, value)
		else:
			self._items[index] = (key, value)

	def update(self, pairs: Pairs) -> None:
		if isinstance(pairs, (Mapping, OrderedMap)):
			pairs = pairs.items()
		for key, value in pairs:
			self.set(key, value)

	def get_or_insert_default(self, key: str) -> V:
		"""
		Return the value stored under `key`, creating it from the factory
		at the end of the map if it does not exist yet.
		"""
		key = normalize_key(key)
		index = self._index.get(key)
		if index is None:
			self._append(key, self.factory())
			index = len(self._items) - 1
		return self._items[index][1]

	def keys(self) -> Iterator[str]:
		return iter(self)

	def values(self) -> Iterator[V]:
		return (value for _, value in self._items)

	def items(self) -> Iterator[Tuple[str, V]]:
		return iter(list(self._items))

	def clear(self) -> None:
		self._items.clear()
		self._index.clear()
