"""
Partial maps are total maps of optional values, defaulting to absent.

Nothing interesting happens here that doesn't happen in ``total``.
A present value is wrapped in ``Some`` so that a key bound to ``None``
is still distinguishable from a key that isn't bound at all.
"""

from typing import Any, Iterable, Iterator, NamedTuple, Optional

from .ontology import Equality, same_key
from .total import TotalMap, empty, build

class Some(NamedTuple):
	value: Any
	def __repr__(self): return "Some(%r)" % (self.value,)

type PartialMap = TotalMap[Any, Optional[Some]]

class Absent(KeyError): pass

def empty_partial(eq:Equality=same_key) -> PartialMap:
	return empty(None, eq)

def lookup(m:PartialMap, key) -> Optional[Some]:
	return m.query(key)

def bind(m:PartialMap, key, value) -> PartialMap:
	return m.update(key, Some(value))

def build_partial(pairs:Iterable[tuple[Any, Any]], eq:Equality=same_key) -> PartialMap:
	return build(None, ((k, Some(v)) for k, v in pairs), eq)

def fetch(m:PartialMap, key) -> Any:
	""" For when absence is somebody's mistake. """
	found = m.query(key)
	if found is None:
		raise Absent(key)
	return found.value

def is_bound(m:PartialMap, key) -> bool:
	return m.query(key) is not None

def bindings(m:PartialMap) -> Iterator[tuple[Any, Any]]:
	""" Bound (key, value) pairs, most recent first, values unwrapped. """
	for key, found in m.overrides():
		if found is not None:
			yield key, found.value

def domain(m:PartialMap) -> list:
	return [key for key, _ in bindings(m)]

def is_included(m1:PartialMap, m2:PartialMap) -> bool:
	""" Does m2 agree with every binding in m1? (It may have more of its own.) """
	return all(m2.query(key) == Some(value) for key, value in bindings(m1))
