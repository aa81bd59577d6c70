"""
Total maps: Every key has a value. Most of them have the default.

Conceptually a total map is a function from keys to values.
Concretely it is a chain of overrides hanging off an empty map
which knows the default value and the key-equality predicate.
Updating a map puts a new link on the front of the chain and leaves
the old chain alone, so old and new maps share everything but the
newest link. Nothing in a chain ever changes after it's built.

Two maps are the same map when they give the same answer for every key,
regardless of how their chains look. Since the chains are finite,
this is decidable: Only the keys mentioned in either chain can differ
from the defaults, so those are the only keys worth asking about.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable, Iterator
from boozetools.support.foundation import Visitor

from .ontology import Equality, same_key

class TotalMap[K, V](ABC):
	__slots__ = ()

	def __setattr__(self, key, value):
		raise AttributeError("%s is immutable." % type(self).__name__)

	@property
	@abstractmethod
	def default(self) -> V: pass

	@property
	@abstractmethod
	def eq(self) -> Equality: pass

	@abstractmethod
	def chain(self) -> Iterator["Override[K, V]"]:
		""" The override links, most recent first. """

	def query(self, key:K) -> V:
		eq = self.eq
		for link in self.chain():
			if eq(link.key, key):
				return link.value
		return self.default

	__getitem__ = query

	def update(self, key:K, value:V) -> "TotalMap[K, V]":
		return Override(key, value, self)

	def depth(self) -> int:
		return sum(1 for _ in self.chain())

	def overrides(self) -> Iterator[tuple[K, V]]:
		""" Live (key, value) overrides, most recent first. Shadowed links are skipped. """
		eq, seen = self.eq, []
		for link in self.chain():
			if not any(eq(prior, link.key) for prior in seen):
				seen.append(link.key)
				yield link.key, link.value

	def support(self) -> list[K]:
		""" Keys with an override. Everything else reads as the default. """
		return [key for key, _ in self.overrides()]

	def compact(self) -> "TotalMap[K, V]":
		""" Same map, shortest chain. """
		live = [(k, v) for k, v in self.overrides() if not same_value(v, self.default)]
		live.reverse()
		return build(self.default, live, self.eq)

	def visit(self, visitor:Visitor):
		return visitor.visit(self)

	def __repr__(self): return render(self)


class Empty[K, V](TotalMap[K, V]):
	__slots__ = ("_default", "_eq")

	def __init__(self, default:V, eq:Equality=same_key):
		object.__setattr__(self, "_default", default)
		object.__setattr__(self, "_eq", eq)

	@property
	def default(self) -> V: return self._default

	@property
	def eq(self) -> Equality: return self._eq

	def chain(self) -> Iterator["Override[K, V]"]:
		return iter(())


class Override[K, V](TotalMap[K, V]):
	__slots__ = ("key", "value", "parent", "_empty")
	key: K
	value: V
	parent: TotalMap[K, V]

	def __init__(self, key:K, value:V, parent:TotalMap[K, V]):
		object.__setattr__(self, "key", key)
		object.__setattr__(self, "value", value)
		object.__setattr__(self, "parent", parent)
		object.__setattr__(self, "_empty", parent if isinstance(parent, Empty) else parent._empty)

	@property
	def default(self) -> V: return self._empty.default

	@property
	def eq(self) -> Equality: return self._empty.eq

	def chain(self) -> Iterator["Override[K, V]"]:
		# Chains may be longer than the recursion limit.
		link = self
		while isinstance(link, Override):
			yield link
			link = link.parent


def empty(default, eq:Equality=same_key) -> TotalMap:
	return Empty(default, eq)

def query(m:TotalMap, key) -> Any:
	return m.query(key)

def update(m:TotalMap, key, value) -> TotalMap:
	return m.update(key, value)

def build(default, pairs:Iterable[tuple[Any, Any]], eq:Equality=same_key) -> TotalMap:
	""" Same as {--> default; k1 --> v1; k2 --> v2; ...} """
	m = empty(default, eq)
	for key, value in pairs:
		m = m.update(key, value)
	return m

def same_value(x, y) -> bool:
	""" As containers compare their items: identity first, so a NaN is still itself. """
	return x is y or x == y

def is_equivalent(a:TotalMap, b:TotalMap) -> bool:
	"""
	Extensional equality: Do these maps agree on every key?

	The key domain is taken to be infinite, so there is always some key
	that neither map mentions. Therefore, differing defaults mean differing maps.
	Each map answers with its own key predicate.
	"""
	if a is b: return True
	if not same_value(a.default, b.default): return False
	for key in a.support() + b.support():
		if not same_value(a.query(key), b.query(key)):
			return False
	return True


class Render(Visitor):
	""" Coq-flavored notation: {--> default; k1 --> v1; k2 --> v2} with the oldest override first. """

	def __init__(self, show=repr):
		self._show = show

	def visit_Empty(self, m:Empty):
		return ["--> " + self._show(m.default)]

	def visit_Override(self, m:Override):
		links = list(m.chain())
		parts = self.visit(links[-1].parent)
		for link in reversed(links):
			parts.append("%s --> %s" % (self._show(link.key), self._show(link.value)))
		return parts

def render(m:TotalMap, show=repr) -> str:
	return "{" + "; ".join(m.visit(Render(show))) + "}"
