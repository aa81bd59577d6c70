"""
Keys, and what it means for two of them to be the same.

A map only ever asks one question of its keys: "Is this the one?"
The answer comes from a two-argument predicate, which defaults to
plain old ``==``. Callers may supply their own, but then it had
better be reflexive, symmetric, and transitive. If it's not,
shadowing and locality go out the window and nobody will warn you.
(See ``laws.audit_equality`` if you want to be warned.)
"""
from typing import Any, Callable, NamedTuple
import operator

type Equality = Callable[[Any, Any], bool]

same_key: Equality = operator.eq

class Id(NamedTuple):
	""" A natural-number identifier. The stock key type. """
	n: int
	def __repr__(self): return "Id(%d)" % self.n

def eq_id(a:Id, b:Id) -> bool:
	return a.n == b.n

def by(projection:Callable[[Any], Any]) -> Equality:
	"""
	Keys are the same when their projections are equal.
	For instance, ``by(str.casefold)`` for case-insensitive names.
	"""
	def eq(a, b) -> bool:
		return projection(a) == projection(b)
	return eq
