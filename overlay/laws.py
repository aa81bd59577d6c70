"""
The algebra of update and query, as something you can run.

Any correct map obeys these laws for every key and value.
You can't try every key, but you can try the ones you care about,
which are usually the ones your program mentions. Each check answers
whether the law held, and files an issue with the report when it didn't.

The laws are stated over total maps. The partial-map versions follow
by substituting Some(v) for v, except for the one about re-binding
a key to the value it already has, which gets its own check.
"""
from itertools import product
from typing import Any, Sequence

from .diagnostics import Report
from .ontology import Equality
from .total import TotalMap, empty, is_equivalent, same_value
from . import partial

class Audit:
	def __init__(self, report:Report):
		self.report = report

	def empty_base(self, default, key, eq:Equality) -> bool:
		if same_value(empty(default, eq).query(key), default): return True
		self.report.law_broken("empty", "query(empty(d), k) == d", [("d", default), ("k", key)])
		return False

	def write_read(self, m:TotalMap, x, v) -> bool:
		if same_value(m.update(x, v).query(x), v): return True
		self.report.law_broken("write-then-read", "query(update(m, x, v), x) == v", [("m", m), ("x", x), ("v", v)])
		return False

	def locality(self, m:TotalMap, x1, x2, v) -> bool:
		if same_value(m.update(x1, v).query(x2), m.query(x2)): return True
		self.report.law_broken("locality", "query(update(m, x1, v), x2) == query(m, x2)", [("m", m), ("x1", x1), ("x2", x2), ("v", v)])
		return False

	def shadowing(self, m:TotalMap, x, v1, v2) -> bool:
		if is_equivalent(m.update(x, v1).update(x, v2), m.update(x, v2)): return True
		self.report.law_broken("shadowing", "update(update(m, x, v1), x, v2) ~ update(m, x, v2)", [("m", m), ("x", x), ("v1", v1), ("v2", v2)])
		return False

	def identity(self, m:TotalMap, x) -> bool:
		if is_equivalent(m.update(x, m.query(x)), m): return True
		self.report.law_broken("no-op", "update(m, x, query(m, x)) ~ m", [("m", m), ("x", x)])
		return False

	def permutation(self, m:TotalMap, x1, v1, x2, v2) -> bool:
		if is_equivalent(m.update(x2, v2).update(x1, v1), m.update(x1, v1).update(x2, v2)): return True
		self.report.law_broken("permutation", "update(update(m, x2, v2), x1, v1) ~ update(update(m, x1, v1), x2, v2)", [("m", m), ("x1", x1), ("v1", v1), ("x2", x2), ("v2", v2)])
		return False

	def rebind_same(self, m:TotalMap, x) -> bool:
		found = partial.lookup(m, x)
		if not isinstance(found, partial.Some) or is_equivalent(partial.bind(m, x, found.value), m): return True
		self.report.law_broken("re-bind", "lookup(m, x) == Some(v) implies bind(m, x, v) ~ m", [("m", m), ("x", x), ("v", found.value)])
		return False

	def all_laws(self, m:TotalMap, keys:Sequence, values:Sequence) -> bool:
		"""
		Try every law at every combination of the given keys and values.
		Distinct-key laws only get distinct keys, as judged by the map's own predicate.
		"""
		eq, ok = m.eq, True
		for x in keys:
			self.report.info("Checking laws at key", repr(x))
			ok &= self.empty_base(m.default, x, eq)
			ok &= self.identity(m, x)
			if m.default is None: ok &= self.rebind_same(m, x)
			for v in values:
				ok &= self.write_read(m, x, v)
			for v1, v2 in product(values, repeat=2):
				ok &= self.shadowing(m, x, v1, v2)
		for x1, x2 in product(keys, repeat=2):
			if eq(x1, x2): continue
			for v in values:
				ok &= self.locality(m, x1, x2, v)
			for v1, v2 in product(values, repeat=2):
				ok &= self.permutation(m, x1, v1, x2, v2)
		return bool(ok)

	def equality(self, eq:Equality, keys:Sequence) -> bool:
		""" Is this predicate an equivalence relation, at least over these keys? """
		ok = True
		for a in keys:
			if not eq(a, a):
				self.report.equality_broken("reflexive", [a])
				ok = False
		for a, b in product(keys, repeat=2):
			if eq(a, b) != eq(b, a):
				self.report.equality_broken("symmetric", [a, b])
				ok = False
		for a, b, c in product(keys, repeat=3):
			if eq(a, b) and eq(b, c) and not eq(a, c):
				self.report.equality_broken("transitive", [a, b, c])
				ok = False
		return ok

def audit(m:TotalMap, keys:Sequence, values:Sequence[Any], report:Report) -> bool:
	return Audit(report).all_laws(m, keys, values)

def audit_equality(eq:Equality, keys:Sequence, report:Report) -> bool:
	return Audit(report).equality(eq, keys)
