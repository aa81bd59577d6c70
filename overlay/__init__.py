"""
Functional total and partial maps, the sort of thing you'd use
for variable bindings in an interpreter or a type-checker.
"""
from .ontology import Id, same_key, eq_id, by
from .total import TotalMap, Empty, Override, empty, query, update, build, is_equivalent, render
from .partial import Some, Absent, empty_partial, lookup, bind, build_partial, fetch, is_bound, domain, bindings, is_included

emptyP = empty_partial
