import unittest

from overlay.ontology import Id, eq_id, by
from overlay.total import empty, query, update, build, is_equivalent, render, Empty, Override

KEYS = [Id(n) for n in range(6)]

def assert_equivalent(test:unittest.TestCase, a, b):
	test.assertTrue(is_equivalent(a, b), "%r is not %r" % (a, b))
	test.assertTrue(is_equivalent(b, a), "%r is not %r" % (b, a))
	for k in KEYS:
		test.assertEqual(query(a, k), query(b, k), k)

class ScenarioTests(unittest.TestCase):

	def test_concrete_scenario(self):
		m = update(update(empty(False), Id(1), False), Id(3), True)
		for n, expect in enumerate([False, False, False, True]):
			with self.subTest(n):
				self.assertIs(expect, query(m, Id(n)))

	def test_same_with_custom_equality(self):
		m = empty(False, eq_id).update(Id(1), False).update(Id(3), True)
		self.assertEqual([False, False, False, True], [m[Id(n)] for n in range(4)])

class QueryUpdateTests(unittest.TestCase):

	def test_empty_is_all_default(self):
		for default in (0, "nope", None, False):
			m = empty(default)
			for k in KEYS + ["a", 7, None]:
				with self.subTest(default=default, key=k):
					self.assertEqual(default, query(m, k))

	def test_write_then_read(self):
		m = build(0, [(Id(1), 10), (Id(2), 20)])
		for k in KEYS:
			for v in (0, 10, 99):
				self.assertEqual(v, query(update(m, k, v), k))

	def test_locality(self):
		m = build(0, [(Id(1), 10), (Id(2), 20)])
		for x1 in KEYS:
			m2 = update(m, x1, 42)
			for x2 in KEYS:
				if x1 != x2:
					self.assertEqual(query(m, x2), query(m2, x2))

	def test_update_does_not_disturb_parent(self):
		base = empty(0).update("x", 1)
		child = base.update("x", 2)
		sibling = base.update("y", 3)
		self.assertEqual(1, base["x"])
		self.assertEqual(0, base["y"])
		self.assertEqual(2, child["x"])
		self.assertEqual(0, child["y"])
		self.assertEqual(3, sibling["y"])
		self.assertIs(child.parent, base)
		self.assertIs(sibling.parent, base)

	def test_immutable(self):
		m = empty(0).update("x", 1)
		with self.assertRaises(AttributeError): m.value = 2
		with self.assertRaises(AttributeError): m.key = "y"
		with self.assertRaises(AttributeError): empty(0).bogus = 1
		self.assertEqual(1, m["x"])

	def test_long_chain_does_not_recurse(self):
		m = empty(-1)
		for i in range(5000):
			m = m.update(i % 10, i)
		self.assertEqual(4999, m[9])
		self.assertEqual(-1, m[10])
		self.assertEqual(5000, m.depth())
		self.assertEqual(10, len(m.support()))

	def test_projected_equality(self):
		m = empty(None, by(str.casefold)).update("Foo", 1)
		self.assertEqual(1, m["FOO"])
		self.assertEqual(1, m.update("bar", 2)["foo"])
		self.assertEqual(3, m.update("FOO", 3)["foo"])

class AlgebraTests(unittest.TestCase):

	def setUp(self) -> None:
		self.m = build("d", [(Id(0), "a"), (Id(2), "b"), (Id(0), "c")])

	def test_shadowing(self):
		for x in KEYS:
			with self.subTest(x):
				assert_equivalent(self, update(update(self.m, x, "v1"), x, "v2"), update(self.m, x, "v2"))

	def test_permutation(self):
		for x1 in KEYS:
			for x2 in KEYS:
				if x1 == x2: continue
				with self.subTest(x1=x1, x2=x2):
					assert_equivalent(
						self,
						update(update(self.m, x2, "v2"), x1, "v1"),
						update(update(self.m, x1, "v1"), x2, "v2"),
					)

	def test_identity(self):
		for x in KEYS:
			with self.subTest(x):
				assert_equivalent(self, update(self.m, x, query(self.m, x)), self.m)

	def test_identity_yields_a_new_map(self):
		m2 = update(self.m, Id(0), query(self.m, Id(0)))
		self.assertIsNot(m2, self.m)

	def test_same_key_different_values_not_equivalent(self):
		self.assertFalse(is_equivalent(update(self.m, Id(5), "x"), update(self.m, Id(5), "y")))

	def test_different_defaults_not_equivalent(self):
		self.assertFalse(is_equivalent(empty(0), empty(1)))
		self.assertTrue(is_equivalent(empty(0), empty(0)))

	def test_nan_is_itself(self):
		nan = float("nan")
		m = empty(nan).update(Id(1), nan)
		self.assertTrue(is_equivalent(update(m, Id(1), query(m, Id(1))), m))
		self.assertTrue(is_equivalent(update(m, Id(2), query(m, Id(2))), m))
		self.assertTrue(is_equivalent(m, empty(nan)))
		self.assertEqual(0, m.compact().depth())

	def test_overriding_with_default_is_equivalent_to_nothing(self):
		assert_equivalent(self, empty(0).update(Id(3), 0), empty(0))

class SupportTests(unittest.TestCase):

	def test_support_and_overrides(self):
		m = build(0, [("a", 1), ("b", 2), ("a", 3)])
		self.assertEqual(["a", "b"], m.support())
		self.assertEqual([("a", 3), ("b", 2)], list(m.overrides()))
		self.assertEqual([], empty(0).support())

	def test_compact(self):
		m = build(0, [("a", 1), ("b", 2), ("a", 3), ("b", 0), ("c", 4)])
		c = m.compact()
		self.assertTrue(is_equivalent(m, c))
		self.assertEqual(2, c.depth())
		self.assertEqual([("c", 4), ("a", 3)], list(c.overrides()))
		self.assertEqual(m.eq, c.eq)

	def test_structure(self):
		m = empty(0)
		self.assertIsInstance(m, Empty)
		self.assertIsInstance(m.update("a", 1), Override)
		self.assertEqual(0, m.update("a", 1).update("b", 2).default)

class RenderTests(unittest.TestCase):

	def test_notation(self):
		self.assertEqual("{--> False}", render(empty(False)))
		m = empty(False).update(Id(1), False).update(Id(3), True)
		self.assertEqual("{--> False; Id(1) --> False; Id(3) --> True}", render(m))
		self.assertEqual(render(m), repr(m))

	def test_custom_show(self):
		m = empty(0).update("x", 1)
		self.assertEqual("{--> 0; x --> 1}", render(m, str))

if __name__ == '__main__':
	unittest.main()
