import unittest
import itertools
import random
from kombi.view import StringView

PREDICATES = [
	str.isdigit, str.isspace, str.isalpha, str.isalnum, str.isupper, str.islower,
	'a'.__eq__, 'b'.__eq__, 'c'.__eq__,
]

def sample_strings(seed, count=200):
	rng = random.Random(seed)
	alphabet = 'abcABC 123\t\n"[]{},:-'
	for _ in range(count):
		yield ''.join(rng.choice(alphabet) for _ in range(rng.randrange(12)))

def plain_span(text, predicate):
	head = ''.join(itertools.takewhile(predicate, text))
	return head, text[len(head):]


class TestSpan(unittest.TestCase):
	def check(self, text, predicate):
		matched, rest = StringView.of(text).span(predicate)
		self.assertEqual(plain_span(text, predicate), (matched.value, rest.value))

	def test_00_non_empty(self):
		self.check("      b   ", str.isspace)

	def test_01_empty(self):
		matched, rest = StringView.of("").span(str.isspace)
		self.assertEqual("", matched.value)
		self.assertEqual("", rest.value)

	def test_02_agrees_with_plain_strings(self):
		for text in sample_strings(1):
			for predicate in PREDICATES:
				with self.subTest(text=text, predicate=predicate): self.check(text, predicate)

	def test_03_nested(self):
		for text in sample_strings(2, 50):
			for first, second in itertools.product(PREDICATES, repeat=2):
				with self.subTest(text=text):
					matched, rest = StringView.of(text).span(first)[1].span(second)
					expected = plain_span(plain_span(text, first)[1], second)
					self.assertEqual(expected, (matched.value, rest.value))

	def test_04_offsets(self):
		matched, rest = StringView.of("123abc").span(str.isdigit)
		self.assertEqual(0, matched.offset)
		self.assertEqual(3, rest.offset)
		self.assertEqual(3, len(rest))


class TestViewBasics(unittest.TestCase):
	def test_00_emptiness_and_length(self):
		self.assertFalse(StringView.of("a").is_empty())
		self.assertTrue(StringView.of("").is_empty())
		for text in sample_strings(3):
			with self.subTest(text=text):
				view = StringView.of(text)
				self.assertEqual(bool(text), view.is_not_empty())
				self.assertEqual(not text, view.is_empty())
				self.assertEqual(bool(text), bool(view))
				self.assertEqual(len(text), len(view))

	def test_01_drop(self):
		rng = random.Random(4)
		for text in sample_strings(4):
			n = rng.randrange(15)
			with self.subTest(text=text, n=n):
				view = StringView.of(text)
				self.assertEqual(text[n:], view.drop(n).value)
				self.assertEqual(text[n:][n:], view.drop(n).drop(n).value)

	def test_02_drop_too_much_is_not_an_error(self):
		view = StringView.of("abc").drop(10)
		self.assertTrue(view.is_empty())
		self.assertEqual("", view.value)
		self.assertEqual(3, view.offset)

	def test_03_indexing(self):
		for text in sample_strings(5):
			view = StringView.of(text)
			for i, c in enumerate(text):
				with self.subTest(text=text, i=i): self.assertEqual(c, view[i])
			with self.assertRaises(IndexError): view[len(text)]

	def test_04_indexing_is_relative(self):
		view = StringView.of("xyz").drop(1)
		self.assertEqual('y', view[0])
		with self.assertRaises(IndexError): view[-1]
		with self.assertRaises(IndexError): view[2]

	def test_05_value_is_computed_once(self):
		view = StringView.of("hello world").drop(6)
		self.assertIs(view.value, view.value)
		self.assertEqual("world", str(view))


class TestEquality(unittest.TestCase):
	def test_00_structural(self):
		text = "some text"
		self.assertEqual(StringView.of(text), StringView.of(text))
		self.assertEqual(StringView.of(text).drop(2), StringView.of(text).drop(2))
		self.assertNotEqual(StringView.of(text).drop(2), StringView.of(text).drop(3))
		self.assertEqual(hash(StringView.of(text).drop(2)), hash(StringView.of(text).drop(2)))

	def test_01_same_text_elsewhere_is_different(self):
		view = StringView.of("abab")
		front, back = view.span('a'.__eq__)[0], view.drop(2).span('a'.__eq__)[0]
		self.assertEqual(front.value, back.value)
		self.assertNotEqual(front, back)

	def test_02_all_empty_views_are_alike(self):
		view = StringView.of("abc")
		self.assertEqual(view.span(str.isdigit)[0], view.drop(5))
		self.assertEqual(hash(view.span(str.isdigit)[0]), hash(view.drop(5)))

	def test_03_not_a_string(self):
		self.assertNotEqual(StringView.of("abc"), "abc")


if __name__ == '__main__':
	unittest.main()
