import unittest
import contextlib
import io
import os
import sys
import tempfile
from kombi import __main__ as cli


class TestCommandLine(unittest.TestCase):
	def setUp(self):
		self.folder = tempfile.TemporaryDirectory()
		self.addCleanup(self.folder.cleanup)

	def write(self, name, text):
		path = os.path.join(self.folder.name, name)
		with open(path, 'w', encoding='utf-8') as fh: fh.write(text)
		return path

	def run_cli(self, *argv):
		out, err = io.StringIO(), io.StringIO()
		with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
			status = cli.main(cli.parse_arguments(list(argv)))
		return status, out.getvalue(), err.getvalue()

	def test_00_good_document(self):
		path = self.write('good.json', '{"a": [1, 2]}\n')
		status, out, err = self.run_cli('-q', '--echo', path)
		self.assertEqual(0, status)
		self.assertEqual('{"a": [1, 2]}\n', out)
		self.assertEqual('', err)

	def test_01_bad_document(self):
		path = self.write('bad.json', '{"a": 1.5}')
		status, out, err = self.run_cli('-q', path)
		self.assertEqual(1, status)
		self.assertIn('not recognized', err)

	def test_02_strict_points_at_leftovers(self):
		path = self.write('extra.json', '[1]\n  oops\n')
		self.assertEqual(0, self.run_cli('-q', path)[0])
		status, out, err = self.run_cli('-q', '--strict', path)
		self.assertEqual(1, status)
		self.assertIn('line 2, column 3', err)

	def test_03_timing_report(self):
		path = self.write('timed.json', 'true')
		status, out, err = self.run_cli(path)
		self.assertEqual(0, status)
		self.assertIn('to parse 4 characters', out)

	def test_04_keeps_going_after_a_failure(self):
		bad = self.write('bad.json', 'nope')
		good = self.write('good.json', 'null')
		status, out, err = self.run_cli('-q', '-e', bad, good)
		self.assertEqual(1, status)
		self.assertEqual('null\n', out)

	def test_05_unreadable_files_are_skipped(self):
		missing = os.path.join(self.folder.name, 'missing.json')
		garbled = os.path.join(self.folder.name, 'garbled.json')
		with open(garbled, 'wb') as fh: fh.write(b'\xff\xfe[1]')
		good = self.write('good.json', '[2]')
		status, out, err = self.run_cli('-q', '-e', missing, garbled, good)
		self.assertEqual(1, status)
		self.assertEqual('[2]\n', out)
		self.assertIn('missing.json: cannot read', err)
		self.assertIn('garbled.json: cannot read', err)

	def test_06_recursion_limit_allows_deeper_nesting(self):
		self.addCleanup(sys.setrecursionlimit, sys.getrecursionlimit())
		depth = 300
		path = self.write('deep.json', '[' * depth + ']' * depth)
		status, out, err = self.run_cli('-q', '--recursion-limit', '10000', path)
		self.assertEqual(0, status)
		self.assertEqual('', err)


if __name__ == '__main__':
	unittest.main()
