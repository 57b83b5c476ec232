"""
Read JSON documents with the combinator grammar and report how long it took.

Each file is read whole, then parsed. A file that does not parse is reported
on STDERR and the exit status will be 1; the remaining files are still tried.
"""

import sys, argparse, time, warnings

from kombi.interface import NoMatch, TrailingInput
from kombi.json.grammar import parse
from kombi.json.render import dumps
from kombi.support.failureprone import SourceText

VERBOSE = True

def parse_arguments(argv=None):
	parser = argparse.ArgumentParser(prog='py -m kombi', description=__doc__)
	parser.add_argument('paths', nargs='+', metavar='path', help='path to a JSON document')
	parser.add_argument('-s', '--strict', action='store_true', help='complain about anything after the value except whitespace')
	parser.add_argument('-e', '--echo', action='store_true', help='print the parsed value back out as JSON text')
	parser.add_argument('-i', '--indent', help='indent the echoed JSON for easier reading.', action='store_const', dest='indent', const=2, default=None)
	parser.add_argument('--recursion-limit', type=int, metavar='N', help='allow more deeply nested documents than Python ordinarily would')
	parser.add_argument('-q', '--quiet', action='store_true', help="don't report timings")
	return parser.parse_args(argv)

def measure(path, text, strict):
	""" Parse, and print the time taken and size. Returns the value, or None after complaining. """
	source = SourceText(text, filename=path)
	began = time.perf_counter()
	try: value = parse(text, strict=strict)
	except TrailingInput as e:
		source.complain(e.position, "unexpected text after the JSON value")
		return None
	except NoMatch:
		print("%s: not recognized as JSON." % path, file=sys.stderr)
		return None
	except RecursionError:
		print("%s: nested too deeply; try a larger --recursion-limit." % path, file=sys.stderr)
		return None
	elapsed = time.perf_counter() - began
	if VERBOSE: print("Took %.3f s to parse %d characters (roughly %d mb) from %s" % (elapsed, len(text), (len(text) + 2) // 1024 // 1024, path))
	return value

def main(args):
	global VERBOSE
	VERBOSE = not args.quiet
	if args.recursion_limit:
		if args.recursion_limit < sys.getrecursionlimit():
			warnings.warn("Lowering the recursion limit to %d." % args.recursion_limit)
		sys.setrecursionlimit(args.recursion_limit)
	status = 0
	for path in args.paths:
		try:
			with open(path, encoding='utf-8') as fh: text = fh.read()
		except (OSError, UnicodeError) as e:
			print("%s: cannot read: %s" % (path, e), file=sys.stderr)
			status = 1
			continue
		value = measure(path, text, args.strict)
		if value is None: status = 1
		elif args.echo: print(dumps(value, args.indent))
	return status

if __name__ == '__main__': sys.exit(main(parse_arguments()))
