"""
Build a map out of command-line bindings, then ask it things.

{0}

For example:

    overlay -d False 1=False 3=True -q 0 -q 3

will print what the map {{--> False; 1 --> False; 3 --> True}} says about keys 0 and 3.

    overlay -p x=1 y=2 x=3 --laws

will build a partial map and check the update/query laws over x, y, 1, 2, and 3.

    overlay -h

will explain all the arguments.
"""
import sys, argparse, ast

parser = argparse.ArgumentParser(
	prog="overlay",
	description="Functional total and partial maps, from the command line.",
)
parser.add_argument("bindings", nargs="*", metavar="KEY=VALUE", help="applied left to right, so later bindings shadow earlier ones.")
parser.add_argument('-d', "--default", default="None", help="value for keys without a binding (total maps only).")
parser.add_argument('-p', "--partial", action="store_true", help="Build a partial map, where unbound keys are absent.")
parser.add_argument('-q', "--query", action="append", default=[], metavar="KEY", help="Print the value at this key. May be repeated.")
parser.add_argument('-l', "--laws", action="store_true", help="Audit the update/query laws over every key and value mentioned.")
parser.add_argument('-v', "--verbose", action="count", help="Say more about what's going on.")

def literal(text:str):
	""" Python literals mean themselves. Anything else is just text. """
	try: return ast.literal_eval(text)
	except (ValueError, SyntaxError, TypeError): return text

def split_binding(text:str):
	key, sep, value = text.partition("=")
	if not sep:
		parser.error("%r is not of the form KEY=VALUE" % text)
	return literal(key), literal(value)

def run(args):
	from .diagnostics import Report, TooManyIssues
	from .total import build
	from .partial import Some, build_partial
	from .laws import audit
	report = Report(verbose=args.verbose)
	pairs = [split_binding(b) for b in args.bindings]
	if args.partial:
		m = build_partial(pairs)
		values = [Some(v) for _, v in pairs]
	else:
		m = build(literal(args.default), pairs)
		values = [m.default] + [v for _, v in pairs]
	report.info("Built", repr(m), "with", m.depth(), "override(s).")
	keys = [k for k, _ in pairs] + [literal(q) for q in args.query]
	if args.query:
		for q in args.query:
			key = literal(q)
			print("%r -> %r" % (key, m.query(key)))
	else:
		print(repr(m))
	if args.laws:
		try:
			audit(m, _distinct(keys), _distinct(values), report)
		except TooManyIssues:
			report.complain_to_console()
			print(" *"*35, file=sys.stderr)
			print("Giving up after a few issues. One crisis at a time, eh?", file=sys.stderr)
			return 1
		if report.sick():
			report.complain_to_console()
			return 1
		print("Looks lawful to me.", file=sys.stderr)
	return 0

def _distinct(items):
	found = []
	for it in items:
		if it not in found: found.append(it)
	return found

def main():
	if len(sys.argv) > 1:
		exit(run(parser.parse_args()))
	else:
		print(__doc__.strip().format(parser.format_usage()))
