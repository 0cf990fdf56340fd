"""
Expand the paste-style macro invocations in a source file.

Invocations like `paste! { ... }` and `concat_idents!(a, b)` are replaced
by their expansions; everything else passes through untouched (although the
output is re-spaced, one blank between tokens).
"""

import sys, os, argparse

from splicetools.macros import registry
from splicetools.support.failureprone import SourceText
from splicetools.support.interfaces import LanguageError

def parse_arguments(argv=None):
	parser = argparse.ArgumentParser(prog='py -m splicetools', description=__doc__,)
	parser.add_argument('source_path', help='path to input file')
	parser.add_argument('-f', '--force', action='store_true', dest='force', help='allow to write over existing file')
	parser.add_argument('-o', '--output', help='path to output file (default: standard output)')
	parser.add_argument('-v', '--verbose', action='store_true', help="Squawk about how many invocations were expanded.")
	return parser.parse_args(argv)

def main(args):
	registry.VERBOSE = args.verbose
	if args.output and os.path.exists(args.output) and not args.force:
		print('Target file already exists and --force command-line argument was not given.', file=sys.stderr)
		sys.exit(1)
	with open(args.source_path) as fh: document = fh.read()
	try:
		expanded = registry.expand_source(document)
	except LanguageError as e:
		source = SourceText(document, filename=args.source_path)
		e.as_issue(args.source_path).emit(lambda key: source)
		sys.exit(1)
	else:
		if args.output:
			with open(args.output, 'w') as fh: print(expanded, file=fh)
			print('Wrote expansion to:')
			print('\t'+args.output)
		else:
			print(expanded)

if __name__ == '__main__': main(parse_arguments())
