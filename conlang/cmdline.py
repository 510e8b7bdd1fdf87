"""
This is a read-print loop for conlang notation.
It reads lines, one value per line, and shows the structure of each value it reads.
"""
import sys, argparse
from pathlib import Path
from typing import Iterable, TextIO

from .values import Value
from .reader import ConlangReader, Unparseable
from .diagnostics import Report
from . import teletype

# The exit status of a program that panics.
FATAL = 101

EXAMPLES = """
For example:

    conlang

will prompt for lines and show the structure of each one, until end-of-file.

    conlang phrases.txt

will do the same for each line of phrases.txt.
"""

parser = argparse.ArgumentParser(
	prog="conlang",
	description="Read lines of conlang notation and print the structure of each.",
	epilog=EXAMPLES,
	formatter_class=argparse.RawDescriptionHelpFormatter,
)
parser.add_argument("source", nargs="?", help="a file of lines to read instead of the terminal.")
parser.add_argument('-v', "--verbose", action="store_true", help="Explain on stderr why reading stopped.")
parser.add_argument('-p', "--prompt", default=teletype.PROMPT, help="Prompt for interactive input (default %(default)r).")

def repl(reader:Iterable[Value], printer:TextIO):
	for value in reader:
		print(repr(value), file=printer, flush=True)

def line_source(args) -> Iterable[str]:
	if args.source:
		return teletype.file_lines(Path.cwd() / args.source)
	elif sys.stdin.isatty():
		return teletype.terminal_lines(args.prompt)
	else:
		return teletype.stream_lines(sys.stdin)

def run(args):
	report = Report(verbose=args.verbose)
	reader = ConlangReader(line_source(args), report)
	try:
		repl(reader, sys.stdout)
	except Unparseable as ex:
		report.unparseable(ex.lineno, ex.line)
		report.complain_to_console()
		return FATAL
	except OSError as ex:
		if ex.filename is None: raise
		if isinstance(ex, FileNotFoundError): report.no_such_file(Path(ex.filename))
		else: report.broken_file(Path(ex.filename))
		report.complain_to_console()
		return 1
	if args.verbose:
		report.complain_to_console()
	return 0

def main(argv=None):
	return run(parser.parse_args(argv))
