import sys, random
from pathlib import Path
from typing import Any
from boozetools.support.failureprone import illustration

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]

	minced_oaths = [
		'Ack', 'ARGH', 'Blargh', 'Confound it', 'Crud', 'Curses', "Crikey",
		'Drat', 'Fiddlesticks', 'Good Grief', "Great Scott",
		'Jeepers', 'Heavens', "Mercy", 'Nuts', 'Rats', 'Woe is me',
	]

	resignations = [
		'I am undone.',
		'I cannot continue.',
		'I have no idea what that line means.',
		'I need to ask for help.',
	]

	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

class Report:
	""" Where the reader and the read-print loop send anything worth telling a human. """
	_issues : list["Pic"]

	def __init__(self, *, verbose:int):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)

	@property
	def issues(self): return tuple(self._issues)

	def issue(self, it:Any):
		self._issues.append(it)

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)

	# Methods the line source might need:
	def _file_error(self, path:Path, prefix:str):
		self.issue(Pic(prefix+" "+str(path), []))

	def no_such_file(self, path:Path):
		self._file_error(path, "I see no file called")

	def broken_file(self, path:Path):
		self._file_error(path, "Something went pear-shaped while trying to read")

	# Methods the reader is likely to call:
	def end_of_input(self, lineno:int):
		self.info("End of input after %d line(s)."%lineno)

	def too_much_input(self, lineno:int, line:str, rest:str):
		intro = "There was more on line %d than I could make sense of."%lineno
		ann = Annotation(lineno, line, len(line)-len(rest), len(rest), "this part")
		self.issue(Pic(intro, [ann], ["Reading stops here; nothing after this line was read."]))

	def unparseable(self, lineno:int, line:str):
		intro = "Line %d is not anything I know how to read."%lineno
		ann = Annotation(lineno, line, 0, len(line), "this line")
		self.issue(Pic(intro, [ann], ["This is fatal. One crisis at a time, eh?"]))

class Annotation:
	def __init__(self, row:int, single_line:str, col:int, width:int, caption:str=""):
		self.row, self.single_line = row, single_line
		self.col, self.width = col, max(width, 1)
		self.caption = caption
	def illustrate(self):
		return illustration(self.single_line, self.col, self.width, prefix='% 6d |' % self.row, caption=self.caption)

class Pic:
	def __init__(self, intro:str, anns:list[Annotation], footer=()):
		self._intro, self._anns, self._footer = intro, anns, footer
	def as_text(self):
		lines = [self._intro, ""]
		lines.extend(ann.illustrate() for ann in self._anns)
		lines.extend(self._footer)
		return '\n'.join(lines)

def _bemoan(issues):
	""" Emit all the issues to the console. """
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
