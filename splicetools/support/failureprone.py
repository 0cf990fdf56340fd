"""
This module is all about easing over the process to display where things go wrong.

Every token carries a span, which is nothing but a pair of character offsets
into the text it was scanned from. That's plenty for the machinery, but a
person wants a line number, a column, and a picture. The SourceText handles
conversion from offsets to rows and columns, and slices the corresponding line
out of a larger text. The `illustration` function makes the picture.

A pasted identifier has no text of its own: it inherits the span of the splice
region that built it (or whatever token a `span` modifier pointed at), so when
a later compiler stage complains about it, the complaint lands somewhere sensible.

Line breaks: the Unix, Apple, and DOS conventions are all treated as line-breaks
by default. Supply a different mode (keys of LINEBREAK_MODE) if you must.
"""

import bisect, re, sys
from typing import NamedTuple, Any
from enum import Enum

LINEBREAK_MODE = {
	'normal': re.compile(r'\r\n?|\n'),
	'unix': re.compile(r'\n'),
	'apple': re.compile(r'\r'),
	'dos': re.compile(r'\r\n'),
}

class Severity(Enum):
	NOTICE = "Notice"
	WARNING = "Warning"
	ERROR = "Error"

class Evidence(NamedTuple):
	slice:slice
	caption: str = "here"

	def width(self): return self.slice.stop - self.slice.start

class Issue(NamedTuple):
	"""
	Everything needed to present an error (or warning, or notice) to a person.

	phase: which portion of the expansion process found the issue.
	severity: how bad the issue is.
	description: the issue in plain language.
	evidence: a dictionary from "key" (as known to an assumed "fetch" function)
		to lists of ``Evidence`` objects relevant to that corresponding text.
	"""
	phase: str
	severity: Severity
	description: str
	evidence: dict[Any, list[Evidence]]

	def as_text(self, fetch):
		"""
		Generate a plain-text report.
		:param: "fetch" must be a function which takes a key (from the evidence dictionary)
		and returns a corresponding SourceText object.
		"""
		lines = ["%s while %s: %s"%(self.severity.value, self.phase, self.description)]
		for key, evidence in self.evidence.items():
			source = fetch(key)
			if source.filename:
				lines.append("Excerpt from "+source.filename+" :")
			lines.extend(source.excerpt(e) for e in evidence)
		return "\n".join(lines)

	def emit(self, fetch):
		""" Print the generated error text to standard error. """
		print(self.as_text(fetch), file=sys.stderr)

def illustration(single_line:str, start:int, width:int=0, *, prefix='', caption="near here") -> str:
	""" Builds up a picture of where something appears in a line of text. """
	blanks = ''.join(c if c == '\t' else ' ' for c in prefix + single_line[:start])
	underline_width = max(1, min(width, len(single_line.rstrip())-start))
	underline = '^'*underline_width
	return prefix + single_line.rstrip() + '\n' + blanks + underline +" "+caption

class SourceText:
	""" The text a token tree was scanned from. Turns offsets back into rows and columns. """
	def __init__(self, content:str, line_breaks='normal', filename:str=None):
		self.content = content
		self.filename = filename
		self.line_breaks = line_breaks
		self.__bounds = None

	def __make_bounds(self):
		""" Lazily only find line breaks if it turns out to be necessary for a particular text. """
		if self.__bounds is None:
			inside = [m.end() for m in LINEBREAK_MODE[self.line_breaks].finditer(self.content)]
			self.__bounds = [0] + inside + [len(self.content)]

	def find_row_col(self, index:int):
		""" Rows count from one; columns from zero. """
		self.__make_bounds()
		row = bisect.bisect_right(self.__bounds, index, hi=len(self.__bounds) - 1) - 1
		return row+1, index - self.__bounds[row]

	def line_of_text(self, row):
		self.__make_bounds()
		r = max(0, row - 1)
		return self.content[self.__bounds[r]:self.__bounds[r + 1]]

	def excerpt(self, evidence:Evidence) -> str:
		""" The line where the evidence starts, numbered, with the evidence underlined. """
		row, col = self.find_row_col(evidence.slice.start)
		return illustration(self.line_of_text(row), col, evidence.width(), prefix='% 6d :'%row, caption=evidence.caption)
