"""
Expanders, and the host pass that finds their invocations.

An expander is just a function from a token sequence to a token sequence. It
holds no state between calls, so invocations never interact. The host pass
walks a token tree looking for `name ! (...)` (or `[...]`, or `{...}`) where
`name` is a registered expander, and splices in that expander's output in
place of all three tokens. Unknown macros are left as they were. So are
invocations inside a macro_rules template, whose arguments still hold `$`
metavariables until the template is used, and so is the output of an
expansion, which is not scanned again.
"""

import sys
from typing import Callable

from ..tokens import Ident, Group, Delimiter, is_punct, walk, render
from ..scanning.lexicon import tokenize
from . import paste, concat_idents

VERBOSE = False

Expander = Callable[[tuple], tuple]

EXPANDERS:dict[str, Expander] = {
	'paste': paste.expand,
	'concat_idents': concat_idents.concat_idents,
}

def register(name:str, expanders:dict=EXPANDERS):
	"""
	For instance:
	@register('stringify')
	def stringify(tokens): ...
	"""
	def decorator(fn:Expander):
		assert callable(fn)
		assert name not in expanders, name
		expanders[name] = fn
		return fn
	return decorator

def _awaits_substitution(arguments) -> bool:
	""" A `$` means the invocation sits in a macro_rules template, so its arguments aren't final yet. """
	return any(is_punct(t, '$') for t in walk(arguments))

def _is_invocation(tokens, i, expanders) -> bool:
	return (
		isinstance(tokens[i], Ident) and tokens[i].text in expanders
		and i + 2 < len(tokens) and is_punct(tokens[i+1], '!')
		and isinstance(tokens[i+2], Group) and tokens[i+2].delimiter is not Delimiter.NONE
		and not _awaits_substitution(tokens[i+2].tokens)
	)

def _expand(tokens:tuple, expanders:dict) -> tuple[tuple, int]:
	result, count, i = [], 0, 0
	while i < len(tokens):
		token = tokens[i]
		if _is_invocation(tokens, i, expanders):
			result.extend(expanders[token.text](tokens[i+2].tokens))
			count += 1
			i += 3
			continue
		if isinstance(token, Group):
			inner, n = _expand(token.tokens, expanders)
			if n:
				token = token.rebuild(inner)
				count += n
		result.append(token)
		i += 1
	return (tuple(result) if count else tokens), count

def expand_invocations(tokens, expanders:dict=EXPANDERS) -> tuple:
	""" Expand every registered invocation, at any depth. """
	result, count = _expand(tuple(tokens), expanders)
	if VERBOSE: print("Expanded %d invocation(s)."%count, file=sys.stderr)
	return result

def expand_source(text:str, expanders:dict=EXPANDERS) -> str:
	""" Text in, text out. """
	return render(expand_invocations(tokenize(text), expanders))
