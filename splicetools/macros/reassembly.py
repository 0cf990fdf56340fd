"""
Put a level of the token tree back together after some of its runs have been resolved.
"""

def reassemble(tokens, replacements) -> tuple:
	"""
	`replacements` is an ordered list of (start, stop, token) triples: each
	half-open index range of `tokens` gets replaced by exactly one token.
	Everything outside those ranges keeps its identity and order, so the
	result has len(tokens) - sum(stop - start) + len(replacements) tokens.
	"""
	result = []
	cursor = 0
	for start, stop, token in replacements:
		if not cursor <= start < stop <= len(tokens):
			raise ValueError("replacement ranges must be ordered, disjoint, and non-empty", (start, stop))
		result.extend(tokens[cursor:start])
		result.append(token)
		cursor = stop
	result.extend(tokens[cursor:])
	return tuple(result)
