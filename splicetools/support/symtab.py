"""
A minimal symbol table.

The paste engine needs exactly one kind of lookup: given a name mentioned in a
`span(name)` modifier, find where that name appears in the invocation. So this
is a NameSpace from name to the provenance of its first mention. Adding a name
twice is an error, because the caller should know it's doing that; looking up
an absent name is an error, because that's the interesting case.
"""

from typing import Generic, TypeVar

class NoSuchSymbol(KeyError):
	pass

class SymbolAlreadyExists(KeyError):
	pass

T = TypeVar("T")

class NameSpace(Generic[T]):
	"""
	The "local" is the set of names defined in this space.
	The "place" is a general statement of where the namespace "lives", used for error messages.
	"""
	def __init__(self, *, place):
		self.local : dict[str, T] = {}
		self.place = place

	def __getitem__(self, key) -> T:
		if key in self.local:
			return self.local[key]
		else:
			raise NoSuchSymbol(key)

	def __contains__(self, key):
		return key in self.local

	def __setitem__(self, key, value:T):
		if key in self.local:
			raise SymbolAlreadyExists(key)
		else:
			self.local[key] = value

	def __len__(self): return len(self.local)
