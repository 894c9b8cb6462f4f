"""
Scopes map names to values.

There are exactly two ways a scope gets changed or made:

* At top level, one scope is shared by every statement, and `NewVariable`
  changes it with `bind_in_place`. Later statements see the new binding.
* Inside a call, every body expression gets a scope of its very own,
  made with `overlay` from the closure's captured snapshot. Bindings made
  there vanish when that body expression is done.
"""
from typing import Iterator, Mapping, Optional
from .types import MAYBE_VALUE, NO_VALUE

class Scope:
	def __init__(self, bindings:Optional[Mapping[str, MAYBE_VALUE]]=None):
		self._bindings = dict(bindings or ())

	def __repr__(self):
		return "<Scope %s>" % ", ".join(self._bindings)

	def __contains__(self, name:str) -> bool: return name in self._bindings
	def __len__(self): return len(self._bindings)
	def __iter__(self) -> Iterator[str]: return iter(self._bindings)

	def lookup(self, name:str) -> MAYBE_VALUE:
		""" Unbound names produce NO_VALUE rather than an error. """
		return self._bindings.get(name, NO_VALUE)

	def bind_in_place(self, name:str, value:MAYBE_VALUE) -> MAYBE_VALUE:
		self._bindings[name] = value
		return value

	def snapshot(self) -> "Scope":
		# Values are immutable, so copying the mapping copies the scope.
		return Scope(self._bindings)

	def overlay(self, on_top:Mapping[str, MAYBE_VALUE]) -> "Scope":
		""" A new scope where the names in `on_top` shadow this one's. """
		fresh = Scope(self._bindings)
		fresh._bindings.update(on_top)
		return fresh
