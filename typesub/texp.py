"""
The type-expression language the substitution algebra works over.

There are exactly three kinds of type expression:

* Atomic types, such as "number" and "boolean".
* Type variables, such as "T1". These are compared by name.
* Procedure types, with an ordered list of parameter types and a return type.

All three are value objects: structurally-equal expressions compare equal
and hash alike. Passes over them are booze-tools visitors, one visit_ method
per kind of type expression.
"""
from typing import Iterable
from boozetools.support.foundation import Visitor

class TypeExpr:
	def __init__(self, *key):
		self._key = key
		self._hash = hash(key)
	def __hash__(self): return self._hash
	def __eq__(self, other: "TypeExpr"): return type(self) is type(other) and self._key == other._key
	def __repr__(self) -> str:
		it = Render().visit(self)
		assert isinstance(it, str), (it, type(self))
		return it

class Atomic(TypeExpr):
	def __init__(self, name:str):
		assert isinstance(name, str), name
		self.name = name
		super().__init__(name)

class Variable(TypeExpr):
	"""Compared by name. There is nothing more to a variable than its name."""
	def __init__(self, name:str):
		assert isinstance(name, str), name
		self.name = name
		super().__init__(name)

class Procedure(TypeExpr):
	def __init__(self, params: Iterable[TypeExpr], result: TypeExpr):
		# Parts are not checked here. A bogus part is the occurs-check's problem.
		self.params = tuple(params)
		self.result = result
		super().__init__(self.params, result)
	def arity(self) -> int: return len(self.params)

NUMBER = Atomic("number")
BOOLEAN = Atomic("boolean")
STRING = Atomic("string")
VOID = Atomic("void")

def is_type_expr(it) -> bool:
	return isinstance(it, (Atomic, Variable, Procedure))

class TypeExprVisitor(Visitor):
	def visit_Atomic(self, a:Atomic): raise NotImplementedError(type(self))
	def visit_Variable(self, v:Variable): raise NotImplementedError(type(self))
	def visit_Procedure(self, p:Procedure): raise NotImplementedError(type(self))

class Render(TypeExprVisitor):
	""" Return a string representation of the term. """
	def visit_Atomic(self, a: Atomic):
		return a.name
	def visit_Variable(self, v: Variable):
		return v.name
	def visit_Procedure(self, p: Procedure):
		if p.params:
			lhs = " * ".join(self.part(t) for t in p.params)
		else:
			lhs = "Empty"
		return "(%s -> %s)" % (lhs, self.part(p.result))
	def part(self, texp):
		# Error messages may need to show a part that is no type at all.
		return self.visit(texp) if is_type_expr(texp) else repr(texp)

def render(texp) -> str:
	return Render().part(texp)

class _Names(TypeExprVisitor):
	def __init__(self):
		self.names = {}
	def visit_Atomic(self, a: Atomic): pass
	def visit_Variable(self, v: Variable): self.names.setdefault(v.name)
	def visit_Procedure(self, p: Procedure):
		for t in p.params: self.visit(t)
		self.visit(p.result)

def variable_names(texp:TypeExpr) -> tuple[str, ...]:
	""" Names of the variables mentioned in texp, in order of first appearance. """
	names = _Names()
	names.visit(texp)
	return tuple(names.names)
