"""
The substitution algebra at the heart of unification-based type inference.

A substitution maps type variables to type expressions.
The operations are few:

* construct (with the occurs-check),
* look up a variable,
* apply the whole thing to a type expression,
* extend by one binding, and
* combine two substitutions into one.

Substitutions are values: nothing here mutates one after construction.
The constructor is the only way to get one, so every substitution in
existence has passed the occurs-check.

Normalization
--------------
Whenever a binding (v, e) joins a substitution, every right-hand side already
present first gets v replaced by e. That way a single pass of ``apply`` is
always enough: no right-hand side ever mentions a variable the substitution
also binds.
"""
from typing import Iterable, Iterator, Sequence
from .texp import TypeExpr, Atomic, Variable, Procedure, TypeExprVisitor, is_type_expr, render

class SubstitutionError(Exception):
	""" Something the inference driver must answer for; never handled in here. """

class CircularBinding(SubstitutionError):
	def __init__(self, variable:Variable, texp:TypeExpr):
		super().__init__(variable, texp)
		self.variable, self.texp = variable, texp
	def __str__(self):
		return "Occurs check error - circular substitution %s in %s" % (self.variable.name, render(self.texp))

class MalformedTypeExpr(SubstitutionError):
	def __init__(self, texp):
		super().__init__(texp)
		self.texp = texp
	def __str__(self):
		return "Bad type expression %r" % (self.texp,)

class _OccursCheck(TypeExprVisitor):
	def __init__(self, variable:Variable, texp):
		self.variable, self.texp = variable, texp
	def visit(self, texp):
		if not is_type_expr(texp):
			raise MalformedTypeExpr(texp)
		return super().visit(texp)
	def visit_Atomic(self, a: Atomic): pass
	def visit_Variable(self, v: Variable):
		if v.name == self.variable.name:
			raise CircularBinding(self.variable, self.texp)
	def visit_Procedure(self, p: Procedure):
		for t in p.params: self.visit(t)
		self.visit(p.result)

def occurs_check(variable:Variable, texp:TypeExpr) -> None:
	"""
	Raise CircularBinding if variable appears anywhere within texp.
	Raise MalformedTypeExpr if texp is (or contains) something
	other than an atomic, variable, or procedure type.
	Parameters are checked left to right, then the result; the first problem wins.
	"""
	_OccursCheck(variable, texp).visit(texp)

class _Apply(TypeExprVisitor):
	def __init__(self, sub:"Substitution"):
		self.sub = sub
	def visit(self, texp):
		# Not a type expression, so nothing in it to substitute.
		return super().visit(texp) if is_type_expr(texp) else texp
	def visit_Atomic(self, a: Atomic): return a
	def visit_Variable(self, v: Variable): return self.sub.lookup(v)
	def visit_Procedure(self, p: Procedure):
		return Procedure([self.visit(t) for t in p.params], self.visit(p.result))

class Substitution:
	"""
	An ordered, duplicate-free set of bindings from type variables to type expressions.
	Lookup is by name; the order only matters to extend and combine.
	"""
	_bindings: dict[Variable, TypeExpr]

	def __init__(self, variables:Sequence[Variable]=(), texps:Sequence[TypeExpr]=()):
		assert len(variables) == len(texps), (len(variables), len(texps))
		assert all(isinstance(v, Variable) for v in variables), variables
		for v, t in zip(variables, texps):
			occurs_check(v, t)
		self._bindings = dict(zip(variables, texps))
		assert len(self._bindings) == len(variables), "Duplicate variable in %r" % (variables,)

	@property
	def variables(self) -> tuple[Variable, ...]: return tuple(self._bindings)
	@property
	def texps(self) -> tuple[TypeExpr, ...]: return tuple(self._bindings.values())

	def is_empty(self) -> bool: return not self._bindings
	def __len__(self): return len(self._bindings)
	def __iter__(self) -> Iterator[tuple[Variable, TypeExpr]]: return iter(self._bindings.items())
	def __contains__(self, variable): return variable in self._bindings
	def __eq__(self, other):
		# Same bindings, never mind the order.
		return isinstance(other, Substitution) and self._bindings == other._bindings
	__hash__ = None
	def __repr__(self):
		return "{%s}" % ", ".join("%s := %s" % (v.name, render(t)) for v, t in self)

	def lookup(self, variable:Variable) -> TypeExpr:
		""" An unbound variable substitutes to itself. """
		return self._bindings.get(variable, variable)

	def apply(self, texp:TypeExpr) -> TypeExpr:
		""" Anything that is not a type expression comes back as it went in, empty substitution or not. """
		if self.is_empty(): return texp
		return _Apply(self).visit(texp)

	def extend(self, variable:Variable, texp:TypeExpr) -> "Substitution":
		"""
		Fold in one more binding, rewriting the existing right-hand sides with it.
		If the variable is already bound, that binding keeps its place.
		Otherwise, the new binding goes in front.
		"""
		single = Substitution([variable], [texp])
		rewritten = [single.apply(t) for t in self._bindings.values()]
		if variable in self._bindings:
			return Substitution(self.variables, rewritten)
		else:
			return Substitution([variable, *self.variables], [texp, *rewritten])

	def combine(self, other:"Substitution") -> "Substitution":
		""" The result applies like self followed by other. """
		if self.is_empty(): return other
		if other.is_empty(): return self
		result = self
		for v, t in other:
			result = result.extend(v, t)
		return result

def make_empty_substitution() -> Substitution:
	return Substitution()

def make_substitution(variables:Iterable[Variable], texps:Iterable[TypeExpr]) -> Substitution:
	return Substitution(tuple(variables), tuple(texps))
