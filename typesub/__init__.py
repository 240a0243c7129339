"""
A substitution algebra for Hindley-Milner style type inference,
over atomic, variable, and procedure type expressions.
"""
from .texp import TypeExpr, Atomic, Variable, Procedure, NUMBER, BOOLEAN, STRING, VOID
from .substitution import (
	Substitution, SubstitutionError, CircularBinding, MalformedTypeExpr,
	occurs_check, make_substitution, make_empty_substitution,
)
