from __future__ import annotations

from typing import FrozenSet, Optional, Union

from .errors import InvariantViolation
from .model import MANY, ONE
from .syntax import (
	ArrayType,
	ChanDir,
	ChanType,
	FieldList,
	FuncType,
	Ident,
	IndexType,
	InterfaceType,
	MapType,
	PointerType,
	SelectorExpr,
	StructType,
	TypeExpr,
	Variadic,
)


SCALAR_TYPES: FrozenSet[str] = frozenset(
	{
		"bool",
		"string",
		"byte",
		"rune",
		"int",
		"int8",
		"int16",
		"int32",
		"int64",
		"uint",
		"uint8",
		"uint16",
		"uint32",
		"uint64",
		"uintptr",
		"float",
		"float32",
		"float64",
	}
)

_CHAN_DIRECTION = {
	ChanDir.SEND: "out",
	ChanDir.RECV: "in",
	ChanDir.BOTH: "both",
}


def element_type(expr: Optional[Union[TypeExpr, FieldList]]) -> str:
	"""Render a type expression as its signature.

	Array and pointer wrappers are stripped, so the result doubles as the
	element type of a field. Composite types render as `map[K]V`,
	`func PR`, `chan <dir> T`, `struct {...}` and `interface {...}`.
	"""
	if expr is None:
		return ""
	if isinstance(expr, Ident):
		return expr.name
	if isinstance(expr, ArrayType):
		return element_type(expr.elt)
	if isinstance(expr, PointerType):
		return element_type(expr.x)
	if isinstance(expr, SelectorExpr):
		return element_type(expr.x) + "." + expr.sel
	if isinstance(expr, FuncType):
		return "func " + element_type(expr.params) + element_type(expr.results)
	if isinstance(expr, FieldList):
		return "".join(element_type(f.type) for f in expr.items)
	if isinstance(expr, MapType):
		return "map[" + element_type(expr.key) + "]" + element_type(expr.value)
	if isinstance(expr, InterfaceType):
		return "interface {" + element_type(expr.methods) + "}"
	if isinstance(expr, StructType):
		return "struct {" + element_type(expr.fields) + "}"
	if isinstance(expr, ChanType):
		return "chan " + _CHAN_DIRECTION[expr.dir] + " " + element_type(expr.value)
	if isinstance(expr, Variadic):
		return "..." + element_type(expr.elt)
	if isinstance(expr, IndexType):
		args = ",".join(element_type(a) for a in expr.args)
		return element_type(expr.x) + "[" + args + "]"
	raise InvariantViolation(f"unknown type expression: {expr!r}")


def multiplicity(expr: TypeExpr) -> str:
	# Only the outermost shape counts: *[]T and [][]T are not special-cased.
	if isinstance(expr, ArrayType):
		return MANY
	return ONE


def is_primitive(signature: str) -> bool:
	"""True when a signature cannot be the target of a diagram edge.

	Scalars are primitive, and so is every composite rendering (they all
	contain a space or a bracket). Anything else is a named type.
	"""
	if signature in SCALAR_TYPES:
		return True
	return " " in signature or "[" in signature
