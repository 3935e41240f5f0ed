"""Syntax forest for Go source files.

Only the parts the class extractor looks at are modeled: top-level
declarations and the full grammar of type expressions. The node set is
closed; `TypeExpr` lists every type-expression variant.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Union


class ChanDir(Enum):
	SEND = "send"
	RECV = "recv"
	BOTH = "both"


@dataclass(frozen=True)
class Ident:
	name: str


@dataclass(frozen=True)
class ArrayType:
	"""Array or slice; `length` is the raw length text, None for slices."""

	elt: "TypeExpr"
	length: Optional[str] = None


@dataclass(frozen=True)
class PointerType:
	x: "TypeExpr"


@dataclass(frozen=True)
class SelectorExpr:
	"""Package-qualified name such as `time.Duration`."""

	x: Ident
	sel: str


@dataclass(frozen=True)
class FieldDecl:
	"""One struct member, parameter, result or interface element.

	`names` is empty for embedded members and unnamed parameters.
	"""

	type: "TypeExpr"
	names: Tuple[str, ...] = ()
	tag: Optional[str] = None

	@property
	def embedded(self) -> bool:
		return not self.names


@dataclass(frozen=True)
class FieldList:
	items: Tuple[FieldDecl, ...] = ()


@dataclass(frozen=True)
class FuncType:
	params: FieldList = field(default_factory=FieldList)
	results: Optional[FieldList] = None


@dataclass(frozen=True)
class MapType:
	key: "TypeExpr"
	value: "TypeExpr"


@dataclass(frozen=True)
class InterfaceType:
	methods: FieldList = field(default_factory=FieldList)


@dataclass(frozen=True)
class StructType:
	fields: FieldList = field(default_factory=FieldList)


@dataclass(frozen=True)
class ChanType:
	value: "TypeExpr"
	dir: ChanDir = ChanDir.BOTH


@dataclass(frozen=True)
class Variadic:
	"""Variadic parameter type, `...T`."""

	elt: "TypeExpr"


@dataclass(frozen=True)
class IndexType:
	"""Instantiated generic type such as `List[int]`, kept syntactic."""

	x: "TypeExpr"
	args: Tuple["TypeExpr", ...] = ()


TypeExpr = Union[
	Ident,
	ArrayType,
	PointerType,
	SelectorExpr,
	FuncType,
	MapType,
	InterfaceType,
	StructType,
	ChanType,
	Variadic,
	IndexType,
]


@dataclass(frozen=True)
class TypeSpec:
	name: str
	type: TypeExpr
	alias: bool = False


@dataclass(frozen=True)
class GenDecl:
	"""`type`, `var`, `const` or `import` declaration; only type specs are kept."""

	tok: str
	specs: Tuple[TypeSpec, ...] = ()


@dataclass(frozen=True)
class FuncDecl:
	name: str
	recv: Optional[FieldList] = None


Decl = Union[GenDecl, FuncDecl]


@dataclass(frozen=True)
class SourceFile:
	path: str
	package: str
	decls: Tuple[Decl, ...] = ()
