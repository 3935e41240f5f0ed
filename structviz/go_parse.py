from __future__ import annotations

import logging
from typing import List, Optional, Union

import tree_sitter_go as tsgo
from tree_sitter import Language, Node, Parser

from .errors import GoSyntaxError, InvariantViolation, SyntaxProblem
from .syntax import (
	ArrayType,
	ChanDir,
	ChanType,
	Decl,
	FieldDecl,
	FieldList,
	FuncDecl,
	FuncType,
	GenDecl,
	Ident,
	IndexType,
	InterfaceType,
	MapType,
	PointerType,
	SelectorExpr,
	SourceFile,
	StructType,
	TypeExpr,
	TypeSpec,
	Variadic,
)


logger = logging.getLogger(__name__)

GO_LANGUAGE = Language(tsgo.language())


def _text(node: Node) -> str:
	return node.text.decode("utf-8") if node.text is not None else ""


def _named(node: Node) -> List[Node]:
	return [c for c in node.named_children if c.type != "comment"]


def _first_error(node: Node) -> Optional[Node]:
	if node.type == "ERROR" or node.is_missing:
		return node
	if not node.has_error:
		return None
	for child in node.children:
		found = _first_error(child)
		if found is not None:
			return found
	return node


def _chan_dir(node: Node) -> ChanDir:
	tokens = [c.type for c in node.children if not c.is_named]
	if tokens[:1] == ["<-"]:
		return ChanDir.RECV
	if "<-" in tokens:
		return ChanDir.SEND
	return ChanDir.BOTH


def _convert_channel(direction: ChanDir, value: Node) -> ChanType:
	# tree-sitter reads `chan<- chan T` as `chan (<-chan T)`; Go binds `<-` to the leftmost chan
	if direction is ChanDir.BOTH and value.type == "channel_type" and _chan_dir(value) is ChanDir.RECV:
		inner = _convert_channel(ChanDir.BOTH, value.child_by_field_name("value"))
		return ChanType(inner, ChanDir.SEND)
	return ChanType(convert_type(value), direction)


def _type_elem_inner(node: Node) -> Node:
	# type arguments are wrapped in type_elem by newer grammars
	if node.type == "type_elem":
		return _named(node)[0]
	return node


def convert_type(node: Node) -> TypeExpr:
	kind = node.type
	if kind in ("type_identifier", "identifier"):
		return Ident(_text(node))
	if kind == "qualified_type":
		pkg = node.child_by_field_name("package")
		name = node.child_by_field_name("name")
		return SelectorExpr(Ident(_text(pkg)), _text(name))
	if kind == "pointer_type":
		return PointerType(convert_type(_named(node)[0]))
	if kind == "slice_type":
		return ArrayType(convert_type(node.child_by_field_name("element")))
	if kind == "array_type":
		length = node.child_by_field_name("length")
		return ArrayType(
			convert_type(node.child_by_field_name("element")),
			length=_text(length) if length is not None else None,
		)
	if kind == "implicit_length_array_type":
		return ArrayType(convert_type(node.child_by_field_name("element")), length="...")
	if kind == "map_type":
		return MapType(
			convert_type(node.child_by_field_name("key")),
			convert_type(node.child_by_field_name("value")),
		)
	if kind == "channel_type":
		return _convert_channel(_chan_dir(node), node.child_by_field_name("value"))
	if kind == "function_type":
		return _convert_signature(node)
	if kind == "struct_type":
		return StructType(convert_field_declarations(_named(node)[0]))
	if kind == "interface_type":
		return InterfaceType(_convert_interface_elems(node))
	if kind == "generic_type":
		args_node = node.child_by_field_name("type_arguments")
		args = tuple(convert_type(_type_elem_inner(a)) for a in _named(args_node)) if args_node is not None else ()
		return IndexType(convert_type(node.child_by_field_name("type")), args)
	if kind == "parenthesized_type":
		return convert_type(_named(node)[0])
	raise InvariantViolation(f"unsupported Go type expression {kind!r}: {_text(node)}")


def convert_field_declarations(node: Node) -> FieldList:
	members: List[FieldDecl] = []
	for decl in _named(node):
		if decl.type != "field_declaration":
			continue
		names = tuple(_text(n) for n in decl.children_by_field_name("name"))
		type_expr = convert_type(decl.child_by_field_name("type"))
		if not names and any(c.type == "*" for c in decl.children):
			type_expr = PointerType(type_expr)
		tag = decl.child_by_field_name("tag")
		members.append(FieldDecl(type_expr, names, _text(tag) if tag is not None else None))
	return FieldList(tuple(members))


def convert_parameters(node: Node) -> FieldList:
	params: List[FieldDecl] = []
	for decl in _named(node):
		names = tuple(_text(n) for n in decl.children_by_field_name("name"))
		type_expr = convert_type(decl.child_by_field_name("type"))
		if decl.type == "variadic_parameter_declaration":
			type_expr = Variadic(type_expr)
		params.append(FieldDecl(type_expr, names))
	return FieldList(tuple(params))


def _convert_signature(node: Node) -> FuncType:
	params = convert_parameters(node.child_by_field_name("parameters"))
	result = node.child_by_field_name("result")
	if result is None:
		return FuncType(params)
	if result.type == "parameter_list":
		return FuncType(params, convert_parameters(result))
	return FuncType(params, FieldList((FieldDecl(convert_type(result)),)))


def _convert_interface_elems(node: Node) -> FieldList:
	elems: List[FieldDecl] = []
	for elem in _named(node):
		if elem.type in ("method_elem", "method_spec"):
			name = _text(elem.child_by_field_name("name"))
			elems.append(FieldDecl(_convert_signature(elem), (name,)))
		elif elem.type == "interface_type_name":
			elems.append(FieldDecl(convert_type(_named(elem)[0])))
		else:
			for term in _named(elem):
				elems.append(FieldDecl(convert_type(term)))
	return FieldList(tuple(elems))


def _convert_type_decl(node: Node) -> GenDecl:
	specs: List[TypeSpec] = []
	for spec in _named(node):
		type_node = spec.child_by_field_name("type")
		# only struct types become classes; other specs may use constraint syntax
		if type_node is None or type_node.type != "struct_type":
			continue
		specs.append(
			TypeSpec(
				_text(spec.child_by_field_name("name")),
				convert_type(type_node),
				alias=spec.type == "type_alias",
			)
		)
	return GenDecl("type", tuple(specs))


def _convert_decl(node: Node) -> Optional[Decl]:
	kind = node.type
	if kind == "type_declaration":
		return _convert_type_decl(node)
	if kind in ("var_declaration", "const_declaration", "import_declaration"):
		return GenDecl(kind.split("_", 1)[0])
	if kind == "function_declaration":
		return FuncDecl(_text(node.child_by_field_name("name")))
	if kind == "method_declaration":
		return FuncDecl(
			_text(node.child_by_field_name("name")),
			convert_parameters(node.child_by_field_name("receiver")),
		)
	return None


def _check_utf8(path: str, data: bytes) -> None:
	try:
		data.decode("utf-8")
	except UnicodeDecodeError as e:
		head = data[: e.start]
		line = head.count(b"\n") + 1
		col = e.start - (head.rfind(b"\n") + 1) + 1
		raise GoSyntaxError([(path, line, col)])


def parse_go_source(path: str, text: Union[str, bytes]) -> SourceFile:
	"""Parse one Go file into the syntax forest.

	Raises GoSyntaxError at the first error or missing node of the tree, or
	at the first byte that is not valid UTF-8.
	"""
	if isinstance(text, str):
		data = text.encode("utf-8")
	else:
		data = text
		_check_utf8(path, data)
	tree = Parser(GO_LANGUAGE).parse(data)
	root = tree.root_node
	if root.has_error:
		bad = _first_error(root) or root
		row, col = bad.start_point
		raise GoSyntaxError([(path, row + 1, col + 1)])

	package = ""
	decls: List[Decl] = []
	for node in _named(root):
		if node.type == "package_clause":
			package = _text(_named(node)[0])
			continue
		decl = _convert_decl(node)
		if decl is not None:
			decls.append(decl)
	return SourceFile(path=path, package=package, decls=tuple(decls))


def parse_go_files(paths: List[str]) -> List[SourceFile]:
	"""Parse every file; if any fails, raise one GoSyntaxError listing them all."""
	sources: List[SourceFile] = []
	problems: List[SyntaxProblem] = []
	for path in paths:
		with open(path, "rb") as fh:
			data = fh.read()
		try:
			sources.append(parse_go_source(path, data))
		except GoSyntaxError as e:
			problems.extend(e.problems)
	if problems:
		raise GoSyntaxError(problems)
	logger.debug("parsed %d go files", len(sources))
	return sources
