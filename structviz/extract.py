from __future__ import annotations

from typing import Iterable, Iterator, List

from .model import Class, Field, Package, Relation, RelationKind
from .signature import element_type, is_primitive, multiplicity
from .syntax import FieldDecl, GenDecl, SourceFile, StructType


def _classify_member(member: FieldDecl, fields: List[Field], relations: List[Relation]) -> None:
	mult = multiplicity(member.type)
	target = element_type(member.type)

	if is_primitive(target):
		if member.embedded:
			fields.append(Field(type=target, multiplicity=mult))
		for name in member.names:
			fields.append(Field(name=name, type=target, multiplicity=mult))
		return

	if member.embedded:
		relations.append(
			Relation(target=target, rel_type=RelationKind.COMPOSITION, multiplicity=mult)
		)
	for name in member.names:
		relations.append(
			Relation(
				label=name,
				target=target,
				rel_type=RelationKind.ASSOCIATION,
				multiplicity=mult,
			)
		)


def build_class(name: str, struct: StructType) -> Class:
	fields: List[Field] = []
	relations: List[Relation] = []
	for member in struct.fields.items:
		_classify_member(member, fields, relations)
	return Class(name=name, fields=fields, relations=relations)


def iter_file_classes(source: SourceFile) -> Iterator[Class]:
	"""Yield a Class for every top-level struct type of a file, in source order."""
	for decl in source.decls:
		if not isinstance(decl, GenDecl):
			continue
		for spec in decl.specs:
			if isinstance(spec.type, StructType):
				yield build_class(spec.name, spec.type)


def extract_package(qualified_name: str, files: Iterable[SourceFile]) -> Package:
	classes: List[Class] = []
	for source in files:
		classes.extend(iter_file_classes(source))
	return Package(qualified_name=qualified_name, classes=classes)
