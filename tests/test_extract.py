import pytest
from pydantic import ValidationError

from structviz.extract import build_class, extract_package
from structviz.model import Class, Field, Relation, RelationKind
from structviz.syntax import (
	ArrayType,
	ChanType,
	FieldDecl,
	FieldList,
	FuncDecl,
	FuncType,
	GenDecl,
	Ident,
	InterfaceType,
	MapType,
	PointerType,
	SelectorExpr,
	SourceFile,
	StructType,
	TypeSpec,
)


def struct(*members):
	return StructType(FieldList(tuple(members)))


def source(path, *specs, extra=()):
	return SourceFile(path=path, package="shop", decls=tuple(extra) + (GenDecl("type", tuple(specs)),))


def test_empty_struct():
	cl = build_class("Empty", struct())
	assert cl == Class(name="Empty")
	assert cl.fields == () and cl.relations == ()


def test_scalar_fields():
	cl = build_class(
		"Item",
		struct(
			FieldDecl(Ident("int"), ("ID",)),
			FieldDecl(Ident("string"), ("Name", "Sku")),
		),
	)
	assert list(cl.fields) == [
		Field(name="ID", type="int"),
		Field(name="Name", type="string"),
		Field(name="Sku", type="string"),
	]
	assert list(cl.relations) == []


def test_slice_of_scalar_is_many_field():
	cl = build_class("Item", struct(FieldDecl(ArrayType(Ident("string")), ("Tags",))))
	assert list(cl.fields) == [Field(name="Tags", type="string", multiplicity="0..*")]


def test_slice_of_named_type_is_association():
	cl = build_class("Order", struct(FieldDecl(ArrayType(PointerType(Ident("Item"))), ("Items",))))
	assert list(cl.fields) == []
	assert list(cl.relations) == [
		Relation(label="Items", target="Item", rel_type=RelationKind.ASSOCIATION, multiplicity="0..*")
	]


def test_embedded_named_type_is_composition():
	cl = build_class(
		"Order",
		struct(
			FieldDecl(Ident("Base")),
			FieldDecl(PointerType(SelectorExpr(Ident("sync"), "Mutex"))),
		),
	)
	assert list(cl.relations) == [
		Relation(target="Base", rel_type=RelationKind.COMPOSITION),
		Relation(target="sync.Mutex", rel_type=RelationKind.COMPOSITION),
	]
	assert all(r.label == "" for r in cl.relations)


def test_embedded_scalar_is_anonymous_field():
	cl = build_class("Counter", struct(FieldDecl(Ident("int"))))
	assert list(cl.fields) == [Field(name="", type="int")]


def test_composite_types_are_fields():
	cl = build_class(
		"Registry",
		struct(
			FieldDecl(MapType(Ident("string"), Ident("int")), ("Counts",)),
			FieldDecl(ChanType(Ident("byte")), ("Feed",)),
			FieldDecl(FuncType(FieldList((FieldDecl(Ident("Event")),))), ("OnEvent",)),
			FieldDecl(InterfaceType(), ("Any",)),
			FieldDecl(struct(FieldDecl(Ident("int"), ("X",))), ("Point",)),
			FieldDecl(ArrayType(MapType(Ident("string"), Ident("Item"))), ("Index",)),
		),
	)
	assert list(cl.relations) == []
	assert [(f.name, f.type, f.multiplicity) for f in cl.fields] == [
		("Counts", "map[string]int", ""),
		("Feed", "chan both byte", ""),
		("OnEvent", "func Event", ""),
		("Any", "interface {}", ""),
		("Point", "struct {int}", ""),
		("Index", "map[string]Item", "0..*"),
	]


def test_multi_name_member_gives_one_association_per_name():
	cl = build_class("Edge", struct(FieldDecl(PointerType(Ident("Node")), ("From", "To"))))
	assert [r.label for r in cl.relations] == ["From", "To"]
	assert {(r.target, r.rel_type, r.multiplicity) for r in cl.relations} == {
		("Node", RelationKind.ASSOCIATION, "")
	}


def test_pointer_to_slice_keeps_single_multiplicity():
	cl = build_class("Order", struct(FieldDecl(PointerType(ArrayType(Ident("Item"))), ("Items",))))
	assert cl.relations[0].multiplicity == ""


def test_extract_package_keeps_declaration_order_and_skips_other_decls():
	first = source(
		"a.go",
		TypeSpec("Order", struct(FieldDecl(ArrayType(Ident("Item")), ("Items",)))),
		TypeSpec("Status", Ident("int")),
		TypeSpec("Reader", InterfaceType()),
		extra=(GenDecl("import"), FuncDecl("NewOrder"), GenDecl("var")),
	)
	second = source("b.go", TypeSpec("Item", struct(FieldDecl(Ident("float64"), ("Price",)))))

	package = extract_package("example.com/shop", [first, second])

	assert package.qualified_name == "example.com/shop"
	assert [c.name for c in package.classes] == ["Order", "Item"]


def test_extraction_is_idempotent():
	files = [
		source(
			"a.go",
			TypeSpec("A", struct(FieldDecl(Ident("B")), FieldDecl(ArrayType(Ident("C")), ("Cs",)))),
			TypeSpec("B", struct(FieldDecl(Ident("string"), ("Name",)))),
		)
	]
	assert extract_package("p", files) == extract_package("p", files)


def test_extracted_package_cannot_be_modified():
	package = extract_package("p", [source("a.go", TypeSpec("A", struct(FieldDecl(Ident("int"), ("N",)))))])
	with pytest.raises(AttributeError):
		package.classes.append(package.classes[0])
	with pytest.raises(AttributeError):
		package.classes[0].fields.append(Field(name="M", type="int"))
	with pytest.raises(ValidationError):
		package.classes[0].name = "B"
