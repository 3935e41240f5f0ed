"""Class-diagram model extraction for Go packages.

Modules:
- syntax.py: Syntax forest for Go declarations and type expressions.
- signature.py: Type signatures, multiplicity and primitive classification.
- extract.py: Struct declarations to Package/Class/Field/Relation.
- fs_scan.py: Import path resolution and Go file listing.
- go_parse.py: tree-sitter based Go parser producing the syntax forest.
- loader.py: Resolve, parse and extract in one call.
- model.py: Pydantic models of the class diagram.
"""

from .errors import ExtractionError, GoSyntaxError, InvariantViolation, ResolutionError
from .extract import extract_package
from .loader import load_package
from .model import Class, Field, Package, Relation, RelationKind

__all__ = [
	"Class",
	"ExtractionError",
	"Field",
	"GoSyntaxError",
	"InvariantViolation",
	"Package",
	"Relation",
	"RelationKind",
	"ResolutionError",
	"extract_package",
	"load_package",
]
