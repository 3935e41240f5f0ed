from __future__ import annotations

from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict


MANY = "0..*"
ONE = ""


class RelationKind(str, Enum):
	COMPOSITION = "Composition"
	ASSOCIATION = "Association"


class Field(BaseModel):
	model_config = ConfigDict(frozen=True)

	name: str = ""
	type: str
	multiplicity: str = ONE


class Relation(BaseModel):
	model_config = ConfigDict(frozen=True)

	label: str = ""
	target: str
	rel_type: RelationKind
	multiplicity: str = ONE


class Class(BaseModel):
	model_config = ConfigDict(frozen=True)

	name: str
	fields: Tuple[Field, ...] = ()
	relations: Tuple[Relation, ...] = ()


class Package(BaseModel):
	model_config = ConfigDict(frozen=True)

	qualified_name: str
	classes: Tuple[Class, ...] = ()
