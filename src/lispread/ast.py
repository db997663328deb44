"""Value nodes produced by the expression parser."""

from typing import Annotated
from typing import Literal as TypingLiteral

from pydantic import BaseModel, ConfigDict, Field


class Atom(BaseModel):
    """Identifier (e.g., 'foo', '+', '#foo')."""

    model_config = ConfigDict(frozen=True)

    type: TypingLiteral["atom"] = "atom"
    name: str


class Bool(BaseModel):
    """Boolean literal, only ever read from '#t' or '#f'."""

    model_config = ConfigDict(frozen=True)

    type: TypingLiteral["bool"] = "bool"
    value: bool


class String(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: TypingLiteral["string"] = "string"
    contents: str  # escapes already decoded


class Number(BaseModel):
    """Exact integer, decimal or radix-prefixed in source."""

    model_config = ConfigDict(frozen=True)

    type: TypingLiteral["number"] = "number"
    value: int


# Expression union type
Expr = Annotated[
    Atom | Bool | String | Number,
    Field(discriminator="type"),
]
