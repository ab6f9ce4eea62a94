"""Core type definitions shared across the translator modules."""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class ContextKey(BaseModel):
    """Identifies one conversation surface: a channel or query on a network."""

    model_config = ConfigDict(frozen=True)

    network: str
    channel: str


class LanguagePair(BaseModel):
    """Source (the local user's) and target (the other side's) language codes."""

    model_config = ConfigDict(frozen=True)

    source: str
    target: str


class Unit(BaseModel):
    """One translatable fragment of a message."""

    model_config = ConfigDict(frozen=True)

    text: str
    trailing_space: bool = False


class FailureKind(StrEnum):
    """Classification of a failed unit translation."""

    TRANSIENT = "transient"
    MALFORMED = "malformed"
    RATE_LIMITED = "rate_limited"


class Translated(BaseModel):
    """A unit the service translated."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["translated"] = "translated"
    text: str


class Failed(BaseModel):
    """A unit the service could not translate."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["failed"] = "failed"
    reason: FailureKind
    detail: str


UnitOutcome = Annotated[Union[Translated, Failed], Field(discriminator="kind")]


class AggregateOutcome(BaseModel):
    """Combined result of translating every unit of one message.

    ``text`` holds the units in their original order, translated where the
    service succeeded and untouched where it failed. An empty ``errors``
    list means the translation is complete; otherwise it is best-effort.
    """

    text: str
    errors: list[str] = Field(default_factory=list)
    rate_limited: bool = False

    @property
    def partial(self) -> bool:
        return bool(self.errors)

    @property
    def error_summary(self) -> str:
        """All distinct error descriptions joined for display."""
        return "; ".join(self.errors)
