"""Heading and tree node payload models."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

ROOT_TITLE = "ROOT"
PLACEHOLDER_TITLE = "[]"


class Heading(BaseModel):
    """A real heading extracted from a document."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["heading"] = "heading"
    level: int = Field(..., ge=1, le=6)
    title: str


class Placeholder(BaseModel):
    """Synthetic node bridging a skipped heading level."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["placeholder"] = "placeholder"

    @property
    def level(self) -> int:
        return 0

    @property
    def title(self) -> str:
        return PLACEHOLDER_TITLE


class RootPayload(BaseModel):
    """Payload of the synthetic root every tree starts with."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["root"] = "root"

    @property
    def level(self) -> int:
        return 0

    @property
    def title(self) -> str:
        return ROOT_TITLE


NodePayload = Annotated[
    Union[RootPayload, Heading, Placeholder], Field(discriminator="kind")
]
