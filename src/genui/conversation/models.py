"""Data models for conversation turns and the context sent to the agent."""

from datetime import datetime
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..components import UIComponentNode


class UserTurn(BaseModel):
    """A turn authored by the user.

    `content` is what the conversation displays; `prompt_content` is the
    technical text the model actually received, when it differs.
    """

    model_config = ConfigDict(frozen=True)

    role: Literal["user"] = "user"
    content: str = Field(description="Display text shown in the conversation")
    prompt_content: str | None = Field(
        default=None,
        description="Technical text sent to the model (defaults to content)"
    )
    timestamp: datetime = Field(default_factory=datetime.now)

    @property
    def technical_text(self) -> str:
        return self.prompt_content if self.prompt_content is not None else self.content


class ModelTurn(BaseModel):
    """A turn authored by the model: always a UI tree, never plain text."""

    model_config = ConfigDict(frozen=True)

    role: Literal["model"] = "model"
    ui: UIComponentNode
    timestamp: datetime = Field(default_factory=datetime.now)

    @field_validator("ui")
    @classmethod
    def own_tree(cls, v: UIComponentNode) -> UIComponentNode:
        """Keep a private copy so the caller's tree can't change history."""
        return v.model_copy(deep=True)


ChatTurn = Annotated[UserTurn | ModelTurn, Field(discriminator="role")]


class ContextPart(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str


class ContextEntry(BaseModel):
    """One turn of history as the agent client receives it."""

    model_config = ConfigDict(frozen=True)

    role: Literal["user", "model"]
    parts: list[ContextPart]

    @property
    def text(self) -> str:
        """All parts joined into one string."""
        return "".join(part.text for part in self.parts)
