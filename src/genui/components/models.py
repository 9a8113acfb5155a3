"""UI component tree model.

A UIComponentNode is the wire format between the model and the renderer:
a type tag, primitive props and ordered children. The engine never interprets
widget semantics; it only walks the structure, so new widget types need no
change here.
"""

import json
from collections.abc import Iterator
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

PropValue = str | int | float | bool


class ComponentType(str, Enum):
    """Known component tags, with UNKNOWN as the fallback arm."""

    CONTAINER = "container"
    CARD = "card"
    TEXT = "text"
    BUTTON = "button"
    DIVIDER = "divider"
    BADGE = "badge"
    INPUT = "input"
    TEXTAREA = "textarea"
    SELECT = "select"
    CHECKBOX = "checkbox"
    IMAGE = "image"
    LIST = "list"
    UNKNOWN = "unknown"

    @classmethod
    def from_tag(cls, tag: str) -> "ComponentType":
        """Map any tag to a ComponentType. Unrecognized tags map to UNKNOWN."""
        try:
            return cls(tag.lower())
        except ValueError:
            return cls.UNKNOWN


# Tags whose widgets report field-change events
FIELD_TYPES = frozenset({
    ComponentType.INPUT,
    ComponentType.TEXTAREA,
    ComponentType.SELECT,
    ComponentType.CHECKBOX,
})


class UIComponentNode(BaseModel):
    """A node of a generative UI tree."""

    model_config = ConfigDict(frozen=True)

    type: str = Field(description="Component tag, e.g. 'card' or 'button'")
    props: dict[str, PropValue] = Field(
        default_factory=dict,
        description="Primitive properties (strings, numbers, booleans)"
    )
    children: tuple["UIComponentNode", ...] | None = Field(
        default=None,
        description="Ordered child nodes (layout order), fixed once built"
    )

    @field_validator("props", mode="before")
    @classmethod
    def drop_null_props(cls, v: Any) -> Any:
        """Models often emit explicit nulls for unset props."""
        if v is None:
            return {}
        if isinstance(v, dict):
            return {k: val for k, val in v.items() if val is not None}
        return v

    @property
    def kind(self) -> ComponentType:
        return ComponentType.from_tag(self.type)

    @property
    def is_field(self) -> bool:
        """Whether this node renders as a form field."""
        return self.kind in FIELD_TYPES

    @property
    def field_id(self) -> str | None:
        """Identifier a field reports its value under ('id', falling back to 'name')."""
        value = self.props.get("id", self.props.get("name"))
        return None if value is None else str(value)

    def prop(self, name: str, default: PropValue | None = None) -> PropValue | None:
        return self.props.get(name, default)

    def walk(self) -> Iterator["UIComponentNode"]:
        """Yield this node and all descendants in pre-order (layout order)."""
        yield self
        for child in self.children or ():
            yield from child.walk()

    def field_ids(self) -> list[str]:
        """Ids of all field nodes in the tree, in layout order."""
        ids = []
        for node in self.walk():
            if node.is_field and node.field_id is not None:
                ids.append(node.field_id)
        return ids

    def to_canonical_json(self) -> str:
        """Deterministic JSON encoding of the tree.

        Keys are sorted and unset children omitted, so equal trees always
        encode to the same text. Children keep their order.
        """
        return json.dumps(
            self.model_dump(mode="json", exclude_none=True),
            sort_keys=True,
            separators=(",", ":"),
            ensure_ascii=False,
        )

    @classmethod
    def from_json(cls, text: str) -> "UIComponentNode":
        """Parse a JSON document into a tree.

        Raises:
            pydantic.ValidationError: If the document is not a valid tree
        """
        return cls.model_validate_json(text)
