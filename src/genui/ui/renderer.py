"""Rendering of UI component trees into Textual widgets.

Hides how each component tag maps to a widget. A UISurface paints one
model turn; its field widgets report FieldChanged messages and its buttons
report ActionTriggered messages. Unknown tags render a placeholder followed
by their children instead of failing.
"""

import logging
import re

from rich.text import Text
from textual.containers import Horizontal, Vertical
from textual.message import Message
from textual.validation import Function, Validator
from textual.widget import Widget
from textual.widgets import Button, Checkbox, Input, Label, Rule, Select, Static, TextArea

from ..components import ComponentType, UIComponentNode
from .config import BUTTON_VARIANTS

logger = logging.getLogger(__name__)

_EMAIL_RE = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")


def _is_number(value: str) -> bool:
    try:
        float(value)
    except ValueError:
        return False
    return True


def build_validators(node: UIComponentNode) -> list[Validator]:
    """Validators for an input node from its required/type/pattern props.

    Empty optional fields are always valid.
    """
    validators: list[Validator] = []
    if node.prop("required") is True:
        validators.append(Function(lambda v: bool(v.strip()), "This field is required"))

    input_type = str(node.prop("type", "text"))
    if input_type == "email":
        validators.append(Function(lambda v: not v or bool(_EMAIL_RE.fullmatch(v)), "Invalid email"))
    elif input_type == "number":
        validators.append(Function(lambda v: not v or _is_number(v), "Must be a number"))

    pattern = node.prop("pattern")
    if isinstance(pattern, str) and pattern:
        try:
            compiled = re.compile(pattern)
        except re.error:
            logger.debug("Ignoring invalid pattern %r on field %s", pattern, node.field_id)
        else:
            validators.append(Function(lambda v: not v or bool(compiled.fullmatch(v)), "Invalid format"))
    return validators


def _split_options(raw: object) -> list[str]:
    if not isinstance(raw, str):
        return []
    return [option.strip() for option in raw.split(",") if option.strip()]


class UISurface(Vertical):
    """Widget tree for one UIComponentNode."""

    class FieldChanged(Message):
        """A field's value or validity changed."""

        def __init__(self, surface: "UISurface", field_id: str, value: str, is_valid: bool) -> None:
            super().__init__()
            self.surface = surface
            self.field_id = field_id
            self.value = value
            self.is_valid = is_valid

    class ActionTriggered(Message):
        """A button with an action was pressed."""

        def __init__(self, surface: "UISurface", action_id: str) -> None:
            super().__init__()
            self.surface = surface
            self.action_id = action_id

    def __init__(self, tree: UIComponentNode, *args, emit_initial: bool = True, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.node = tree
        self._emit_initial = emit_initial
        self._fields: dict[Widget, tuple[str, UIComponentNode]] = {}
        self._actions: dict[Widget, str] = {}
        self._frozen = False
        self._field_counter = 0

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def field_ids(self) -> list[str]:
        return [field_id for field_id, _ in self._fields.values()]

    def compose(self):
        yield self._build(self.node)

    def on_mount(self) -> None:
        """Report every field's initial state so the form data starts complete."""
        if not self._emit_initial:
            return
        for widget in self._fields:
            self._report(widget)

    def freeze(self) -> None:
        """Stop this surface's fields from reporting changes.

        Called when a newer turn replaces this one; buttons stay usable.
        """
        self._frozen = True
        for widget in self._fields:
            widget.disabled = True

    # --- Building ---

    def _build(self, node: UIComponentNode) -> Widget:
        kind = node.kind
        children = [self._build(child) for child in node.children or []]

        if kind is ComponentType.CONTAINER:
            direction = str(node.prop("direction", "col"))
            classes = f"ui-container gap-{node.prop('gap', 'md')}"
            if direction == "row":
                return Horizontal(*children, classes=classes)
            return Vertical(*children, classes=classes)

        if kind is ComponentType.CARD:
            card = Vertical(*children, classes=f"ui-card card-{node.prop('variant', 'outlined')}")
            title = node.prop("title")
            if title is not None:
                card.border_title = str(title)
            return card

        if kind is ComponentType.LIST:
            return Vertical(*children, classes="ui-list")

        if kind is ComponentType.TEXT:
            style = "bold" if node.prop("bold") is True else ""
            size = node.prop("size", "md")
            return Static(Text(str(node.prop("content", "")), style=style), classes=f"ui-text text-{size}")

        if kind is ComponentType.DIVIDER:
            label = node.prop("label")
            if label is None:
                return Rule(classes="ui-divider")
            return Vertical(Label(str(label), classes="divider-label"), Rule(), classes="ui-divider")

        if kind is ComponentType.BADGE:
            variant = node.prop("variant", "info")
            return Label(str(node.prop("label", "")), classes=f"ui-badge badge-{variant}")

        if kind is ComponentType.BUTTON:
            variant = BUTTON_VARIANTS.get(str(node.prop("variant", "primary")), "default")
            button = Button(str(node.prop("label", "OK")), variant=variant, classes="ui-button")
            action = node.prop("action")
            if action is not None:
                self._actions[button] = str(action)
            return button

        if kind is ComponentType.IMAGE:
            caption = node.prop("alt") or node.prop("src") or "image"
            return Static(Text(f"[image] {caption}", style="italic"), classes="ui-image")

        if node.is_field:
            return self._build_field(node)

        # Unknown tag: placeholder, then whatever children it has
        placeholder = Static(Text(f"[unsupported component: {node.type}]", style="dim"), classes="ui-unknown")
        return Vertical(placeholder, *children, classes="ui-container")

    def _build_field(self, node: UIComponentNode) -> Widget:
        self._field_counter += 1
        field_id = node.field_id or f"field_{self._field_counter}"
        label = node.prop("label")
        kind = node.kind

        if kind is ComponentType.CHECKBOX:
            widget: Widget = Checkbox(
                str(label or field_id),
                value=node.prop("checked") is True,
                classes="ui-checkbox",
            )
            self._fields[widget] = (field_id, node)
            return widget

        if kind is ComponentType.TEXTAREA:
            widget = TextArea(str(node.prop("value", "")), classes="ui-textarea")
        elif kind is ComponentType.SELECT:
            options = _split_options(node.prop("options"))
            select_kwargs = {}
            if node.prop("value") in options:
                select_kwargs["value"] = node.prop("value")
            widget = Select(
                [(option, option) for option in options],
                prompt=str(node.prop("placeholder", "Select...")),
                classes="ui-select",
                **select_kwargs,
            )
        else:
            widget = Input(
                value=str(node.prop("value", "")),
                placeholder=str(node.prop("placeholder", "")),
                validators=build_validators(node),
                disabled=node.prop("readonly") is True,
                classes="ui-input",
            )

        self._fields[widget] = (field_id, node)
        if label is None:
            return widget
        return Vertical(Label(str(label), classes="field-label"), widget, classes="ui-field")

    # --- Field state ---

    def _field_value(self, widget: Widget) -> str:
        if isinstance(widget, Input):
            return widget.value
        if isinstance(widget, TextArea):
            return widget.text
        if isinstance(widget, Select):
            return widget.value if isinstance(widget.value, str) else ""
        if isinstance(widget, Checkbox):
            return "true" if widget.value else "false"
        return ""

    def _field_valid(self, widget: Widget, node: UIComponentNode, value: str) -> bool:
        if isinstance(widget, Input):
            result = widget.validate(value)
            return result is None or result.is_valid
        if node.prop("required") is True:
            if isinstance(widget, Checkbox):
                return value == "true"
            return bool(value.strip())
        return True

    def _report(self, widget: Widget) -> None:
        if self._frozen or widget not in self._fields:
            return
        field_id, node = self._fields[widget]
        value = self._field_value(widget)
        self.post_message(self.FieldChanged(self, field_id, value, self._field_valid(widget, node, value)))

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        self._report(event.input)

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        event.stop()
        self._report(event.text_area)

    def on_select_changed(self, event: Select.Changed) -> None:
        event.stop()
        self._report(event.select)

    def on_checkbox_changed(self, event: Checkbox.Changed) -> None:
        event.stop()
        self._report(event.checkbox)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        action_id = self._actions.get(event.button)
        if action_id is not None:
            self.post_message(self.ActionTriggered(self, action_id))
