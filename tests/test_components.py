"""Unit tests for the UI component tree model."""
import json

import pytest
from hypothesis import given
from hypothesis import strategies as st
from pydantic import ValidationError

from genui.components import (
    OPEN_SETTINGS_ACTION,
    ComponentType,
    UIComponentNode,
    build_connected_banner,
    build_greeting,
)


class TestComponentType:
    """Tests for ComponentType."""

    def test_known_tags(self):
        """Test that known tags map to their members."""
        assert ComponentType.from_tag("card") is ComponentType.CARD
        assert ComponentType.from_tag("Button") is ComponentType.BUTTON

    @given(st.text().filter(lambda s: s.lower() not in {t.value for t in ComponentType}))
    def test_unknown_tags_fall_back(self, tag: str):
        """Property test: any unrecognized tag maps to UNKNOWN."""
        assert ComponentType.from_tag(tag) is ComponentType.UNKNOWN


class TestUIComponentNode:
    """Tests for UIComponentNode."""

    def test_minimal_node(self):
        """Test a node with only a type."""
        node = UIComponentNode(type="divider")

        assert node.props == {}
        assert node.children is None
        assert node.kind is ComponentType.DIVIDER

    def test_unknown_type_is_accepted(self):
        """Test that new widget tags parse without changes to the model."""
        node = UIComponentNode.from_json('{"type": "chart", "props": {"kind": "bar"}}')

        assert node.type == "chart"
        assert node.kind is ComponentType.UNKNOWN
        assert not node.is_field

    def test_null_props_are_dropped(self):
        """Test that explicit nulls from the model are ignored."""
        node = UIComponentNode.model_validate({"type": "text", "props": {"content": "hi", "color": None}})
        empty = UIComponentNode.model_validate({"type": "text", "props": None})

        assert node.props == {"content": "hi"}
        assert empty.props == {}

    def test_non_primitive_prop_fails(self):
        """Test that nested objects are rejected as prop values."""
        with pytest.raises(ValidationError):
            UIComponentNode.model_validate({"type": "text", "props": {"style": {"bold": True}}})

    def test_missing_type_fails(self):
        """Test that a node needs a type."""
        with pytest.raises(ValidationError):
            UIComponentNode.model_validate({"props": {}})

    def test_node_is_frozen(self):
        """Test that nodes cannot be mutated."""
        node = UIComponentNode(type="text")

        with pytest.raises(ValidationError):
            node.type = "button"  # type: ignore

    def test_field_id_prefers_id_over_name(self):
        """Test field id resolution."""
        both = UIComponentNode(type="input", props={"id": "a", "name": "b"})
        named = UIComponentNode(type="input", props={"name": "b"})
        numbered = UIComponentNode(type="input", props={"id": 7})

        assert both.field_id == "a"
        assert named.field_id == "b"
        assert numbered.field_id == "7"
        assert UIComponentNode(type="input").field_id is None

    def test_walk_is_preorder(self, order_form):
        """Test that walk yields nodes in layout order."""
        types = [node.type for node in order_form.walk()]

        assert types == ["card", "input", "select", "checkbox", "button"]

    def test_field_ids(self, order_form):
        """Test that field ids are listed in layout order."""
        assert order_form.field_ids() == ["qty", "size", "gift"]

    def test_canonical_json_is_compact_and_sorted(self):
        """Test the canonical encoding."""
        node = UIComponentNode(type="text", props={"size": "lg", "content": "héllo"})

        assert node.to_canonical_json() == '{"props":{"content":"héllo","size":"lg"},"type":"text"}'

    def test_canonical_json_keeps_child_order(self, order_form):
        """Test that children are never reordered."""
        data = json.loads(order_form.to_canonical_json())

        assert [child["type"] for child in data["children"]] == ["input", "select", "checkbox", "button"]

    def test_canonical_json_round_trips(self, order_form):
        """Test that the canonical JSON parses back to an equal tree."""
        assert UIComponentNode.from_json(order_form.to_canonical_json()) == order_form

    @given(st.dictionaries(
        st.text(min_size=1, max_size=8),
        st.one_of(st.text(max_size=8), st.integers(), st.booleans()),
        max_size=6,
    ))
    def test_canonical_json_independent_of_prop_order(self, props: dict):
        """Property test: equal props in any order encode identically."""
        forward = UIComponentNode(type="text", props=props)
        backward = UIComponentNode(type="text", props=dict(reversed(list(props.items()))))

        assert forward.to_canonical_json() == backward.to_canonical_json()


class TestBuilders:
    """Tests for engine-authored trees."""

    def test_greeting_offers_settings_and_demo(self):
        """Test the welcome card actions."""
        greeting = build_greeting()
        actions = [node.prop("action") for node in greeting.walk() if node.kind is ComponentType.BUTTON]

        assert actions == [OPEN_SETTINGS_ACTION, "demo_servicenow"]
        assert greeting.field_ids() == []

    def test_connected_banner_names_deployment(self):
        """Test the connection banner text."""
        banner = build_connected_banner("gpt-4o-mini")
        texts = [node.prop("content") for node in banner.walk() if node.kind is ComponentType.TEXT]

        assert texts == ["Successfully connected to gpt-4o-mini"]
        assert banner.children[0].props == {"label": "Connected", "variant": "success"}
