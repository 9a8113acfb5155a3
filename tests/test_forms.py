"""Unit tests for form state aggregation."""
import pytest
from hypothesis import given
from hypothesis import strategies as st
from pydantic import ValidationError

from genui.forms import FieldChangeEvent, FieldState, FormStateAggregator


class TestFieldState:
    """Tests for FieldState."""

    def test_defaults(self):
        """Test that a field starts empty and valid."""
        state = FieldState(id="qty")

        assert state.value == ""
        assert state.is_valid is True

    def test_frozen(self):
        """Test that field states cannot be mutated."""
        state = FieldState(id="qty", value="1")

        with pytest.raises(ValidationError):
            state.value = "2"  # type: ignore


class TestFormStateAggregator:
    """Tests for FormStateAggregator."""

    def test_starts_empty(self):
        """Test an empty aggregator."""
        forms = FormStateAggregator()

        assert len(forms) == 0
        assert not forms
        assert dict(forms.snapshot) == {}

    def test_last_write_wins(self):
        """Test that a field keeps only its latest state."""
        forms = FormStateAggregator()
        forms.on_field_change("email", "a@", False)
        forms.on_field_change("email", "a@b.co", True)

        assert forms.snapshot["email"] == FieldState(id="email", value="a@b.co", is_valid=True)
        assert len(forms) == 1

    def test_other_fields_untouched(self):
        """Test that a change leaves other fields as they were."""
        forms = FormStateAggregator()
        forms.on_field_change("a", "1", True)
        forms.on_field_change("b", "2", False)
        forms.on_field_change("a", "3", True)

        assert forms.snapshot["b"] == FieldState(id="b", value="2", is_valid=False)
        assert list(forms.snapshot) == ["a", "b"]

    def test_snapshot_is_immutable_and_stable(self):
        """Test that an earlier snapshot does not see later writes."""
        forms = FormStateAggregator()
        forms.on_field_change("a", "1", True)
        before = forms.snapshot

        forms.on_field_change("b", "2", True)

        assert "b" not in before
        with pytest.raises(TypeError):
            before["c"] = FieldState(id="c")  # type: ignore

    def test_apply_event(self):
        """Test recording a FieldChangeEvent."""
        forms = FormStateAggregator()
        forms.apply(FieldChangeEvent(id="gift", value="true"))

        assert "gift" in forms
        assert forms.snapshot["gift"].value == "true"

    def test_read_and_clear(self):
        """Test that reading consumes the form state."""
        forms = FormStateAggregator()
        forms.on_field_change("qty", "2", True)

        data = forms.read_and_clear()

        assert data["qty"].value == "2"
        assert len(forms) == 0
        assert forms.read_and_clear() == {}

    @given(st.lists(st.tuples(st.text(max_size=5), st.text(max_size=5), st.booleans())))
    def test_read_and_clear_always_empties(self, events):
        """Property test: reading returns the last state and leaves nothing behind."""
        forms = FormStateAggregator()
        for field_id, value, is_valid in events:
            forms.on_field_change(field_id, value, is_valid)
        before = dict(forms.snapshot)

        assert dict(forms.read_and_clear()) == before
        assert len(forms) == 0
        assert dict(forms.snapshot) == {}

    def test_subscribe_sees_changes(self):
        """Test that subscribers observe every replacement."""
        forms = FormStateAggregator()
        sizes = []
        forms.subscribe(lambda data: sizes.append(len(data)))

        forms.on_field_change("a", "1", True)
        forms.on_field_change("b", "1", True)
        forms.clear()

        assert sizes == [1, 2, 0]

    def test_subscriber_may_write_back(self):
        """Test that a subscriber can call into the aggregator without deadlock."""
        forms = FormStateAggregator()

        def mirror(data):
            if "a" in data and "a_copy" not in data:
                forms.on_field_change("a_copy", data["a"].value, True)

        forms.subscribe(mirror)
        forms.on_field_change("a", "x", True)

        assert forms.snapshot["a_copy"].value == "x"

    @given(st.lists(st.tuples(st.sampled_from(["a", "b", "c"]), st.text(max_size=5), st.booleans())))
    def test_snapshot_matches_last_event_per_field(self, events):
        """Property test: the snapshot holds the latest event of every field."""
        forms = FormStateAggregator()
        expected = {}
        for field_id, value, is_valid in events:
            forms.on_field_change(field_id, value, is_valid)
            expected[field_id] = FieldState(id=field_id, value=value, is_valid=is_valid)

        assert dict(forms.snapshot) == expected
