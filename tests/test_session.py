"""Unit tests for the conversation session."""
import asyncio
import logging

import pytest

from genui.actions import DEMO_PROMPTS, OPEN_SETTINGS_ACTION
from genui.agent import AgentNotConnectedError
from genui.components import build_greeting
from genui.conversation import ConversationSession, ModelTurn, SessionState, UserTurn
from genui.forms import FieldChangeEvent

from fakes import FakeAgentClient, text_ui


class TestConversationSession:
    """Tests for ConversationSession."""

    def test_greeting_on_start(self, fake_client):
        """Test that a new session opens with the welcome card."""
        session = ConversationSession(fake_client)

        assert len(session.history) == 1
        assert isinstance(session.history[0], ModelTurn)
        assert session.history[0].ui == build_greeting()

    @pytest.mark.asyncio
    async def test_send_appends_user_and_model_turns(self, session, fake_client):
        """Test a plain typed message."""
        fake_client.replies = [text_ui("hi there")]
        session.user_input.set("hello")

        reply = await session.send_message()

        user, model = session.history.turns
        assert user == UserTurn(content="hello", prompt_content="hello", timestamp=user.timestamp)
        assert model is reply
        assert reply.ui == text_ui("hi there")
        assert session.user_input.value == ""
        assert session.state.value is SessionState.IDLE

    @pytest.mark.asyncio
    async def test_context_excludes_current_prompt(self, fake_client):
        """Test that the agent receives only earlier turns as history."""
        session = ConversationSession(fake_client)

        await session.send_message("first")
        await session.send_message("second")

        first_prompt, first_history = fake_client.calls[0]
        second_prompt, second_history = fake_client.calls[1]
        assert first_prompt == "first"
        assert [entry.role for entry in first_history] == ["model"]
        assert second_prompt == "second"
        assert [entry.role for entry in second_history] == ["model", "user", "model"]
        assert second_history[1].text == "first"

    @pytest.mark.asyncio
    async def test_blank_prompt_is_ignored(self, session, fake_client):
        """Test that whitespace-only text is not sent."""
        session.user_input.set("   ")

        assert await session.send_message() is None
        assert len(session.history) == 0
        assert fake_client.calls == []

    @pytest.mark.asyncio
    async def test_single_flight(self, session, fake_client):
        """Test that a send issued while another is pending is rejected."""
        fake_client.gate = asyncio.Event()
        fake_client.replies = [text_ui("A")]

        first = asyncio.create_task(session.send_message("first"))
        await asyncio.sleep(0)
        assert session.is_loading

        assert await session.send_message("second") is None

        fake_client.gate.set()
        reply = await first

        assert reply.ui == text_ui("A")
        assert [turn.role for turn in session.history] == ["user", "model"]
        assert len(fake_client.calls) == 1
        assert session.state.value is SessionState.IDLE

    @pytest.mark.asyncio
    async def test_state_transitions(self, session):
        """Test that the state goes SENDING then back to IDLE."""
        states = []
        session.state.subscribe(states.append)

        await session.send_message("go")

        assert states == [SessionState.SENDING, SessionState.IDLE]

    @pytest.mark.asyncio
    async def test_failure_keeps_user_turn(self, session, fake_client, caplog):
        """Test that a failed send leaves the user turn without a reply."""
        fake_client.replies = [RuntimeError("boom")]

        with caplog.at_level(logging.ERROR, logger="genui"):
            reply = await session.send_message("hello")

        assert reply is None
        assert [turn.role for turn in session.history] == ["user"]
        assert session.state.value is SessionState.IDLE
        assert "Agent failed to generate a response" in caplog.text

    @pytest.mark.asyncio
    async def test_observer_error_does_not_fail_send(self, session, fake_client, caplog):
        """Test that a broken history observer leaves a successful send successful."""
        fake_client.replies = [text_ui("ok")]

        def broken(turns):
            if turns and turns[-1].role == "model":
                raise RuntimeError("observer broke")

        session.history.subscribe(broken)

        with caplog.at_level(logging.ERROR, logger="genui"):
            reply = await session.send_message("hello")

        assert reply is not None
        assert [turn.role for turn in session.history] == ["user", "model"]
        assert "Agent failed to generate a response" not in caplog.text

    @pytest.mark.asyncio
    async def test_unconnected_client_fails_send(self, session, fake_client):
        """Test that a client error is treated as a failed send."""
        fake_client.replies = [AgentNotConnectedError("not connected")]

        assert await session.send_message("hello") is None
        assert not session.is_loading

    @pytest.mark.asyncio
    async def test_session_usable_after_failure(self, session, fake_client):
        """Test that a failed send does not block the next one."""
        fake_client.replies = [RuntimeError("boom"), text_ui("ok")]

        await session.send_message("one")
        reply = await session.send_message("two")

        assert reply is not None
        assert [turn.role for turn in session.history] == ["user", "user", "model"]

    @pytest.mark.asyncio
    async def test_new_model_turn_clears_form(self, session, order_form):
        """Test that fields of a replaced form cannot leak into later actions."""
        session.append_model_turn(order_form)
        session.handle_form_change(FieldChangeEvent(id="qty", value="9"))

        await session.send_message("something else")

        assert len(session.forms) == 0


class TestHandleUIAction:
    """Tests for action handling through the session."""

    @pytest.mark.asyncio
    async def test_action_with_form_data(self, session, fake_client, order_form):
        """Test that an action sends form data with separate display text."""
        session.append_model_turn(order_form)
        session.handle_form_change(FieldChangeEvent(id="qty", value="2"))
        session.handle_form_change(FieldChangeEvent(id="size", value="M"))

        await session.handle_ui_action("submit_order")

        user = session.history[1]
        assert user.content == "Triggered Action: submit_order (Submitted Data)"
        assert '"qty": "2"' in user.prompt_content
        assert fake_client.calls[0][0] == user.prompt_content
        assert len(session.forms) == 0

    @pytest.mark.asyncio
    async def test_demo_action(self, fake_client):
        """Test the welcome card's demo button."""
        session = ConversationSession(fake_client)

        await session.handle_ui_action("demo_servicenow")

        prompt, display = DEMO_PROMPTS["demo_servicenow"]
        assert session.history[1].content == display
        assert session.history[1].prompt_content == prompt

    @pytest.mark.asyncio
    async def test_settings_action_opens_settings(self, fake_client):
        """Test that the settings action calls back instead of sending."""
        opened = []
        session = ConversationSession(fake_client, greeting=False, on_open_settings=lambda: opened.append(True))

        assert await session.handle_ui_action(OPEN_SETTINGS_ACTION) is None
        assert opened == [True]
        assert len(session.history) == 0
        assert fake_client.calls == []

    @pytest.mark.asyncio
    async def test_settings_action_without_callback(self, session):
        """Test that the settings action is harmless without a callback."""
        assert await session.handle_ui_action(OPEN_SETTINGS_ACTION) is None


def test_fake_client_is_an_agent_client():
    """Test that the fake satisfies the abstract interface."""
    assert FakeAgentClient().is_connected is False
