"""
Tests for the per-invocation run state and the completion signal.
"""
import pytest

from content_agents.state import RunState, RunStateField, format_completion_message
from tools.content_tools import complete_content


class TestRunState:

    def test_starts_incomplete(self):
        state = RunState()
        assert state.completed is False
        assert state.to_dict() == {
            "completed": False,
            "title": None,
            "word_count": None,
            "summary": None,
        }

    def test_record_completion_sets_distinct_fields(self):
        state = RunState()
        state.record_completion("Rain Note", 50, "A short note about rain.")

        assert state.to_dict() == {
            "completed": True,
            "title": "Rain Note",
            "word_count": 50,
            "summary": "A short note about rain.",
        }

    def test_integral_float_word_count_stored_as_int(self):
        state = RunState()
        state.record_completion("Rain Note", 50.0, "summary")
        assert state.word_count == 50
        assert isinstance(state.word_count, int)

    def test_completed_cannot_be_reset(self):
        state = RunState()
        state.set(RunStateField.COMPLETED, True)

        with pytest.raises(ValueError):
            state.set(RunStateField.COMPLETED, False)
        assert state.completed is True

    def test_completed_has_no_setter(self):
        state = RunState()
        with pytest.raises(AttributeError):
            state.completed = True

    def test_completed_stays_true_after_other_writes(self):
        state = RunState()
        state.record_completion("First", 10, "one")
        state.set(RunStateField.TITLE, "Second")
        state.record_completion("Third", 20, "three")

        assert state.completed is True
        assert state.get(RunStateField.TITLE) == "Third"

    def test_states_are_independent(self):
        first, second = RunState(), RunState()
        first.record_completion("Rain Note", 50, "rain")
        assert second.completed is False


class TestCompletionSignal:

    def test_confirmation_embeds_inputs(self):
        state = RunState()

        message = complete_content(state, "Rain Note", 50, "A short note about rain.")

        assert message == format_completion_message("Rain Note", 50, "A short note about rain.")
        assert message.startswith("Content creation finished!")
        assert 'Title: "Rain Note"' in message
        assert "Words: 50" in message
        assert "Summary: A short note about rain." in message
        assert state.completed is True
