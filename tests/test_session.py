"""
Tests for the answer reducer.

Covers:
- Session start (all unanswered, score 0)
- Write-once answers and score counting
- Completion on answering the last question
- Invalid submissions being ignored
"""

import pytest

from quiz_biblico.models import AnswerSubmitted, Question, QuizPhase
from quiz_biblico.session import reduce, start_session, submit_answer


def _correct_count(state):
    return sum(
        1
        for q, sel in zip(state.questions, state.selections)
        if sel == q.correct_option
    )


class TestStartSession:

    def test_initial_state(self, questions):
        state = start_session(questions)
        assert len(state.selections) == len(questions) == 2
        assert state.selections == (None, None)
        assert state.score == 0
        assert state.completed is False

    def test_empty_list_stays_loading(self):
        state = start_session([])
        assert state.phase is QuizPhase.LOADING
        assert state.selections == ()
        # no last index exists, so nothing can complete the quiz
        assert submit_answer(state, 0, "A") is state
        assert submit_answer(state, -1, "A") is state


class TestSubmitAnswer:

    def test_correct_answer_scores(self, state):
        new = submit_answer(state, 0, "A")
        assert new.selections == ("A", None)
        assert new.score == 1
        assert new.completed is False

    def test_wrong_answer_records_without_scoring(self, state):
        new = submit_answer(state, 0, "B")
        assert new.selections == ("B", None)
        assert new.score == 0

    def test_input_state_untouched(self, state):
        submit_answer(state, 0, "A")
        assert state.selections == (None, None)
        assert state.score == 0

    def test_answer_is_write_once(self, state):
        first = submit_answer(state, 0, "B")
        second = submit_answer(first, 0, "A")
        assert second is first
        assert second.selections[0] == "B"
        assert second.score == 0

    def test_same_answer_twice_scores_once(self, state):
        s = submit_answer(state, 0, "A")
        s = submit_answer(s, 0, "A")
        assert s.score == 1

    @pytest.mark.parametrize("index", [-1, 2, 99])
    def test_out_of_range_index_is_noop(self, state, index):
        assert submit_answer(state, index, "A") is state

    def test_label_outside_options_is_recorded_as_wrong(self, state):
        new = submit_answer(state, 1, "Z")
        assert new.selections == (None, "Z")
        assert new.score == 0
        assert new.completed is True

    def test_answering_one_question_leaves_others(self, state):
        new = submit_answer(state, 0, "A")
        assert new.selections[1] is None


class TestCompletion:

    def test_scenario_in_order(self, state):
        s = submit_answer(state, 0, "A")
        assert (s.score, s.completed) == (1, False)
        s = submit_answer(s, 1, "C")
        assert (s.score, s.completed) == (1, True)
        assert s.phase is QuizPhase.COMPLETED

    def test_last_question_first_completes_immediately(self, state):
        s = submit_answer(state, 1, "D")
        assert (s.score, s.completed) == (1, True)
        assert s.selections[0] is None

        s = submit_answer(s, 0, "A")
        assert s.score == 2
        assert s.completed is True

    def test_earlier_answers_do_not_complete(self):
        qs = [
            Question(prompt=f"Q{i}", options=("x", "y"), correct_option="x", explanation="")
            for i in range(3)
        ]
        s = start_session(qs)
        s = submit_answer(s, 0, "x")
        s = submit_answer(s, 1, "x")
        assert s.completed is False
        s = submit_answer(s, 2, "y")
        assert s.completed is True


class TestInvariants:

    def test_score_matches_correct_selections(self, questions):
        events = [(1, "C"), (0, "A"), (1, "D"), (5, "A"), (0, "B")]
        s = start_session(questions)
        previous_score = 0
        for index, option in events:
            s = submit_answer(s, index, option)
            assert s.score == _correct_count(s)
            assert s.score >= previous_score
            assert len(s.selections) == len(questions)
            assert s.completed == (s.selections[-1] is not None)
            previous_score = s.score


class TestReduce:

    def test_answer_event(self, state):
        new = reduce(state, AnswerSubmitted(index=0, option="A"))
        assert new.score == 1

    def test_unknown_event_rejected(self, state):
        with pytest.raises(TypeError):
            reduce(state, object())
