"""
session.py
======================

SessionState を更新する純粋関数（reducer）。

- start_session(): 読み込んだ問題から初期状態を作る
- submit_answer(): 1 問に回答する
- reduce(): イベントを受け取って次の状態を返す

Streamlit には依存しない。UI 側は戻り値の状態を保存して再描画するだけ。

注意:
    完了判定は「最後の問題に回答したか」で行う。
    途中の問題が未回答でも、最後の問題に答えた時点で完了となる。
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable

from .models import AnswerSubmitted, Question, SessionState

log = logging.getLogger(__name__)


def start_session(questions: Iterable[Question]) -> SessionState:
    """全問未回答・スコア 0・未完了の状態を作る。"""
    qs = tuple(questions)
    return SessionState(
        questions=qs,
        selections=(None,) * len(qs),
        score=0,
        completed=False,
    )


def submit_answer(state: SessionState, index: int, option: str) -> SessionState:
    """
    問題 index に option を回答した後の状態を返す。

    範囲外の index と回答済みの問題は無視し、
    同じ state をそのまま返す（例外にはしない）。
    選択肢にないラベルもそのまま記録する（不正解扱い）。
    """
    if not 0 <= index < len(state.questions):
        log.debug("Ignoring answer for out-of-range index %s (total %d)", index, state.total)
        return state

    if state.is_answered(index):
        log.debug("Ignoring repeated answer for question %d", index)
        return state

    question = state.questions[index]
    selections = list(state.selections)
    selections[index] = option

    score = state.score + 1 if question.is_correct(option) else state.score
    # 一度 True になったら戻らない
    completed = state.completed or index == len(state.questions) - 1

    return replace(
        state,
        selections=tuple(selections),
        score=score,
        completed=completed,
    )


def reduce(state: SessionState, event: AnswerSubmitted) -> SessionState:
    if isinstance(event, AnswerSubmitted):
        return submit_answer(state, event.index, event.option)
    raise TypeError(f"unsupported event: {event!r}")
