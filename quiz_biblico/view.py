"""
view.py
======================

SessionState から「何を表示するか」を組み立てるモジュール。

- 状態は持たない（同じ入力なら同じ出力）
- Streamlit には依存しない。実際の描画は ui.py が行う

戻り値は次のどれか:
    LoadingView   → 読み込み中の文言だけ
    ActiveView    → 問題と選択肢の一覧
    CompletedView → 最終スコアだけ
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple, Union

from .messages import get_messages
from .models import Question, QuizPhase, SessionState

# 選択肢ボタンの見た目
NEUTRAL = "neutral"
CORRECT = "correct"
WRONG = "wrong"


@dataclass(frozen=True)
class OptionView:
    question_index: int
    option_index: int
    label: str
    enabled: bool
    status: str = NEUTRAL
    # 選んだ選択肢の下にだけ出す正誤・正解・解説
    feedback: Tuple[str, ...] = ()

    @property
    def key(self) -> str:
        # CSS のクラス名にも使うので選択肢の文字列ではなく位置で作る
        return f"qb_option_{self.question_index}_{self.option_index}"


@dataclass(frozen=True)
class QuestionView:
    index: int
    prompt: str
    options: Tuple[OptionView, ...]


@dataclass(frozen=True)
class LoadingView:
    text: str


@dataclass(frozen=True)
class ActiveView:
    title: str
    questions: Tuple[QuestionView, ...]


@dataclass(frozen=True)
class CompletedView:
    text: str
    score: int
    total: int


View = Union[LoadingView, ActiveView, CompletedView]


# ----------------------------------------------------------------------
#  組み立て
# ----------------------------------------------------------------------
def _option_view(
    index: int,
    question: Question,
    option_index: int,
    selected: Optional[str],
    messages: Dict[str, str],
) -> OptionView:
    label = question.options[option_index]
    if selected != label:
        return OptionView(
            question_index=index,
            option_index=option_index,
            label=label,
            enabled=selected is None,
        )

    correct = question.is_correct(label)
    verdict = messages["correct"] if correct else messages["wrong"]
    feedback = (
        f"{verdict} " + messages["correct_answer"].format(answer=question.correct_option),
        f"**{messages['explanation']}** {question.explanation}",
    )
    return OptionView(
        question_index=index,
        option_index=option_index,
        label=label,
        enabled=False,
        status=CORRECT if correct else WRONG,
        feedback=feedback,
    )


def _question_view(
    index: int,
    question: Question,
    selected: Optional[str],
    messages: Dict[str, str],
) -> QuestionView:
    return QuestionView(
        index=index,
        prompt=question.prompt,
        options=tuple(
            _option_view(index, question, j, selected, messages)
            for j in range(len(question.options))
        ),
    )


def build_view(
    state: SessionState,
    messages: Optional[Dict[str, str]] = None,
    title: Optional[str] = None,
) -> View:
    """
    状態から表示内容を作る。

    引数:
        state: 現在の SessionState
        messages: messages.get_messages() の戻り値。None ならポルトガル語
        title: 見出し。None なら messages["title"]
    """
    messages = messages or get_messages()
    phase = state.phase

    if phase is QuizPhase.LOADING:
        return LoadingView(text=messages["loading"])

    if phase is QuizPhase.COMPLETED:
        return CompletedView(
            text=messages["score"].format(score=state.score, total=state.total),
            score=state.score,
            total=state.total,
        )

    return ActiveView(
        title=title or messages["title"],
        questions=tuple(
            _question_view(i, q, state.selections[i], messages)
            for i, q in enumerate(state.questions)
        ),
    )
