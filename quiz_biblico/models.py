"""
models.py
======================

クイズで扱うデータ構造をまとめたモジュール。

- Question: API から受け取った 1 問分のデータ（読み込み後は不変）
- SessionState: 回答状況・スコア・完了フラグ（不変オブジェクト）
- QuizPhase: 画面状態（読み込み中 / 回答中 / 完了）
- AnswerSubmitted: 選択肢が押されたことを表すイベント

状態の更新は session.py の reducer が担当し、ここでは型と検証だけを持つ。
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class QuizPhase(str, Enum):
    LOADING = "loading"
    ACTIVE = "active"
    COMPLETED = "completed"


# ----------------------------------------------------------------------
#  Question
# ----------------------------------------------------------------------
@dataclass(frozen=True)
class Question:
    """
    多肢選択問題 1 問分。

    API の JSON キーとの対応:
        question    → prompt
        options     → options
        answer      → correct_option
        explanation → explanation
    """

    prompt: str
    options: Tuple[str, ...]
    correct_option: str
    explanation: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Question":
        """
        API レスポンスの 1 要素から Question を作る。
        形が合わない場合は ValueError。
        """
        if not isinstance(data, dict):
            raise ValueError(f"question record must be an object, got {type(data).__name__}")

        for key in ("question", "answer", "explanation"):
            if not isinstance(data.get(key), str):
                raise ValueError(f"field '{key}' must be a string")

        options = data.get("options")
        if not isinstance(options, list) or not all(isinstance(o, str) for o in options):
            raise ValueError("field 'options' must be a list of strings")
        if len(set(options)) != len(options):
            raise ValueError(f"duplicate options in {options!r}")

        answer = data["answer"]
        if answer not in options:
            raise ValueError(f"answer {answer!r} is not one of the options")

        return cls(
            prompt=data["question"],
            options=tuple(options),
            correct_option=answer,
            explanation=data["explanation"],
        )

    def is_correct(self, option: str) -> bool:
        return option == self.correct_option


# ----------------------------------------------------------------------
#  SessionState
# ----------------------------------------------------------------------
@dataclass(frozen=True)
class SessionState:
    """
    1 セッション分の回答状況。

    - questions: 読み込んだ問題（空なら読み込み中）
    - selections: 問題ごとの選択肢。None は未回答
    - score: 正解数
    - completed: 最後の問題に回答済みなら True

    更新は session.submit_answer() / session.reduce() で新しいインスタンスを作る。
    """

    questions: Tuple[Question, ...] = ()
    selections: Tuple[Optional[str], ...] = ()
    score: int = 0
    completed: bool = False

    @property
    def phase(self) -> QuizPhase:
        # 0 問のときは読み込み中の画面のまま
        if not self.questions:
            return QuizPhase.LOADING
        if self.completed:
            return QuizPhase.COMPLETED
        return QuizPhase.ACTIVE

    @property
    def total(self) -> int:
        return len(self.questions)

    def is_answered(self, index: int) -> bool:
        return self.selections[index] is not None


# ----------------------------------------------------------------------
#  イベント
# ----------------------------------------------------------------------
@dataclass(frozen=True)
class AnswerSubmitted:
    """問題 index に対して option が選ばれた。"""

    index: int
    option: str


LOADING_STATE = SessionState()
