"""
quiz_biblico パッケージ
======================

このパッケージは、Quiz Bíblico アプリの内部ロジックを提供する。

主な役割:
- 設定管理（config）
- 問題一覧の取得（loader）
- 回答状態の更新（session）
- 表示内容の組み立て（view）
- UI コンポーネント（ui）

app.py は Streamlit の起動と状態の保持のみを担当し、内部ロジックはすべて本パッケージから呼ぶ。
"""

from .config import AppConfig, load_app_config
from .loader import QuizLoadError, fetch_questions
from .models import AnswerSubmitted, Question, QuizPhase, SessionState
from .session import reduce, start_session, submit_answer
from .view import build_view

__all__ = [
    "AppConfig",
    "load_app_config",
    "QuizLoadError",
    "fetch_questions",
    "AnswerSubmitted",
    "Question",
    "QuizPhase",
    "SessionState",
    "reduce",
    "start_session",
    "submit_answer",
    "build_view",
]
