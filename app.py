"""
app.py
======================

Quiz Bíblico（Streamlit）エントリーポイント。

流れ:
- セッション開始時に 1 回だけ API から問題一覧を取得する
- 取得に失敗した場合はログに残し、読み込み中の画面のままにする（リトライなし）
- 選択肢が押されたら session.reduce で状態を更新して再描画する
- 最後の問題に回答した時点で最終スコアを表示する

起動:
    streamlit run app.py

前提:
- config.toml の [api].url（または環境変数 QUIZ_API_URL）が問題 API を指している
"""

from __future__ import annotations

import logging

import streamlit as st

from quiz_biblico.config import AppConfig, configure_logging, load_app_config
from quiz_biblico.loader import QuizLoadError, fetch_questions
from quiz_biblico.messages import get_messages
from quiz_biblico.models import LOADING_STATE, SessionState
from quiz_biblico.session import reduce, start_session
from quiz_biblico.ui import render_view
from quiz_biblico.view import build_view

log = logging.getLogger(__name__)


# ----------------------------------------------------------------------
#  設定 / SessionState のラッパー
# ----------------------------------------------------------------------
def get_app_config() -> AppConfig:
    """AppConfig をセッションに保持して返す。"""
    if "app_config" not in st.session_state:
        st.session_state["app_config"] = load_app_config()
    return st.session_state["app_config"]  # type: ignore[return-value]


def get_quiz_state() -> SessionState:
    return st.session_state.get("quiz_state", LOADING_STATE)


def set_quiz_state(state: SessionState) -> None:
    st.session_state["quiz_state"] = state


# ----------------------------------------------------------------------
#  問題の読み込み（セッションごとに 1 回だけ）
# ----------------------------------------------------------------------
def load_questions_once(cfg: AppConfig) -> None:
    """
    まだ取得を試みていなければ問題一覧を取得し、SessionState を初期化する。
    失敗しても再試行はしない。
    """
    if st.session_state.get("load_attempted"):
        return
    # 取得結果に関係なく、以降の再実行では呼ばない
    st.session_state["load_attempted"] = True

    try:
        questions = fetch_questions(cfg)
    except QuizLoadError:
        log.exception("Failed to load questions from %s", cfg.api_url)
        return

    log.info("Loaded %d questions", len(questions))
    set_quiz_state(start_session(questions))


# ----------------------------------------------------------------------
#  メイン
# ----------------------------------------------------------------------
def main() -> None:
    cfg = get_app_config()
    configure_logging(cfg.log_level)
    messages = get_messages(cfg.language)

    st.set_page_config(
        page_title=cfg.title or messages["title"],
        page_icon="📖",
        layout="centered",
    )

    load_questions_once(cfg)

    state = get_quiz_state()
    view = build_view(state, messages, title=cfg.title)
    event = render_view(view, theme_key=cfg.theme)

    if event is not None:
        new_state = reduce(state, event)
        if new_state is not state:
            set_quiz_state(new_state)
            st.rerun()


if __name__ == "__main__":
    main()
