"""
ui.py
======================

Streamlit ベースの UI コンポーネントをまとめたモジュール。

責務:
- テーマ（ボタン色）と CSS の生成
- view.py が作った表示内容の描画（読み込み中 / 問題一覧 / 最終スコア）
- 選択肢ボタンの入力

状態の更新は行わない。戻り値として「どの選択肢が新たに押されたか」を返し、
反映は app.py 側（session.reduce）に任せる。
"""

from __future__ import annotations

from typing import Dict, List, Optional

import streamlit as st

from .models import AnswerSubmitted
from .view import (
    CORRECT,
    WRONG,
    ActiveView,
    CompletedView,
    LoadingView,
    OptionView,
    View,
)

# ----------------------------------------------------------------------
#  テーマ定義
# ----------------------------------------------------------------------


THEMES: Dict[str, Dict[str, str]] = {
    "light": {
        "text": "#000000",
        "neutral": "lightgray",
        "correct": "green",
        "incorrect": "red",
    },
    "dark": {
        "text": "#f5f5f7",
        "neutral": "#3a3a3c",
        "correct": "#30d158",
        "incorrect": "#ff453a",
    },
}


def get_theme(theme_key: str) -> Dict[str, str]:
    return THEMES.get(theme_key, THEMES["light"])


# ----------------------------------------------------------------------
#  CSS 生成
# ----------------------------------------------------------------------
def _button_rule(key: str, background: str, text: str) -> str:
    # Streamlit はキー付きウィジェットのコンテナに st-key-<key> クラスを付ける
    return f"""
    .st-key-{key} button,
    .st-key-{key} button:disabled {{
        background-color: {background};
        color: {text};
        opacity: 1;
    }}
    """


def generate_css(view: ActiveView, theme: Dict[str, str]) -> str:
    """問題一覧の選択肢ボタンに色を付ける CSS を生成する。"""
    rules: List[str] = [
        f"""
    div[class*="st-key-qb_option_"] button {{
        background-color: {theme['neutral']};
        color: {theme['text']};
        padding: 10px;
        margin: 5px;
    }}
    """
    ]

    for q in view.questions:
        for opt in q.options:
            if opt.status == CORRECT:
                rules.append(_button_rule(opt.key, theme["correct"], theme["text"]))
            elif opt.status == WRONG:
                rules.append(_button_rule(opt.key, theme["incorrect"], theme["text"]))

    return "<style>" + "".join(rules) + "</style>"


# ----------------------------------------------------------------------
#  各画面
# ----------------------------------------------------------------------
def render_loading(view: LoadingView) -> None:
    st.title(view.text)


def render_completed(view: CompletedView) -> None:
    st.title(view.text)


def _render_option(opt: OptionView) -> bool:
    """選択肢 1 つを描画し、新たに押されたかどうかを返す。"""
    clicked = st.button(opt.label, key=opt.key, disabled=not opt.enabled)

    for line in opt.feedback:
        st.markdown(line)

    # 回答済み（disabled）のボタンからはイベントを出さない
    return clicked and opt.enabled


def render_active(view: ActiveView, theme: Dict[str, str]) -> Optional[AnswerSubmitted]:
    """
    問題一覧を描画する。

    戻り値:
        新たに押された選択肢があれば AnswerSubmitted、なければ None。
    """
    st.markdown(generate_css(view, theme), unsafe_allow_html=True)
    st.header(view.title)

    event: Optional[AnswerSubmitted] = None

    for q in view.questions:
        with st.container():
            st.subheader(q.prompt)
            for opt in q.options:
                if _render_option(opt) and event is None:
                    event = AnswerSubmitted(index=opt.question_index, option=opt.label)

    return event


# ----------------------------------------------------------------------
#  公開 API
# ----------------------------------------------------------------------
def render_view(view: View, theme_key: str = "light") -> Optional[AnswerSubmitted]:
    """
    view.build_view() の結果を描画する。

    戻り値:
        問題一覧の画面で選択肢が押された場合のみ AnswerSubmitted。
    """
    if isinstance(view, LoadingView):
        render_loading(view)
        return None

    if isinstance(view, CompletedView):
        render_completed(view)
        return None

    return render_active(view, get_theme(theme_key))
