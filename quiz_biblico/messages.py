"""
messages.py
======================

画面に表示する文言。config.toml の [app].language で切り替える。
未知の言語はポルトガル語にフォールバック。
"""

from __future__ import annotations

from typing import Dict

DEFAULT_LANGUAGE = "pt"

MESSAGES: Dict[str, Dict[str, str]] = {
    "pt": {
        "title": "Quiz Bíblico",
        "loading": "Carregando perguntas...",
        "score": "Sua pontuação: {score} de {total}",
        "correct": "Correto!",
        "wrong": "Errado!",
        "correct_answer": "Resposta correta: {answer}.",
        "explanation": "Explicação:",
    },
    "en": {
        "title": "Bible Quiz",
        "loading": "Loading questions...",
        "score": "Your score: {score} of {total}",
        "correct": "Correct!",
        "wrong": "Wrong!",
        "correct_answer": "Correct answer: {answer}.",
        "explanation": "Explanation:",
    },
}


def get_messages(language: str = DEFAULT_LANGUAGE) -> Dict[str, str]:
    return MESSAGES.get(language, MESSAGES[DEFAULT_LANGUAGE])
