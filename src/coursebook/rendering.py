# src/coursebook/rendering.py
"""Display decisions for stored content.

Nothing here produces markup. These helpers tell a front end which widget
to use for a practice answer and how to embed a tutorial video.
"""

from __future__ import annotations

import re
from typing import Literal

from pydantic import BaseModel, ConfigDict

from coursebook.classifier import ContentClassifier, HeuristicClassifier
from coursebook.models import AnswerKind, Language, PracticeSection

_YOUTUBE_ID = re.compile(r"^.*(youtu\.be/|v/|u/\w/|embed/|watch\?v=|&v=)([^#&?]*).*")

AnswerMode = Literal["code", "text", "image", "none"]


class AnswerView(BaseModel):
    """How to show one practice answer."""

    model_config = ConfigDict(frozen=True)

    mode: AnswerMode
    text: str = ""
    language: Language | None = None
    image_url: str | None = None


def render_answer(
    practice: PracticeSection, classifier: ContentClassifier | None = None
) -> AnswerView:
    """Pick the display mode for a practice section's answer.

    Image answers never consult the classifier. For the other kinds the
    answer text is classified, with the declared kind passed as a hint.
    """
    classifier = classifier or HeuristicClassifier()
    text = practice.primary_answer

    if practice.answer_kind is AnswerKind.IMAGE or not text.strip():
        if practice.answer_image_url:
            return AnswerView(mode="image", image_url=practice.answer_image_url)
        return AnswerView(mode="none")

    result = classifier.classify(text, practice.answer_kind)
    return AnswerView(
        mode="code" if result.is_code else "text",
        text=text,
        language=result.language if result.is_code else None,
        image_url=practice.answer_image_url,
    )


def youtube_video_id(url: str) -> str | None:
    """Extract the 11-character video id from a YouTube URL."""
    match = _YOUTUBE_ID.match(url or "")
    if match and len(match.group(2)) == 11:
        return match.group(2)
    return None


def embed_url(url: str) -> str | None:
    """Embeddable player URL for a YouTube link, or None for other links."""
    video_id = youtube_video_id(url)
    if video_id is None:
        return None
    return f"https://www.youtube.com/embed/{video_id}"
