# src/coursebook/commands/classify.py
"""Classify command - decide whether an answer is shown as code."""

from __future__ import annotations

from dataclasses import asdict
from pathlib import Path

from pydantic import ValidationError

from coursebook.classifier import HeuristicClassifier, StructuralSignals
from coursebook.classifier.patterns import matching_categories
from coursebook.commands.base import ClassifyResult
from coursebook.config import build_settings, load_config
from coursebook.models import AnswerKind


def classify(
    text: str | None = None,
    kind: str | None = None,
    file: str | Path | None = None,
    config_path: str | Path | None = None,
) -> ClassifyResult:
    """Classify a piece of answer text with the configured weights.

    Args:
        text: Answer text (ignored when ``file`` is given)
        kind: Declared answer kind (text, code, image, mixed)
        file: Read the answer text from this file instead
        config_path: Override config file path

    Returns:
        ClassifyResult with the decision and the evidence behind it
    """
    if file is not None:
        try:
            text = Path(file).read_text(encoding="utf-8")
        except OSError as e:
            return ClassifyResult(success=False, error=f"Cannot read {file}: {e}")

    declared: AnswerKind | None = None
    if kind:
        try:
            declared = AnswerKind(kind.lower())
        except ValueError:
            choices = ", ".join(k.value for k in AnswerKind)
            return ClassifyResult(success=False, error=f"Unknown kind '{kind}' (choose: {choices})")

    try:
        settings = build_settings(load_config(config_path))
    except (ValidationError, ValueError) as e:
        return ClassifyResult(success=False, error=f"Invalid settings: {e}")

    classifier = HeuristicClassifier(
        weights=settings.classifier, default_language=settings.default_language
    )
    decision = classifier.classify(text, declared)

    return ClassifyResult(
        success=True,
        is_code=decision.is_code,
        language=decision.language.value,
        score=round(decision.score, 4),
        threshold=settings.classifier.threshold,
        categories=matching_categories(text) if text else [],
        signals=asdict(StructuralSignals.from_text(text)) if text else {},
    )
