# src/coursebook/settings.py
"""Behavioral settings for Coursebook.

Settings are passed programmatically; the library never reads environment
variables itself. The CLI layer (see ``coursebook.config``) reads YAML and
``COURSEBOOK_*`` env vars and builds a ``Settings`` from them.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

from coursebook.models import Language

# Weight presets for the answer classifier.
# - "strict": only render as code when a language idiom matched
# - "lenient": render almost anything with punctuation as code
CLASSIFIER_PROFILES: dict[str, dict[str, float]] = {
    "strict": {
        "threshold": 0.6,
    },
    "lenient": {
        "threshold": 0.2,
        "declared_code": 0.5,
    },
}


class ClassifierWeights(BaseModel):
    """Weight table for the code-vs-text score.

    The defaults are empirical. Each structural signal adds its weight when
    present; ``is_code`` is decided by ``score >= threshold``.
    """

    code_patterns: float = 0.6
    multiline: float = 0.2
    indentation: float = 0.1
    braces: float = 0.1
    parentheses: float = 0.1
    semicolons: float = 0.1
    quotes: float = 0.1
    declared_code: float = 0.3
    threshold: float = 0.3


class Settings(BaseModel):
    """Behavioral settings for Coursebook.

    Example:
        settings = Settings(default_passing_score=60)

        # Or start from a classifier preset
        settings = Settings.with_profile("strict")
    """

    # Answer rendering
    classifier: ClassifierWeights = Field(default_factory=ClassifierWeights)
    default_language: Language = Language.JAVASCRIPT

    # Exam authoring defaults
    default_time_limit: int = Field(default=30, gt=0)
    default_passing_score: int = Field(default=70, ge=0, le=100)

    @classmethod
    def with_profile(
        cls,
        profile: Literal["strict", "lenient"],
        **overrides: Any,
    ) -> Settings:
        """Create Settings with a classifier weight preset.

        Args:
            profile: The preset to use.
            **overrides: Settings fields to set on top of the preset. A
                ``classifier`` override may be a dict of individual weights.

        Returns:
            Settings instance with profile values applied.
        """
        if profile not in CLASSIFIER_PROFILES:
            raise ValueError(
                f"Unknown profile '{profile}'. "
                f"Available profiles: {list(CLASSIFIER_PROFILES.keys())}"
            )

        weights: dict[str, Any] = CLASSIFIER_PROFILES[profile].copy()
        classifier_overrides = overrides.pop("classifier", None) or {}
        if isinstance(classifier_overrides, ClassifierWeights):
            classifier_overrides = classifier_overrides.model_dump(exclude_unset=True)
        weights.update(classifier_overrides)
        return cls(classifier=ClassifierWeights(**weights), **overrides)
