"""Classification result model."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Language(str, Enum):
    """Languages the answer renderer knows how to highlight."""

    JAVASCRIPT = "javascript"
    PYTHON = "python"
    HTML = "html"
    CSS = "css"
    SQL = "sql"


class ClassificationResult(BaseModel):
    """How a stored answer string should be rendered.

    ``language`` is always populated. Callers only consult it when
    ``is_code`` is true.
    """

    model_config = ConfigDict(frozen=True)

    is_code: bool
    language: Language = Language.JAVASCRIPT
    score: float = 0.0
