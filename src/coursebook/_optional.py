# src/coursebook/_optional.py
"""Placeholders for names whose optional extra is not installed."""

from typing import Any


def _create_missing_dependency_class(class_name: str, extra: str) -> type:
    """Build a stand-in class that fails loudly when instantiated.

    The stand-in keeps ``from coursebook.stores import FirestoreChapterStore``
    importable without the extra, so type hints and isinstance checks still
    work; only construction raises.

    Args:
        class_name: Name the placeholder should carry
        extra: Name of the pip extra that provides the real class
    """

    def __init__(self: Any, *args: Any, **kwargs: Any) -> None:
        raise ImportError(
            f"{class_name} needs the '{extra}' extra. "
            f"Install it with: pip install coursebook[{extra}]"
        )

    return type(class_name, (), {"__init__": __init__, "__module__": "coursebook"})
