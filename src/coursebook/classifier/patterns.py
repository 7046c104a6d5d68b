"""Pattern tables for answer classification.

``CODE_PATTERNS`` decides whether a string looks like code at all.
``LANGUAGE_PATTERNS`` picks a highlighting language; it is checked in
order and the first language with any match wins.
"""

import re

from coursebook.models import Language

# Identifier and whitespace classes match ASCII only
_A = re.ASCII
_I = re.IGNORECASE | re.ASCII

CODE_PATTERNS: dict[str, tuple[re.Pattern[str], ...]] = {
    "declarations": (
        re.compile(r"function\s+\w+\s*\(", _A),
        re.compile(r"const\s+\w+\s*=", _A),
        re.compile(r"let\s+\w+\s*=", _A),
        re.compile(r"var\s+\w+\s*=", _A),
        re.compile(r"=>\s*\{", _A),
        re.compile(r"console\.log", _A),
        re.compile(r"\.\w+\(", _A),  # method calls
    ),
    "modules": (
        re.compile(r"import\s+", _A),
        re.compile(r"export\s+", _A),
    ),
    "control_flow": (
        re.compile(r"if\s*\(", _A),
        re.compile(r"for\s*\(", _A),
        re.compile(r"while\s*\(", _A),
        re.compile(r"return\s+", _A),
        re.compile(r"try\s*\{", _A),
        re.compile(r"catch\s*\(", _A),
    ),
    "object_oriented": (
        re.compile(r"class\s+\w+", _A),
        re.compile(r"new\s+\w+", _A),
    ),
    "async": (
        re.compile(r"async\s+function", _A),
        re.compile(r"await\s+", _A),
        re.compile(r"Promise\.", _A),
        re.compile(r"\.then\(", _A),
        re.compile(r"\.catch\(", _A),
    ),
    "markup": (re.compile(r"<[^>]*>", _A),),
    "stylesheet": (
        re.compile(r"css\s*\{", _A),
        re.compile(r"@media", _A),
        re.compile(r"\.\w+\s*\{", _A),
    ),
    "sql": (
        re.compile(r"sql", _I),
        re.compile(r"select\s+.+from", _I),
        re.compile(r"insert\s+into", _I),
        re.compile(r"update\s+.+set", _I),
        re.compile(r"delete\s+from", _I),
        re.compile(r"create\s+table", _I),
    ),
    "scripting": (
        re.compile(r"python", _I),
        re.compile(r"def\s+\w+", _A),
        re.compile(r"import\s+\w+", _A),
        re.compile(r"print\s*\(", _A),
        re.compile(r"if\s+\w+:", _A),
        re.compile(r"for\s+\w+\s+in", _A),
    ),
}

LANGUAGE_PATTERNS: tuple[tuple[Language, tuple[re.Pattern[str], ...]], ...] = (
    (
        Language.JAVASCRIPT,
        (
            re.compile(r"function\s+\w+\s*\(", _A),
            re.compile(r"const\s+\w+\s*=", _A),
            re.compile(r"let\s+\w+\s*=", _A),
            re.compile(r"var\s+\w+\s*=", _A),
            re.compile(r"import\s+", _A),
            re.compile(r"export\s+", _A),
            re.compile(r"console\.log", _A),
            re.compile(r"=>\s*\{", _A),
            re.compile(r"Promise\.", _A),
            re.compile(r"async\s+function", _A),
            # brace-bodied classes; `class Foo:` falls through to python
            re.compile(r"class\s+\w+(\s+extends\s+[\w.]+)?\s*\{", _A),
        ),
    ),
    (
        Language.PYTHON,
        (
            re.compile(r"def\s+\w+", _A),
            re.compile(r"import\s+\w+", _A),
            re.compile(r"print\s*\(", _A),
            re.compile(r"if\s+\w+:", _A),
            re.compile(r"for\s+\w+\s+in", _A),
            re.compile(r"class\s+\w+", _A),
            re.compile(r"__init__", _A),
            re.compile(r"self\.", _A),
        ),
    ),
    (
        Language.HTML,
        (
            re.compile(r"<html", _A),
            re.compile(r"<head", _A),
            re.compile(r"<body", _A),
            re.compile(r"<div", _A),
            re.compile(r"<span", _A),
            re.compile(r"<p", _A),
            re.compile(r"<h[1-6]", _A),
            re.compile(r"<!DOCTYPE", _A),
            re.compile(r"<script", _A),
            re.compile(r"<style", _A),
            re.compile(r"<link", _A),
            re.compile(r"<meta", _A),
        ),
    ),
    (
        Language.CSS,
        (
            re.compile(r"css\s*\{", _A),
            re.compile(r"@media", _A),
            re.compile(r"\.\w+\s*\{", _A),
            re.compile(r"#\w+\s*\{", _A),
            re.compile(r"margin:", _A),
            re.compile(r"padding:", _A),
            re.compile(r"color:", _A),
            re.compile(r"background:", _A),
            re.compile(r"font-size:", _A),
            re.compile(r"display:", _A),
        ),
    ),
    (
        Language.SQL,
        (
            re.compile(r"select\s+.+from", _I),
            re.compile(r"insert\s+into", _I),
            re.compile(r"update\s+.+set", _I),
            re.compile(r"delete\s+from", _I),
            re.compile(r"create\s+table", _I),
            re.compile(r"alter\s+table", _I),
            re.compile(r"drop\s+table", _I),
            re.compile(r"where\s+", _I),
        ),
    ),
)


def matching_categories(text: str) -> list[str]:
    """Names of the ``CODE_PATTERNS`` categories that match ``text``."""
    return [
        name
        for name, patterns in CODE_PATTERNS.items()
        if any(pattern.search(text) for pattern in patterns)
    ]
