"""
Naming utilities: case conversion and English inflection.

Case conversion follows the ORM host's identifier rules exactly, so
schemas generated by earlier releases keep the same physical names.
Inflection uses the ``pluralizer`` port of the host's pluralize rules.
"""

from __future__ import annotations

import re

from pluralizer import Pluralizer


_UPPER_RUN_RE = re.compile("([A-Z])([A-Z])([a-z])")
_LOWER_UPPER_RE = re.compile("([a-z0-9])([A-Z])")
_CAMEL_RE = re.compile(r"^([A-Z])|[\s\-_](\w)")
_WORD_SPLIT_RES = (
    re.compile("([a-z0-9])([A-Z])"),
    re.compile("([A-Z])([A-Z][a-z])"),
)
_WORD_STRIP_RE = re.compile("[^A-Z0-9]+", re.IGNORECASE)

_pluralizer = Pluralizer()


def snake_case(text: str) -> str:
    """
    Convert ``camelCase``/``PascalCase`` text to ``snake_case``.

    Existing separators are kept as-is, so ``"first.propertyNames"`` becomes
    ``"first.property_names"``.
    """
    step1 = _UPPER_RUN_RE.sub(r"\1_\2\3", text)
    return _LOWER_UPPER_RE.sub(r"\1_\2", step1).lower()


def camel_case(text: str, first_capital: bool = False) -> str:
    """
    Convert separated words to ``camelCase``.

    A leading capital is lower-cased; any word character following
    whitespace, ``-`` or ``_`` is upper-cased and the separator dropped.
    ``first_capital`` treats the start of the text as a word boundary, so
    ``"property_name"`` becomes ``"PropertyName"``.
    """

    def _replace(match: re.Match[str]) -> str:
        if match.group(2):
            return match.group(2).upper()
        return match.group(1).lower()

    if first_capital:
        text = " " + text
    return _CAMEL_RE.sub(_replace, text)


def pascal_case(text: str) -> str:
    """
    Convert text to ``PascalCase``.

    Each word is capitalized and the rest of it lower-cased, so acronyms are
    folded (``"HTTPServer"`` -> ``"HttpServer"``).
    """
    split = text
    for pattern in _WORD_SPLIT_RES:
        split = pattern.sub("\\1\0\\2", split)
    split = _WORD_STRIP_RE.sub("\0", split).strip("\0")
    return "".join(_capitalize_word(word, index) for index, word in enumerate(split.split("\0")))


def _capitalize_word(word: str, index: int) -> str:
    first, rest = word[:1], word[1:].lower()
    if index > 0 and first.isdigit():
        return f"_{first}{rest}"
    return f"{first.upper()}{rest}"


def pluralize(word: str) -> str:
    return _pluralizer.plural(word)


def singularize(word: str) -> str:
    return _pluralizer.singular(word)


def is_singular(word: str) -> bool:
    """
    Return ``True`` when ``word`` is already in singular form.

    The check is case-insensitive. Uncountable nouns (``"news"``,
    ``"sheep"``, ``"blue_fish"``) count as singular.
    """
    return _pluralizer.isSingular(word)
