"""Component name handling: case variants and canonical file detection."""

from __future__ import annotations

import re
from typing import Iterable

from .schema import NameVariants

__all__ = [
    "DEFAULT_EXTENSIONS",
    "canonical_file_pattern",
    "canonical_name_from_filename",
    "derive_variants",
    "normalize_component_name",
]


DEFAULT_EXTENSIONS = ("ts", "tsx", "js", "jsx")

_WORD_BOUNDARY = re.compile(r"([a-z])([A-Z])")
_SEPARATORS = re.compile(r"[\s_\-]+")


def _split_words(name: str, separator: str) -> str:
    return _WORD_BOUNDARY.sub(rf"\1{separator}\2", name).lower()


def derive_variants(name: str) -> NameVariants:
    """Derive the pascal, camel, kebab and snake renderings of ``name``.

    A separator is inserted only where a lowercase ASCII letter is directly
    followed by an uppercase one, so runs of capitals stay together:
    ``MyUiComponent`` becomes ``my-ui-component``.
    """

    if not name or not name.strip():
        raise ValueError("component name must not be empty")

    return NameVariants(
        pascal=name,
        camel=name[0].lower() + name[1:],
        kebab=_split_words(name, "-"),
        snake=_split_words(name, "_"),
    )


def canonical_file_pattern(extensions: Iterable[str] = DEFAULT_EXTENSIONS) -> re.Pattern[str]:
    """Return the pattern whose ``fullmatch`` accepts PascalCase source file names."""

    # Longest first so "tsx" is tried before "ts".
    ordered = sorted({ext.lstrip(".") for ext in extensions}, key=lambda ext: (-len(ext), ext))
    if not ordered:
        raise ValueError("at least one source extension is required")
    alternatives = "|".join(re.escape(ext) for ext in ordered)
    return re.compile(rf"(?P<name>[A-Z][a-zA-Z0-9]*)\.(?:{alternatives})")


def canonical_name_from_filename(
    filename: str,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    *,
    pattern: re.Pattern[str] | None = None,
) -> str | None:
    """Return the component name encoded in ``filename`` or ``None``."""

    matcher = pattern or canonical_file_pattern(extensions)
    match = matcher.fullmatch(filename)
    if match is None:
        return None
    return match.group("name")


def normalize_component_name(name: str) -> str:
    """Return a PascalCase component name built from ``name``.

    Words are split on whitespace, hyphens and underscores. The first character
    of every word is upper-cased and the remainder is kept verbatim, so an
    existing PascalCase or camelCase name survives unchanged apart from its
    first letter.
    """

    words = [word for word in _SEPARATORS.split(name.strip()) if word]
    if not words:
        raise ValueError("component name must not be empty")
    return "".join(word[0].upper() + word[1:] for word in words)
