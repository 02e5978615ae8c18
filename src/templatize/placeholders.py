"""Replace component name variants with template placeholders."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from .schema import CaseStyle, NameVariants

__all__ = [
    "DEFAULT_TEMPLATE_SUFFIX",
    "PlaceholderScheme",
    "rename_for_template",
    "substitute_content",
]


DEFAULT_TEMPLATE_SUFFIX = ".hbs"


class PlaceholderScheme(str, Enum):
    """Spelling of the placeholder tokens written into templates."""

    HANDLEBARS = "handlebars"
    MOUSTACHE = "moustache"

    def token(self, style: CaseStyle) -> str:
        """Return the placeholder inserted in place of ``style`` occurrences."""

        return _TOKENS[self][style]

    def tokens(self) -> Mapping[CaseStyle, str]:
        return _TOKENS[self]


_TOKENS: Mapping[PlaceholderScheme, Mapping[CaseStyle, str]] = MappingProxyType(
    {
        PlaceholderScheme.HANDLEBARS: MappingProxyType(
            {style: f"{{{{{style.value}Case name}}}}" for style in CaseStyle}
        ),
        PlaceholderScheme.MOUSTACHE: MappingProxyType(
            {style: f"{{{{ name|{style.value} }}}}" for style in CaseStyle}
        ),
    }
)


def substitute_content(
    text: str,
    variants: NameVariants,
    scheme: PlaceholderScheme = PlaceholderScheme.HANDLEBARS,
) -> str:
    """Replace every occurrence of every variant in ``text`` with its placeholder.

    Variants are replaced one at a time in precedence order (pascal, camel,
    kebab, snake), each completely before the next. Matching is literal and
    only ever touches source text: a placeholder inserted for one variant is
    never searched for the next, even when it contains that variant (the
    ``name`` inside ``{{pascalCase name}}`` for a component called ``Name``).
    """

    # (segment, is_placeholder) pairs
    segments: list[tuple[str, bool]] = [(text, False)]
    for style, value in variants.items():
        token = scheme.token(style)
        replaced: list[tuple[str, bool]] = []
        for segment, is_placeholder in segments:
            if is_placeholder or value not in segment:
                replaced.append((segment, is_placeholder))
                continue
            for index, part in enumerate(segment.split(value)):
                if index:
                    replaced.append((token, True))
                if part:
                    replaced.append((part, False))
        segments = replaced
    return "".join(segment for segment, _ in segments)


def rename_for_template(
    filename: str,
    variants: NameVariants,
    scheme: PlaceholderScheme = PlaceholderScheme.HANDLEBARS,
    *,
    suffix: str = DEFAULT_TEMPLATE_SUFFIX,
) -> str:
    """Return the template file name for ``filename``.

    Only the first variant found (in precedence order) is replaced, at every
    position it occurs; other variants in the same name are left alone. The
    template ``suffix`` is appended whether or not anything matched.
    """

    for style, value in variants.items():
        if value in filename:
            filename = filename.replace(value, scheme.token(style))
            break
    return filename + suffix
