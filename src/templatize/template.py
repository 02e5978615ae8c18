"""Expand placeholder templates back into concrete component files."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Mapping, MutableMapping

from .naming import derive_variants
from .placeholders import DEFAULT_TEMPLATE_SUFFIX
from .schema import CaseStyle

__all__ = [
    "TemplateRenderer",
    "TemplateRenderingError",
]


_PLACEHOLDER_PATTERN = re.compile(r"{{\s*(?P<expression>[^{}]+?)\s*}}")


class TemplateRenderingError(RuntimeError):
    """Raised when the renderer cannot evaluate a placeholder."""


def _resolve_value(context: Mapping[str, Any], key: str) -> Any:
    if key not in context:
        raise KeyError(key)
    return context[key]


def _apply_filter(value: Any, filter_name: str, filters: Mapping[str, Callable[[Any], Any]]) -> Any:
    try:
        filter_func = filters[filter_name]
    except KeyError as exc:
        raise TemplateRenderingError(f"unknown filter '{filter_name}'") from exc

    return filter_func(value)


def _case_filter(style: CaseStyle) -> Callable[[Any], str]:
    def apply(value: Any) -> str:
        return derive_variants(str(value)).get(style)

    return apply


def _parse_expression(expression: str) -> tuple[str, list[str]] | None:
    """Split ``expression`` into a context key and the filters to apply.

    Both ``name|pascal`` and the helper form ``pascalCase name`` are accepted;
    a helper is applied before any ``|`` filters that follow it.
    """

    parts = [part.strip() for part in expression.split("|") if part.strip()]
    if not parts:
        return None

    head, *filters = parts
    words = head.split()
    if len(words) == 2:
        helper, key = words
        return key, [helper, *filters]
    return head, filters


@dataclass(slots=True)
class TemplateRenderer:
    """Render templates with ``{{ name|filters }}`` or ``{{helper name}}`` expressions."""

    filters: MutableMapping[str, Callable[[Any], Any]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.filters:
            self.filters.update(
                {
                    "upper": lambda value: str(value).upper(),
                    "lower": lambda value: str(value).lower(),
                }
            )
            for style in CaseStyle:
                self.filters[style.value] = _case_filter(style)
                self.filters[f"{style.value}Case"] = _case_filter(style)

    def render_string(
        self,
        template: str,
        context: Mapping[str, Any],
        *,
        missing: str = "keep",
    ) -> str:
        """Render ``template`` using ``context``.

        Parameters
        ----------
        template:
            The template string to evaluate.
        context:
            Mapping providing values for placeholders.
        missing:
            Controls what happens when a placeholder cannot be resolved. The
            supported policies are ``"keep"`` (return the placeholder unchanged),
            ``"empty"`` (replace with an empty string) and ``"error"`` (raise
            :class:`TemplateRenderingError`).
        """

        if missing not in {"keep", "empty", "error"}:
            raise ValueError("missing must be 'keep', 'empty', or 'error'")

        def substitute(match: re.Match[str]) -> str:
            parsed = _parse_expression(match.group("expression"))
            if parsed is None:
                return match.group(0)

            key, filters = parsed
            try:
                value = _resolve_value(context, key)
            except KeyError:
                if missing == "keep":
                    return match.group(0)
                if missing == "empty":
                    return ""
                raise TemplateRenderingError(f"missing value for '{key}'")

            for filter_name in filters:
                value = _apply_filter(value, filter_name, self.filters)

            return str(value)

        return _PLACEHOLDER_PATTERN.sub(substitute, template)

    def render_file(
        self,
        template_path: str | Path,
        context: Mapping[str, Any],
        *,
        target: str | Path | None = None,
        encoding: str = "utf-8",
        missing: str = "keep",
    ) -> str:
        """Render ``template_path`` and optionally write the result to ``target``."""

        template_path = Path(template_path)
        if not template_path.is_file():
            raise FileNotFoundError(template_path)

        with template_path.open("r", encoding=encoding, errors="surrogateescape", newline="") as handle:
            text = handle.read()
        rendered = self.render_string(text, context, missing=missing)

        if target is not None:
            target_path = Path(target)
            target_path.parent.mkdir(parents=True, exist_ok=True)
            with target_path.open("w", encoding=encoding, errors="surrogateescape", newline="") as handle:
                handle.write(rendered)

        return rendered

    def render_directory(
        self,
        template_dir: str | Path,
        target_dir: str | Path,
        context: Mapping[str, Any],
        *,
        suffix: str = DEFAULT_TEMPLATE_SUFFIX,
        missing: str = "keep",
    ) -> list[Path]:
        """Render every file inside ``template_dir`` into ``target_dir``.

        File and directory names are rendered as well, and ``suffix`` is
        stripped from file names that carry it. Returns the written files.
        """

        template_dir = Path(template_dir)
        target_dir = Path(target_dir)
        if not template_dir.is_dir():
            raise FileNotFoundError(template_dir)

        written: list[Path] = []
        for source in sorted(template_dir.rglob("*")):
            relative = source.relative_to(template_dir)
            parts = [self.render_string(part, context, missing=missing) for part in relative.parts]

            if source.is_dir():
                target_dir.joinpath(*parts).mkdir(parents=True, exist_ok=True)
                continue

            if suffix and parts[-1].endswith(suffix) and len(parts[-1]) > len(suffix):
                parts[-1] = parts[-1][: -len(suffix)]
            destination = target_dir.joinpath(*parts)
            self.render_file(source, context, target=destination, missing=missing)
            written.append(destination)

        return written
