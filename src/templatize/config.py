"""Configuration shared by the template converter and the CLI."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

from .naming import DEFAULT_EXTENSIONS, canonical_file_pattern, normalize_component_name
from .placeholders import DEFAULT_TEMPLATE_SUFFIX, PlaceholderScheme

_COMPONENT_NAME = re.compile(r"[A-Z][a-zA-Z0-9]*")


@dataclass(slots=True)
class ConverterConfig:
    """Options controlling a conversion run.

    Attributes
    ----------
    template_suffix:
        Marker appended to every generated file name.
    extensions:
        Source file extensions (without the leading dot) recognised when
        looking for the PascalCase component file.
    scheme:
        Placeholder spelling written into contents and file names.
    component_name:
        Explicit canonical name. When set, the source tree is not searched for
        a component file.
    sort_entries:
        Visit siblings in name order so repeated runs behave identically.
    encoding:
        Text encoding used to read and write files.
    """

    template_suffix: str = DEFAULT_TEMPLATE_SUFFIX
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    scheme: PlaceholderScheme = PlaceholderScheme.HANDLEBARS
    component_name: str | None = None
    sort_entries: bool = True
    encoding: str = "utf-8"

    @classmethod
    def from_options(
        cls,
        *,
        suffix: str | None = None,
        extensions: Iterable[str] | None = None,
        scheme: str | PlaceholderScheme | None = None,
        name: str | None = None,
        sort_entries: bool = True,
    ) -> "ConverterConfig":
        """Build a :class:`ConverterConfig` from raw, user supplied values.

        Parameters
        ----------
        suffix:
            Template marker such as ``".hbs"``. Must start with a dot.
        extensions:
            Extensions recognised for the component file. Leading dots are
            stripped.
        scheme:
            Name of a :class:`PlaceholderScheme`.
        name:
            Component name override, normalised to PascalCase.
        """

        template_suffix = DEFAULT_TEMPLATE_SUFFIX if suffix is None else suffix.strip()
        if len(template_suffix) < 2 or not template_suffix.startswith("."):
            raise ValueError(f"invalid template suffix '{suffix}'. Expected something like '.hbs'.")

        if extensions is None:
            normalized_extensions = DEFAULT_EXTENSIONS
        else:
            normalized_extensions = tuple(
                dict.fromkeys(ext.strip().lstrip(".") for ext in extensions if ext.strip().lstrip("."))
            )
            if not normalized_extensions:
                raise ValueError("at least one source extension is required")

        try:
            placeholder_scheme = PlaceholderScheme(scheme or PlaceholderScheme.HANDLEBARS)
        except ValueError as exc:
            choices = ", ".join(member.value for member in PlaceholderScheme)
            raise ValueError(f"unknown placeholder scheme '{scheme}'. Choose one of: {choices}.") from exc

        component_name = None
        if name is not None:
            component_name = normalize_component_name(name)
            if not _COMPONENT_NAME.fullmatch(component_name):
                raise ValueError(f"invalid component name '{name}'")

        return cls(
            template_suffix=template_suffix,
            extensions=normalized_extensions,
            scheme=placeholder_scheme,
            component_name=component_name,
            sort_entries=sort_entries,
        )

    @property
    def canonical_pattern(self) -> re.Pattern[str]:
        """Pattern matching the file name that carries the component name."""

        return canonical_file_pattern(self.extensions)
