"""Records shared by the scanner, the substitution helpers and the converter."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Iterator, List, Tuple

from pydantic import BaseModel, ConfigDict, Field


class CaseStyle(str, Enum):
    """Case renderings of a component name, in substitution precedence order."""

    PASCAL = "pascal"
    CAMEL = "camel"
    KEBAB = "kebab"
    SNAKE = "snake"


class NameVariants(BaseModel):
    """The four case renderings derived from one canonical component name."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    pascal: str = Field(..., description="Canonical name, unchanged.")
    camel: str = Field(..., description="Canonical name with a lower-cased first character.")
    kebab: str = Field(..., description="Hyphen separated, lower-cased rendering.")
    snake: str = Field(..., description="Underscore separated, lower-cased rendering.")

    @property
    def name(self) -> str:
        return self.pascal

    def get(self, style: CaseStyle) -> str:
        return getattr(self, style.value)

    def items(self) -> Iterator[Tuple[CaseStyle, str]]:
        """Yield ``(style, value)`` pairs in precedence order."""

        for style in CaseStyle:
            yield style, self.get(style)


class DirectoryEntry(BaseModel):
    """One filesystem object visited while scanning a source tree."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: Path = Field(..., description="Parent path joined with the entry name.")
    name: str = Field(..., description="Base name of the entry.")
    is_directory: bool = Field(..., description="Whether the entry is a directory.")


class WrittenFile(BaseModel):
    """A template file produced from one source file."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    source: Path = Field(..., description="File read from the source tree.")
    destination: Path = Field(..., description="Template file written under the output tree.")
    changed: bool = Field(..., description="Whether any name variant was substituted in the contents.")


class ConversionReport(BaseModel):
    """Summary of a completed conversion run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    source: Path = Field(..., description="Root of the converted component tree.")
    output: Path = Field(..., description="Root of the generated template tree.")
    component_name: str = Field(..., description="Canonical name the substitutions were anchored on.")
    variants: NameVariants = Field(..., description="Case renderings replaced by placeholders.")
    directories: List[Path] = Field(default_factory=list, description="Directories created under the output root.")
    files: List[WrittenFile] = Field(default_factory=list, description="Template files written, in processing order.")


__all__ = [
    "CaseStyle",
    "ConversionReport",
    "DirectoryEntry",
    "NameVariants",
    "WrittenFile",
]
