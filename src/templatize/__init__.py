"""Convert concrete UI component directories into scaffolding templates.

The package derives the case variants of a component name, replaces every
occurrence of them in a directory tree with template placeholders, and can
expand such templates again for a new name. Everything is available
programmatically and through the command line interface.
"""

from __future__ import annotations

from .config import ConverterConfig
from .converter import TemplateConverter, convert_to_template
from .errors import InvalidSourceError, NoCanonicalFileError, TemplatizeError
from .naming import canonical_name_from_filename, derive_variants, normalize_component_name
from .placeholders import PlaceholderScheme, rename_for_template, substitute_content
from .scan import scan_directory
from .schema import CaseStyle, ConversionReport, DirectoryEntry, NameVariants, WrittenFile
from .starter import StarterScaffolder, available_starters
from .template import TemplateRenderer, TemplateRenderingError

__all__ = [
    "CaseStyle",
    "ConversionReport",
    "ConverterConfig",
    "DirectoryEntry",
    "InvalidSourceError",
    "NameVariants",
    "NoCanonicalFileError",
    "PlaceholderScheme",
    "StarterScaffolder",
    "TemplateConverter",
    "TemplateRenderer",
    "TemplateRenderingError",
    "TemplatizeError",
    "WrittenFile",
    "available_starters",
    "canonical_name_from_filename",
    "convert_to_template",
    "derive_variants",
    "normalize_component_name",
    "rename_for_template",
    "scan_directory",
    "substitute_content",
]

__version__ = "0.1.0"
