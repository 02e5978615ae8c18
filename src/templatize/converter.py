"""Turn a concrete component directory into a reusable template tree."""

from __future__ import annotations

import logging
import stat
from pathlib import Path
from typing import Sequence

from .config import ConverterConfig
from .errors import InvalidSourceError, NoCanonicalFileError
from .naming import canonical_name_from_filename, derive_variants
from .placeholders import rename_for_template, substitute_content
from .scan import scan_directory
from .schema import ConversionReport, DirectoryEntry, NameVariants, WrittenFile

__all__ = ["TemplateConverter", "convert_to_template"]


LOGGER = logging.getLogger(__name__)


class TemplateConverter:
    """Replace a component's name with placeholders across a whole tree.

    The converter validates the source directory, scans it, derives the name
    variants from the PascalCase component file and then writes every file,
    with placeholder substituted contents and name, to the mirrored location
    under the output directory. Entries are processed one at a time; the first
    error aborts the run without removing anything already written.
    """

    def __init__(self, config: ConverterConfig | None = None) -> None:
        self.config = config or ConverterConfig()

    def convert(self, source_path: str | Path, output_path: str | Path) -> ConversionReport:
        """Convert ``source_path`` into a template tree rooted at ``output_path``.

        Raises
        ------
        InvalidSourceError
            ``source_path`` does not exist or is not a directory.
        NoCanonicalFileError
            No PascalCase component file was found and no name was configured.
        OSError
            Any filesystem failure while scanning, reading or writing.
        """

        source = Path(source_path)
        output = Path(output_path)
        self._validate_source(source)

        output.mkdir(parents=True, exist_ok=True)

        entries = self._scan(source, output)
        component_name = self._component_name(entries)
        variants = derive_variants(component_name)
        LOGGER.info("converting component %s from %s into %s", component_name, source, output)

        directories: list[Path] = []
        files: list[WrittenFile] = []
        for entry in entries:
            relative = entry.path.relative_to(source)
            if entry.is_directory:
                destination = output / relative
                destination.mkdir(parents=True, exist_ok=True)
                LOGGER.debug("mirrored directory %s", destination)
                directories.append(destination)
                continue

            files.append(self._transform_file(entry, output / relative.parent, variants))

        LOGGER.info("wrote %d template files and %d directories", len(files), len(directories))
        return ConversionReport(
            source=source,
            output=output,
            component_name=component_name,
            variants=variants,
            directories=directories,
            files=files,
        )

    def _validate_source(self, source: Path) -> None:
        try:
            info = source.stat()
        except OSError as exc:
            raise InvalidSourceError(f"Source path must be a directory: {source}") from exc
        if not stat.S_ISDIR(info.st_mode):
            raise InvalidSourceError(f"Source path must be a directory: {source}")

    def _scan(self, source: Path, output: Path) -> list[DirectoryEntry]:
        entries = scan_directory(source, sort=self.config.sort_entries)

        resolved_output = output.resolve()
        resolved_source = source.resolve()
        if resolved_output == resolved_source or resolved_source not in resolved_output.parents:
            return entries

        nested = resolved_output.relative_to(resolved_source)
        LOGGER.info("skipping output directory %s nested inside the source tree", output)
        return [entry for entry in entries if not _is_within(entry.path.relative_to(source), nested)]

    def _component_name(self, entries: Sequence[DirectoryEntry]) -> str:
        if self.config.component_name:
            return self.config.component_name

        pattern = self.config.canonical_pattern
        for entry in entries:
            if entry.is_directory:
                continue
            name = canonical_name_from_filename(entry.name, pattern=pattern)
            if name is not None:
                LOGGER.debug("component file %s", entry.path)
                return name

        raise NoCanonicalFileError("Could not find main component file (should be PascalCase)")

    def _transform_file(self, entry: DirectoryEntry, target_dir: Path, variants: NameVariants) -> WrittenFile:
        config = self.config
        with entry.path.open("r", encoding=config.encoding, errors="surrogateescape", newline="") as handle:
            original = handle.read()

        content = substitute_content(original, variants, config.scheme)
        filename = rename_for_template(entry.name, variants, config.scheme, suffix=config.template_suffix)

        target_dir.mkdir(parents=True, exist_ok=True)
        destination = target_dir / filename
        with destination.open("w", encoding=config.encoding, errors="surrogateescape", newline="") as handle:
            handle.write(content)

        LOGGER.debug("wrote %s -> %s", entry.path, destination)
        return WrittenFile(source=entry.path, destination=destination, changed=content != original)


def _is_within(relative: Path, nested: Path) -> bool:
    return relative == nested or nested in relative.parents


def convert_to_template(
    source_path: str | Path,
    output_path: str | Path,
    config: ConverterConfig | None = None,
) -> ConversionReport:
    """Convenience wrapper around :meth:`TemplateConverter.convert`."""

    return TemplateConverter(config).convert(source_path, output_path)
