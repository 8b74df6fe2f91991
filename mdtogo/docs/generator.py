"""
Generation pipeline: collect, parse, render, write.

Every input (Markdown files and the license file) is read before the output
file is touched, so a failed run leaves the destination unchanged.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

from ..log import Logger, LoggerFactory, create_root_lg
from . import emitter
from .collector import DEFAULT_EXTENSION, collect_files
from .emitter import DEFAULT_FILENAME, License
from .model import ExtractedDoc
from .parser import parse_file


@dataclass(frozen=True)
class GeneratorConfig:
    """Settings for one generator run, built once at startup."""

    source: Path
    dest: Path
    recursive: bool = False
    license: License = field(default_factory=License.default)
    extension: str = DEFAULT_EXTENSION
    filename: str = DEFAULT_FILENAME


class DocsGenerator:
    """
    Generate a Go file of help-text variables from Markdown sources.

    Example:
        config = GeneratorConfig(source=Path("docs"), dest=Path("generated/docs"))
        path = DocsGenerator(config, lg).run()
    """

    def __init__(self, config: GeneratorConfig, lg: Logger | None = None):
        """
        Initialize the generator.

        Args:
            config: Run settings
            lg: Parent logger (a silent root logger is created if None)
        """
        self.config = config
        parent = lg if lg is not None else create_root_lg(False)
        self.lg = LoggerFactory.derive(parent, "generator")

    def collect(self) -> list[Path]:
        paths = collect_files(
            self.config.source, self.config.recursive, self.config.extension
        )
        self.lg.debug(
            "collected files",
            extra={
                "source": self.config.source,
                "recursive": self.config.recursive,
                "count": len(paths),
            },
        )
        return paths

    def parse(self, paths: list[Path]) -> list[ExtractedDoc]:
        """Parse every file, in order. Records sharing a name are all kept."""
        docs = []
        for path in paths:
            doc = parse_file(path)
            self.lg.trace(
                "parsed file",
                extra={
                    "path": path,
                    "name": doc.name,
                    "short": bool(doc.short),
                    "long": bool(doc.long),
                    "examples": bool(doc.examples),
                },
            )
            docs.append(doc)

        for name, count in Counter(d.name for d in docs if not d.is_empty).items():
            if count > 1:
                self.lg.warning(
                    "duplicate variable names in generated file",
                    extra={"name": name, "files": count},
                )
        return docs

    def render(self, docs: list[ExtractedDoc]) -> str:
        """Render the generated file; reads the license file if one is set."""
        return emitter.render(
            docs, self.config.license.text, emitter.package_name(self.config.dest)
        )

    def run(self) -> Path:
        """
        Run the full pipeline.

        Returns:
            Path of the written file

        Raises:
            SourceReadError: If the source directory or an input file is unreadable
            LicenseReadError: If the license file is unreadable
            DestWriteError: If the output file cannot be written
        """
        docs = self.parse(self.collect())
        content = self.render(docs)
        path = emitter.write_output(self.config.dest, content, self.config.filename)
        self.lg.info(
            "wrote generated file",
            extra={"path": path, "docs": len(docs), "license": self.config.license},
        )
        return path
