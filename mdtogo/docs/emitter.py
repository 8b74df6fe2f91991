"""
Rendering and writing of the generated Go file.

Output layout:

    <license header>
    // Code generated by "mdtogo"; DO NOT EDIT.
    package <dest dir name>

    var FooShort = `...`
    var FooLong = `...`
    ...
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from ..exceptions import DestWriteError, LicenseReadError
from .model import DocField, ExtractedDoc

DEFAULT_LICENSE = """\
// Copyright 2019 The Kubernetes Authors.
// SPDX-License-Identifier: Apache-2.0"""

GENERATED_WARNING = '// Code generated by "mdtogo"; DO NOT EDIT.'

DEFAULT_FILENAME = "docs.go"

# Value of --license that disables the header
NO_LICENSE = "none"

DIR_MODE = 0o700
FILE_MODE = 0o600


@dataclass(frozen=True)
class License:
    """
    Source of the header text placed at the top of the generated file.

    Exactly one of the three forms applies: the built-in default header,
    no header at all, or the contents of a file.
    """

    path: Path | None = None
    enabled: bool = True

    @classmethod
    def default(cls) -> License:
        return cls()

    @classmethod
    def none(cls) -> License:
        return cls(enabled=False)

    @classmethod
    def from_file(cls, path: str | Path) -> License:
        return cls(path=Path(path))

    @classmethod
    def parse(cls, value: str | None) -> License:
        """Map a --license value: empty for default, "none", or a path."""
        if not value:
            return cls.default()
        if value == NO_LICENSE:
            return cls.none()
        return cls.from_file(value)

    @property
    def text(self) -> str:
        """
        Header text.

        Raises:
            LicenseReadError: If the license file cannot be read
        """
        if not self.enabled:
            return ""
        if self.path is None:
            return DEFAULT_LICENSE
        try:
            with open(self.path, encoding="utf-8", errors="surrogateescape", newline="") as f:
                return f.read()
        except OSError as e:
            raise LicenseReadError(
                f"cannot read license file: {e.strerror or e}", path=self.path
            ) from e

    def __str__(self) -> str:
        if not self.enabled:
            return NO_LICENSE
        return str(self.path) if self.path is not None else "default"


def render_doc(doc: ExtractedDoc) -> str:
    """Render the variable declarations for one record."""
    parts = [
        f"var {doc.name}{field.value} = `{doc.get(field)}`"
        for field in DocField
        if doc.get(field)
    ]
    return "\n".join(parts) + "\n"


def package_name(dest: str | Path) -> str:
    """Go package name: the final segment of the destination directory."""
    dest = Path(dest)
    return dest.name or dest.absolute().name


def render(docs: Iterable[ExtractedDoc], license_text: str, package: str) -> str:
    """Render the complete generated file."""
    out = [license_text, f"\n{GENERATED_WARNING}\npackage {package}\n"]
    out.extend(render_doc(doc) for doc in docs)
    return "\n".join(out)


def write_output(
    dest: str | Path, content: str, filename: str = DEFAULT_FILENAME
) -> Path:
    """
    Write ``content`` to ``dest/filename``, creating ``dest`` if needed.

    An existing file is truncated and replaced.

    Raises:
        DestWriteError: If the file cannot be written
    """
    dest = Path(dest)
    target = dest / filename
    try:
        dest.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
        fd = os.open(target, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
        with open(fd, "w", encoding="utf-8", errors="surrogateescape", newline="") as f:
            f.write(content)
    except OSError as e:
        raise DestWriteError(
            f"cannot write generated file: {e.strerror or e}", path=target
        ) from e
    return target
