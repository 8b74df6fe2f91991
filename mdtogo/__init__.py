from importlib.metadata import PackageNotFoundError, version

from .docs import (
    DocField,
    DocsGenerator,
    ExtractedDoc,
    GeneratorConfig,
    License,
    clean_up_content,
    collect_files,
    extract,
)
from .exceptions import (
    DestWriteError,
    LicenseReadError,
    MdtogoError,
    SourceReadError,
    UsageError,
)

# Version is read from package metadata (pyproject.toml)
try:
    __version__ = version("mdtogo")
except PackageNotFoundError:
    # Package not installed, use fallback (development mode)
    __version__ = "0.1.0-dev"

__all__ = [
    "__version__",
    # Generator
    "DocsGenerator",
    "GeneratorConfig",
    "License",
    # Extraction
    "DocField",
    "ExtractedDoc",
    "extract",
    "clean_up_content",
    "collect_files",
    # Exceptions
    "MdtogoError",
    "UsageError",
    "SourceReadError",
    "LicenseReadError",
    "DestWriteError",
]
