"""
Help-text extraction from Markdown and Go source generation.
"""

from .collector import collect_files
from .emitter import License, package_name, render, render_doc, write_output
from .generator import DocsGenerator, GeneratorConfig
from .model import DocField, ExtractedDoc
from .normalizer import clean_up_content
from .parser import doc_name, extract, parse_file

__all__ = [
    "DocField",
    "DocsGenerator",
    "ExtractedDoc",
    "GeneratorConfig",
    "License",
    "clean_up_content",
    "collect_files",
    "doc_name",
    "extract",
    "package_name",
    "parse_file",
    "render",
    "render_doc",
    "write_output",
]
