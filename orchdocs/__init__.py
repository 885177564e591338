"""orchdocs - Markdown reference docs from orchestrator action sources."""

from .exceptions import OrchdocsError, SourceNotFoundError, UnsafeCleanError
from .extractors import extract_actions, extract_class, is_class_based, parse_doc_comment
from .generators import render
from .models import ClassDoc, DeclarationDoc, ModuleDoc, Param, Returns
from .walker import generate_docs, generate_toc, module_name

__version__ = "0.1.0"

__all__ = [
    "ClassDoc",
    "DeclarationDoc",
    "ModuleDoc",
    "OrchdocsError",
    "Param",
    "Returns",
    "SourceNotFoundError",
    "UnsafeCleanError",
    "extract_actions",
    "extract_class",
    "generate_docs",
    "generate_toc",
    "is_class_based",
    "module_name",
    "parse_doc_comment",
    "render",
]
