from . import app, documents

# Base exception
from .exceptions import CatalogError, InputFormatError, OutOfRangeError

# Documents
from .documents import (
    CatalogEntry,
    Document,
    DocumentRegistry,
    ExcelDocument,
    HtmlDocument,
    PdfDocument,
    TxtDocument,
    WordDocument,
    get_registry,
    parse_document,
)

__version__ = "0.1.0"

__all__ = [
    # Modules
    "app",
    "documents",
    # Errors
    "CatalogError",
    "OutOfRangeError",
    "InputFormatError",
    # Documents
    "Document",
    "WordDocument",
    "PdfDocument",
    "ExcelDocument",
    "TxtDocument",
    "HtmlDocument",
    "parse_document",
    "CatalogEntry",
    "DocumentRegistry",
    "get_registry",
]
