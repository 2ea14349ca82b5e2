from .models import (
    AnyDocument,
    Document,
    ExcelDocument,
    HtmlDocument,
    PdfDocument,
    TxtDocument,
    WordDocument,
    parse_document,
)
from .registry import CatalogEntry, DocumentRegistry, get_registry, render_entry, reset_registry
from .samples import load_samples, sample_documents

__all__ = [
    # Models
    "Document",
    "WordDocument",
    "PdfDocument",
    "ExcelDocument",
    "TxtDocument",
    "HtmlDocument",
    "AnyDocument",
    "parse_document",
    # Registry
    "CatalogEntry",
    "DocumentRegistry",
    "render_entry",
    "get_registry",
    "reset_registry",
    # Samples
    "sample_documents",
    "load_samples",
]
