from __future__ import annotations

from .models import Document, parse_document
from .registry import DocumentRegistry

# One document of each kind, in the order the catalog lists them.
SAMPLE_DOCUMENTS: list[dict] = [
    {
        "kind": "word",
        "name": "Report.docx",
        "author": "Ivanov I.I.",
        "keywords": ["report", "quarterly", "finance"],
        "theme": "Finance",
        "file_path": r"C:\Documents\Report.docx",
        "page_count": 7,
    },
    {
        "kind": "pdf",
        "name": "Manual.pdf",
        "author": "Company LLC",
        "keywords": ["manual", "instructions", "help"],
        "theme": "Documentation",
        "file_path": r"C:\Documents\Manual.pdf",
        "is_protected": True,
    },
    {
        "kind": "excel",
        "name": "Data.xlsx",
        "author": "Petrova A.S.",
        "keywords": ["data", "analysis", "2023"],
        "theme": "Statistics",
        "file_path": r"C:\Documents\Data.xlsx",
        "sheet_count": 3,
    },
    {
        "kind": "txt",
        "name": "Notes.txt",
        "author": "Sidorov V.V.",
        "keywords": ["notes", "ideas", "development"],
        "theme": "Personal",
        "file_path": r"C:\Documents\Notes.txt",
        "encoding": "UTF-8",
    },
    {
        "kind": "html",
        "name": "Site.html",
        "author": "WebStudio",
        "keywords": ["html", "web", "page"],
        "theme": "Development",
        "file_path": r"C:\Documents\Site.html",
        "version": "HTML5",
    },
]


def sample_documents() -> list[Document]:
    return [parse_document(raw) for raw in SAMPLE_DOCUMENTS]


def load_samples(registry: DocumentRegistry) -> int:
    docs = sample_documents()
    for doc in docs:
        registry.add(doc)
    return len(docs)


__all__ = ["SAMPLE_DOCUMENTS", "sample_documents", "load_samples"]
