"""
Root conftest.py for doc-catalog tests.

Provides:
1. Markers applied by directory
2. Registry and settings isolation between tests
3. Shared document fixtures
"""

from __future__ import annotations

import pytest

from doc_catalog.app.core.env import get_env
from doc_catalog.app.settings import get_catalog_settings
from doc_catalog.documents import (
    DocumentRegistry,
    PdfDocument,
    WordDocument,
    load_samples,
    reset_registry,
)


# =============================================================================
# PYTEST CONFIGURATION
# =============================================================================


def pytest_collection_modifyitems(config, items):
    for item in items:
        norm = str(item.fspath).replace("\\", "/")
        if "/tests/unit/documents/" in norm:
            item.add_marker(pytest.mark.documents)
        if "/tests/unit/cli/" in norm:
            item.add_marker(pytest.mark.cli)


# =============================================================================
# ISOLATION
# =============================================================================


@pytest.fixture(autouse=True)
def _isolate(monkeypatch):
    """Fresh process registry and settings for every test; keep logs quiet."""
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    for var in ("CATALOG_LOAD_SAMPLES", "CATALOG_LOG_LEVEL", "CATALOG_LOG_FORMAT", "CATALOG_ENV", "APP_ENV"):
        monkeypatch.delenv(var, raising=False)
    reset_registry()
    get_catalog_settings.cache_clear()
    get_env.cache_clear()
    yield
    reset_registry()
    get_catalog_settings.cache_clear()
    get_env.cache_clear()


# =============================================================================
# DOCUMENTS
# =============================================================================


@pytest.fixture
def word_doc() -> WordDocument:
    return WordDocument(
        name="Report.docx",
        author="Ivanov I.I.",
        keywords=["report", "quarterly"],
        theme="Finance",
        file_path="/docs/Report.docx",
        page_count=7,
    )


@pytest.fixture
def pdf_doc() -> PdfDocument:
    return PdfDocument(
        name="Manual.pdf",
        author="Company LLC",
        keywords=["manual"],
        theme="Documentation",
        file_path="/docs/Manual.pdf",
        is_protected=True,
    )


@pytest.fixture
def registry() -> DocumentRegistry:
    return DocumentRegistry()


@pytest.fixture
def sample_registry() -> DocumentRegistry:
    reg = DocumentRegistry()
    load_samples(reg)
    return reg
