from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Annotated, Any, ClassVar, Literal, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Document(BaseModel, ABC):
    """Bibliographic metadata shared by every document kind.

    Concrete kinds add one extra field and set ``detail_label`` / ``type_tag``;
    ``describe()`` renders the base lines followed by those two.
    ``file_path`` is stored as given and never opened. The base itself cannot
    be instantiated.
    """

    model_config = ConfigDict(frozen=True)

    kind: str
    name: str
    author: str
    keywords: tuple[str, ...] = ()
    theme: str
    file_path: str

    detail_label: ClassVar[str]
    type_tag: ClassVar[str]

    def base_description(self) -> str:
        return "\n".join(
            [
                f"Name: {self.name}",
                f"Author: {self.author}",
                f"Keywords: {', '.join(self.keywords)}",
                f"Theme: {self.theme}",
                f"File path: {self.file_path}",
            ]
        )

    @abstractmethod
    def detail_value(self) -> str:
        ...

    def describe(self) -> str:
        return "\n".join(
            [
                self.base_description(),
                f"{self.detail_label}: {self.detail_value()}",
                f"Type: {self.type_tag}",
            ]
        )


class WordDocument(Document):
    kind: Literal["word"] = "word"
    page_count: int

    detail_label: ClassVar[str] = "Page count"
    type_tag: ClassVar[str] = "MS Word"

    def detail_value(self) -> str:
        return str(self.page_count)


class PdfDocument(Document):
    kind: Literal["pdf"] = "pdf"
    is_protected: bool

    detail_label: ClassVar[str] = "Protected"
    type_tag: ClassVar[str] = "PDF"

    def detail_value(self) -> str:
        return "True" if self.is_protected else "False"


class ExcelDocument(Document):
    kind: Literal["excel"] = "excel"
    sheet_count: int

    detail_label: ClassVar[str] = "Sheet count"
    type_tag: ClassVar[str] = "MS Excel"

    def detail_value(self) -> str:
        return str(self.sheet_count)


class TxtDocument(Document):
    kind: Literal["txt"] = "txt"
    encoding: str

    detail_label: ClassVar[str] = "Encoding"
    type_tag: ClassVar[str] = "TXT"

    def detail_value(self) -> str:
        return self.encoding


class HtmlDocument(Document):
    kind: Literal["html"] = "html"
    version: str

    detail_label: ClassVar[str] = "HTML version"
    type_tag: ClassVar[str] = "HTML"

    def detail_value(self) -> str:
        return self.version


AnyDocument = Annotated[
    Union[WordDocument, PdfDocument, ExcelDocument, TxtDocument, HtmlDocument],
    Field(discriminator="kind"),
]

_any_document = TypeAdapter(AnyDocument)


def parse_document(data: Mapping[str, Any]) -> Document:
    """Build the matching variant from a mapping keyed by ``kind``."""
    return _any_document.validate_python(dict(data))


__all__ = [
    "Document",
    "WordDocument",
    "PdfDocument",
    "ExcelDocument",
    "TxtDocument",
    "HtmlDocument",
    "AnyDocument",
    "parse_document",
]
