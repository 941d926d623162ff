"""Document editors: a naive one and one built from elements and storage."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

DEFAULT_PATH = "document.txt"
_IMAGE_SUFFIXES = (".jpg", ".png")


class NaiveDocumentEditor:
    """Keeps every element as a string and guesses which ones are images."""

    def __init__(self) -> None:
        self.elements: list[str] = []
        self._rendered = ""

    def add_text(self, text: str) -> None:
        self.elements.append(text)

    def add_image(self, image_path: str) -> None:
        self.elements.append(image_path)

    def render_document(self) -> str:
        """Render once, one element per line; later calls return the cached text."""
        if not self._rendered:
            lines = []
            for element in self.elements:
                if len(element) > 4 and element[-4:] in _IMAGE_SUFFIXES:
                    lines.append(f"[Image: {element}]\n")
                else:
                    lines.append(element + "\n")
            self._rendered = "".join(lines)
        return self._rendered

    def save_to_file(self, path=DEFAULT_PATH) -> Path:
        target = Path(path)
        target.write_text(self.render_document(), encoding="utf-8")
        print(f"Document saved to {target}")
        return target


class DocumentElement(ABC):
    @abstractmethod
    def render(self) -> str:
        """The element's text."""


class TextElement(DocumentElement):
    def __init__(self, text: str) -> None:
        self.text = text

    def render(self):
        return self.text


class ImageElement(DocumentElement):
    def __init__(self, image_path: str) -> None:
        self.image_path = image_path

    def render(self):
        return f"[Image: {self.image_path}]"


class NewLineElement(DocumentElement):
    def render(self):
        return "\n"


class TabSpaceElement(DocumentElement):
    def render(self):
        return "\t"


class Document:
    """An ordered collection of elements."""

    def __init__(self) -> None:
        self.elements: list[DocumentElement] = []

    def add_element(self, element: DocumentElement) -> None:
        self.elements.append(element)

    def render(self) -> str:
        return "".join(element.render() for element in self.elements)


class Persistence(ABC):
    @abstractmethod
    def save(self, data: str) -> None:
        """Store ``data``."""


class FileStorage(Persistence):
    """Saves documents to a file."""

    def __init__(self, path=DEFAULT_PATH) -> None:
        self.path = Path(path)

    def save(self, data):
        self.path.write_text(data, encoding="utf-8")
        print(f"Document saved to {self.path}")


class DBStorage(Persistence):
    """Keeps saved documents as records in memory."""

    def __init__(self) -> None:
        self.records: list[str] = []

    def save(self, data):
        self.records.append(data)


class DocumentEditor:
    """Builds a document and saves it through the given storage."""

    def __init__(self, document: Document, storage: Persistence) -> None:
        self.document = document
        self.storage = storage
        self._rendered = ""

    def add_text(self, text: str) -> None:
        self.document.add_element(TextElement(text))

    def add_image(self, image_path: str) -> None:
        self.document.add_element(ImageElement(image_path))

    def add_new_line(self) -> None:
        self.document.add_element(NewLineElement())

    def add_tab_space(self) -> None:
        self.document.add_element(TabSpaceElement())

    def render_document(self) -> str:
        """Render once; later calls return the cached text."""
        if not self._rendered:
            self._rendered = self.document.render()
        return self._rendered

    def save_document(self) -> None:
        self.storage.save(self.render_document())