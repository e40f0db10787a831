from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator, Optional


class StructuredDocument(ABC):
    """
    Interface (Contrato) de um documento HTML já interpretado.

    Os extratores só falam com esta interface, então a biblioteca de parsing
    pode ser trocada sem mexer na lógica de extração.
    """

    @abstractmethod
    def find_by_id(self, tag: str, element_id: str) -> Optional["StructuredDocument"]:
        """Return the first `tag` element whose id equals `element_id`."""

    @abstractmethod
    def find_all(self, tag: str) -> Iterator["StructuredDocument"]:
        """Yield every descendant `tag` element in document order."""

    @abstractmethod
    def text_content(self) -> str:
        """Concatenated text of the element and all its descendants."""


class BaseExtractor(ABC):
    """
    Interface (Contrato) que todo Extrator de links deve seguir.
    """

    def __init__(self, url: str, params: dict | None = None):
        self.url = url
        self.params = params or {}

    @abstractmethod
    def find_links(self) -> list[str]:
        """
        Deve retornar a lista de URLs candidatas, na ordem do documento.
        Se não houver links, retorna uma lista vazia.
        """
