"""Ports (interfaces) for the hexagonal architecture."""

from abc import ABC, abstractmethod

from src.domain.model import PageResponse


class WorkoutSourcePort(ABC):
    @abstractmethod
    def fetch_page(self, page: int) -> PageResponse:
        ...


class PacerPort(ABC):
    @abstractmethod
    def wait(self) -> None:
        ...


class ExportSinkPort(ABC):
    @abstractmethod
    def deliver(self, content: bytes, filename: str) -> str:
        """Make the content available to the user; return where it went."""
        ...


class ConfigPort(ABC):
    @abstractmethod
    def load(self) -> dict:
        ...

    @abstractmethod
    def save(self, cfg: dict) -> None:
        ...

    @abstractmethod
    def is_configured(self) -> bool:
        ...
