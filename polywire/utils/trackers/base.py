from abc import ABC, abstractmethod


class LogWriter(ABC):
    """Sink for run progress (scalars and free text) keyed by a tag path."""

    @abstractmethod
    def bind(
        self, *, path: list[str] | None = None, labels: dict[str, str] | None = None
    ) -> "LogWriter":
        pass

    @abstractmethod
    def scalar(self, metric: str, value: float, **kwargs) -> None:
        pass

    @abstractmethod
    def text(self, tag: str, text: str, **kwargs) -> None:
        pass

    @abstractmethod
    def close(self) -> None:
        pass
