"""Abstract interfaces for transport-agnostic bot clients."""
from abc import ABC, abstractmethod


class ActivityIndicator(ABC):
    """Shows the chat as busy for the duration of an ``async with`` block."""

    @abstractmethod
    async def start(self) -> None: ...

    @abstractmethod
    async def stop(self) -> None: ...

    async def __aenter__(self) -> "ActivityIndicator":
        await self.start()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.stop()


class BotClient(ABC):
    @abstractmethod
    def run(self) -> None: ...

    @abstractmethod
    async def send_message(self, to: str, text: str) -> bool: ...

    @abstractmethod
    async def send_document(self, to: str, data: bytes, filename: str) -> bool: ...
