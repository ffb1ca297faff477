"""
Append-only message history.
"""

from typing import Iterator

from mindmate.models.message import Message


class MessageStore:
    __slots__ = ("_messages",)

    def __init__(self) -> None:
        self._messages: list[Message] = []

    def append(self, message: Message) -> None:
        if not isinstance(message, Message):
            raise TypeError(f"expected Message, got {type(message).__name__}")
        self._messages.append(message)

    @property
    def last(self) -> Message:
        return self._messages[-1]

    def snapshot(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(self.snapshot())

    def __getitem__(self, index: int) -> Message:
        return self._messages[index]

    def __repr__(self) -> str:
        return f"MessageStore(len={len(self._messages)})"
