"""Message records and their read-time views."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class Message:
    """A stored message.  Never mutated after creation.

    Attributes:
        sender:      Opaque identity of whoever sent it.
        content:     Message body.  Never empty.
        send_time:   Logical time at which it was sent.
        target_time: Logical time from which it can be read.
        is_paradox:  Always ``False`` for stored records; paradoxical sends
                     are rejected before anything is written.
    """

    sender: str
    content: str
    send_time: int
    target_time: int
    is_paradox: bool = False

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Message:
        return cls(
            sender=data["sender"],
            content=data["content"],
            send_time=data["send_time"],
            target_time=data["target_time"],
            is_paradox=data.get("is_paradox", False),
        )


@dataclass(frozen=True)
class MessageView:
    """A message as seen at a particular logical time.

    ``is_available`` is derived when the view is built and is not part of
    the stored record, so two views of the same id can disagree.
    """

    id: int
    message: Message
    is_available: bool

    @property
    def sender(self) -> str:
        return self.message.sender

    @property
    def content(self) -> str:
        return self.message.content

    @property
    def send_time(self) -> int:
        return self.message.send_time

    @property
    def target_time(self) -> int:
        return self.message.target_time

    @property
    def is_paradox(self) -> bool:
        return self.message.is_paradox

    @classmethod
    def at(cls, message_id: int, message: Message, current_time: int) -> MessageView:
        return cls(
            id=message_id,
            message=message,
            is_available=current_time >= message.target_time,
        )

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, **self.message.to_dict(), "is_available": self.is_available}
