"""Messages exchanged by nodes during the cycle search."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class MessageType(IntEnum):
    FORWARD = 0
    BACKWARD = 1
    PUBLISH = 2
    BROADCAST = 3


_TYPE_NAMES = {
    MessageType.FORWARD: "forward",
    MessageType.BACKWARD: "backward",
    MessageType.PUBLISH: "publish",
    MessageType.BROADCAST: "broadcast",
}


def _pad(value: int) -> str:
    return ("0" if value < 10 else "") + str(value)


@dataclass(frozen=True)
class Message:
    """A protocol message; build one with the type-specific constructors."""

    kind: MessageType
    source: int = 0
    target: int = 0
    r: int = 0
    gx: int = 0
    l: int = 0  # noqa: E741 - time-to-live
    path: tuple[int, ...] = ()

    @classmethod
    def forward(cls, source: int, target: int, r: int, gx: int, l: int) -> Message:  # noqa: E741
        return cls(MessageType.FORWARD, source, target, r, gx, l)

    @classmethod
    def backward(cls, source: int, target: int, r: int, gx: int) -> Message:
        return cls(MessageType.BACKWARD, source, target, r, gx)

    @classmethod
    def publish(cls, source: int, target: int, r: int, gx: int, path) -> Message:
        return cls(MessageType.PUBLISH, source, target, r, gx, path=tuple(path))

    @classmethod
    def broadcast(cls, path) -> Message:
        return cls(MessageType.BROADCAST, path=tuple(path))

    def path_key(self) -> str:
        """The path as space-separated node ids."""
        return " ".join(str(node) for node in self.path)

    def _path_list(self) -> str:
        return "{ " + "".join(f"{node} " for node in self.path) + "}"

    def describe(self) -> str:
        """A one-line human-readable rendering of the message."""
        if self.kind is MessageType.BROADCAST:
            return f"[BRDC] (path={self._path_list()})"
        head = f"[{_pad(self.source)}->{_pad(self.target)}] ("
        if self.kind is MessageType.FORWARD:
            body = f"t=f, r={self.r}, gx={self.gx}, l={self.l})"
        elif self.kind is MessageType.BACKWARD:
            body = f"t=b, r={self.r}, gx={self.gx})"
        else:
            body = f"t=p, r={self.r}, path={self._path_list()})"
        return head + body

    def type_name(self) -> str:
        return _TYPE_NAMES.get(self.kind, "unknown")