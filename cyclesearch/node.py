"""A participant in the distributed cycle search protocol."""

from __future__ import annotations

from dataclasses import dataclass

from .message import Message
from .util import Group, pow_mod, random_in_group


@dataclass
class Route:
    """State kept by a relay for one forwarded search instance."""

    s_id: int
    s_nonce: int
    t_id: int
    t_nonce: int
    f_gx: int
    b_gx: int
    key: int


@dataclass(frozen=True)
class Edge:
    """A directed edge learned from a broadcast cycle."""

    source: int
    target: int


class Node:
    """A graph node that searches for cycles through its out-neighbours."""

    def __init__(self, node_id: int, n_in, n_out, group: Group) -> None:
        self.id = node_id
        self.n_in: list[int] = list(n_in)
        self.n_out: list[int] = list(n_out)
        self.group = group
        self.keys: list[int] = []
        self.init: list[tuple[int, int]] = []
        self.routes: list[Route] = []
        self.topology: list[Edge] = []
        self._key_set: set[int] = set()
        self._init_by_nonce: dict[int, int] = {}
        self._route_by_nonce: dict[int, Route] = {}

    def _add_key(self, key: int) -> None:
        self.keys.append(key)
        self._key_set.add(key)

    def initiate(self, l: int) -> list[Message]:  # noqa: E741
        """Start a search of depth ``l`` towards every out-neighbour."""
        g, p = self.group.g, self.group.p
        messages = []
        for target in self.n_out:
            x = random_in_group(self.group)
            r = random_in_group(self.group)
            self.init.append((x, r))
            self._init_by_nonce.setdefault(r, x)
            messages.append(Message.forward(self.id, target, r, pow_mod(g, x, p), l - 1))
        return messages

    def forward(self, msg: Message) -> list[Message]:
        """Answer a forward message and relay it while its time-to-live lasts."""
        g, p = self.group.g, self.group.p
        y = random_in_group(self.group)
        self._add_key(pow_mod(msg.gx, y, p))

        messages = [Message.backward(self.id, msg.source, msg.r, pow_mod(g, y, p))]
        if msg.l <= 0:
            return messages

        for target in self.n_out:
            route = Route(
                s_id=msg.source,
                s_nonce=msg.r,
                t_id=target,
                t_nonce=random_in_group(self.group),
                f_gx=msg.gx,
                b_gx=0,
                key=random_in_group(self.group),
            )
            self.routes.append(route)
            self._route_by_nonce.setdefault(route.t_nonce, route)
            messages.append(
                Message.forward(
                    self.id,
                    route.t_id,
                    route.t_nonce,
                    pow_mod(msg.gx, route.key, p),
                    msg.l - 1,
                )
            )
        return messages

    def backward(self, msg: Message) -> list[Message]:
        """Handle a reply: detect a closed cycle or pass the reply back."""
        p = self.group.p
        x = self._init_by_nonce.get(msg.r)
        if x is not None:
            key = pow_mod(msg.gx, x, p)
            messages = []
            if key in self._key_set:
                messages.append(Message.publish(self.id, msg.source, msg.r, msg.gx, [self.id]))
            self._add_key(key)
            return messages

        route = self._route_by_nonce.get(msg.r)
        if route is None:
            return []
        route.b_gx = msg.gx
        return [
            Message.backward(
                self.id, route.s_id, route.s_nonce, pow_mod(msg.gx, route.key, p)
            )
        ]

    def publish(self, msg: Message) -> list[Message]:
        """Extend a cycle's path and pass it along the matching routes."""
        if not msg.path:
            raise ValueError("publish message carries an empty path")
        ext_path = (*msg.path, self.id)
        if self.id == msg.path[0]:
            return [Message.broadcast(ext_path)]

        p = self.group.p
        return [
            Message.publish(self.id, route.t_id, route.t_nonce, route.b_gx, ext_path)
            for route in self.routes
            if pow_mod(route.b_gx, route.key, p) == msg.gx and route.s_nonce == msg.r
        ]

    def broadcast(self, msg: Message) -> None:
        """Record the edges of a broadcast cycle in the known topology."""
        path = msg.path
        self.topology.extend(
            Edge(source, target) for source, target in zip(path, path[1:])
        )

    def topology_string(self) -> str:
        """The known topology as a one-line listing."""
        return f"[TOP~{self.id}] | " + "".join(
            f"{edge.source}->{edge.target} | " for edge in self.topology
        )

    def keys_string(self) -> str:
        """All keys held by the node as a one-line listing."""
        text = f"[KEY~{self.id}] (" + "".join(f"{key}, " for key in self.keys)
        return text[:-1]

    def neighbour_size(self) -> int:
        """The number of out-neighbours."""
        return len(self.n_out)