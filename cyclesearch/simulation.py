"""Runs the cycle search over generated graphs and logs the statistics."""

from __future__ import annotations

import argparse
import time
from collections import Counter, deque
from dataclasses import dataclass
from pathlib import Path

from .message import Message, MessageType
from .node import Node
from .util import Group, generate_scale_free_graph, group_parameters

_RULE = "=" * 61
_CSV_HEADER = "n,m,d_avg,l,n_cyc,c_edge,n_msg,n_for,n_echo,n_pub,n_brd,t\n"


@dataclass(frozen=True)
class RunResult:
    """Statistics of one run of the search over all nodes."""

    cycles: int
    cycle_edges: int
    messages: int
    forward: int
    backward: int
    publish: int
    broadcast: int
    elapsed_ms: int


def send(nodes: list[Node], msg: Message) -> list[Message]:
    """Deliver ``msg`` and return the messages it produces."""
    if msg.kind is MessageType.FORWARD:
        return nodes[msg.target].forward(msg)
    if msg.kind is MessageType.BACKWARD:
        return nodes[msg.target].backward(msg)
    if msg.kind is MessageType.PUBLISH:
        return nodes[msg.target].publish(msg)
    if msg.kind is MessageType.BROADCAST:
        for node in nodes:
            node.broadcast(msg)
    return []


def read_file(path, max_neighbours: int, max_size: int) -> list[list[int]]:
    """Read a graph from lines of comma-separated ``source,target`` pairs.

    Sources must appear in order; edges touching a node above ``max_size``
    are skipped and each node keeps at most ``max_neighbours`` targets.
    """
    graph: list[list[int]] = []
    with open(path, encoding="utf-8") as file:
        for raw in file:
            line = raw.rstrip("\r\n")
            head, sep, tail = line.partition(",")
            source = int(head)
            target = int(tail if sep else line)
            if source > max_size or target > max_size:
                continue
            if source == len(graph):
                graph.append([])
            if not 0 <= source < len(graph):
                raise ValueError(f"source {source} out of order in {path}")
            if len(graph[source]) < max_neighbours:
                graph[source].append(target)
            if target == len(graph):
                graph.append([])
    return graph


def write_file(text: str, run_hash: int, group: Group, directory) -> Path:
    """Append ``text`` to the log file for this run and group."""
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    name = (
        f"-{run_hash}group [p={group.p},q={group.q},r={group.r},"
        f"h={group.h},g={group.g}].log"
    )
    path = directory / name
    with path.open("a", encoding="utf-8") as file:
        file.write(text)
    return path


def generate_nodes(graph: list[list[int]], group: Group) -> list[Node]:
    """One node per adjacency list, with the list as its out-neighbours."""
    return [Node(idx, [], neighbours, group) for idx, neighbours in enumerate(graph)]


def run(n: int, nodes: list[Node], l: int, m: int, d_avg: float) -> RunResult:  # noqa: E741
    """Let each of the first ``n`` nodes search for cycles up to length ``l``."""
    start = time.perf_counter()
    global_cycles: set[str] = set()
    counts: Counter[MessageType] = Counter()
    total_messages = 0
    cycle_edges = 0

    for node in nodes[:n]:
        cycles: set[str] = set()
        queue = deque(node.initiate(l))
        while queue:
            msg = queue.popleft()
            total_messages += 1
            counts[msg.kind] += 1
            if msg.kind is MessageType.BROADCAST:
                key = msg.path_key()
                if key not in cycles:
                    cycles.add(key)
                    cycle_edges += len(key) - 1
            queue.extend(send(nodes, msg))
        global_cycles |= cycles

    elapsed_ms = int((time.perf_counter() - start) * 1000)
    result = RunResult(
        cycles=len(global_cycles),
        cycle_edges=cycle_edges,
        messages=total_messages,
        forward=counts[MessageType.FORWARD],
        backward=counts[MessageType.BACKWARD],
        publish=counts[MessageType.PUBLISH],
        broadcast=counts[MessageType.BROADCAST],
        elapsed_ms=elapsed_ms,
    )
    print(
        f"n={n}, m={m}, d_avg={d_avg:.2f}, l={l}, "
        f"n_cyc={result.cycles}, c_edge={result.cycle_edges}, "
        f"n_msg={result.messages}, n_for={result.forward}, "
        f"n_echo={result.backward}, n_pub={result.publish}, "
        f"n_brd={result.broadcast}, "
        f"t={elapsed_ms}ms ({elapsed_ms // 1000}s)"
    )
    return result


def _parse_args(argv):
    parser = argparse.ArgumentParser(
        description="Measure the distributed cycle search on scale-free graphs."
    )
    parser.add_argument("--l-lower", type=int, default=2, help="minimum cycle length")
    parser.add_argument("--l-upper", type=int, default=4, help="maximum cycle length")
    parser.add_argument("--n-lower", type=int, default=50, help="minimum graph size")
    parser.add_argument("--n-upper", type=int, default=50, help="maximum graph size")
    parser.add_argument("--d-lower", type=int, default=3, help="minimum m (density)")
    parser.add_argument("--d-upper", type=int, default=9, help="maximum m (density)")
    parser.add_argument("--iterations", type=int, default=1, help="repetitions")
    parser.add_argument("--q-size", type=int, default=20, help="bits of q")
    parser.add_argument("--r-size", type=int, default=40, help="size parameter of r")
    parser.add_argument("--output", default="output", help="log directory")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Sweep graph size, density and search depth, logging every run."""
    args = _parse_args(argv)
    group = group_parameters(args.q_size, args.r_size)

    print(f"{_RULE}PARAM{_RULE}")
    print(f"group [p={group.p}, q={group.q}, r={group.r}, h={group.h}, g={group.g}]")
    print(
        f"graph size [{args.n_lower},{args.n_upper}] with l "
        f"[{args.l_lower},{args.l_upper}] and degree [{args.d_lower},{args.d_upper}]\n"
    )
    print(f"{_RULE}STATS{_RULE}")

    run_hash = time.time_ns() // 1_000_000
    write_file(_CSV_HEADER, run_hash, group, args.output)

    for _ in range(args.iterations):
        for size in range(args.n_lower, args.n_upper + 1):
            for density in range(args.d_lower, args.d_upper + 1):
                m, d_avg, graph = generate_scale_free_graph(density, density, size)
                nodes = generate_nodes(graph, group)
                prefix = f"{size},{m},{d_avg:.6f},"
                for depth in range(args.l_lower, args.l_upper + 1):
                    r = run(size, nodes, depth, m, d_avg)
                    row = ",".join(
                        str(v)
                        for v in (
                            depth, r.cycles, r.cycle_edges, r.messages, r.forward,
                            r.backward, r.publish, r.broadcast, r.elapsed_ms,
                        )
                    )
                    write_file(prefix + row + "\n", run_hash, group, args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())