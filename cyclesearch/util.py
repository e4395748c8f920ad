"""Modular arithmetic, prime and group generation, and random graph helpers."""

from __future__ import annotations

import random
from dataclasses import dataclass

FIRST_PRIMES: tuple[int, ...] = (
    2, 3, 5, 7, 11, 13, 17, 19, 23, 29,
    31, 37, 41, 43, 47, 53, 59, 61, 67,
    71, 73, 79, 83, 89, 97, 101, 103,
    107, 109, 113, 127, 131, 137, 139,
    149, 151, 157, 163, 167, 173, 179,
    181, 191, 193, 197, 199, 211, 223,
    227, 229, 233, 239, 241, 251, 257,
    263, 269, 271, 277, 281, 283, 293,
    307, 311, 313, 317, 331, 337, 347, 349,
)

_UINT16_MAX = 0xFFFF

Graph = list[list[int]]


@dataclass(frozen=True)
class Group:
    """Parameters of a DDH-safe subgroup of order q in Z_p^* (p = q*r + 1)."""

    p: int
    q: int
    r: int
    h: int
    g: int


def mul_mod(a: int, b: int, m: int) -> int:
    """Return a * b modulo m for non-negative a and b."""
    return (a * b) % m


def pow_mod(a: int, b: int, n: int) -> int:
    """Return a ** b modulo n; a non-positive exponent gives 1 mod n."""
    if b <= 0:
        return 1 % n
    return pow(a % n, b, n)


def random_in_range(lower: int, upper: int) -> int:
    """Return a uniformly random integer in [lower, upper]."""
    return random.randint(lower, upper)


def random_of_size(bits: int = 64) -> int:
    """Return a random integer with exactly ``bits`` bits (top bit set)."""
    if bits < 2:
        return 0
    top = 1 << (bits - 1)
    return random.randint(0, top - 1) | top


def random_in_group(group: Group) -> int:
    """Return a random element of the subgroup generated by ``group.g``."""
    exponent = random.randint(0, group.q - 1)
    return pow_mod(group.g, exponent, group.p)


def low_level_prime(bits: int = 64) -> int:
    """Return a random ``bits``-bit number with no small prime factor."""
    while True:
        candidate = random_of_size(bits)
        for prime in FIRST_PRIMES:
            if candidate == prime:
                return candidate
            if candidate % prime == 0:
                break
        else:
            return candidate


def trial_composite(a: int, even_c: int, to_test: int, max_div_2: int) -> bool:
    """Return True if witness ``a`` proves ``to_test`` composite."""
    if pow_mod(a, even_c, to_test) == 1:
        return False
    return all(
        pow_mod(a, (1 << i) * even_c, to_test) != to_test - 1
        for i in range(max_div_2)
    )


def miller_rabin_test(to_test: int, accuracy: int = 20) -> bool:
    """Probabilistic primality test with ``accuracy`` random witnesses."""
    if to_test < 2:
        raise ValueError(f"cannot test {to_test} for primality")
    max_div_2 = 0
    even_c = to_test - 1
    while even_c % 2 == 0:
        even_c >>= 1
        max_div_2 += 1

    for _ in range(accuracy):
        a = random.randint(2, to_test)
        if trial_composite(a, even_c, to_test, max_div_2):
            return False
    return True


def big_prime(bits: int = 64) -> int:
    """Return a random probable prime of ``bits`` bits."""
    while True:
        candidate = low_level_prime(bits)
        if miller_rabin_test(candidate):
            return candidate


def group_parameters(q_size: int, r_size: int) -> Group:
    """Generate a group with a ``q_size``-bit prime order subgroup."""
    q = big_prime(q_size)
    r_upper = pow_mod(2, r_size, _UINT16_MAX)
    while True:
        r = random_in_range(2, r_upper)
        p = q * r + 1
        if not miller_rabin_test(p):
            continue
        h = random_in_range(2, p - 1)
        g = pow_mod(h, r, p)
        if g != 1:
            return Group(p=p, q=q, r=r, h=h, g=g)


def average_degree(graph: Graph) -> float:
    """Edges per distinct node, counting only rows that are (u, v) pairs."""
    unique_nodes: set[int] = set()
    edge_count = 0
    for edge in graph:
        if len(edge) != 2:
            continue
        unique_nodes.update(edge)
        edge_count += 1
    if not unique_nodes:
        return 0.0
    return edge_count / len(unique_nodes)


def generate_graph(
    size: int, min_degree: int, max_degree: int
) -> tuple[int, float, Graph]:
    """Random directed graph; each node gets a random out-degree.

    Returns (edge count, average out-degree, adjacency lists).
    """
    upper = min(size - 2, max_degree)
    graph: Graph = []
    d_sum = 0
    for i in range(size):
        d = random.randint(min_degree, upper)
        d_sum += d
        candidates = [k for k in range(size) if k != i]
        graph.append(random.sample(candidates, d))
    return d_sum, d_sum / size, graph


def generate_scale_free_graph(
    m0: int, m: int, target_size: int
) -> tuple[int, float, Graph]:
    """Directed graph grown in the manner of the Barabási–Albert model.

    Starts from a complete directed graph on ``m0`` nodes; every later node
    connects to ``m`` distinct earlier nodes, each edge pointing either way.
    Returns (edge count, edges per node, adjacency lists).
    """
    graph: Graph = [[j for j in range(m0) if j != i] for i in range(m0)]

    edges = m0 * (m0 - 1) + m * (target_size - m0)

    for i in range(m0, target_size):
        graph.append([])
        for k in random.sample(range(i), m):
            if random.randint(0, 1) == 0:
                graph[i].append(k)
            else:
                graph[k].append(i)
    return edges, edges / target_size, graph


def format_graph(graph: Graph) -> str:
    """Render adjacency lists one node per line."""
    return "".join(
        f"node {idx}: " + "".join(f"{edge} " for edge in neighbours) + "\n"
        for idx, neighbours in enumerate(graph)
    )