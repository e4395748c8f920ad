import random

import pytest

from cyclesearch.util import (
    FIRST_PRIMES,
    Group,
    average_degree,
    big_prime,
    format_graph,
    generate_graph,
    generate_scale_free_graph,
    group_parameters,
    low_level_prime,
    miller_rabin_test,
    mul_mod,
    pow_mod,
    random_in_group,
    random_in_range,
    random_of_size,
    trial_composite,
)


def _is_prime(n):
    if n < 2:
        return False
    d = 2
    while d * d <= n:
        if n % d == 0:
            return False
        d += 1
    return True


@pytest.fixture(autouse=True)
def _seeded():
    random.seed(20240601)


@pytest.mark.parametrize("a,b,m", [(7, 5, 6), (0, 9, 4), (123, 456, 789), (10, 3, 1)])
def test_mul_mod_matches_product(a, b, m):
    assert mul_mod(a, b, m) == (a * b) % m


@pytest.mark.parametrize("a,b,n", [(2, 10, 1000), (3, 7, 13), (17, 123, 97), (5, 1, 3)])
def test_pow_mod_matches_builtin(a, b, n):
    assert pow_mod(a, b, n) == pow(a, b, n)


def test_pow_mod_zero_exponent_and_unit_modulus():
    assert pow_mod(5, 0, 7) == 1
    assert pow_mod(5, -3, 7) == 1
    assert pow_mod(5, 3, 1) == 0


def test_random_in_range_bounds():
    values = {random_in_range(3, 6) for _ in range(200)}
    assert values <= {3, 4, 5, 6}
    assert len(values) > 1


@pytest.mark.parametrize("bits", [2, 8, 16, 31])
def test_random_of_size_has_top_bit(bits):
    for _ in range(50):
        value = random_of_size(bits)
        assert value >> (bits - 1) == 1


def test_random_of_size_small_bits_is_zero():
    assert random_of_size(1) == 0
    assert random_of_size(0) == 0


def test_low_level_prime_has_no_small_factor():
    for _ in range(30):
        value = low_level_prime(16)
        assert value >> 15 == 1
        assert all(value % p != 0 or value == p for p in FIRST_PRIMES)


def test_trial_composite_prime_witness_is_not_composite():
    # 7 - 1 = 3 * 2^1
    assert trial_composite(2, 3, 7, 1) is False


def test_trial_composite_detects_nine():
    # 9 - 1 = 1 * 2^3
    assert trial_composite(2, 1, 9, 3) is True


@pytest.mark.parametrize("prime", [1000003, 104729, 65537])
def test_miller_rabin_accepts_primes(prime):
    assert miller_rabin_test(prime) is True


@pytest.mark.parametrize("composite", [561, 1000001, 100, 65535])
def test_miller_rabin_rejects_composites(composite):
    assert miller_rabin_test(composite) is False


def test_miller_rabin_rejects_tiny_values():
    with pytest.raises(ValueError):
        miller_rabin_test(1)


def test_big_prime_is_prime():
    for bits in (12, 16, 20):
        value = big_prime(bits)
        assert value >> (bits - 1) == 1
        assert _is_prime(value)


def test_group_parameters_structure():
    group = group_parameters(20, 40)
    assert group.p == group.q * group.r + 1
    assert _is_prime(group.q)
    assert _is_prime(group.p)
    assert group.g != 1
    assert pow(group.h, group.r, group.p) == group.g
    assert pow(group.g, group.q, group.p) == 1


def test_random_in_group_stays_in_subgroup():
    group = group_parameters(16, 40)
    for _ in range(20):
        x = random_in_group(group)
        assert pow(x, group.q, group.p) == 1


def test_random_in_group_with_fixed_group():
    group = Group(p=23, q=11, r=2, h=5, g=2)
    members = {pow(2, e, 23) for e in range(11)}
    for _ in range(30):
        assert random_in_group(group) in members


def test_average_degree_of_cycle_pairs():
    pairs = [[0, 1], [1, 2], [2, 0]]
    assert average_degree(pairs) == 1.0


def test_average_degree_ignores_malformed_rows():
    pairs = [[0, 1], [1, 3], [3, 4]]
    assert average_degree(pairs + [[7], [1, 2, 3], []]) == average_degree(pairs)


def test_average_degree_empty():
    assert average_degree([]) == 0.0
    assert average_degree([[1], [2, 3, 4]]) == 0.0


def test_generate_graph_invariants():
    d_sum, avg, graph = generate_graph(10, 2, 4)
    assert len(graph) == 10
    assert d_sum == sum(len(row) for row in graph)
    assert avg == d_sum / 10
    for i, row in enumerate(graph):
        assert 2 <= len(row) <= 4
        assert i not in row
        assert len(set(row)) == len(row)
        assert all(0 <= k < 10 for k in row)


def test_generate_graph_caps_degree_by_size():
    _, _, graph = generate_graph(5, 1, 10)
    assert all(1 <= len(row) <= 3 for row in graph)


def test_generate_scale_free_graph_invariants():
    edges, avg, graph = generate_scale_free_graph(3, 3, 20)
    assert len(graph) == 20
    assert edges == sum(len(row) for row in graph)
    assert avg == edges / 20
    for i in range(3):
        assert graph[i][:2] == [j for j in range(3) if j != i]
    for i, row in enumerate(graph):
        assert i not in row
        assert len(set(row)) == len(row)


def test_generate_scale_free_graph_links_each_new_node_m_times():
    m0, m, size = 4, 2, 15
    _, _, graph = generate_scale_free_graph(m0, m, size)
    for i in range(m0, size):
        to_earlier = [k for k in graph[i] if k < i]
        from_earlier = [k for k in range(i) if i in graph[k]]
        assert len(to_earlier) + len(from_earlier) == m


def test_generate_scale_free_graph_rejects_large_m():
    with pytest.raises(ValueError):
        generate_scale_free_graph(3, 5, 10)


def test_format_graph_layout():
    assert format_graph([[1, 2], [0]]) == "node 0: 1 2 \nnode 1: 0 \n"
    assert format_graph([]) == ""