from math import factorial

import pytest

from exact_tsp.brute_force import solve_brute_force
from exact_tsp.cost import route_cost
from exact_tsp.errors import InsufficientNodesError
from exact_tsp.io import generate_random_graph
from exact_tsp.oracle import oracle_from_mapping

SQUARE = oracle_from_mapping(
    {
        ("A", "B"): 10,
        ("B", "C"): 15,
        ("C", "D"): 20,
        ("D", "A"): 25,
        ("A", "C"): 12,
        ("B", "D"): 18,
    }
)


def test_unit_triangle():
    weights = oracle_from_mapping({("A", "B"): 1, ("B", "C"): 1, ("A", "C"): 1})
    results, stats = solve_brute_force(["A", "B", "C"], weights)
    assert stats.optimal_cost == 3
    assert stats.evaluated_route_count == 2
    assert sorted(stats.optimal_route) == ["A", "B", "C"]
    assert stats.algorithm_name == "Brute Force"


def test_square_ranking_keeps_reflections_in_enumeration_order():
    results, stats = solve_brute_force(["A", "B", "C", "D"], SQUARE)
    assert stats.evaluated_route_count == 6
    assert [(r.route, r.cost) for r in results] == [
        (("A", "B", "D", "C"), 60),
        (("A", "C", "D", "B"), 60),
        (("A", "B", "C", "D"), 70),
        (("A", "C", "B", "D"), 70),
        (("A", "D", "B", "C"), 70),
        (("A", "D", "C", "B"), 70),
    ]
    assert stats.optimal_route == results[0].route
    assert stats.optimal_cost == 60


@pytest.mark.parametrize("n", [3, 4, 5, 6, 7])
def test_route_count_and_shape(n):
    oracle = generate_random_graph(n, seed=n)
    node_ids = oracle.node_ids()
    results, stats = solve_brute_force(node_ids, oracle)
    assert stats.evaluated_route_count == factorial(n - 1) == len(results)
    assert all(r.route[0] == node_ids[0] for r in results)
    assert all(sorted(r.route) == sorted(node_ids) for r in results)
    assert all(a.cost <= b.cost for a, b in zip(results, results[1:]))
    assert route_cost(stats.optimal_route, oracle) == stats.optimal_cost


def test_repeated_calls_are_identical():
    oracle = generate_random_graph(6, seed=3)
    first = solve_brute_force(oracle.node_ids(), oracle)
    second = solve_brute_force(oracle.node_ids(), oracle)
    assert first.results == second.results
    assert first.stats.optimal_cost == second.stats.optimal_cost


@pytest.mark.parametrize("nodes", [[], ["A"], ["A", "B"]])
def test_too_few_nodes(nodes):
    with pytest.raises(InsufficientNodesError) as excinfo:
        solve_brute_force(nodes, SQUARE)
    assert excinfo.value.node_count == len(nodes)


def test_elapsed_time_is_measured():
    _, stats = solve_brute_force(["A", "B", "C", "D"], SQUARE)
    assert stats.elapsed_time_ms >= 0.0
