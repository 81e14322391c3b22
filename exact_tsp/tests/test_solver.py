import pytest

from exact_tsp import solver
from exact_tsp.errors import InsufficientNodesError, UnrecognizedAlgorithmError
from exact_tsp.io import generate_random_graph
from exact_tsp.solver import AUTO_BRUTE_FORCE_MAX_NODES, Algorithm, resolve_algorithm, solve


@pytest.fixture
def calls(monkeypatch):
    """Record which solver the dispatcher picks without running it."""
    seen = []

    def fake(name):
        def _solve(node_ids, weight):
            seen.append((name, len(node_ids)))
            return name

        return _solve

    monkeypatch.setattr(solver, "solve_brute_force", fake("bruteforce"))
    monkeypatch.setattr(solver, "solve_held_karp", fake("heldkarp"))
    return seen


def test_auto_threshold_is_ten():
    assert AUTO_BRUTE_FORCE_MAX_NODES == 10
    assert resolve_algorithm("auto", 10) is Algorithm.BRUTE_FORCE
    assert resolve_algorithm("auto", 11) is Algorithm.HELD_KARP


def test_auto_dispatch_by_size(calls):
    nodes10 = [f"n{i}" for i in range(10)]
    nodes11 = [f"n{i}" for i in range(11)]
    assert solve(nodes10, lambda a, b: 1, "auto") == "bruteforce"
    assert solve(nodes11, lambda a, b: 1, "auto") == "heldkarp"
    assert calls == [("bruteforce", 10), ("heldkarp", 11)]


def test_explicit_modes_ignore_size(calls):
    big = [f"n{i}" for i in range(15)]
    small = ["a", "b", "c"]
    assert solve(big, lambda a, b: 1, "bruteforce") == "bruteforce"
    assert solve(small, lambda a, b: 1, Algorithm.HELD_KARP) == "heldkarp"


@pytest.mark.parametrize("mode", ["AUTO", " heldkarp ", Algorithm.AUTO])
def test_mode_parsing(mode):
    assert Algorithm.parse(mode) in set(Algorithm)


@pytest.mark.parametrize("mode", ["xyz", "", "held-karp", None, 3])
def test_unrecognized_algorithm(mode):
    with pytest.raises(UnrecognizedAlgorithmError) as excinfo:
        solve(["a", "b", "c"], lambda a, b: 1, mode)
    assert excinfo.value.mode == mode


def test_mode_is_checked_before_node_count():
    with pytest.raises(UnrecognizedAlgorithmError):
        solve(["a"], lambda a, b: 1, "xyz")


def test_too_few_nodes_through_dispatcher():
    with pytest.raises(InsufficientNodesError):
        solve(["a", "b"], lambda a, b: 1)


def test_auto_brute_force_end_to_end():
    oracle = generate_random_graph(6, seed=1)
    results, stats = solve(oracle.node_ids(), oracle)
    assert stats.algorithm_name == "Brute Force"
    assert stats.evaluated_route_count == 120
    assert stats.optimal_route == results[0].route


def test_auto_held_karp_end_to_end():
    oracle = generate_random_graph(12, seed=1)
    results, stats = solve(oracle.node_ids(), oracle)
    assert stats.algorithm_name == "Held-Karp (DP)"
    assert stats.evaluated_route_count == 1
    assert stats.optimal_route == results[0].route
    assert oracle.route_cost(stats.optimal_route) == stats.optimal_cost


def test_best_is_the_first_ranked_route():
    oracle = generate_random_graph(5, seed=3)
    outcome = solve(oracle.node_ids(), oracle, "bruteforce")
    assert outcome.best == outcome.results[0]
    assert outcome.best.cost == outcome.stats.optimal_cost
    assert outcome.best.route == outcome.stats.optimal_route
