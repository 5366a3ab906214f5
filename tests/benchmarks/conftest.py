"""Benchmark fixtures for lax hypergraph performance tests."""

import random

import pytest

from open_hypergraphs import lax


def generate_random_chain(num_ops: int, max_arity: int = 3, seed: int = 42) -> lax.Hypergraph:
    """Generate a lax hypergraph of randomly wired operations.

    Each operation gets between 0 and ``max_arity`` sources and targets, all
    labeled ``"x"``. Every source after the first operation is unified with a
    random earlier target, so quotienting merges many nodes.

    Args:
        num_ops: Number of operations to create
        max_arity: Largest number of sources or targets per operation
        seed: Random seed for reproducibility

    Returns:
        Lax hypergraph with pending identifications
    """
    rng = random.Random(seed)
    h = lax.Hypergraph()
    outputs = []

    for i in range(num_ops):
        n_in = rng.randint(0, max_arity)
        n_out = rng.randint(0, max_arity)
        _, (sources, targets) = h.new_operation(f"op_{i}", ["x"] * n_in, ["x"] * n_out)
        if outputs:
            for s in sources:
                h.unify(rng.choice(outputs), s)
        outputs.extend(targets)

    return h


@pytest.fixture
def chain_1k() -> lax.Hypergraph:
    """1K operations - small benchmark graph."""
    return generate_random_chain(num_ops=1000)


@pytest.fixture
def chain_10k() -> lax.Hypergraph:
    """10K operations - medium benchmark graph."""
    return generate_random_chain(num_ops=10000)
