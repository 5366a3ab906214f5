from open_hypergraphs.lax.hypergraph import EdgeId, Hyperedge, Hypergraph, Interface, NodeId

__all__ = [
    "EdgeId",
    "Hyperedge",
    "Hypergraph",
    "Interface",
    "NodeId",
]
