"""Pydantic report models.

Plain-data summaries returned by ``lax.Hypergraph.validate()`` and
``lax.Hypergraph.stats()``, validated and serializable like any other
pydantic model.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ValidationResult(BaseModel):
    """Result of a lax hypergraph consistency check.

    ``errors`` lists broken structural invariants; ``warnings`` lists pending
    identifications that would fail when the graph is quotiented.
    """

    valid: bool
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class HypergraphStats(BaseModel):
    """Summary counts for a lax hypergraph."""

    node_count: int = Field(ge=0)
    edge_count: int = Field(ge=0)
    source_count: int = Field(ge=0)
    target_count: int = Field(ge=0)
    pending_identifications: int = Field(ge=0)
