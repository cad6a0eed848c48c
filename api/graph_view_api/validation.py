"""Validation and normalization of graph models."""

from __future__ import annotations

import logging

from .model import GraphModel, ValidatedModel

LOGGER = logging.getLogger(__name__)


def validate(model: GraphModel) -> ValidatedModel:
    """
    Check id uniqueness and edge references, returning a ValidatedModel.

    Raises DuplicateIdError or DanglingReferenceError on the first violation.
    """
    if isinstance(model, ValidatedModel):
        return model
    validated = ValidatedModel(nodes=model.nodes, edges=model.edges)
    LOGGER.debug("Validated graph model: %d nodes, %d edges", len(validated.nodes), len(validated.edges))
    return validated


def normalize(model: GraphModel) -> ValidatedModel:
    """Fill label and directionality defaults, then validate."""
    return validate(
        GraphModel(
            nodes=tuple(node.with_defaults() for node in model.nodes),
            edges=tuple(edge.with_defaults() for edge in model.edges),
        )
    )
