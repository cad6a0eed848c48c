"""Stylesheet rules and per-element style resolution."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional, Union

from api.graph_view_api.model import Edge, Node
from api.graph_view_api.model.node import freeze_mapping


@dataclass(frozen=True)
class StyleRule:
    selector: str
    style: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "style", freeze_mapping(self.style))

    def to_dict(self) -> dict:
        return {"selector": self.selector, "style": dict(self.style)}

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "StyleRule":
        selector = raw.get("selector")
        if not isinstance(selector, str) or not selector.strip():
            raise ValueError(f"Style rule is missing a selector: {dict(raw)!r}")
        style = raw.get("style") or {}
        if not isinstance(style, Mapping):
            raise ValueError(f"Style of rule '{selector}' must be a mapping.")
        return cls(selector=selector.strip(), style=style)


RuleLike = Union[StyleRule, Mapping[str, Any]]

# Rectangular labelled nodes, bezier edges ending in a filled triangle.
DEFAULT_STYLE = (
    StyleRule(
        "node",
        {
            "label": "data(label)",
            "text-valign": "center",
            "text-halign": "center",
            "shape": "rectangle",
        },
    ),
    StyleRule(
        "edge",
        {
            "curve-style": "bezier",
            "target-arrow-shape": "triangle",
            "target-arrow-fill": "filled",
        },
    ),
)


def element_kind(element: Union[Node, Edge]) -> str:
    if isinstance(element, Node):
        return "node"
    if isinstance(element, Edge):
        return "edge"
    raise TypeError(f"Unsupported graph element: {type(element).__name__}")


def as_rules(rules: Iterable[RuleLike]) -> tuple:
    return tuple(rule if isinstance(rule, StyleRule) else StyleRule.from_dict(rule) for rule in rules)


def resolve_style(
    element: Union[Node, Edge],
    base_rules: Iterable[RuleLike],
    override: Optional[Mapping[str, Any]] = None,
) -> dict:
    """
    Resolve the effective style of a single element.

    Base rules whose selector is the element kind ("node" or "edge") apply
    first, in stylesheet order. The override (the element's own
    ``style_override`` when not given) is then merged key by key on top,
    so it only shadows the properties it names.
    """
    kind = element_kind(element)
    resolved: dict = {}
    for rule in as_rules(base_rules):
        if rule.selector == kind:
            resolved.update(rule.style)

    if override is None:
        override = element.style_override
    resolved.update(override)
    return resolved
