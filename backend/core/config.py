from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RuleOptions:
    # Suppress chain offers from rows 1 and 6 unless a capture leads away from
    # the adjacent edge. Not a standard checkers rule.
    edge_chain_guard: bool = True


DEFAULT_RULES = RuleOptions()
