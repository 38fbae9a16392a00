"""
Productions and the rule table of a stochastic bracketed context-free L-system.

Productions are stored per left-hand symbol in insertion order. That order
decides which production wins when a random draw is matched against the
cumulative probabilities, so it must be kept exactly as added.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from stochastic_l_systems.errors import GrammarError

ARROW = "→"


@dataclass(frozen=True)
class Production:
    """
    A rewrite lhs -> rhs applied with the given probability.

    Deterministic productions have probability 1.
    """

    lhs: str
    rhs: str
    probability: float = 1.0

    def __post_init__(self):
        if not isinstance(self.lhs, str) or len(self.lhs) != 1:
            raise GrammarError(f"left-hand side must be a single symbol, got {self.lhs!r}")
        if not isinstance(self.rhs, str):
            raise GrammarError(f"right-hand side of '{self.lhs}' must be a string")
        if not 0.0 < self.probability <= 1.0:
            raise GrammarError(
                f"probability of '{self.lhs}' {ARROW} '{self.rhs}' must be in (0, 1], "
                f"got {self.probability}"
            )

    @property
    def is_stochastic(self) -> bool:
        return self.probability < 1.0

    def describe(self, with_probability: bool = False) -> str:
        text = f"{self.lhs} {ARROW} {self.rhs}"
        if with_probability:
            text += f" ({self.probability:.2f})"
        return text


class Grammar:
    """
    Root string plus an ordered list of productions per symbol.

    The grammar does not check that the probabilities of one symbol add up
    to 1. Any mass left uncovered means "leave the symbol as it is".
    """

    def __init__(self, root: str = ""):
        self.root = root
        self.rules: Dict[str, List[Production]] = {}
        self._order: List[Production] = []
        self._stochastic = False

    def set_root(self, symbols: str) -> None:
        self.root = symbols

    def add(self, production: Production) -> Production:
        """Append a production to the list of its left-hand side."""
        self.rules.setdefault(production.lhs, []).append(production)
        self._order.append(production)
        if production.is_stochastic:
            self._stochastic = True
        return production

    def add_production(self, lhs: str, rhs: str, probability: float = 1.0) -> Production:
        return self.add(Production(lhs, rhs, probability))

    def clear(self) -> None:
        """Drop every production, the root and the stochastic flag."""
        self.rules.clear()
        self._order.clear()
        self.root = ""
        self._stochastic = False

    def productions_for(self, symbol: str) -> Tuple[Production, ...]:
        return tuple(self.rules.get(symbol, ()))

    @property
    def productions(self) -> Tuple[Production, ...]:
        """All productions in the order they were added."""
        return tuple(self._order)

    @property
    def symbols(self) -> List[str]:
        return list(self.rules)

    @property
    def is_stochastic(self) -> bool:
        return self._stochastic

    def rule_string(self) -> str:
        """
        Printable description of the grammar.

        One line for the root, then one line per production in the order they
        were added. Probabilities are shown with two decimals when the grammar
        is stochastic, e.g.::

            Root is F
            F → F[+F]F (0.50)
            F → F[-F]F (0.50)
        """
        lines = [f"Root is {self.root}"]
        lines.extend(p.describe(self._stochastic) for p in self._order)
        return "\n".join(lines) + "\n"

    def __len__(self) -> int:
        return len(self._order)

    def __contains__(self, symbol: str) -> bool:
        return symbol in self.rules

    def __repr__(self) -> str:
        return f"Grammar(root={self.root!r}, productions={len(self._order)})"
