"""
Generation driver: parallel rewriting of the root string under a grammar.

Every generation is computed entirely from the previous one. Symbols produced
while rewriting generation i are only looked at again in generation i + 1.
"""

import logging
from typing import Iterator, List, Optional

from stochastic_l_systems.errors import GrammarError
from stochastic_l_systems.grammar import Grammar, Production
from stochastic_l_systems.prng import UniformSource, XorShift128

logger = logging.getLogger(__name__)


class LSystem:
    """
    A stochastic bracketed context-free L-system.

    Args:
        grammar: Root and productions. A new empty grammar when omitted.
        rng: Source of uniform samples in [0, 1] used to pick between
            competing productions. Defaults to a timer-seeded XorShift128.
    """

    def __init__(self, grammar: Optional[Grammar] = None, rng: Optional[UniformSource] = None):
        self.grammar = grammar if grammar is not None else Grammar()
        self.rng = rng if rng is not None else XorShift128()
        self.generations = 0
        self._result = ""

    # settings

    def set_root(self, symbols: str) -> None:
        self.grammar.set_root(symbols)

    def add_production(self, lhs: str, rhs: str, probability: float = 1.0) -> Production:
        return self.grammar.add_production(lhs, rhs, probability)

    def clear(self) -> None:
        """Clear the rules, the root and the result."""
        self.grammar.clear()
        self._result = ""
        self.generations = 0

    # generation

    def _choose(self, symbol: str, productions) -> Optional[Production]:
        r = self.rng.next_float01()
        cumulative = 0.0
        for production in productions:
            cumulative += production.probability
            if r <= cumulative:
                return production
        logger.debug("no production of '%s' covers %.4f (total %.4f), copied", symbol, r, cumulative)
        return None

    def rewrite(self, source: str) -> str:
        """Apply one generation of parallel rewriting to source."""
        dest: List[str] = []
        rules = self.grammar.rules
        for symbol in source:
            productions = rules.get(symbol)
            if productions:
                chosen = self._choose(symbol, productions)
                if chosen is not None:
                    dest.append(chosen.rhs)
                    continue
            dest.append(symbol)
        return "".join(dest)

    def iter_generations(self, n: int) -> Iterator[str]:
        """
        Yield generation 0 (the root) up to generation n.

        Each generation is built only from the previous one, which is an
        immutable string.
        """
        if n < 0:
            raise GrammarError(f"number of generations must be >= 0, got {n}")

        current = self.grammar.root
        yield current

        for i in range(n):
            current = self.rewrite(current)
            logger.debug("generation %d: %d symbols", i + 1, len(current))
            yield current

    def generate(self, n: int) -> str:
        """
        Generate the string n generations away from the root.

        The result is recomputed from the root on every call. For a stochastic
        grammar the output depends on the state of the random source, which is
        consumed once per rewritten symbol, left to right, generation by
        generation.

        Returns:
            str: The generated string (also available as ``result``).
        """
        result = self.grammar.root
        for result in self.iter_generations(n):
            pass
        self.generations = n
        self._result = result
        return result

    # readers

    @property
    def result(self) -> str:
        return self._result

    @property
    def rule_string(self) -> str:
        return self.grammar.rule_string()

    @property
    def is_stochastic(self) -> bool:
        return self.grammar.is_stochastic

    def summary(self) -> str:
        """Rule description followed by the number of generations applied."""
        return f"{self.rule_string}{self.generations} generations\n"

    def __repr__(self) -> str:
        return (
            f"LSystem(root={self.grammar.root!r}, productions={len(self.grammar)}, "
            f"generations={self.generations}, stochastic={self.is_stochastic})"
        )
