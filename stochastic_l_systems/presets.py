"""
Collection of ready-made L-systems.

Plants A to F are the bracketed plants of "The Algorithmic Beauty of Plants"
(figure 1.24), the branching plant is a stochastic variation of plant A, and
the hexagonal Gosper curve is an edge-rewriting curve using L and R as drawing
symbols. Each entry contains: root, rules, generations, angle, length,
description.
"""

import math
from typing import Dict, List, Optional

from stochastic_l_systems.errors import PresetError
from stochastic_l_systems.prng import UniformSource
from stochastic_l_systems.rewriting import LSystem
from stochastic_l_systems.turtle_graphics import TurtleDescriptor

THIN_LINES = 1.0
THICK_LINES = 2.0

LSYSTEM_PRESETS: Dict[str, Dict] = {
    "plant_a": {
        "root": "F",
        "rules": [("F", "F[+F]F[-F]F", 1.0)],
        "generations": 5,
        "angle": 22.7,
        "length": 8.0,
        "description": "Edge-rewriting plant with alternating side branches",
    },
    "plant_b": {
        "root": "F",
        "rules": [("F", "F[+F]F[-F][F]", 1.0)],
        "generations": 5,
        "angle": 20.0,
        "length": 20.0,
        "description": "Plant with a straight apical branch",
    },
    "plant_c": {
        "root": "F",
        "rules": [("F", "FF-[-F+F+F]+[+F-F-F]", 1.0)],
        "generations": 5,
        "angle": 22.5,
        "length": 12.0,
        "description": "Bushy plant",
    },
    "plant_d": {
        "root": "X",
        "rules": [("X", "F[+X]F[-X]+X", 1.0),
                  ("F", "FF", 1.0)],
        "generations": 7,
        "angle": 20.0,
        "length": 5.0,
        "description": "Node-rewriting plant, leaning to the left",
    },
    "plant_e": {
        "root": "X",
        "rules": [("X", "F[+X][-X]FX", 1.0),
                  ("F", "FF", 1.0)],
        "generations": 7,
        "angle": 25.7,
        "length": 5.0,
        "description": "Node-rewriting plant with paired branches",
    },
    "plant_f": {
        "root": "X",
        "rules": [("X", "F-[[X]+X]+F[+FX]-X", 1.0),
                  ("F", "FF", 1.0)],
        "generations": 5,
        "angle": 22.5,
        "length": 16.0,
        "description": "Node-rewriting weed-like plant",
    },
    "branching": {
        "root": "F",
        "rules": [("F", "F[+F]F[-F]F", 0.33),
                  ("F", "F[+F]F", 0.33),
                  ("F", "F[-F]F", 0.34)],
        "generations": 6,
        "angle": math.degrees(0.37),
        "length": 8.0,
        "description": "Stochastic branching plant, different on every generation",
    },
    "hexgosper": {
        "root": "L",
        "rules": [("L", "L+R++R-L--LL-R+", 1.0),
                  ("R", "-L+RR++R+L--L-R", 1.0)],
        "generations": 5,
        "angle": 60.0,
        "length": 12.0,
        "description": "Hexagonal Gosper curve",
    },
}


def preset_names() -> List[str]:
    return list(LSYSTEM_PRESETS)


def get_preset(name: str) -> Dict:
    try:
        return LSYSTEM_PRESETS[name]
    except KeyError:
        raise PresetError(
            f"unknown L-system '{name}', expected one of: {', '.join(LSYSTEM_PRESETS)}"
        ) from None


def build_lsystem(name: str, rng: Optional[UniformSource] = None) -> LSystem:
    """Create an L-system loaded with the root and rules of a preset."""
    preset = get_preset(name)
    lsys = LSystem(rng=rng)
    lsys.set_root(preset["root"])
    for lhs, rhs, prob in preset["rules"]:
        lsys.add_production(lhs, rhs, prob)
    return lsys


def turtle_for(name: str, pen_width: float = THIN_LINES) -> TurtleDescriptor:
    preset = get_preset(name)
    return TurtleDescriptor(angle=preset["angle"], length=preset["length"], pen_width=pen_width)
