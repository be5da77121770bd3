"""
Generators: the Gen value object, its factory, sized generators and
range dispatch.
"""

from .choose import choose, is_choosable, register_choosable
from .factory import Gens
from .gen import Either, Gen, Left, Right, Some
from .sized import SGen, SizedGen, UnsizedGen

__all__ = [
    "Either",
    "Gen",
    "Gens",
    "Left",
    "Right",
    "SGen",
    "SizedGen",
    "Some",
    "UnsizedGen",
    "choose",
    "is_choosable",
    "register_choosable",
]
