"""
Sum-of-products strings built from solved loops.
"""

from __future__ import annotations
from typing import List, Sequence

from quine_mccluskey.loop import Loop


def default_variable_names(n: int) -> List[str]:
    """A, B, C, ... for up to 26 variables, x0, x1, ... beyond."""
    if n <= 26:
        return [chr(ord('A') + i) for i in range(n)]
    return [f"x{i}" for i in range(n)]


def product_terms(loops: Sequence[Loop], variable_names: Sequence[str]) -> List[str]:
    return [loop.render(variable_names) for loop in loops]


def sum_of_products(loops: Sequence[Loop], variable_names: Sequence[str], output_name: str = "F") -> str:
    """Render "F = t1 + t2 + ..." ("F = 0" when there are no loops)."""
    terms = product_terms(loops, variable_names)
    rhs = " + ".join(terms) if terms else "0"
    return f"{output_name} = {rhs}"


def complement_sum_of_products(loops: Sequence[Loop], variable_names: Sequence[str], output_name: str = "F") -> str:
    """Render the zero-cell cover as "F' = t1 + t2 + ..."."""
    return sum_of_products(loops, variable_names, output_name + "'")
