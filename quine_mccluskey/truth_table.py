"""
Sum-of-minterms text format and truth table helpers.

One output function per line, don't-cares optional:
    f = sum{0,2,3,4} d{5,7}
    g = sum{1,6} + d{0,3}
    h = sum{}
Blank lines and lines starting with '#' are ignored.
"""

from __future__ import annotations
import itertools
import random
import re
from typing import Dict, Iterable, List, Optional, Set, Tuple

from quine_mccluskey.errors import TruthTableFormatError

# name -> (on_set, dc_set)
FunctionTable = Dict[str, Tuple[Set[int], Set[int]]]

_LINE_RE = re.compile(
    r"""^\s*([A-Za-z_][A-Za-z0-9_]*)\s*=\s*sum\s*\{\s*([0-9,\s]*)\s*\}\s*(?:\+?\s*d\s*\{\s*([0-9,\s]*)\s*\}\s*)?$"""
)


def _parse_index_list(body: Optional[str]) -> Set[int]:
    if body is None or body.strip() == "":
        return set()
    return {int(tok) for tok in (t.strip() for t in body.split(',')) if tok}


def parse_sum_of_minterms(lines: Iterable[str]) -> FunctionTable:
    """Parse sum-of-minterms lines into name -> (on_set, dc_set).

    Raises:
        TruthTableFormatError: a line does not match the format, a name
            repeats, ON and DC overlap, or no function is present
    """
    functions: FunctionTable = {}
    for lineno, raw in enumerate(lines, 1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        m = _LINE_RE.match(line)
        if not m:
            raise TruthTableFormatError(f"Line {lineno}: invalid format -> {line}")
        name = m.group(1)
        if name in functions:
            raise TruthTableFormatError(f"Line {lineno}: output '{name}' defined twice")
        on_set = _parse_index_list(m.group(2))
        dc_set = _parse_index_list(m.group(3))
        if on_set & dc_set:
            raise TruthTableFormatError(
                f"Line {lineno}: output '{name}' has overlap between ON and DC: {sorted(on_set & dc_set)}"
            )
        functions[name] = (on_set, dc_set)
    if not functions:
        raise TruthTableFormatError("No outputs found.")
    return functions


def parse_sum_of_minterms_file(path: str) -> FunctionTable:
    with open(path, "r", encoding="utf-8") as f:
        return parse_sum_of_minterms(f)


def format_sum_of_minterms(functions: FunctionTable) -> str:
    lines = []
    for name in sorted(functions):
        on_set, dc_set = functions[name]
        on_part = ",".join(str(i) for i in sorted(on_set))
        dc_part = ",".join(str(i) for i in sorted(dc_set))
        if dc_set:
            lines.append(f"{name} = sum{{{on_part}}} d{{{dc_part}}}")
        else:
            lines.append(f"{name} = sum{{{on_part}}}")
    return "\n".join(lines)


def write_sum_of_minterms_file(path: str, functions: FunctionTable) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write(format_sum_of_minterms(functions))


def random_functions(
    n_inputs: int,
    n_outputs: int,
    *,
    on_ratio: float = 0.35,
    dc_ratio: float = 0.15,
    ensure_on: bool = True,
    seed: Optional[int] = None,
) -> FunctionTable:
    """Draw random ON/DC sets for f1..fM.

    The ON-set is capped at half the rows; DC indices never overlap ON.
    """
    if n_inputs < 1 or n_outputs < 1:
        raise ValueError("n_inputs and n_outputs must be >= 1")
    rng = random.Random(seed)
    n_rows = 1 << n_inputs
    max_on = n_rows // 2
    want_on = min(int(on_ratio * n_rows), max_on)
    want_dc = max(0, int(dc_ratio * n_rows))

    functions: FunctionTable = {}
    all_indices = list(range(n_rows))
    for j in range(1, n_outputs + 1):
        on_k = want_on
        if ensure_on and on_k == 0 and max_on > 0:
            on_k = 1
        on_set = set(rng.sample(all_indices, on_k)) if on_k > 0 else set()
        remaining = [i for i in all_indices if i not in on_set]
        dc_k = min(want_dc, len(remaining))
        dc_set = set(rng.sample(remaining, dc_k)) if dc_k > 0 else set()
        functions[f"f{j}"] = (on_set, dc_set)
    return functions


def generate_random_file(
    path: str,
    n_inputs: int,
    n_outputs: int,
    *,
    on_ratio: float = 0.35,
    dc_ratio: float = 0.15,
    seed: Optional[int] = None,
) -> FunctionTable:
    functions = random_functions(
        n_inputs, n_outputs, on_ratio=on_ratio, dc_ratio=dc_ratio, seed=seed
    )
    write_sum_of_minterms_file(path, functions)
    return functions


def build_truth_table(
    n_inputs: int,
    functions: FunctionTable,
) -> Tuple[List[str], List[str], List[str]]:
    """
    Returns:
      - inputs_bits: 2^N strings of N bits, MSB first
      - outputs_trits: 2^N strings with one '0', '1' or '-' per output
      - output_names: ordered output names
    """
    if n_inputs < 1:
        raise ValueError("n_inputs must be >= 1")
    max_index = (1 << n_inputs) - 1
    out_names = sorted(functions)

    for name, (on_set, dc_set) in functions.items():
        bad = sorted(i for i in on_set | dc_set if i < 0 or i > max_index)
        if bad:
            raise TruthTableFormatError(f"Output '{name}' has invalid indices: {bad} (N={n_inputs})")

    inputs_bits = [''.join(bits) for bits in itertools.product('01', repeat=n_inputs)]
    rows: List[str] = []
    for i in range(1 << n_inputs):
        chars = []
        for name in out_names:
            on_set, dc_set = functions[name]
            if i in on_set:
                chars.append('1')
            elif i in dc_set:
                chars.append('-')
            else:
                chars.append('0')
        rows.append(''.join(chars))
    return inputs_bits, rows, out_names


def print_truth_table(
    inputs_bits: List[str],
    outputs_trits: List[str],
    input_names: Optional[List[str]] = None,
    output_names: Optional[List[str]] = None,
) -> None:
    if not inputs_bits or not outputs_trits:
        print("(empty truth table)")
        return
    if input_names is None:
        input_names = [f"x{i + 1}" for i in range(len(inputs_bits[0]))]
    if output_names is None:
        output_names = [f"f{i + 1}" for i in range(len(outputs_trits[0]))]

    print(" ".join(input_names + output_names))
    for xb, yb in zip(inputs_bits, outputs_trits):
        print(f"{' '.join(xb)} {' '.join(yb)}")
