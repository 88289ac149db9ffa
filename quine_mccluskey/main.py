"""
Command line front end: minimize every output of a sum-of-minterms file.

Usage:
    python3 -m quine_mccluskey.main random [N] [M] [on_ratio] [dc_ratio]
    python3 -m quine_mccluskey.main functions.txt [N] [names]
"""

from __future__ import annotations
import os
import sys
from typing import List, Optional

from quine_mccluskey.config import SolverConfig
from quine_mccluskey.errors import QuineMcCluskeyError
from quine_mccluskey.expression import (
    complement_sum_of_products,
    default_variable_names,
    sum_of_products,
)
from quine_mccluskey.solver import minimize, solve_complement
from quine_mccluskey.truth_table import (
    build_truth_table,
    generate_random_file,
    parse_sum_of_minterms_file,
    print_truth_table,
)
from quine_mccluskey.verify import check_cover


def run_from_sum_file(
    path: str,
    n_inputs: int,
    input_names: Optional[List[str]] = None,
    config: Optional[SolverConfig] = None,
) -> bool:
    """Minimize each output of the file and print the results.

    Returns:
        True if every cover passed the exhaustive check
    """
    functions = parse_sum_of_minterms_file(path)
    inputs_bits, outputs_trits, out_names = build_truth_table(n_inputs, functions)

    if input_names is None:
        input_names = default_variable_names(n_inputs)

    print("Truth table:")
    print_truth_table(inputs_bits, outputs_trits, input_names, out_names)

    all_ok = True
    for out_name in out_names:
        on_set, dc_set = functions[out_name]
        solution = minimize(on_set, dc_set, n_inputs, config=config)
        zeros = solve_complement(on_set, dc_set, n_inputs, config=config)
        report = check_cover(solution.loops, on_set, dc_set, n_inputs)
        all_ok = all_ok and report.ok

        print(f"\n=== {out_name} ===")
        print("Loops:", [loop.cube for loop in solution.loops])
        print(f"Essential: {solution.essential_count}/{len(solution.loops)}")
        print("SOP:", sum_of_products(solution.loops, input_names, out_name))
        print("Complement:", complement_sum_of_products(zeros, input_names, out_name))
        if report.ok:
            print("Check: ok")
        else:
            print(f"Check: FAILED uncovered={list(report.uncovered)} false={list(report.false_hits)}")

    return all_ok


def print_usage():
    print(
        "Usage:\n"
        "  python3 -m quine_mccluskey.main random [N] [M] [on_ratio] [dc_ratio]\n"
        "      -> Generate random_functions.txt then minimize it.\n"
        "         Defaults: N=4, M=2, on_ratio=0.35 (<=0.5), dc_ratio=0.15\n"
        "\n"
        "  python3 -m quine_mccluskey.main functions.txt [N] [names]\n"
        "      -> Minimize a sum-of-minterms file (supports d{...}); default N=3.\n"
        "         names: comma separated input names, e.g. A,B,C\n"
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print_usage()
        return 1

    mode = args[0].strip()
    config = SolverConfig.from_env_or_file()

    try:
        if mode.lower() == "random":
            try:
                N = int(args[1]) if len(args) >= 2 else 4
                M = int(args[2]) if len(args) >= 3 else 2
                on = float(args[3]) if len(args) >= 4 else 0.35
                dc = float(args[4]) if len(args) >= 5 else 0.15
            except ValueError:
                print("Error: parameters must be numeric (N,M ints; on_ratio, dc_ratio floats).")
                return 1

            if on > 0.5:
                print("Warning: on_ratio > 0.5 is clamped to 0.5.")
                on = 0.5

            out_path = "random_functions.txt"
            generate_random_file(out_path, n_inputs=N, n_outputs=M, on_ratio=on, dc_ratio=dc)
            print(f"[i] Generated random functions -> {out_path}")
            return 0 if run_from_sum_file(out_path, N, config=config) else 2

        # file mode: functions.txt [N] [names]
        path = mode
        try:
            N = int(args[1]) if len(args) >= 2 else 3
        except ValueError:
            print("Error: N must be an integer.")
            return 1

        if not os.path.exists(path):
            print(f"Error: file '{path}' not found.")
            return 1

        input_names = args[2].split(",") if len(args) >= 3 else None
        if input_names is not None and len(input_names) != N:
            print(f"Error: expected {N} input names, got {len(input_names)}.")
            return 1

        return 0 if run_from_sum_file(path, N, input_names, config=config) else 2
    except (QuineMcCluskeyError, ValueError) as exc:
        print(f"Error: {exc}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
