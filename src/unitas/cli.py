# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for matrix decompositions.

Usage:
    # QR factorization
    unitas -i matrix.json -o qr.json --op qr

    # Eigen decomposition of a Hermitian matrix
    unitas -i matrix.json -o eig.json --op eigen --shift rayleigh

    # Thin SVD, with solver progress on stderr
    unitas -i matrix.json -o svd.json --op svd --verbose

    # Solve A·x = b ("rhs" key in the input file)
    unitas -i system.json -o x.json --op solve
"""
import argparse
import logging
import sys

from unitas.adapters.json_io import JsonDecompositionWriter, JsonMatrixReader
from unitas.domain.config import DEFAULT_CONFIG, SHIFT_STRATEGIES, SolverConfig
from unitas.domain.eigen import power_method, qr_shift_eigs
from unitas.domain.hessenberg import hessenberg_reduce
from unitas.domain.qr import qr_decompose, solve
from unitas.domain.serialization import decomposition_to_payload
from unitas.domain.svd import svd

logger = logging.getLogger(__name__)

OPERATIONS = ("qr", "hessenberg", "eigen", "power", "svd", "solve")


def run(
    input_path: str,
    output_path: str,
    operation: str,
    config: SolverConfig = DEFAULT_CONFIG,
) -> dict:
    """
    Read a matrix, apply one operation and write the result payload.

    Returns:
        The payload written to output_path.
    """
    reader = JsonMatrixReader()
    writer = JsonDecompositionWriter()

    matrix, rhs = reader.read_matrix(input_path)
    logger.info("Read %dx%d matrix from %s", matrix.rows, matrix.cols, input_path)

    if operation == "qr":
        result = qr_decompose(matrix)
    elif operation == "hessenberg":
        result = hessenberg_reduce(matrix)
    elif operation == "eigen":
        result = qr_shift_eigs(matrix, config)
    elif operation == "power":
        result = power_method(matrix, config)
    elif operation == "svd":
        result = svd(matrix, config)
    elif operation == "solve":
        if rhs is None:
            raise ValueError(f"Operation 'solve' needs an 'rhs' entry in {input_path}")
        result = solve(matrix, rhs)
    else:
        raise ValueError(f"Unknown operation {operation!r}; expected one of {OPERATIONS}")

    payload = decomposition_to_payload(operation, result)
    writer.write(payload, output_path)
    logger.info("Wrote %s result to %s", operation, output_path)
    return payload


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        description="Dense complex matrix decompositions (QR, Hessenberg, eigen, SVD)"
    )
    parser.add_argument(
        '--input', '-i', required=True,
        help="Path to input JSON with a 'matrix' (and optional 'rhs') entry"
    )
    parser.add_argument(
        '--output', '-o', required=True,
        help="Path to write the result JSON"
    )
    parser.add_argument(
        '--op', choices=OPERATIONS, default="qr",
        help="Operation to run (default: qr)"
    )

    solver_group = parser.add_argument_group('eigen solver')
    solver_group.add_argument(
        '--shift', choices=SHIFT_STRATEGIES, default=DEFAULT_CONFIG.shift,
        help=f"Shift strategy (default: {DEFAULT_CONFIG.shift})"
    )
    solver_group.add_argument(
        '--max-iterations', type=int, default=DEFAULT_CONFIG.max_iterations,
        help=f"Iteration cap per deflation level (default: {DEFAULT_CONFIG.max_iterations})"
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true', default=False,
        help="Log solver details to stderr"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = SolverConfig(shift=args.shift, max_iterations=args.max_iterations)
        run(args.input, args.output, args.op, config)
        print(f"Wrote {args.op} result to {args.output}")
    except FileNotFoundError:
        print(
            f"Error: Input file not found: {args.input}\n"
            f"Expected a JSON file with a 'matrix' entry.",
            file=sys.stderr,
        )
        sys.exit(1)
    except ValueError as e:
        # LinalgError and JSONDecodeError both derive from ValueError
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
