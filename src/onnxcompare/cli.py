"""Command-line entry point: ``onnxcompare MODEL1 MODEL2``."""

__docformat__ = "restructuredtext"
__all__ = ["main"]

import argparse
import contextlib
import json
import sys
from pathlib import Path

from onnxcompare._onnxcompare import OnnxCompare
from onnxcompare.report import render_text, to_dict


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="onnxcompare",
        description="Compare two ONNX models and report what changed.",
    )
    parser.add_argument("model1", type=str, help="Path to the first ONNX model")
    parser.add_argument("model2", type=str, help="Path to the second ONNX model")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument(
        "--all", action="store_true", help="Also list entries that did not change"
    )
    parser.add_argument(
        "--check", action="store_true", help="Validate both models with onnx.checker"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose output")
    parser.add_argument(
        "--exit-code",
        action="store_true",
        help="Exit with status 1 when the models differ",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the comparison command.

    :param argv: Arguments (defaults to ``sys.argv[1:]``)
    :return: Process exit status
    """
    args = _build_parser().parse_args(argv)
    comparator = OnnxCompare(verbose=args.verbose, check_model=args.check)

    # Keep stdout clean for JSON consumers
    progress = contextlib.redirect_stdout(sys.stderr) if args.json else contextlib.nullcontext()
    try:
        with progress:
            result = comparator.compare(args.model1, args.model2)
    except (OSError, ValueError) as error:
        print(f"Error comparing ONNX models: {error}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(to_dict(result), indent=2))
    else:
        print(
            render_text(
                result,
                model1_name=Path(args.model1).name,
                model2_name=Path(args.model2).name,
                show_unchanged=args.all,
            ),
            end="",
        )

    if args.exit_code and result.has_differences:
        return 1
    return 0
