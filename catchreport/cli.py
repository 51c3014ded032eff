"""Command line entry: turn a Catch2 report into a JSON results file."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .results import OutputMessage

PROG = "catchreport"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the conversion with input, output, compiler-output and test-file paths."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 4:
        print(
            "Input, output, compilation errors, and test file names are required but were not supplied."
        )
        print(
            f"Usage: {PROG} input_file_name output_file_name "
            "compilation_errors_file_name test_file_path"
        )
        return -1

    input_path, output_path, compilation_errors_path, test_file_path = args[:4]
    try:
        message = OutputMessage()
        message.load_from_catch2_xml(input_path, compilation_errors_path)
        message.generate_test_code_from_test_file(test_file_path)
        message.save_as_exercism_json(output_path)
    except Exception as error:  # report any failure and still finish normally
        print(f"Error: {error}")
    return 0


if __name__ == "__main__":
    sys.exit(main())