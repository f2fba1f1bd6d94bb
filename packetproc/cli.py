"""Command line entry point: generate a sample file if needed and process it."""

from __future__ import annotations

import argparse
import os

from .generator import generate_random_sample_file_name, write_random_pairs_to_file
from .processor import (
    count_and_write_in_one_batch,
    count_and_write_one_by_one,
    generate_result_file_name,
)
from .textutils import Timer

_RULE = "======================================"


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="packetproc",
        description="Count Latin and other characters of base64 encoded samples.",
    )
    parser.add_argument(
        "-i",
        dest="input",
        default="",
        help="Path to input file - generated when not given",
    )
    parser.add_argument(
        "-o",
        dest="output",
        default="",
        help="Path to output file - derived from the input file when not given",
    )
    parser.add_argument(
        "-n",
        dest="n_samples",
        type=int,
        default=100,
        help="Number of samples to generate/process (default 100)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    timer = Timer()
    input_file: str = args.input
    output_file: str = args.output
    n_samples: int = args.n_samples

    if not input_file:
        print(_RULE)
        input_file = os.path.normpath(os.path.join(".", generate_random_sample_file_name()))
        print("Generating file, please wait ... ", input_file)
        timer.start()
        write_random_pairs_to_file(input_file, n_samples)
        timer.print_diff_milli("WriteRandomPairsToFile")

    if not output_file:
        output_file = generate_result_file_name(input_file)
        print("Generate output file: ", output_file)

    print("Using input file:", input_file)
    print("Using output file:", output_file)
    print("Number of samples that will be processes:", n_samples)

    print(_RULE)
    print(f"Processing <{n_samples}> samples from file <{input_file}>")
    print(_RULE)

    print("Read One -> Process One -> Write One")
    timer.start()
    count_and_write_one_by_one(input_file, output_file)
    timer.print_diff_milli("CountAndWriteToFileOneByOne")

    print(_RULE)

    print("Read All -> Process All -> Write All")
    timer.start()
    count_and_write_in_one_batch(input_file, output_file, n_samples)
    timer.print_diff_milli("CountAndWriteToFileInOneBatch")

    print(_RULE)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())