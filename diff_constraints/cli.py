import logging
import os

import click

from .checker import check_constraint_cases, format_verdict
from .parsing import InputFormatError, iter_constraint_cases

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def _fix_workers_kwargs(kwargs):
    # Accept -1 as "num_workers"
    if kwargs["num_workers"] == -1:
        kwargs["num_workers"] = os.cpu_count()
    elif kwargs["num_workers"] < 1:
        raise click.BadParameter(
            "must be -1 or a positive integer", param_hint="'--num_workers'"
        )


def _write_verdicts(verdict_gen, output_file):
    case_count = 0
    consistent_count = 0
    for consistent in verdict_gen:
        output_file.write(format_verdict(consistent) + "\n")
        case_count += 1
        consistent_count += consistent
    return case_count, consistent_count


@click.command()
@click.option(
    "--input_file",
    type=click.File("r"),
    default="-",
    help="Path of the input file with the test cases. Defaults to standard input",
)
@click.option(
    "--output_file",
    type=click.File("w"),
    default="-",
    help="Path of the output file that will get one YES/NO line per test case. "
    "Defaults to standard output",
)
@click.option(
    "--index_base",
    type=click.IntRange(0, 1),
    default=1,
    help="Index of the first variable in the input: 1 for variables 1..n, 0 for 0..n-1",
)
@click.option(
    "--num_workers",
    type=int,
    default=1,
    help="Number of worker processes used to check test cases. "
    "Set -1 to use all available CPUs",
)
@click.option(
    "--multiprocessing_context",
    type=str,
    default="fork",
    help="Context name for multiprocessing when num_workers is not 1, "
    "like `spawn`, `fork`, `forkserver`",
)
def check(**kwargs):
    """
    Check, for each test case, whether the difference constraints
    `x_i - x_j = c` are consistent. Prints YES or NO per test case.
    """
    _fix_workers_kwargs(kwargs)
    constraint_case_gen = iter_constraint_cases(
        kwargs["input_file"], index_base=kwargs["index_base"]
    )
    verdict_gen = check_constraint_cases(
        constraint_case_gen,
        num_workers=kwargs["num_workers"],
        multiprocessing_context=kwargs["multiprocessing_context"],
    )

    try:
        case_count, consistent_count = _write_verdicts(verdict_gen, kwargs["output_file"])
    except InputFormatError as e:
        raise click.ClickException(f"Invalid input: {e}") from e

    logger.info(f"Checked {case_count} test cases, {consistent_count} consistent")

    return 0
