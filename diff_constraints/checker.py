import logging
import multiprocessing

from .helpers import build_pool_kwargs
from .union_find import WeightedUnionFind

logger = logging.getLogger(__name__)

YES = "YES"
NO = "NO"


def _apply_constraints(variable_count, constraints):
    uf = WeightedUnionFind(variable_count)
    for position, (i, j, c) in enumerate(constraints):
        if not uf.union_with_constraint(i, j, c):
            # remaining constraints are not applied
            return uf, position
    return uf, None


def check_constraints(variable_count, constraints):
    _, position = _apply_constraints(variable_count, constraints)
    return position is None


def check_constraint_case(constraint_case):
    uf, position = _apply_constraints(
        constraint_case.variable_count, constraint_case.constraints
    )
    if position is None:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                f"Test case {constraint_case.case_number} is consistent, "
                f"{len(uf.component_dict())} groups"
            )
        return True

    logger.debug(
        f"Test case {constraint_case.case_number} is inconsistent, "
        f"first contradiction at constraint {position + 1}"
    )
    return False


def check_constraint_cases(
    constraint_cases, num_workers=1, multiprocessing_context=None, chunksize=None
):
    """
    Yield one verdict per ``ConstraintCase``, in the same order as
    ``constraint_cases``. With ``num_workers != 1`` the cases are checked on
    a process pool; ``None`` or ``0`` workers means one per CPU.
    """
    if num_workers is not None and num_workers < 0:
        raise ValueError(f"num_workers={num_workers} must be >= 0")

    if num_workers == 1:
        for constraint_case in constraint_cases:
            yield check_constraint_case(constraint_case)
        return

    pool_kwargs = build_pool_kwargs(
        {
            "num_workers": num_workers,
            "multiprocessing_context": multiprocessing_context,
            "chunksize": chunksize,
        }
    )
    logger.info(
        f"Checking test cases with num_workers={pool_kwargs['num_workers']}, "
        f"multiprocessing_context={pool_kwargs['multiprocessing_context']}"
    )
    context = multiprocessing.get_context(pool_kwargs["multiprocessing_context"])
    with context.Pool(processes=pool_kwargs["num_workers"]) as pool:
        yield from pool.imap(
            check_constraint_case, constraint_cases, chunksize=pool_kwargs["chunksize"]
        )


def format_verdict(consistent):
    return YES if consistent else NO
