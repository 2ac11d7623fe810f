import logging

import pytest
from diff_constraints.checker import (
    check_constraint_case,
    check_constraint_cases,
    check_constraints,
    format_verdict,
)
from diff_constraints.parsing import Constraint, ConstraintCase

CONTRADICTORY_CONSTRAINTS = [(0, 1, 5), (1, 2, 3), (0, 2, 9)]
CONSISTENT_CONSTRAINTS = [(0, 1, 5), (1, 2, 3), (0, 2, 8)]


def test_check_constraints_contradiction():
    assert not check_constraints(3, CONTRADICTORY_CONSTRAINTS)


def test_check_constraints_consistent():
    assert check_constraints(3, CONSISTENT_CONSTRAINTS)


def test_check_constraints_without_constraints():
    assert check_constraints(0, [])
    assert check_constraints(5, [])


def test_check_constraints_accepts_constraint_tuples_and_generators():
    constraints = (Constraint(i, j, c) for i, j, c in CONSISTENT_CONSTRAINTS)
    assert check_constraints(3, constraints)


def test_check_constraints_stops_at_first_contradiction():
    # the 4th constraint would raise IndexError if it were applied
    constraints = [*CONTRADICTORY_CONSTRAINTS, (0, 10, 1)]
    assert not check_constraints(3, constraints)


def test_check_constraints_out_of_range_raises():
    with pytest.raises(IndexError):
        check_constraints(2, [(0, 2, 1)])


def test_check_constraint_case_logs_first_contradiction(caplog):
    constraint_case = ConstraintCase(
        variable_count=3,
        constraints=[Constraint(*c) for c in CONTRADICTORY_CONSTRAINTS],
        case_number=7,
    )

    with caplog.at_level(logging.DEBUG, logger="diff_constraints.checker"):
        assert not check_constraint_case(constraint_case)

    assert "Test case 7 is inconsistent, first contradiction at constraint 3" in caplog.text


def test_check_constraint_case_logs_group_count(caplog):
    # {0, 1, 2} and {3, 4} are related, 5 is alone
    constraint_case = ConstraintCase(
        variable_count=6,
        constraints=[Constraint(0, 1, 2), Constraint(1, 2, 3), Constraint(4, 3, -1)],
        case_number=2,
    )

    with caplog.at_level(logging.DEBUG, logger="diff_constraints.checker"):
        assert check_constraint_case(constraint_case)

    assert "Test case 2 is consistent, 3 groups" in caplog.text


def _build_constraint_cases():
    return [
        ConstraintCase(3, [Constraint(*c) for c in CONTRADICTORY_CONSTRAINTS], 1),
        ConstraintCase(3, [Constraint(*c) for c in CONSISTENT_CONSTRAINTS], 2),
        ConstraintCase(2, [Constraint(0, 1, 4), Constraint(1, 0, 4)], 3),
        ConstraintCase(1, [], 4),
    ]


def test_check_constraint_cases_keeps_cases_independent():
    verdicts = list(check_constraint_cases(_build_constraint_cases()))
    assert verdicts == [False, True, False, True]


def test_check_constraint_cases_is_lazy():
    verdict_gen = check_constraint_cases(iter(_build_constraint_cases()))
    assert next(verdict_gen) is False
    assert next(verdict_gen) is True


def test_check_constraint_cases_with_workers_preserves_order():
    constraint_cases = _build_constraint_cases() * 10

    verdicts = list(
        check_constraint_cases(
            constraint_cases, num_workers=2, multiprocessing_context="fork", chunksize=3
        )
    )

    assert verdicts == [False, True, False, True] * 10


def test_check_constraint_cases_negative_workers_raises():
    with pytest.raises(ValueError, match="num_workers"):
        list(check_constraint_cases(_build_constraint_cases(), num_workers=-1))


@pytest.mark.parametrize("consistent, expected", [(True, "YES"), (False, "NO")])
def test_format_verdict(consistent, expected):
    assert format_verdict(consistent) == expected
