import logging
from dataclasses import dataclass, field
from typing import List, NamedTuple

import regex

logger = logging.getLogger(__name__)

# plain ASCII decimal integers, with an optional sign
integer_re = regex.compile(r"[+-]?[0-9]+")


class InputFormatError(ValueError):
    pass


class Constraint(NamedTuple):
    # value(i) - value(j) == c, 0-based indices
    i: int
    j: int
    c: int


@dataclass
class ConstraintCase:
    variable_count: int
    constraints: List[Constraint] = field(default_factory=list)
    case_number: int = 1


class _TokenReader:
    def __init__(self, file_obj):
        self._tokens = self._yield_tokens(file_obj)
        self.line_number = 0

    def _yield_tokens(self, file_obj):
        for line_number, line in enumerate(file_obj, start=1):
            for token in line.split():
                yield line_number, token

    def read_int(self, what):
        try:
            self.line_number, token = next(self._tokens)
        except StopIteration:
            raise InputFormatError(f"Unexpected end of input while reading {what}") from None
        # int() alone would also accept "1_0" and non-ASCII digits
        if not integer_re.fullmatch(token):
            raise InputFormatError(
                f"Line {self.line_number}: expected an integer for {what}, found {token!r}"
            )
        return int(token)

    def read_count(self, what):
        value = self.read_int(what)
        if value < 0:
            raise InputFormatError(
                f"Line {self.line_number}: {what}={value} must be non-negative"
            )
        return value

    def ensure_exhausted(self):
        for line_number, token in self._tokens:
            raise InputFormatError(
                f"Line {line_number}: unexpected token {token!r} after the last test case"
            )


def _read_index(reader, what, variable_count, index_base):
    value = reader.read_int(what)
    if not index_base <= value < variable_count + index_base:
        raise InputFormatError(
            f"Line {reader.line_number}: {what}={value} out of range "
            f"[{index_base}, {variable_count - 1 + index_base}]"
        )
    return value - index_base


def _read_constraint_case(reader, case_number, index_base):
    variable_count = reader.read_count(f"variable count of test case {case_number}")
    constraint_count = reader.read_count(f"constraint count of test case {case_number}")

    constraints = []
    for k in range(1, constraint_count + 1):
        what = f"constraint {k} of test case {case_number}"
        i = _read_index(reader, f"first variable of {what}", variable_count, index_base)
        j = _read_index(reader, f"second variable of {what}", variable_count, index_base)
        c = reader.read_int(f"difference of {what}")
        constraints.append(Constraint(i, j, c))

    return ConstraintCase(
        variable_count=variable_count, constraints=constraints, case_number=case_number
    )


def iter_constraint_cases(file_obj, index_base=1):
    """
    Lazily parse the whitespace separated input format::

        t
        n m          (for each test case)
        i j c        (m times)

    into ``ConstraintCase`` objects with 0-based variable indices. Indices in
    the input start at ``index_base`` (0 or 1).
    """
    if index_base not in (0, 1):
        raise ValueError(f"index_base={index_base!r} must be 0 or 1")

    reader = _TokenReader(file_obj)
    case_total = reader.read_count("number of test cases")
    logger.debug(f"Reading {case_total} test cases")

    for case_number in range(1, case_total + 1):
        yield _read_constraint_case(reader, case_number, index_base)

    reader.ensure_exhausted()
