"""Top-level package for diff-constraints."""
import logging

from .checker import (  # noqa: F401
    check_constraint_case,
    check_constraint_cases,
    check_constraints,
    format_verdict,
)
from .parsing import (  # noqa: F401
    Constraint,
    ConstraintCase,
    InputFormatError,
    iter_constraint_cases,
)
from .union_find import WeightedUnionFind  # noqa: F401

__version__ = "0.0.1"

# Good practice: https://docs.python-guide.org/writing/logging/#logging-in-a-library
logging.getLogger(__name__).addHandler(logging.NullHandler())
