"""Evaluation of charge test vectors.

Each vector is priced with an independent ``charge`` call and compared
to its expected amount within a tolerance. Vectors expecting an error pass
when pricing raises a call charge error.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

import pandas as pd

from callcharge.calculators.charge_calculator import charge
from callcharge.exceptions import CallChargeError
from callcharge.models.tariff import Tariff
from callcharge.models.vector import ChargeVector
from callcharge.utils.logging_utils import LogContext, generate_run_id

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE = 0.01


@dataclass
class VectorOutcome:
    """Result of pricing one test vector.

    Attributes:
        vector: The vector that was priced
        actual_amount: Amount returned by charge (None if it raised)
        error: Message of the error raised (None if it succeeded)
        passed: Whether the outcome matches the expectation
    """

    vector: ChargeVector
    actual_amount: Optional[float]
    error: Optional[str]
    passed: bool


@dataclass
class BatchSummary:
    """Aggregated outcome of a vector run.

    Attributes:
        total: Number of vectors evaluated
        passed: Vectors matching their expectation
        failed: Vectors with a wrong amount or an unexpected outcome
        errored: Vectors whose pricing raised
        run_id: Identifier attached to the run's log records
    """

    total: int
    passed: int
    failed: int
    errored: int
    run_id: str

    @property
    def all_passed(self) -> bool:
        """Whether every vector passed."""
        return self.failed == 0


def evaluate_vector(
    vector: ChargeVector,
    tariff: Optional[Tariff] = None,
    tolerance: float = DEFAULT_TOLERANCE,
) -> VectorOutcome:
    """Price a single vector and compare it to its expectation.

    Args:
        vector: The vector to price
        tariff: Rate table (default: DEFAULT_TARIFF)
        tolerance: Allowed absolute difference between amounts

    Returns:
        VectorOutcome for the vector
    """
    try:
        amount = charge(vector.start_time, vector.end_time, vector.is_transform, tariff)
    except CallChargeError as e:
        logger.debug(f"Vector {vector.num} raised {type(e).__name__}: {e}")
        return VectorOutcome(
            vector=vector,
            actual_amount=None,
            error=f"{type(e).__name__}: {e}",
            passed=vector.expects_error,
        )

    passed = (
        not vector.expects_error
        and abs(amount - vector.expected_amount) <= tolerance
    )
    if not passed:
        logger.warning(
            f"Vector {vector.num} expected {vector.expected_amount}, got {amount}"
        )
    return VectorOutcome(vector=vector, actual_amount=amount, error=None, passed=passed)


def evaluate_vectors(
    vectors: List[ChargeVector],
    tariff: Optional[Tariff] = None,
    tolerance: float = DEFAULT_TOLERANCE,
    run_id: Optional[str] = None,
) -> List[VectorOutcome]:
    """Price every vector independently.

    Args:
        vectors: Vectors to price
        tariff: Rate table (default: DEFAULT_TARIFF)
        tolerance: Allowed absolute difference between amounts
        run_id: Identifier attached to log records (generated if omitted)

    Returns:
        Outcomes in the same order as vectors
    """
    if tolerance < 0:
        raise ValueError(f"tolerance cannot be negative, got {tolerance}")

    outcomes = []
    with LogContext(run_id=run_id or generate_run_id()):
        for vector in vectors:
            with LogContext(vector_num=vector.num):
                outcomes.append(evaluate_vector(vector, tariff, tolerance))

    return outcomes


def summarize_outcomes(
    outcomes: List[VectorOutcome], run_id: Optional[str] = None
) -> BatchSummary:
    """Aggregate vector outcomes into a summary.

    Example:
        >>> summary = summarize_outcomes([])
        >>> summary.total, summary.all_passed
        (0, True)
    """
    passed = sum(1 for o in outcomes if o.passed)
    errored = sum(1 for o in outcomes if o.error is not None)

    return BatchSummary(
        total=len(outcomes),
        passed=passed,
        failed=len(outcomes) - passed,
        errored=errored,
        run_id=run_id or generate_run_id(),
    )


def outcomes_to_dataframe(outcomes: List[VectorOutcome]) -> pd.DataFrame:
    """Tabulate vector outcomes for reporting.

    Returns:
        One row per outcome with the vector, expected and actual amounts
    """
    columns = [
        "num",
        "start_time",
        "end_time",
        "is_transform",
        "expected",
        "actual",
        "status",
    ]
    rows = []
    for outcome in outcomes:
        vector = outcome.vector
        rows.append(
            {
                "num": vector.num,
                "start_time": vector.start_time,
                "end_time": vector.end_time,
                "is_transform": vector.is_transform,
                "expected": "error"
                if vector.expects_error
                else f"{vector.expected_amount:.2f}",
                "actual": outcome.error
                if outcome.error is not None
                else f"{outcome.actual_amount:.2f}",
                "status": "PASS" if outcome.passed else "FAIL",
            }
        )

    return pd.DataFrame(rows, columns=columns)
