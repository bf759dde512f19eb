"""Calculator modules for the call charge system."""

from callcharge.calculators.batch_calculator import (
    BatchSummary,
    VectorOutcome,
    evaluate_vector,
    evaluate_vectors,
    outcomes_to_dataframe,
    summarize_outcomes,
)
from callcharge.calculators.charge_calculator import (
    billed_minutes,
    calculate_charge_breakdown,
    charge,
    price_interval,
)
from callcharge.calculators.dst_calculator import (
    calculate_dst_adjustment,
    dst_window_for_year,
    nth_sunday,
)
from callcharge.calculators.pricing_calculator import (
    calculate_cost,
    calculate_cost_decimal,
)

__all__ = [
    # batch_calculator
    "BatchSummary",
    "VectorOutcome",
    "evaluate_vector",
    "evaluate_vectors",
    "outcomes_to_dataframe",
    "summarize_outcomes",
    # charge_calculator
    "billed_minutes",
    "calculate_charge_breakdown",
    "charge",
    "price_interval",
    # dst_calculator
    "calculate_dst_adjustment",
    "dst_window_for_year",
    "nth_sunday",
    # pricing_calculator
    "calculate_cost",
    "calculate_cost_decimal",
]
