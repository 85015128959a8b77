"""
Math modules для numvec

Скалярные примитивы с IEEE-семантикой, валидация аргументов и описательная
статистика над последовательностями float.
"""

# Numerical Safeguards
from numvec.math.numerical_safeguards import (
    # Type checks
    is_integral,
    is_real_number,
    is_valid_float,
    # Validation
    validate_finite,
    validate_in_range,
    validate_integral,
    validate_length,
    # IEEE scalar functions
    ieee_ceil,
    ieee_divide,
    ieee_exp,
    ieee_exp10,
    ieee_floor,
    ieee_log,
    ieee_log10,
    ieee_trig,
    # Rounding
    round_half_away,
)

# Statistics
from numvec.math.statistics import (
    mean,
    percentile_linear,
    quantile_cut_points,
    std,
    variance,
    weighted_mean,
)

__all__ = [
    # Numerical Safeguards — Type checks
    "is_integral",
    "is_real_number",
    "is_valid_float",
    # Numerical Safeguards — Validation
    "validate_finite",
    "validate_in_range",
    "validate_integral",
    "validate_length",
    # Numerical Safeguards — IEEE scalar functions
    "ieee_ceil",
    "ieee_divide",
    "ieee_exp",
    "ieee_exp10",
    "ieee_floor",
    "ieee_log",
    "ieee_log10",
    "ieee_trig",
    # Numerical Safeguards — Rounding
    "round_half_away",
    # Statistics
    "mean",
    "percentile_linear",
    "quantile_cut_points",
    "std",
    "variance",
    "weighted_mean",
]
