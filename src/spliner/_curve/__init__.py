from ._curve import Curve, curve
from ._curve_evaluate import curve_evaluate
from ._curve_extrapolate import curve_extrapolate
from ._split_at_duplicates import split_at_duplicates

__all__ = [
    "Curve",
    "curve",
    "curve_evaluate",
    "curve_extrapolate",
    "split_at_duplicates",
]
