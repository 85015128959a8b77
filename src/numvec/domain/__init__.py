"""
Domain models для numvec

NumericVector — неизменяемая Pydantic модель вектора float.
"""

from numvec.domain.numeric_vector import NumericVector

__all__ = ["NumericVector"]
