"""Exception types raised by the bond analysis library.

Two kinds of failure reach callers:
- **Invalid input**: a request field is missing, non-numeric, non-finite or
  outside its domain. Raised before any computation.
- **Computation failure**: numeric degeneracy inside a pipeline (division by
  zero, float overflow). Raised by the engine boundary with the original
  exception chained.
"""

from __future__ import annotations


class BondAnalysisError(Exception):
    """Base class for all library errors."""


class InvalidInputError(BondAnalysisError, ValueError):
    """A request field failed validation."""


class ComputationError(BondAnalysisError, ArithmeticError):
    """A pipeline failed while computing its metrics."""


class ConvergenceError(ComputationError):
    """Newton-Raphson exhausted its iterations without meeting the tolerance."""
