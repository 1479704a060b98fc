"""GraphQL types for the bond math queries."""

from __future__ import annotations

import strawberry


@strawberry.type
class YtmResult:
    """Annual-compounding yield to maturity (decimal) and solver diagnostics."""

    ytm: float
    iterations: int
    converged: bool


@strawberry.type
class DurationResult:
    """Macaulay duration in years and modified duration D / (1 + y)."""

    macaulay: float
    modified: float
