"""
Protocol-based interfaces for the extension points of the library.

typing.Protocol gives structural subtyping: any class with `can_evaluate()`
and `evaluate()` can be registered with the EvaluationEngine, so new decision
pipelines do not require changes to the engine.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class EvaluationRequest(Protocol):
    """Marker protocol for pipeline inputs.

    Requests are data-only; decision logic lives in Pipeline implementations.
    """

    pass


class Pipeline(Protocol):
    """Protocol for decision pipelines.

    Each pipeline handles one request type and turns it into a result
    carrying metrics, checkpoints and a decision.
    """

    @property
    def name(self) -> str:
        """Short identifier used in logs and error messages (e.g. 'screener')."""
        ...

    def can_evaluate(self, request: EvaluationRequest) -> bool:
        """Return True if this pipeline handles the given request type."""
        ...

    def evaluate(self, request: EvaluationRequest) -> Any:
        """Run the pipeline and return its result object."""
        ...
