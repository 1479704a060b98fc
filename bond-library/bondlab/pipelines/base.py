"""Base pipeline abstract class for decision pipeline implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from bondlab.interfaces import EvaluationRequest


class BasePipeline(ABC):
    """Abstract base class for decision pipelines.

    Subclasses implement can_evaluate() and evaluate() for one request type
    and hold their threshold policy on `self.policy`.
    """

    name: str = "pipeline"

    @abstractmethod
    def can_evaluate(self, request: EvaluationRequest) -> bool:
        """Return True if this pipeline handles the request type."""
        ...

    @abstractmethod
    def evaluate(self, request: EvaluationRequest) -> Any:
        """Compute metrics, checkpoints and the decision."""
        ...
