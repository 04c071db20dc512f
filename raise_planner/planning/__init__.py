"""
Planning aids built on the team engine: suggestions, approval queue, optimizer.
"""

from .approvals import ApprovalItem, approval_urgency, build_approval_queue
from .optimizer import (
    STRATEGIES,
    OptimizationResult,
    OptimizerOptions,
    best_strategy,
    compare_strategies,
    optimize_budget,
)
from .suggestions import budget_suggestions

__all__ = [
    "ApprovalItem",
    "approval_urgency",
    "build_approval_queue",
    "STRATEGIES",
    "OptimizationResult",
    "OptimizerOptions",
    "best_strategy",
    "compare_strategies",
    "optimize_budget",
    "budget_suggestions",
]
