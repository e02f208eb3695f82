"""Domain entities for passwordcheck.

Entities are immutable dataclasses describing one evaluation: its policy,
its input and its result.
"""

from passwordcheck.domain.entities.evaluation import (
    APPROVED,
    Approved,
    EvaluationInput,
    EvaluationResult,
    PasswordType,
    Rejected,
    RuleViolation,
    ViolationCode,
)
from passwordcheck.domain.entities.policy_config import PolicyConfig

__all__ = [
    "APPROVED",
    "Approved",
    "EvaluationInput",
    "EvaluationResult",
    "PasswordType",
    "PolicyConfig",
    "Rejected",
    "RuleViolation",
    "ViolationCode",
]
