"""Base rule interface and violation model for the StyleIQ lint engine."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from styleiq.adapters.base import SourceUnit

__all__ = [
    "ViolationSeverity",
    "RuleViolation",
    "BaseRule",
    "FunctionRule",
    "FrozenRuleError",
]


class ViolationSeverity(str, Enum):
    WARNING = "WARNING"
    ERROR = "ERROR"


@dataclass(frozen=True)
class RuleViolation:
    rule_id: str
    severity: ViolationSeverity
    file_path: str
    line: int
    column: int
    message: str

    @property
    def sort_key(self) -> tuple[str, int, int, str]:
        return (self.file_path, self.line, self.column, self.rule_id)


class FrozenRuleError(AttributeError):
    def __init__(self, rule_id: str, attribute: str) -> None:
        self.rule_id = rule_id
        self.attribute = attribute
        super().__init__(f"Rule '{rule_id}' is registered and cannot be modified (attribute '{attribute}')")


class BaseRule(ABC):
    """A single style rule.

    Subclasses set ``rule_id``, ``description`` and ``severity`` as class
    attributes and implement :meth:`evaluate`. The severity may be overridden
    per instance, which is how configuration changes a rule's default.
    Once a registry has frozen the rule, any attribute assignment fails.
    """

    rule_id: str = "base"
    description: str = ""
    severity: ViolationSeverity = ViolationSeverity.WARNING

    def __init__(self, severity: ViolationSeverity | None = None) -> None:
        if severity is not None:
            self.severity = ViolationSeverity(severity)

    def __setattr__(self, name: str, value: Any) -> None:
        if self.__dict__.get("_frozen", False):
            raise FrozenRuleError(self.rule_id, name)
        super().__setattr__(name, value)

    def freeze(self) -> None:
        object.__setattr__(self, "_frozen", True)

    @property
    def frozen(self) -> bool:
        return self.__dict__.get("_frozen", False)

    @abstractmethod
    def evaluate(self, unit: SourceUnit) -> list[RuleViolation]:
        """Analyse a parsed source unit and return any violations found."""

    def violation(self, unit: SourceUnit, line: int, column: int, message: str) -> RuleViolation:
        return RuleViolation(
            rule_id=self.rule_id, severity=self.severity,
            file_path=unit.display_path, line=line, column=column, message=message,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(rule_id={self.rule_id!r}, severity={self.severity.value})"


class FunctionRule(BaseRule):
    """Adapt a plain ``predicate(unit) -> list[RuleViolation]`` callable into a rule."""

    def __init__(
        self,
        rule_id: str,
        predicate: Callable[[SourceUnit], list[RuleViolation]],
        *,
        description: str = "",
        severity: ViolationSeverity = ViolationSeverity.WARNING,
    ) -> None:
        super().__init__(severity)
        self.rule_id = rule_id
        self.description = description
        self.predicate = predicate

    def evaluate(self, unit: SourceUnit) -> list[RuleViolation]:
        return list(self.predicate(unit))
