"""Task rule definitions -- declarative task kinds, windows and conditions

A RuleTable is built once at startup and handed to the generator
explicitly; nothing reads it as module state.
"""

from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .enums import TaskType
from .patient import Patient


class TaskRule(BaseModel):
    """One task kind with its window offsets and applicability condition"""

    model_config = ConfigDict(frozen=True)

    type: TaskType = Field(description="Task kind produced by this rule")
    label: str = Field(description="Human-readable task name")
    window_start_hours: float = Field(ge=0, description="Hours after discharge the window opens")
    window_end_hours: float = Field(ge=0, description="Hours after discharge the window closes")
    condition: Callable[[Patient], bool] = Field(
        exclude=True, description="Pure predicate deciding whether the rule applies"
    )

    @model_validator(mode="after")
    def _check_window(self) -> "TaskRule":
        if self.window_start_hours > self.window_end_hours:
            raise ValueError(
                f"rule {self.type}: window_start_hours must not exceed window_end_hours"
            )
        return self

    def applies_to(self, patient: Patient) -> bool:
        return bool(self.condition(patient))


class RuleTable(BaseModel):
    """Ordered, immutable collection of task rules"""

    model_config = ConfigDict(frozen=True)

    rules: tuple[TaskRule, ...] = Field(description="Rules in evaluation order")

    @model_validator(mode="after")
    def _check_unique_types(self) -> "RuleTable":
        seen: set[TaskType] = set()
        for rule in self.rules:
            if rule.type in seen:
                raise ValueError(f"duplicate rule for task type {rule.type}")
            seen.add(rule.type)
        return self

    def get(self, task_type: TaskType) -> TaskRule | None:
        """Look up the rule for a task kind"""
        for rule in self.rules:
            if rule.type == task_type:
                return rule
        return None

    def label_for(self, task_type: TaskType) -> str:
        """Display label for a task kind, falling back to the enum value"""
        rule = self.get(task_type)
        return rule.label if rule is not None else str(task_type)
