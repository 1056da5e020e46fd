"""Validation models: violations and the report produced by a pipeline run."""

from typing import Optional

from pydantic import BaseModel, Field


class Violation(BaseModel):
    """A single violated constraint."""

    constraint: str                # Constraint type name
    message: str                   # The constraint's violation message
    position: int = Field(ge=0)    # Index of the constraint in the pipeline


class ValidationReport(BaseModel):
    """Outcome of running every constraint of a pipeline against one input."""

    satisfied: bool = Field(description="True if no constraint was violated")
    checked: int = Field(ge=0, description="Number of constraints evaluated")
    violations: list[Violation] = Field(default_factory=list)

    @property
    def messages(self) -> list[str]:
        return [v.message for v in self.violations]

    @property
    def first_violation(self) -> Optional[Violation]:
        return self.violations[0] if self.violations else None
