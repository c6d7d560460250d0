from dataclasses import dataclass


@dataclass
class StepResult:
    step: str
    ok: bool
    value: int | None = None
    error: str | None = None
