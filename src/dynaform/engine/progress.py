"""
Indicador de progreso por secciones ("Sección i de N").
"""

from dataclasses import dataclass
from enum import Enum

from dynaform.engine.state import NavigationState
from dynaform.models import FormSchema


class StepStatus(str, Enum):
    COMPLETED = "completed"
    CURRENT = "current"
    PENDING = "pending"


@dataclass(frozen=True)
class StepMark:
    title: str
    status: StepStatus


@dataclass(frozen=True)
class Progress:
    """Paso actual (base 1), total y marca por sección."""
    current_step: int
    total_steps: int
    steps: tuple[StepMark, ...]

    @property
    def percentage(self) -> int:
        return int(self.current_step / self.total_steps * 100)


def progress(schema: FormSchema, navigation: NavigationState) -> Progress:
    """Calcula el progreso; tras el envío todas las secciones quedan completas."""
    current = navigation.current_section_index
    steps = []
    for idx, section in enumerate(schema.sections):
        if navigation.submitted or idx < current:
            status = StepStatus.COMPLETED
        elif idx == current:
            status = StepStatus.CURRENT
        else:
            status = StepStatus.PENDING
        steps.append(StepMark(title=section.title, status=status))
    return Progress(
        current_step=current + 1,
        total_steps=schema.section_count,
        steps=tuple(steps),
    )
