"""First-come, first-served service queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import TYPE_CHECKING

from .models import EmptyError, OperationType, Patient

if TYPE_CHECKING:
    from .undo import UndoStack


class ServiceQueue:
    """Patients waiting to be seen, in arrival order."""

    def __init__(self) -> None:
        self._patients: deque[Patient] = deque()

    def enqueue(self, patient: Patient, history: UndoStack | None = None) -> None:
        """Add a patient at the end; record it in history if given."""
        self._patients.append(patient)
        if history is not None:
            history.push(OperationType.ENQUEUE, patient)

    def dequeue(self, history: UndoStack | None = None) -> Patient:
        """Remove and return the first patient; record it in history if given."""
        if not self._patients:
            raise EmptyError("Fila vazia. Nenhum paciente para atender.")
        patient = self._patients.popleft()
        if history is not None:
            history.push(OperationType.DEQUEUE, patient)
        return patient

    def __iter__(self) -> Iterator[Patient]:
        return iter(list(self._patients))

    def __len__(self) -> int:
        return len(self._patients)

    def render(self) -> str:
        """Describe the queue in service order."""
        if not self._patients:
            return "Fila de atendimento vazia."
        lines = [f"\n===== FILA DE ATENDIMENTO ({len(self)}) ====="]
        lines.extend(
            f"{position}. {p.name} (CPF: {p.cpf})"
            for position, p in enumerate(self._patients, start=1)
        )
        lines.append("==================================")
        return "\n".join(lines)