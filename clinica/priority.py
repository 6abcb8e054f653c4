"""Priority service queue: the oldest patient is seen first."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from .models import CapacityError, EmptyError, OperationType, Patient

if TYPE_CHECKING:
    from .undo import UndoStack

CAPACITY = 20


def _sift_up(items: list[Patient], index: int) -> None:
    while index > 0:
        parent = (index - 1) // 2
        if items[parent].age >= items[index].age:
            return
        items[parent], items[index] = items[index], items[parent]
        index = parent


def _sift_down(items: list[Patient], index: int) -> None:
    size = len(items)
    while True:
        largest = index
        for child in (2 * index + 1, 2 * index + 2):
            if child < size and items[child].age > items[largest].age:
                largest = child
        if largest == index:
            return
        items[index], items[largest] = items[largest], items[index]
        index = largest


def _pop_root(items: list[Patient]) -> Patient:
    root = items[0]
    last = items.pop()
    if items:
        items[0] = last
        _sift_down(items, 0)
    return root


class PriorityQueue:
    """Max-heap of patients by age, holding at most CAPACITY patients."""

    capacity = CAPACITY

    def __init__(self) -> None:
        self._heap: list[Patient] = []

    def enqueue(self, patient: Patient, history: UndoStack | None = None) -> None:
        """Add a patient; record it in history if given."""
        if len(self._heap) >= self.capacity:
            raise CapacityError(
                "Heap cheio. Capacidade maxima de atendimentos prioritarios "
                f"atingida ({self.capacity})."
            )
        self._heap.append(patient)
        _sift_up(self._heap, len(self._heap) - 1)
        if history is not None:
            history.push(OperationType.ENQUEUE, patient)

    def dequeue(self, history: UndoStack | None = None) -> Patient:
        """Remove and return the oldest patient; record it in history if given."""
        if not self._heap:
            raise EmptyError("Heap vazio. Nenhum paciente prioritario para atender.")
        patient = _pop_root(self._heap)
        if history is not None:
            history.push(OperationType.DEQUEUE, patient)
        return patient

    def ordered(self) -> Iterator[Patient]:
        """Yield patients in the order they would be served."""
        items = list(self._heap)
        while items:
            yield _pop_root(items)

    def __len__(self) -> int:
        return len(self._heap)

    def render(self) -> str:
        """Describe the queue in service order."""
        if not self._heap:
            return "Fila de atendimento prioritario vazia."
        lines = [
            f"\n===== FILA DE ATENDIMENTO PRIORITARIO ({len(self)}) =====",
            "Ordem de atendimento por prioridade (idade):",
        ]
        lines.extend(
            f"{position}. {p.name} (Idade: {p.age}, CPF: {p.cpf})"
            for position, p in enumerate(self.ordered(), start=1)
        )
        lines.append("==============================================")
        return "\n".join(lines)