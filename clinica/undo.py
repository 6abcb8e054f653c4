"""Stack of queue operations that can be undone."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Protocol

from .models import EmptyError, Operation, OperationType, Patient


class _Enqueuer(Protocol):
    def enqueue(self, patient: Patient, history: object) -> None: ...


class UndoStack:
    """Last-in, first-out record of queue operations."""

    def __init__(self) -> None:
        self._ops: list[Operation] = []

    def push(self, kind: OperationType, patient: Patient) -> Operation:
        """Record an operation and return it."""
        op = Operation(kind, patient)
        self._ops.append(op)
        return op

    def pop(self) -> Operation:
        """Remove and return the most recent operation."""
        if not self._ops:
            raise EmptyError("Pilha vazia. Nenhuma operacao para desfazer.")
        return self._ops.pop()

    def peek(self) -> Operation:
        """Return the most recent operation without removing it."""
        if not self._ops:
            raise EmptyError("Pilha vazia. Nenhuma operacao para desfazer.")
        return self._ops[-1]

    def __iter__(self) -> Iterator[Operation]:
        return reversed(list(self._ops))

    def __len__(self) -> int:
        return len(self._ops)

    def render(self) -> str:
        """Describe the recorded operations, most recent first."""
        if not self._ops:
            return "Nenhuma operacao registrada."
        lines = [f"\n===== OPERACOES REALIZADAS ({len(self)}) ====="]
        lines.extend(
            f"{position}. {op.kind.value}: Paciente {op.patient.name}"
            for position, op in enumerate(self, start=1)
        )
        lines.append("==================================")
        return "\n".join(lines)

    def undo(
        self, queue: _Enqueuer, confirm: Callable[[Operation], bool]
    ) -> Operation | None:
        """Undo the latest operation if confirm approves it.

        An undone dequeue puts the patient back at the end of queue without
        recording a new operation; an undone enqueue only drops the record.
        Returns the undone operation, or None when it was not confirmed, in
        which case the operation stays on the stack.
        """
        if not self._ops:
            raise EmptyError("Nenhuma operacao para desfazer.")
        op = self._ops.pop()
        if not confirm(op):
            self._ops.append(op)
            return None
        if op.kind is OperationType.DEQUEUE:
            queue.enqueue(op.patient, None)
        return op