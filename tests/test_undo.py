import pytest

from clinica.models import EmptyError, OperationType, Patient, RegistrationDate
from clinica.service_queue import ServiceQueue
from clinica.undo import UndoStack


def make(name):
    return Patient(name, 50, f"cpf-{name}", f"phone-{name}", RegistrationDate(1, 1, 2022))


def test_push_pop_lifo():
    stack = UndoStack()
    a, b = make("a"), make("b")
    stack.push(OperationType.ENQUEUE, a)
    stack.push(OperationType.DEQUEUE, b)
    assert stack.pop().patient is b
    assert stack.pop().patient is a
    assert len(stack) == 0


def test_pop_empty_raises():
    with pytest.raises(EmptyError):
        UndoStack().pop()


def test_peek_does_not_remove():
    stack = UndoStack()
    op = stack.push(OperationType.ENQUEUE, make("a"))
    assert stack.peek() is op
    assert len(stack) == 1


def test_peek_empty_raises():
    with pytest.raises(EmptyError):
        UndoStack().peek()


def test_iteration_top_first():
    stack = UndoStack()
    patients = [make(n) for n in "abc"]
    for p in patients:
        stack.push(OperationType.ENQUEUE, p)
    assert [op.patient for op in stack] == patients[::-1]


def test_render():
    stack = UndoStack()
    assert stack.render() == "Nenhuma operacao registrada."
    stack.push(OperationType.ENQUEUE, make("a"))
    stack.push(OperationType.DEQUEUE, make("b"))
    text = stack.render()
    assert "OPERACOES REALIZADAS (2)" in text
    assert "1. DESENFILEIRAR: Paciente b" in text
    assert "2. ENFILEIRAR: Paciente a" in text


def test_undo_dequeue_requeues_without_recording():
    stack = UndoStack()
    queue = ServiceQueue()
    patient = make("a")
    queue.enqueue(patient, stack)
    queue.dequeue(stack)
    assert len(queue) == 0
    op = stack.undo(queue, lambda _op: True)
    assert op.kind is OperationType.DEQUEUE
    assert list(queue) == [patient]
    assert [o.kind for o in stack] == [OperationType.ENQUEUE]


def test_undo_enqueue_only_drops_record():
    stack = UndoStack()
    queue = ServiceQueue()
    patient = make("a")
    queue.enqueue(patient, stack)
    op = stack.undo(queue, lambda _op: True)
    assert op.patient is patient
    assert len(stack) == 0
    assert list(queue) == [patient]


def test_undo_cancelled_keeps_operation():
    stack = UndoStack()
    queue = ServiceQueue()
    pushed = stack.push(OperationType.DEQUEUE, make("a"))
    seen = []
    result = stack.undo(queue, lambda op: seen.append(op) or False)
    assert result is None
    assert seen == [pushed]
    assert stack.peek() is pushed
    assert len(queue) == 0


def test_undo_empty_raises():
    with pytest.raises(EmptyError):
        UndoStack().undo(ServiceQueue(), lambda _op: True)