import pytest

from clinica.models import EmptyError, OperationType, Patient, RegistrationDate
from clinica.service_queue import ServiceQueue
from clinica.undo import UndoStack


def make(name):
    return Patient(name, 30, f"cpf-{name}", f"phone-{name}", RegistrationDate(2, 2, 2023))


def test_fifo_order():
    queue = ServiceQueue()
    patients = [make(n) for n in "abc"]
    for p in patients:
        queue.enqueue(p)
    assert [queue.dequeue() for _ in patients] == patients
    assert len(queue) == 0


def test_dequeue_empty_raises():
    with pytest.raises(EmptyError):
        ServiceQueue().dequeue()


def test_history_recorded():
    queue = ServiceQueue()
    stack = UndoStack()
    p = make("a")
    queue.enqueue(p, stack)
    queue.dequeue(stack)
    assert [(op.kind, op.patient) for op in stack] == [
        (OperationType.DEQUEUE, p),
        (OperationType.ENQUEUE, p),
    ]


def test_no_history_when_none():
    queue = ServiceQueue()
    stack = UndoStack()
    queue.enqueue(make("a"), None)
    queue.enqueue(make("b"), stack)
    assert len(stack) == 1
    assert len(queue) == 2


def test_failed_dequeue_records_nothing():
    stack = UndoStack()
    with pytest.raises(EmptyError):
        ServiceQueue().dequeue(stack)
    assert len(stack) == 0


def test_render():
    queue = ServiceQueue()
    assert queue.render() == "Fila de atendimento vazia."
    queue.enqueue(make("a"))
    queue.enqueue(make("b"))
    text = queue.render()
    assert "FILA DE ATENDIMENTO (2)" in text
    assert "1. a (CPF: cpf-a)" in text
    assert "2. b (CPF: cpf-b)" in text


def test_iter_does_not_consume():
    queue = ServiceQueue()
    p = make("a")
    queue.enqueue(p)
    assert list(queue) == [p]
    assert list(queue) == [p]