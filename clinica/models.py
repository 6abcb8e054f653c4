"""Core data types shared by the clinic's registries and queues."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ClinicError(Exception):
    """Base class for every error raised by the clinic package."""


class PatientNotFoundError(ClinicError, LookupError):
    """No patient with the given CPF is registered."""

    def __init__(self, cpf: str) -> None:
        super().__init__(f"Paciente com CPF {cpf} nao encontrado.")
        self.cpf = cpf


class EmptyError(ClinicError):
    """An operation needed an element but the container was empty."""


class CapacityError(ClinicError):
    """A bounded container is already full."""


@dataclass
class RegistrationDate:
    """Day, month and year on which a patient was registered."""

    day: int
    month: int
    year: int

    def __str__(self) -> str:
        return f"{self.day:02d}/{self.month:02d}/{self.year:04d}"


@dataclass
class Patient:
    """A registered patient."""

    name: str
    age: int
    cpf: str
    phone: str
    registered: RegistrationDate


class OperationType(Enum):
    """Kinds of queue operations recorded for undo."""

    ENQUEUE = "ENFILEIRAR"
    DEQUEUE = "DESENFILEIRAR"


@dataclass
class Operation:
    """A queue operation recorded on the undo stack."""

    kind: OperationType
    patient: Patient