"""Registry of patients, newest first."""

from __future__ import annotations

from collections.abc import Iterator

from .models import EmptyError, Patient, PatientNotFoundError


class PatientRegistry:
    """Holds registered patients; newly registered ones come first."""

    def __init__(self) -> None:
        self._patients: list[Patient] = []

    def register(self, patient: Patient) -> None:
        """Add a patient at the front of the registry."""
        self._patients.insert(0, patient)

    def find(self, cpf: str) -> Patient | None:
        """Return the first patient with this CPF, or None."""
        return next((p for p in self._patients if p.cpf == cpf), None)

    def update(self, cpf: str, new_data: Patient) -> Patient:
        """Copy name, age and phone from new_data; CPF and date are kept."""
        patient = self.find(cpf)
        if patient is None:
            raise PatientNotFoundError(cpf)
        patient.name = new_data.name
        patient.age = new_data.age
        patient.phone = new_data.phone
        return patient

    def remove(self, cpf: str) -> Patient:
        """Remove and return the first patient with this CPF."""
        if not self._patients:
            raise EmptyError("Lista vazia. Nenhum paciente para remover.")
        for index, patient in enumerate(self._patients):
            if patient.cpf == cpf:
                del self._patients[index]
                return patient
        raise PatientNotFoundError(cpf)

    def clear(self) -> None:
        """Forget every patient."""
        self._patients.clear()

    def __iter__(self) -> Iterator[Patient]:
        return iter(list(self._patients))

    def __len__(self) -> int:
        return len(self._patients)

    def render(self) -> str:
        """Describe every registered patient as text."""
        if not self._patients:
            return "Nenhum paciente cadastrado."
        lines = [f"\n===== LISTA DE PACIENTES CADASTRADOS ({len(self)}) ====="]
        for position, patient in enumerate(self._patients, start=1):
            lines.extend(
                [
                    f"\n--- Paciente {position} ---",
                    f"Nome: {patient.name}",
                    f"Idade: {patient.age}",
                    f"CPF: {patient.cpf}",
                    f"Telefone: {patient.phone}",
                    f"Data de registro: {patient.registered}",
                ]
            )
        lines.append("\n==========================================")
        return "\n".join(lines)