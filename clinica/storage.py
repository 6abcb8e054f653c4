"""Reading and writing the patient registry as comma-separated lines."""

from __future__ import annotations

import re
from datetime import date
from os import PathLike

from .models import Patient, RegistrationDate
from .registry import PatientRegistry

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _to_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_line(line: str) -> Patient | None:
    """Parse "nome,idade,cpf,telefone,dia,mes,ano"; None if fields are missing.

    Empty fields are skipped and numbers are read from their leading digits,
    giving 0 when there are none.
    """
    line = line.split("\n", 1)[0]
    fields = [field for field in line.split(",") if field]
    if len(fields) < 7:
        return None
    name, age, cpf, phone, day, month, year = fields[:7]
    return Patient(
        name=name,
        age=_to_int(age),
        cpf=cpf,
        phone=phone,
        registered=RegistrationDate(_to_int(day), _to_int(month), _to_int(year)),
    )


def format_line(patient: Patient) -> str:
    """Format a patient as one line, without the trailing newline."""
    d = patient.registered
    return (
        f"{patient.name},{patient.age},{patient.cpf},{patient.phone},"
        f"{d.day},{d.month},{d.year}"
    )


def load_patients(registry: PatientRegistry, path: str | PathLike[str]) -> int:
    """Replace the registry's contents with the patients in path.

    Each loaded patient is registered in turn, so the last line of the file
    ends up first. Returns the number of patients loaded.
    """
    with open(path, encoding="utf-8") as fp:
        registry.clear()
        count = 0
        for line in fp:
            patient = parse_line(line)
            if patient is not None:
                registry.register(patient)
                count += 1
    return count


def save_patients(registry: PatientRegistry, path: str | PathLike[str]) -> int:
    """Write every patient to path in registry order; return how many."""
    count = 0
    with open(path, "w", encoding="utf-8") as fp:
        for patient in registry:
            fp.write(format_line(patient) + "\n")
            count += 1
    return count


def about_text() -> str:
    """Describe the system."""
    today = date.today()
    stamp = f"{today:%b} {today.day:2d} {today.year}"
    return "\n".join(
        [
            "\n===== SOBRE O SISTEMA =====",
            "Gerenciador de Atendimento Medico",
            "Estrutura de Dados(CCA230)",
            "Centro Universitario FEI",
            "Engenharia de Robos",
            "Primeiro Semestre de 2025",
            "Ciclo: Setimo Ciclo",
            f"Data: {stamp}",
            "==========================",
        ]
    )