"""Patients ordered by registration date or age."""

from __future__ import annotations

from bisect import insort
from collections.abc import Callable
from enum import Enum

from .models import Patient


class SortKey(Enum):
    """Orderings that a search tree can list patients in."""

    YEAR = "ANO DE REGISTRO"
    MONTH = "MES DE REGISTRO"
    DAY = "DIA DE REGISTRO"
    AGE = "IDADE"


_KEYS: dict[SortKey, Callable[[Patient], int]] = {
    SortKey.YEAR: lambda p: p.registered.year,
    SortKey.MONTH: lambda p: p.registered.month,
    SortKey.DAY: lambda p: p.registered.day,
    SortKey.AGE: lambda p: p.age,
}

_WIDE_RULE = "=" * 50
_NARROW_RULE = "=" * 40


def _describe(patient: Patient, key: SortKey) -> str:
    if key is SortKey.AGE:
        return (
            f"Nome: {patient.name}, Idade: {patient.age}, "
            f"Data: {patient.registered}"
        )
    return (
        f"Nome: {patient.name}, Data: {patient.registered}, "
        f"Idade: {patient.age}"
    )


class SearchTree:
    """Patients kept ordered by registration year.

    Patients with equal keys keep their insertion order, and listings by
    another key are stable with respect to the year ordering.
    """

    def __init__(self) -> None:
        self._by_year: list[Patient] = []

    def insert(self, patient: Patient) -> None:
        """Insert a patient after any others registered in the same year."""
        insort(self._by_year, patient, key=_KEYS[SortKey.YEAR])

    def sorted(self, key: SortKey = SortKey.YEAR) -> list[Patient]:
        """Return the patients ordered by the given key."""
        if key is SortKey.YEAR:
            return list(self._by_year)
        return sorted(self._by_year, key=_KEYS[key])

    def __len__(self) -> int:
        return len(self._by_year)

    def render(self, key: SortKey = SortKey.YEAR) -> str:
        """Describe the patients ordered by the given key."""
        if not self._by_year:
            return "Arvore vazia. Nenhum paciente para mostrar."
        if key is SortKey.AGE:
            header = f"\n===== PACIENTES ORDENADOS POR {key.value} ====="
            footer = _NARROW_RULE
        else:
            header = f"\n===== PACIENTES ORDENADOS POR {key.value} ====="
            footer = _WIDE_RULE
        lines = [header]
        lines.extend(_describe(p, key) for p in self.sorted(key))
        lines.append(footer)
        return "\n".join(lines)