import pytest

from clinica.models import EmptyError, Patient, PatientNotFoundError, RegistrationDate
from clinica.registry import PatientRegistry


def make(name, cpf, age=40):
    return Patient(name, age, cpf, f"phone-{name}", RegistrationDate(3, 4, 2021))


@pytest.fixture
def registry():
    reg = PatientRegistry()
    reg.register(make("Ana", "cpf-a"))
    reg.register(make("Bia", "cpf-b"))
    reg.register(make("Caio", "cpf-c"))
    return reg


def test_newest_first(registry):
    assert [p.name for p in registry] == ["Caio", "Bia", "Ana"]
    assert len(registry) == 3


def test_find_returns_patient(registry):
    found = registry.find("cpf-b")
    assert found.name == "Bia"


def test_find_missing_returns_none(registry):
    assert registry.find("cpf-z") is None


def test_update_keeps_cpf_and_date(registry):
    original = registry.find("cpf-a")
    date = original.registered
    new = Patient("Ana Maria", 41, "other", "phone-new", RegistrationDate(9, 9, 1999))
    updated = registry.update("cpf-a", new)
    assert updated is original
    assert (updated.name, updated.age, updated.phone) == ("Ana Maria", 41, "phone-new")
    assert updated.cpf == "cpf-a"
    assert updated.registered == date


def test_update_missing_raises(registry):
    with pytest.raises(PatientNotFoundError):
        registry.update("cpf-z", make("X", "cpf-z"))


@pytest.mark.parametrize("cpf", ["cpf-a", "cpf-b", "cpf-c"])
def test_remove_any_position(registry, cpf):
    removed = registry.remove(cpf)
    assert removed.cpf == cpf
    assert registry.find(cpf) is None
    assert len(registry) == 2


def test_remove_missing_raises(registry):
    with pytest.raises(PatientNotFoundError):
        registry.remove("cpf-z")
    assert len(registry) == 3


def test_remove_from_empty_raises():
    with pytest.raises(EmptyError):
        PatientRegistry().remove("cpf-a")


def test_clear(registry):
    registry.clear()
    assert len(registry) == 0
    assert list(registry) == []


def test_render_empty():
    assert PatientRegistry().render() == "Nenhum paciente cadastrado."


def test_render_lists_patients(registry):
    text = registry.render()
    assert "LISTA DE PACIENTES CADASTRADOS (3)" in text
    assert text.index("Nome: Caio") < text.index("Nome: Ana")
    assert "Data de registro: 03/04/2021" in text