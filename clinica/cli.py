"""Interactive text menus for managing patients and their service queues."""

from __future__ import annotations

import argparse
import re
from collections.abc import Callable, Sequence

from .models import (
    CapacityError,
    EmptyError,
    Operation,
    OperationType,
    Patient,
    PatientNotFoundError,
    RegistrationDate,
)
from .priority import PriorityQueue
from .registry import PatientRegistry
from .search_tree import SearchTree, SortKey
from .service_queue import ServiceQueue
from .storage import about_text, load_patients, save_patients
from .undo import UndoStack

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

_NAME_LIMIT = 99
_CPF_LIMIT = 14
_PHONE_LIMIT = 19
_FILENAME_LIMIT = 99

_BACK = "Voltando ao menu principal..."
_INVALID = "Opcao invalida. Tente novamente."
_CHOOSE = "Escolha uma opcao: "
_NOT_FOUND = "Paciente nao encontrado."
_REGISTER_FIRST = "Paciente nao encontrado. Cadastre o paciente primeiro."


def _parse_int(text: str) -> int | None:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


class App:
    """The clinic's menu-driven console application."""

    def __init__(
        self,
        input_fn: Callable[[str], str] | None = None,
        output_fn: Callable[[str], object] | None = None,
    ) -> None:
        self._input = input_fn or input
        self._output = output_fn or print
        self.registry = PatientRegistry()
        self.queue = ServiceQueue()
        self.priority = PriorityQueue()
        self.tree = SearchTree()
        self.history = UndoStack()

    # -- input helpers -------------------------------------------------

    def _say(self, text: str) -> None:
        self._output(text)

    def _read_text(self, prompt: str, limit: int) -> str:
        return self._input(prompt).rstrip("\n")[:limit]

    def _read_int(self, prompt: str, default: int | None = None) -> int | None:
        value = _parse_int(self._input(prompt))
        return default if value is None else value

    def _menu(self, title: str, entries: Sequence[str]) -> int | None:
        self._say(f"\n===== {title} =====")
        for entry in entries:
            self._say(entry)
        return self._read_int(_CHOOSE)

    def _create_patient(self) -> Patient:
        self._say("\n--- Cadastro de Paciente ---")
        name = self._read_text("Nome: ", _NAME_LIMIT)
        age = self._read_int("Idade: ", 0)
        cpf = self._read_text("CPF: ", _CPF_LIMIT)
        phone = self._read_text("Telefone: ", _PHONE_LIMIT)
        day = self._read_int("Dia de registro: ", 0)
        month = self._read_int("Mes de registro: ", 0)
        year = self._read_int("Ano de registro: ", 0)
        return Patient(name, age, cpf, phone, RegistrationDate(day, month, year))

    def _lookup(self, prompt: str) -> Patient | None:
        return self.registry.find(self._read_text(prompt, _CPF_LIMIT))

    # -- menus ---------------------------------------------------------

    def _registration_menu(self) -> None:
        while True:
            option = self._menu(
                "MENU DE CADASTRO",
                [
                    "1. Cadastrar novo paciente",
                    "2. Consultar paciente cadastrado",
                    "3. Mostrar lista completa",
                    "4. Atualizar dados de paciente",
                    "5. Remover paciente",
                    "0. Voltar ao menu principal",
                ],
            )
            if option == 1:
                patient = self._create_patient()
                self.registry.register(patient)
                self._say(f"Paciente {patient.name} cadastrado com sucesso!")
            elif option == 2:
                patient = self._lookup("Digite o CPF do paciente: ")
                if patient is None:
                    self._say(_NOT_FOUND)
                else:
                    self._say("\n--- Dados do Paciente ---")
                    self._say(f"Nome: {patient.name}")
                    self._say(f"Idade: {patient.age}")
                    self._say(f"CPF: {patient.cpf}")
                    self._say(f"Telefone (11): {patient.phone}")
                    self._say(f"Data de registro 00/00/00: {patient.registered}")
            elif option == 3:
                self._say(self.registry.render())
            elif option == 4:
                cpf = self._read_text(
                    "Digite o CPF do paciente a ser atualizado: ", _CPF_LIMIT
                )
                if self.registry.find(cpf) is None:
                    self._say(_NOT_FOUND)
                else:
                    self._say("Digite os novos dados do paciente:")
                    updated = self.registry.update(cpf, self._create_patient())
                    self._say(
                        f"Dados do paciente {updated.name} atualizados com sucesso!"
                    )
            elif option == 5:
                cpf = self._read_text(
                    "Digite o CPF do paciente a ser removido: ", _CPF_LIMIT
                )
                try:
                    removed = self.registry.remove(cpf)
                except (EmptyError, PatientNotFoundError) as exc:
                    self._say(str(exc))
                else:
                    self._say(f"Paciente {removed.name} removido com sucesso!")
            elif option == 0:
                self._say(_BACK)
                return
            else:
                self._say(_INVALID)

    def _service_menu(self) -> None:
        while True:
            option = self._menu(
                "MENU DE ATENDIMENTO",
                [
                    "1. Enfileirar paciente",
                    "2. Desenfileirar paciente",
                    "3. Mostrar fila",
                    "0. Voltar ao menu principal",
                ],
            )
            if option == 1:
                patient = self._lookup("Digite o CPF do paciente a ser enfileirado: ")
                if patient is None:
                    self._say(_REGISTER_FIRST)
                else:
                    self.queue.enqueue(patient, self.history)
                    self._say(f"Paciente {patient.name} enfileirado com sucesso!")
            elif option == 2:
                try:
                    patient = self.queue.dequeue(self.history)
                except EmptyError as exc:
                    self._say(str(exc))
                else:
                    self._say(f"Paciente {patient.name} atendido com sucesso!")
            elif option == 3:
                self._say(self.queue.render())
            elif option == 0:
                self._say(_BACK)
                return
            else:
                self._say(_INVALID)

    def _priority_menu(self) -> None:
        while True:
            option = self._menu(
                "MENU DE ATENDIMENTO PRIORITARIO",
                [
                    "1. Enfileirar paciente prioritario",
                    "2. Desenfileirar paciente prioritario",
                    "3. Mostrar fila prioritaria",
                    "0. Voltar ao menu principal",
                ],
            )
            if option == 1:
                patient = self._lookup(
                    "Digite o CPF do paciente a ser enfileirado com prioridade: "
                )
                if patient is None:
                    self._say(_REGISTER_FIRST)
                    continue
                try:
                    self.priority.enqueue(patient, self.history)
                except CapacityError as exc:
                    self._say(str(exc))
                else:
                    self._say(
                        f"Paciente {patient.name} enfileirado com prioridade "
                        f"(idade: {patient.age})!"
                    )
            elif option == 2:
                try:
                    patient = self.priority.dequeue(self.history)
                except EmptyError as exc:
                    self._say(str(exc))
                else:
                    self._say(
                        f"Paciente prioritario {patient.name} atendido com sucesso!"
                    )
            elif option == 3:
                self._say(self.priority.render())
            elif option == 0:
                self._say(_BACK)
                return
            else:
                self._say(_INVALID)

    def _search_menu(self) -> None:
        listings = {2: SortKey.YEAR, 3: SortKey.MONTH, 4: SortKey.DAY, 5: SortKey.AGE}
        while True:
            option = self._menu(
                "MENU DE PESQUISA",
                [
                    "1. Inserir paciente na arvore de busca",
                    "2. Mostrar registros ordenados por ano",
                    "3. Mostrar registros ordenados por mes",
                    "4. Mostrar registros ordenados por dia",
                    "5. Mostrar registros ordenados por idade",
                    "0. Voltar ao menu principal",
                ],
            )
            if option == 1:
                patient = self._lookup(
                    "Digite o CPF do paciente a ser inserido na arvore: "
                )
                if patient is None:
                    self._say(_REGISTER_FIRST)
                else:
                    self.tree.insert(patient)
                    self._say(f"Paciente {patient.name} inserido na arvore de busca!")
            elif option in listings:
                self._say(self.tree.render(listings[option]))
            elif option == 0:
                self._say(_BACK)
                return
            else:
                self._say(_INVALID)

    def _confirm_undo(self, op: Operation) -> bool:
        if op.kind is OperationType.ENQUEUE:
            self._say(f"Operacao a ser desfeita: ENFILEIRAR Paciente {op.patient.name}")
            self._say("Esta operacao sera desfeita removendo o paciente da fila.")
        else:
            self._say(
                f"Operacao a ser desfeita: DESENFILEIRAR Paciente {op.patient.name}"
            )
            self._say(
                "Esta operacao sera desfeita, adicionando o paciente de volta a fila."
            )
        answer = self._input("Confirma desfazer esta operacao (S/N): ").strip()
        return answer[:1] in ("S", "s")

    def _undo(self) -> None:
        try:
            op = self.history.undo(self.queue, self._confirm_undo)
        except EmptyError as exc:
            self._say(str(exc))
            return
        if op is None:
            self._say("Operacao cancelada.")
            return
        if op.kind is OperationType.ENQUEUE:
            self._say(f"Paciente {op.patient.name} removido da fila.")
        else:
            self._say(f"Paciente {op.patient.name} enfileirado com sucesso!")
        self._say("Operacao desfeita com sucesso!")

    def _undo_menu(self) -> None:
        while True:
            option = self._menu(
                "MENU DE DESFAZER",
                [
                    "1. Mostrar operacoes realizadas",
                    "2. Desfazer ultima operacao",
                    "0. Voltar ao menu principal",
                ],
            )
            if option == 1:
                self._say(self.history.render())
            elif option == 2:
                self._undo()
            elif option == 0:
                self._say(_BACK)
                return
            else:
                self._say(_INVALID)

    def _file_menu(self) -> None:
        while True:
            option = self._menu(
                "MENU DE ARQUIVO",
                [
                    "1. Carregar dados de arquivo",
                    "2. Salvar dados em arquivo",
                    "0. Voltar ao menu principal",
                ],
            )
            if option == 1:
                path = self._read_text(
                    "Digite o nome do arquivo para carregar: ", _FILENAME_LIMIT
                )
                try:
                    count = load_patients(self.registry, path)
                except OSError:
                    self._say(f"Erro ao abrir o arquivo {path} para leitura.")
                    continue
                for patient in reversed(list(self.registry)):
                    self._say(f"Paciente {patient.name} cadastrado com sucesso!")
                self._say(
                    f"Dados carregados com sucesso! {count} pacientes cadastrados."
                )
            elif option == 2:
                path = self._read_text(
                    "Digite o nome do arquivo para salvar: ", _FILENAME_LIMIT
                )
                try:
                    count = save_patients(self.registry, path)
                except OSError:
                    self._say(f"Erro ao abrir o arquivo {path} para escrita.")
                    continue
                self._say(
                    "Dados salvos com sucesso! "
                    f"{count} pacientes registrados no arquivo."
                )
            elif option == 0:
                self._say(_BACK)
                return
            else:
                self._say(_INVALID)

    # -- main loop -----------------------------------------------------

    def run(self) -> None:
        """Show the main menu until the user leaves or input runs out."""
        submenus = {
            1: self._registration_menu,
            2: self._service_menu,
            3: self._priority_menu,
            4: self._search_menu,
            5: self._undo_menu,
            6: self._file_menu,
        }
        try:
            while True:
                option = self._menu(
                    "GERENCIADOR DE ATENDIMENTO MEDICO",
                    [
                        "1. Cadastrar",
                        "2. Atendimento",
                        "3. Atendimento prioritario",
                        "4. Pesquisa",
                        "5. Desfazer",
                        "6. Carregar / Salvar",
                        "7. Sobre",
                        "0. Sair",
                    ],
                )
                if option in submenus:
                    submenus[option]()
                elif option == 7:
                    self._say(about_text())
                elif option == 0:
                    self._say("Saindo do sistema...")
                    return
                else:
                    self._say(_INVALID)
        except EOFError:
            return


def main(argv: Sequence[str] | None = None) -> int:
    """Start the interactive clinic manager."""
    parser = argparse.ArgumentParser(
        prog="clinica", description="Gerenciador de atendimento medico."
    )
    parser.parse_args(argv)
    App().run()
    return 0