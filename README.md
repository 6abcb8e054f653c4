# clinica

A console manager for a medical practice, with menus and messages in
Portuguese. It keeps a register of patients and runs the day's appointments
through:

- a **patient registry** (`clinica.registry.PatientRegistry`), where patients
  are looked up by CPF and newly registered patients come first;
- a **service queue** (`clinica.service_queue.ServiceQueue`), served first
  come, first served;
- a **priority queue** (`clinica.priority.PriorityQueue`) that holds at most
  20 patients and serves the oldest first;
- a **search tree** (`clinica.search_tree.SearchTree`), which lists the
  patients put into it by registration year, month or day, or by age
  (`SortKey.YEAR`, `SortKey.MONTH`, `SortKey.DAY`, `SortKey.AGE`);
- an **undo history** (`clinica.undo.UndoStack`), which records every enqueue
  and dequeue on either queue and can revert the latest one once confirmed;
- **loading and saving** the registry as a comma-separated text file
  (`clinica.storage`).

## Installation

```
pip install .
```

## Running

```
clinica
```

This opens the main menu:

```
1. Cadastrar
2. Atendimento
3. Atendimento prioritario
4. Pesquisa
5. Desfazer
6. Carregar / Salvar
7. Sobre
0. Sair
```

Type the number of an option and press Enter. In each submenu, `0` returns to
the main menu; `0` in the main menu, or the end of input, exits.

- **Cadastrar**: register, look up, list, update (name, age and phone; CPF
  and registration date are kept) and remove patients.
- **Atendimento**: enqueue a registered patient by CPF, serve the next one,
  show the queue.
- **Atendimento prioritario**: the same for the priority queue, served by age.
- **Pesquisa**: add a registered patient to the search tree, then list the
  tree by year, month, day or age.
- **Desfazer**: show the recorded operations, most recent first, or undo the
  latest one after answering `S` (or `s`).
- **Carregar / Salvar**: load or save the registry.
- **Sobre**: a short description of the system.

## Data file format

Each patient is one line:

```
nome,idade,cpf,telefone,dia,mes,ano
```

For example:

```
Maria Silva,72,cpf-maria,fone-maria,3,5,2025
```

Loading replaces the current registry with the patients in the file. Empty
fields are skipped, and lines with fewer than seven fields are ignored.
Numbers are read from their leading digits (0 when there are none). Each
loaded patient is registered in turn, so the last line of the file ends up
first in the registry; saving writes the registry in its current order.

## Using it as a library

```python
from clinica.models import Patient, RegistrationDate
from clinica.registry import PatientRegistry
from clinica.service_queue import ServiceQueue
from clinica.priority import PriorityQueue
from clinica.undo import UndoStack

registry = PatientRegistry()
registry.register(Patient("Ana", 80, "cpf-ana", "fone-ana", RegistrationDate(1, 2, 2025)))

history = UndoStack()
queue = ServiceQueue()
priority = PriorityQueue()

priority.enqueue(registry.find("cpf-ana"), history)
served = priority.dequeue(history)

# Undo the dequeue: the patient goes back to the end of the service queue.
history.undo(queue, lambda op: True)
```

Each container has `render()`, which returns the text shown by the menus.
`clinica.storage` offers `parse_line`, `format_line`, `load_patients`,
`save_patients` and `about_text`.

Errors are raised as subclasses of `clinica.models.ClinicError`:
`PatientNotFoundError` (also a `LookupError`) for an unknown CPF, `EmptyError`
for an empty structure, and `CapacityError` for a full priority queue.

## What it does not do

- Only the patient registry can be saved and loaded. The queues, the search
  tree and the undo history live only while the program runs.
- Undoing an enqueue only drops it from the history; the patient stays in the
  queue. Undoing a dequeue always puts the patient back into the service
  queue, even when it was served from the priority queue.
- Patients cannot be taken out of the search tree, and removing or updating a
  patient in the registry does not change the queues or the tree.

## Tests

```
pip install .[test]
pytest
```