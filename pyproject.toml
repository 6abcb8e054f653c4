[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clinica"
version = "0.1.0"
description = "Console manager for medical appointments: patient registry, service queue, age-priority queue, sorted listings and undo history."
requires-python = ">=3.10"
dependencies = []
keywords = ["clinic", "patients", "queue", "scheduling", "appointments"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Healthcare Industry",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
clinica = "clinica.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["clinica"]

[tool.pytest.ini_options]
addopts = "-ra"
