[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "premiacao"
version = "0.1.0"
description = "Simulação da distribuição de prêmios num shopping center com filas, pilhas e listas"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulacao", "fila", "pilha", "lista", "estruturas de dados"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Natural Language :: Portuguese (Brazilian)",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
premiacao = "premiacao.simulacao:main"

[tool.hatch.build.targets.wheel]
packages = ["premiacao"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
