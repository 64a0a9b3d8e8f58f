"""Bounded FIFO queue of customer names."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

TAMANHO_MAX_FILA = 50
TAMANHO_MAX_NOME = 99


class FilaCheiaError(Exception):
    """Raised when a name is added to a full queue."""

    def __init__(self, nome: str) -> None:
        super().__init__(f"Fila cheia! Impossível inserir '{nome}'.")
        self.nome = nome


class FilaVaziaError(Exception):
    """Raised when a name is taken from an empty queue."""

    def __init__(self) -> None:
        super().__init__("Fila vazia! Impossível remover.")


class FilaClientes:
    """Customer queue with a fixed capacity."""

    def __init__(self, capacidade: int = TAMANHO_MAX_FILA) -> None:
        if capacidade < 1:
            raise ValueError("a capacidade da fila deve ser positiva")
        self.capacidade = capacidade
        self._nomes: deque[str] = deque()

    def __len__(self) -> int:
        return len(self._nomes)

    def __iter__(self) -> Iterator[str]:
        return iter(self._nomes)

    def vazia(self) -> bool:
        return not self._nomes

    def cheia(self) -> bool:
        return len(self._nomes) == self.capacidade

    def enfileirar(self, nome: str) -> None:
        """Add a name at the end; names longer than the limit are truncated."""
        if self.cheia():
            raise FilaCheiaError(nome)
        self._nomes.append(nome[:TAMANHO_MAX_NOME])

    def desenfileirar(self) -> str:
        """Remove and return the name at the front."""
        if self.vazia():
            raise FilaVaziaError()
        return self._nomes.popleft()

    def formatar(self, nome_fila: str) -> str:
        """Render the queue as the simulation log shows it."""
        partes = [f"\n--- {nome_fila} ({len(self)}/{self.capacidade}) ---\n\n"]
        if self.vazia():
            partes.append("A fila está vazia.\n\n")
        else:
            conteudo = " | ".join(self._nomes)
            partes.append(f"Inicio -> [ {conteudo} ] <- Fim\n\n")
        partes.append("------------------------\n\n")
        return "".join(partes)