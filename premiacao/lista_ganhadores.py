"""Ordered list of prize winners."""

from __future__ import annotations

from collections.abc import Iterator

TAMANHO_MAX_NOME = 99


class ListaGanhadores:
    """Winners kept in the order they were added."""

    def __init__(self) -> None:
        self._nomes: list[str] = []

    def __len__(self) -> int:
        return len(self._nomes)

    def __iter__(self) -> Iterator[str]:
        return iter(self._nomes)

    def __reversed__(self) -> Iterator[str]:
        return reversed(self._nomes)

    def inserir(self, nome: str) -> None:
        """Append a winner; long names are truncated."""
        self._nomes.append(nome[:TAMANHO_MAX_NOME])

    def formatar(self) -> str:
        """Render the list as the simulation log shows it."""
        partes = [f"--- Lista de Ganhadores ({len(self)}) ---\n\n"]
        if not self._nomes:
            partes.append("A lista de ganhadores está vazia.\n\n")
            return "".join(partes)
        partes.extend(f"{i}. {nome}\n\n" for i, nome in enumerate(self._nomes, start=1))
        partes.append("---------------------------------\n\n")
        return "".join(partes)

    def limpar(self) -> None:
        self._nomes.clear()