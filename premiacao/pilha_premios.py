"""LIFO stack of prize descriptions."""

from __future__ import annotations

from collections.abc import Iterator

TAMANHO_MAX_DESCRICAO = 99


class PilhaVaziaError(Exception):
    """Raised when a prize is taken from an empty stack."""

    def __init__(self) -> None:
        super().__init__("Pilha vazia! Impossível desempilhar.")


class PilhaPremios:
    """Unbounded stack of prizes."""

    def __init__(self) -> None:
        self._itens: list[str] = []

    def __len__(self) -> int:
        return len(self._itens)

    def __iter__(self) -> Iterator[str]:
        """Iterate from the top down to the base."""
        return reversed(self._itens)

    def vazia(self) -> bool:
        return not self._itens

    def empilhar(self, descricao: str) -> None:
        """Push a prize; long descriptions are truncated."""
        self._itens.append(descricao[:TAMANHO_MAX_DESCRICAO])

    def desempilhar(self) -> str:
        """Pop and return the prize on top."""
        if self.vazia():
            raise PilhaVaziaError()
        return self._itens.pop()

    def formatar(self, nome_pilha: str) -> str:
        """Render the stack as the simulation log shows it."""
        partes = [f"--- {nome_pilha} ({len(self)}) ---\n\n"]
        if self.vazia():
            partes.append("A pilha está vazia.\n\n")
        else:
            conteudo = " | ".join(self)
            partes.append(f"Topo -> [ {conteudo} ] <- Base\n\n")
        partes.append("--------------------\n\n")
        return "".join(partes)

    def limpar(self) -> None:
        self._itens.clear()