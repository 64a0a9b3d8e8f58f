"""Prize distribution simulation for a shopping center."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterable
from typing import TextIO

from premiacao.entrada import ler_inteiro_nao_negativo
from premiacao.fila_clientes import (
    TAMANHO_MAX_FILA,
    FilaCheiaError,
    FilaClientes,
    FilaVaziaError,
)
from premiacao.lista_ganhadores import ListaGanhadores
from premiacao.pilha_premios import PilhaPremios, PilhaVaziaError

_SEPARADOR = "=======================================================================\n\n"


def cabecalho_log() -> str:
    """Return the banner printed at the start of a run."""
    return (
        _SEPARADOR
        + "Inicio da execução: Simulacao Shopping Center - Distribuicao de Premios\n\n"
        + "Implementacao: Listas, Filas e Pilhas em C\n\n"
        + _SEPARADOR
    )


def rodape_log() -> str:
    """Return the banner printed at the end of a run."""
    return "\n\n" + _SEPARADOR + "Fim da execução.\n\n" + _SEPARADOR


class Simulacao:
    """Two customer queues, two prize stacks and the list of winners."""

    def __init__(
        self,
        saida: TextIO | None = None,
        rng: random.Random | None = None,
        capacidade_fila: int = TAMANHO_MAX_FILA,
    ) -> None:
        self.saida = sys.stdout if saida is None else saida
        self.rng = random.Random() if rng is None else rng
        self.capacidade_fila = capacidade_fila
        self.fila1 = FilaClientes(capacidade_fila)
        self.fila2 = FilaClientes(capacidade_fila)
        self.pilha_gibis = PilhaPremios()
        self.pilha_ingressos = PilhaPremios()
        self.ganhadores = ListaGanhadores()
        self.passos = 0

    def _escrever(self, texto: str) -> None:
        self.saida.write(texto)

    def _filas(self) -> tuple[tuple[FilaClientes, str], tuple[FilaClientes, str]]:
        return (self.fila1, "Fila 1"), (self.fila2, "Fila 2")

    def _pilhas(self) -> tuple[tuple[PilhaPremios, str, str], tuple[PilhaPremios, str, str]]:
        return (
            (self.pilha_gibis, "Pilha de Gibis", "gibi"),
            (self.pilha_ingressos, "Pilha de Ingressos", "ingresso"),
        )

    def popular_filas(self, nomes: Iterable[str]) -> None:
        """Distribute names between the queues, alternating from the last.

        Counting down from the total, a name arriving at an even count goes to
        queue 2 and at an odd count to queue 1. Names that do not fit are
        reported and dropped.
        """
        lista = list(nomes)
        for restantes, nome in zip(range(len(lista), 0, -1), lista):
            fila = self.fila2 if restantes % 2 == 0 else self.fila1
            try:
                fila.enfileirar(nome)
            except FilaCheiaError as erro:
                self._escrever(f"ERRO: {erro}\n\n")

    def popular_pilhas(self, gibis: Iterable[str], ingressos: Iterable[str]) -> None:
        """Push the comic books and the tickets onto their stacks."""
        for gibi in gibis:
            self.pilha_gibis.empilhar(gibi)
        for ingresso in ingressos:
            self.pilha_ingressos.empilhar(ingresso)

    def imprimir_estado(self) -> None:
        """Write the state of every structure."""
        for fila, nome in self._filas():
            self._escrever(fila.formatar(nome))
        for pilha, nome, _ in self._pilhas():
            self._escrever(pilha.formatar(nome))
        self._escrever(self.ganhadores.formatar())

    def _pode_continuar(self) -> bool:
        ha_clientes = not (self.fila1.vazia() and self.fila2.vazia())
        ha_premios = not (self.pilha_gibis.vazia() and self.pilha_ingressos.vazia())
        return ha_clientes and ha_premios

    def passo(self) -> str | None:
        """Run one step; return the winner's name, or None if nobody won."""
        self.passos += 1
        self._escrever(f"\n\n--- Passo {self.passos} da Simulacao ---\n\n")

        fila, nome_fila = self._filas()[self.rng.randrange(2)]
        self._escrever(f"Tentando atender cliente da {nome_fila}...\n\n")

        vencedor: str | None = None
        try:
            cliente = fila.desenfileirar()
        except FilaVaziaError as erro:
            self._escrever(f"ERRO: {erro}\n\n")
            self._escrever(f"ERRO: {nome_fila} vazia! Nenhum cliente para atender.\n\n")
        else:
            self._escrever(f"Cliente '{cliente}' removido da {nome_fila}.\n\n")
            pilha, nome_pilha, tipo = self._pilhas()[self.rng.randrange(2)]
            self._escrever(
                f"Cliente '{cliente}' escolheu {tipo}. Verificando {nome_pilha}...\n\n"
            )
            try:
                premio = pilha.desempilhar()
            except PilhaVaziaError:
                self._escrever(
                    f"ERRO: {nome_pilha} vazia! Cliente '{cliente}' não ganhou "
                    f"o prêmio desejado ({tipo}).\n\n"
                )
            else:
                self._escrever(f"Prêmio '{premio}' removido da {nome_pilha}.\n\n")
                self._escrever(f"Cliente '{cliente}' ganhou '{premio}'!\n\n")
                self.ganhadores.inserir(cliente)
                self._escrever(
                    f"Cliente '{cliente}' adicionado à lista de ganhadores.\n\n"
                )
                vencedor = cliente

        self.imprimir_estado()
        return vencedor

    def executar(self) -> ListaGanhadores:
        """Run steps until customers or prizes run out, or the step limit is hit."""
        self._escrever("*** Iniciando Simulação da Distribuição ***\n\n")
        limite = self.capacidade_fila * 2
        while self._pode_continuar():
            self.passo()
            if self.passos > limite:
                self._escrever(
                    "\n\nAVISO: Limite de passos da simulação atingido. Interrompendo.\n\n"
                )
                break
        self._escrever("*** Fim da Simulação ***\n\n")
        self._escrever("Motivo: Filas ou Pilhas esgotadas.\n\n")
        return self.ganhadores


class _LeitorEntrada:
    """Line reader that can also take single whitespace-separated words."""

    def __init__(self, fluxo: TextIO) -> None:
        self._fluxo = fluxo
        self._pendente = ""

    def readline(self) -> str:
        if self._pendente:
            linha, self._pendente = self._pendente, ""
            return linha
        return self._fluxo.readline()

    def palavra(self) -> str:
        resto = self._pendente.lstrip()
        while not resto:
            linha = self._fluxo.readline()
            if not linha:
                raise EOFError("entrada terminou antes de um nome")
            resto = linha.lstrip()
        palavra = resto.split(maxsplit=1)[0]
        self._pendente = resto[len(palavra):]
        return palavra

    def linha_sem_quebra(self) -> str:
        linha = self.readline()
        if not linha:
            raise EOFError("entrada terminou antes de um nome")
        return linha.split("\n", 1)[0]


def _ler_nomes_premios(
    leitor: _LeitorEntrada, saida: TextIO, quantidade_msg: str, nome_msg: str
) -> list[str]:
    quantidade = ler_inteiro_nao_negativo(quantidade_msg, leitor, saida)
    nomes = []
    for _ in range(quantidade):
        saida.write(nome_msg)
        saida.flush()
        nomes.append(leitor.linha_sem_quebra())
    return nomes


def main(argv: list[str] | None = None) -> int:
    """Run the interactive simulation on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="premiacao",
        description="Simulação de distribuição de prêmios em um shopping center.",
    )
    parser.add_argument(
        "--semente", type=int, default=None, help="semente do gerador aleatório"
    )
    args = parser.parse_args(argv)

    saida = sys.stdout
    leitor = _LeitorEntrada(sys.stdin)
    sim = Simulacao(saida=saida, rng=random.Random(args.semente))

    saida.write(cabecalho_log())
    saida.write("*** Inicializando Estruturas ***\n\n")
    saida.write(
        f"Filas de clientes inicializadas (Estaticas, max: {sim.capacidade_fila}).\n\n"
    )
    for fila, nome in sim._filas():
        saida.write(fila.formatar(nome))
    saida.write("Pilhas de prêmios inicializadas (Dinamicas).\n\n")
    for pilha, nome, _ in sim._pilhas():
        saida.write(pilha.formatar(nome))
    saida.write("Lista de ganhadores inicializada (Duplamente Encadeada, Dinamica).\n\n")
    saida.write(sim.ganhadores.formatar())
    saida.write("\n\n*** Fim da Inicialização ***\n\n")

    try:
        saida.write("*** Populando Estruturas para Teste ***\n\n")
        saida.write("Populando Filas de Clientes...\n\n")
        quantidade = ler_inteiro_nao_negativo(
            "Indique a quantidade de usuários: ", leitor, saida
        )
        sim.popular_filas([leitor.palavra() for _ in range(quantidade)])
        for fila, nome in sim._filas():
            saida.write(fila.formatar(nome))

        saida.write("\n\nPopulando Pilhas de Prêmios...\n\n")
        gibis = _ler_nomes_premios(
            leitor, saida, "Indique a quantidade de Gibis: ", "Indique o nome do gibi: "
        )
        sim.popular_pilhas(gibis, [])
        ingressos = _ler_nomes_premios(
            leitor,
            saida,
            "Indique a quantidade de Ingressos: ",
            "Indique o nome do ingresso: ",
        )
        sim.popular_pilhas([], ingressos)
    except EOFError:
        sys.stderr.write("ERRO: entrada terminou inesperadamente.\n")
        return 1

    for pilha, nome, _ in sim._pilhas():
        saida.write(pilha.formatar(nome))

    sim.executar()
    saida.write(rodape_log())
    return 0


if __name__ == "__main__":
    sys.exit(main())