"""Reading non-negative integers from interactive input."""

from __future__ import annotations

import re
import sys
from typing import TextIO

MENSAGEM_INVALIDA = "Por favor, insira um número inteiro positivo ou zero válido.\n"

_INTEIRO = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_SEPARADORES = " \t\n"


def analisar_inteiro_nao_negativo(linha: str) -> int | None:
    """Return the value of a line holding one non-negative integer, or None.

    The number must start the line; after the first token only blanks may follow.
    """
    encontrado = _INTEIRO.match(linha)
    if encontrado is None:
        return None
    valor = int(encontrado.group(1))
    if valor < 0:
        return None
    fim_token = next(
        (pos for pos, ch in enumerate(linha) if ch in _SEPARADORES), len(linha)
    )
    if linha[fim_token:].strip(_SEPARADORES):
        return None
    return valor


def ler_inteiro_nao_negativo(
    mensagem: str,
    entrada: TextIO | None = None,
    saida: TextIO | None = None,
) -> int:
    """Prompt until a valid non-negative integer is read.

    Raises EOFError if the input ends first.
    """
    entrada = sys.stdin if entrada is None else entrada
    saida = sys.stdout if saida is None else saida
    while True:
        saida.write(mensagem)
        saida.flush()
        linha = entrada.readline()
        if not linha:
            raise EOFError("entrada terminou antes de um número válido")
        valor = analisar_inteiro_nao_negativo(linha)
        if valor is not None:
            return valor
        saida.write(MENSAGEM_INVALIDA)