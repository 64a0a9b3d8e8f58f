"""Simulação da distribuição de prêmios com filas, pilhas e listas de ganhadores."""

__version__ = "0.1.0"