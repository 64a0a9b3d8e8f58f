import pytest

from premiacao.fila_clientes import (
    TAMANHO_MAX_FILA,
    TAMANHO_MAX_NOME,
    FilaCheiaError,
    FilaClientes,
    FilaVaziaError,
)


def test_nova_fila_vazia():
    fila = FilaClientes()
    assert fila.vazia()
    assert not fila.cheia()
    assert len(fila) == 0
    assert fila.capacidade == TAMANHO_MAX_FILA


def test_ordem_fifo():
    fila = FilaClientes()
    for nome in ["Ana", "Bruno", "Carla"]:
        fila.enfileirar(nome)
    assert list(fila) == ["Ana", "Bruno", "Carla"]
    assert [fila.desenfileirar() for _ in range(3)] == ["Ana", "Bruno", "Carla"]
    assert fila.vazia()


def test_desenfileirar_vazia():
    with pytest.raises(FilaVaziaError):
        FilaClientes().desenfileirar()


def test_fila_cheia():
    fila = FilaClientes()
    for i in range(TAMANHO_MAX_FILA):
        fila.enfileirar(f"Cliente_{i + 1}")
    assert fila.cheia()
    with pytest.raises(FilaCheiaError) as info:
        fila.enfileirar("Cliente Extra")
    assert info.value.nome == "Cliente Extra"
    assert len(fila) == TAMANHO_MAX_FILA


def test_circular_apos_remocoes():
    fila = FilaClientes(capacidade=3)
    fila.enfileirar("a")
    fila.enfileirar("b")
    fila.enfileirar("c")
    assert fila.desenfileirar() == "a"
    fila.enfileirar("d")
    assert list(fila) == ["b", "c", "d"]
    assert fila.cheia()


def test_nome_truncado():
    fila = FilaClientes()
    fila.enfileirar("x" * 200)
    assert fila.desenfileirar() == "x" * TAMANHO_MAX_NOME


def test_capacidade_invalida():
    with pytest.raises(ValueError):
        FilaClientes(capacidade=0)


def test_formatar_vazia():
    texto = FilaClientes().formatar("Fila 1")
    assert texto == (
        f"\n--- Fila 1 (0/{TAMANHO_MAX_FILA}) ---\n\n"
        "A fila está vazia.\n\n"
        "------------------------\n\n"
    )


def test_formatar_com_clientes():
    fila = FilaClientes()
    fila.enfileirar("Ana")
    fila.enfileirar("Bruno")
    texto = fila.formatar("Fila 2")
    assert f"(2/{TAMANHO_MAX_FILA})" in texto
    assert "Inicio -> [ Ana | Bruno ] <- Fim\n\n" in texto