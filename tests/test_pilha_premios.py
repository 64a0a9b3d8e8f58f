import pytest

from premiacao.pilha_premios import TAMANHO_MAX_DESCRICAO, PilhaPremios, PilhaVaziaError


def test_nova_pilha_vazia():
    pilha = PilhaPremios()
    assert pilha.vazia()
    assert len(pilha) == 0


def test_ordem_lifo():
    pilha = PilhaPremios()
    for item in ["Gibi do Batman #1", "Gibi 2", "Gibi 3"]:
        pilha.empilhar(item)
    assert list(pilha) == ["Gibi 3", "Gibi 2", "Gibi do Batman #1"]
    assert pilha.desempilhar() == "Gibi 3"
    assert len(pilha) == 2


def test_desempilhar_vazia():
    with pytest.raises(PilhaVaziaError):
        PilhaPremios().desempilhar()


def test_limpar():
    pilha = PilhaPremios()
    pilha.empilhar("Ingresso Vingadores")
    pilha.limpar()
    assert pilha.vazia()
    with pytest.raises(PilhaVaziaError):
        pilha.desempilhar()


def test_descricao_truncada():
    pilha = PilhaPremios()
    pilha.empilhar("y" * 150)
    assert pilha.desempilhar() == "y" * TAMANHO_MAX_DESCRICAO


def test_formatar_vazia():
    assert PilhaPremios().formatar("Pilha de Gibis") == (
        "--- Pilha de Gibis (0) ---\n\n"
        "A pilha está vazia.\n\n"
        "--------------------\n\n"
    )


def test_formatar_com_itens():
    pilha = PilhaPremios()
    pilha.empilhar("A")
    pilha.empilhar("B")
    texto = pilha.formatar("Pilha de Ingressos")
    assert texto.startswith("--- Pilha de Ingressos (2) ---\n\n")
    assert "Topo -> [ B | A ] <- Base\n\n" in texto