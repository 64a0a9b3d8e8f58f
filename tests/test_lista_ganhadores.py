from premiacao.lista_ganhadores import TAMANHO_MAX_NOME, ListaGanhadores


def test_nova_lista_vazia():
    lista = ListaGanhadores()
    assert len(lista) == 0
    assert list(lista) == []


def test_inserir_mantem_ordem():
    lista = ListaGanhadores()
    for nome in ["Ana", "Bruno", "Carla"]:
        lista.inserir(nome)
    assert list(lista) == ["Ana", "Bruno", "Carla"]
    assert list(reversed(lista)) == ["Carla", "Bruno", "Ana"]
    assert len(lista) == 3


def test_limpar():
    lista = ListaGanhadores()
    lista.inserir("Ana")
    lista.limpar()
    assert len(lista) == 0
    assert list(lista) == []


def test_nome_truncado():
    lista = ListaGanhadores()
    lista.inserir("z" * 120)
    assert list(lista) == ["z" * TAMANHO_MAX_NOME]


def test_formatar_vazia_sem_rodape():
    assert ListaGanhadores().formatar() == (
        "--- Lista de Ganhadores (0) ---\n\n"
        "A lista de ganhadores está vazia.\n\n"
    )


def test_formatar_numerada():
    lista = ListaGanhadores()
    lista.inserir("Ana")
    lista.inserir("Bruno")
    assert lista.formatar() == (
        "--- Lista de Ganhadores (2) ---\n\n"
        "1. Ana\n\n"
        "2. Bruno\n\n"
        "---------------------------------\n\n"
    )