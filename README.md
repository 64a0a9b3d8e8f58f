# premiacao

Simulação de um shopping center que distribui prêmios (gibis e ingressos) a
clientes que esperam em duas filas. O pacote usa três estruturas de dados:

- `FilaClientes` (`premiacao.fila_clientes`): fila de capacidade fixa
  (50 por padrão), o primeiro a entrar é o primeiro a sair;
- `PilhaPremios` (`premiacao.pilha_premios`): pilha de prêmios, o último
  empilhado sai primeiro;
- `ListaGanhadores` (`premiacao.lista_ganhadores`): ganhadores na ordem em que
  ganharam.

Nomes e descrições com mais de 99 caracteres são truncados ao serem inseridos.

## Instalação

```
pip install .
```

## Uso pela linha de comando

```
premiacao
premiacao --semente 42
```

A opção `--semente` fixa a semente do gerador aleatório, tornando a execução
reproduzível.

O programa lê da entrada padrão, na ordem:

1. a quantidade de clientes e, em seguida, os nomes (uma palavra cada,
   separadas por espaços ou quebras de linha); contando de trás para frente a
   partir do total, o cliente de contagem par vai para a Fila 2 e o de contagem
   ímpar para a Fila 1. Clientes que não cabem numa fila cheia são
   informados e descartados;
2. a quantidade de gibis e o nome de cada um (um por linha);
3. a quantidade de ingressos e o nome de cada um (um por linha).

As quantidades precisam ser inteiros maiores ou iguais a zero; uma entrada
inválida é pedida de novo. Se a entrada terminar antes do fim, o programa
escreve um erro e sai com código 1.

Depois disso, a simulação escolhe ao acaso uma fila e um tipo de prêmio a cada
passo, até acabarem os clientes ou os prêmios, e imprime o estado de todas as
estruturas após cada passo. A execução é interrompida com um aviso quando o
número de passos passa do dobro da capacidade da fila.

## Uso como biblioteca

```python
import random
from premiacao.simulacao import Simulacao

sim = Simulacao(rng=random.Random(1))
sim.popular_filas(["Ana", "Bruno", "Carla"])
sim.popular_pilhas(["Gibi A"], ["Ingresso B"])
ganhadores = sim.executar()
print(list(ganhadores))
```

`Simulacao` aceita `saida` (um fluxo de texto, `sys.stdout` por padrão), `rng`
(um `random.Random`) e `capacidade_fila`. `passo()` executa um único passo e
devolve o nome do ganhador, ou `None` se ninguém ganhou; `imprimir_estado()`
escreve o estado de todas as estruturas. As funções `cabecalho_log()` e
`rodape_log()` devolvem os textos de abertura e de encerramento do log.

As estruturas também podem ser usadas isoladamente:

```python
from premiacao.fila_clientes import FilaClientes
from premiacao.pilha_premios import PilhaPremios

fila = FilaClientes(capacidade=2)
fila.enfileirar("Ana")
print(fila.desenfileirar())      # Ana

pilha = PilhaPremios()
pilha.empilhar("Gibi 1")
pilha.empilhar("Gibi 2")
print(pilha.desempilhar())       # Gibi 2
print(pilha.formatar("Pilha de Gibis"))
```

Remover de uma fila ou pilha vazia levanta `FilaVaziaError` ou
`PilhaVaziaError`; inserir numa fila cheia levanta `FilaCheiaError`.

Para ler números da entrada, `premiacao.entrada` oferece
`analisar_inteiro_nao_negativo(linha)`, que devolve o inteiro ou `None`, e
`ler_inteiro_nao_negativo(mensagem, entrada, saida)`, que pergunta até receber
um valor válido e levanta `EOFError` se a entrada terminar.

## Testes

```
pip install .[test]
pytest
```