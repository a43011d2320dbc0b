# src/chartpack/core/values/errors.py
"""
Exceções canônicas da camada de values do Chartpack.

Este módulo define a hierarquia de exceções utilizadas durante o parse,
a navegação e a serialização de values (`values.yaml`).

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais são tratados como falhas fatais

Invariantes:
    - Todas as exceções de values herdam de `ValuesError`
    - Nenhuma exceção representa erro de carregamento do chart

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não valida semântica dos valores
"""


class ValuesError(Exception):
    """
    Exceção base para erros relacionados a values.

    Limites explícitos:
        - Não representa erro estrutural do chart (ver `LoadError`)
    """


class ValuesFileNotFoundError(ValuesError):
    """Arquivo de values não encontrado no caminho especificado."""


class ValuesParseError(ValuesError):
    """Falha ao parsear o YAML de values."""


class InvalidValuesRootTypeError(ValuesError):
    """
    Exceção levantada quando o conteúdo raiz de values
    não é um dicionário (`dict`).

    Decisões arquiteturais:
        - Values são sempre um mapa chave-valor
        - Listas ou valores escalares no root são inválidos

    Limites explícitos:
        - Não tenta normalizar ou encapsular estruturas inválidas
    """


class NoTableError(ValuesError):
    """
    Exceção levantada quando uma tabela (sub-mapping) não existe.

    O atributo `name` contém o nome composto pesquisado (ex.: `foo.bar`).
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"tabela não encontrada: {name}")
