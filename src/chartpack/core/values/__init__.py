# src/chartpack/core/values/__init__.py
"""
Camada de values do Chartpack.

Values são os padrões de configuração de um chart (`values.yaml`). O
loader os transporta como bytes brutos; este pacote é o colaborador
que os converte em mapa, navega tabelas e serializa.

Princípios fundamentais:
    - O resultado do parse é sempre um dicionário puro

Limites explícitos:
    - Não valida semântica de domínio
    - Não participa da montagem da árvore de charts
"""

from .errors import (
    InvalidValuesRootTypeError,
    NoTableError,
    ValuesError,
    ValuesFileNotFoundError,
    ValuesParseError,
)
from .values import Values, read_values, read_values_file

__all__ = [
    "InvalidValuesRootTypeError",
    "NoTableError",
    "Values",
    "ValuesError",
    "ValuesFileNotFoundError",
    "ValuesParseError",
    "read_values",
    "read_values_file",
]
