# src/chartpack/core/values/values.py
"""
Leitura, navegação e serialização de values.

O loader preserva `values.yaml` como bytes brutos (`Chart.values`); este
módulo é o colaborador que converte esses bytes em um mapa estruturado
e de volta em bytes.

Responsabilidades do módulo:
    - Parsear YAML de values em `Values`
    - Navegar tabelas aninhadas por nome composto (`foo.bar`)
    - Serializar `Values` em YAML

Invariantes:
    - O resultado do parse é sempre um dicionário
    - Documentos vazios produzem `Values` vazio

Limites explícitos:
    - Não valida semântica dos valores
    - Não renderiza templates
"""

from __future__ import annotations

from pathlib import Path
from typing import IO, Any, Dict, Union

import yaml  # PyYAML

from .errors import (
    InvalidValuesRootTypeError,
    NoTableError,
    ValuesFileNotFoundError,
    ValuesParseError,
)


class Values(Dict[str, Any]):
    """Coleção de values de um chart."""

    def table(self, name: str) -> "Values":
        """
        Retorna uma tabela (sub-mapping) como `Values`.

        Nomes compostos são separados por ponto: `foo.bar` é a tabela
        `bar` dentro da tabela `foo`.

        Raises:
            NoTableError: Se alguma parte do caminho não existir ou não
                for um mapping.
        """
        table: Dict[str, Any] = self
        for part in name.split("."):
            child = table.get(part)
            if not isinstance(child, dict):
                raise NoTableError(name)
            table = child
        return Values(table)

    def to_yaml(self) -> bytes:
        return yaml.safe_dump(
            dict(self),
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        ).encode("utf-8")

    def encode(self, out: IO[bytes]) -> None:
        """Escreve os values serializados em YAML no stream binário `out`."""
        out.write(self.to_yaml())


def read_values(data: Union[bytes, str]) -> Values:
    """
    Parseia YAML de values em `Values`.

    Raises:
        ValuesParseError: Se o YAML for inválido.
        InvalidValuesRootTypeError: Se a raiz não for um mapping.
    """
    try:
        parsed = yaml.safe_load(data)
    except yaml.YAMLError as e:
        raise ValuesParseError(str(e) or "falha ao parsear values") from e

    if parsed is None:
        return Values()

    if not isinstance(parsed, dict):
        raise InvalidValuesRootTypeError(
            f"Values root deve ser dict, recebido: {type(parsed).__name__}"
        )

    return Values(parsed)


def read_values_file(path: Union[str, Path]) -> Values:
    """Lê e parseia um arquivo de values."""
    p = Path(path)
    if not p.exists():
        raise ValuesFileNotFoundError(f"Arquivo de values não encontrado: {p}")
    return read_values(p.read_bytes())
