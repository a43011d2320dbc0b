# src/chartpack/core/chart/chartfile.py
"""
Parser canônico de `Chart.yaml`.

Este módulo converte o conteúdo bruto de `Chart.yaml` no registro
descritivo `Metadata`. O loader só inspeciona `name`; os demais campos
são transportados de forma opaca.

Decisões arquiteturais:
    - O YAML é lido com `yaml.BaseLoader`: todo escalar chega como
      string, sem resolução implícita de tipos (`version: 1.10`
      permanece `"1.10"`, `name: 2048` vira `"2048"`)
    - Documento vazio produz `Metadata` vazio; a ausência de `name` é
      reportada depois pelo loader como `MissingMetadataError`

Invariantes:
    - Campos de texto nunca aceitam listas ou mappings
    - `sources` e `keywords` são sempre listas de strings
    - `maintainers` é sempre uma lista de mappings

Limites explícitos:
    - Chaves desconhecidas são ignoradas
    - Não valida formato de versão, URLs ou e-mails
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

import yaml

from ..errors import InvalidChartfileError
from .model import Maintainer, Metadata

_STRING_FIELDS = ("name", "home", "version", "description", "engine", "icon")
_LIST_FIELDS = ("sources", "keywords")


def _as_str(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise InvalidChartfileError(
            f"Chart.yaml: campo '{key}' deve ser escalar, recebido: {type(value).__name__}"
        )
    return value


def _as_str_tuple(data: Dict[str, Any], key: str) -> Tuple[str, ...]:
    value = data.get(key)
    if value is None:
        return ()
    if not isinstance(value, list) or not all(isinstance(x, str) for x in value):
        raise InvalidChartfileError(f"Chart.yaml: campo '{key}' deve ser lista de strings")
    return tuple(value)


def _maintainers(data: Dict[str, Any]) -> Tuple[Maintainer, ...]:
    value = data.get("maintainers")
    if value is None:
        return ()
    if not isinstance(value, list):
        raise InvalidChartfileError("Chart.yaml: campo 'maintainers' deve ser lista")

    out: List[Maintainer] = []
    for item in value:
        if not isinstance(item, dict):
            raise InvalidChartfileError("Chart.yaml: cada maintainer deve ser um mapping")
        out.append(Maintainer(name=_as_str(item, "name"), email=_as_str(item, "email")))
    return tuple(out)


def parse_chartfile(data: bytes) -> Metadata:
    """
    Converte o conteúdo bruto de `Chart.yaml` em `Metadata`.

    Raises:
        InvalidChartfileError: se o YAML for inválido, se a raiz não for
            um mapping ou se algum campo conhecido tiver forma incorreta.
    """
    try:
        raw = yaml.load(data, Loader=yaml.BaseLoader)
    except yaml.YAMLError as e:
        raise InvalidChartfileError(f"Chart.yaml inválido: {e}") from e

    if raw is None:
        return Metadata()

    if not isinstance(raw, dict):
        raise InvalidChartfileError(
            f"Chart.yaml: raiz deve ser mapping, recebido: {type(raw).__name__}"
        )

    fields = {key: _as_str(raw, key) for key in _STRING_FIELDS}
    fields.update({key: _as_str_tuple(raw, key) for key in _LIST_FIELDS})
    return Metadata(maintainers=_maintainers(raw), **fields)


def load_chartfile(path: Union[str, Path]) -> Metadata:
    """Lê e parseia um `Chart.yaml` do disco."""
    return parse_chartfile(Path(path).read_bytes())
