# src/chartpack/core/loader/assemble.py
"""
Classificador de entradas e montador recursivo da árvore de charts.

Este módulo recebe uma sequência plana de entradas `(caminho, conteúdo)`
(vinda de um arquivo compactado ou de um diretório) e constrói um
`Chart` completo, resolvendo recursivamente as dependências aninhadas.

Política de classificação (v1), por caminho e nesta prioridade:
    - `Chart.yaml`      → metadados (obrigatório)
    - `values.toml`     → formato legado proibido (erro fatal imediato)
    - `values.yaml`     → blob bruto de values
    - `templates/...`   → template
    - `charts/...`      → dependência aninhada (agrupada por nome)
    - demais caminhos   → arquivo auxiliar opaco

Resolução de dependências:
    - `charts/<nome>.tgz` → arquivo compactado aninhado, lido pelo leitor
      de tar e montado recursivamente
    - `charts/<nome>/...` → diretório aninhado, com o prefixo `<nome>/`
      removido de cada entrada

Princípios fundamentais:
    - A montagem é uma função pura de entradas para `Chart`
    - Fail-fast: a primeira falha de dependência aborta a montagem
    - Cada nível de recursão acrescenta contexto ao erro propagado

Invariantes:
    - `templates`, `files` e `dependencies` preservam a ordem de encontro
    - Dependências são agrupadas na ordem em que o nome aparece pela
      primeira vez
    - Todo chart retornado possui `metadata.name` não vazio

Limites explícitos:
    - Não lê filesystem diretamente
    - Não parseia values
    - Não valida sintaxe de templates

Este módulo existe para concentrar, em um único ponto testável,
as regras estruturais do formato de empacotamento.
"""

from __future__ import annotations

import io
import logging
from typing import Dict, List, Optional, Sequence

from ..chart.chartfile import parse_chartfile
from ..chart.model import Chart, File, Metadata, Template
from ..errors import (
    DependencyLoadError,
    DeprecatedFormatError,
    LoadError,
    MissingMetadataError,
    NestedArchiveMismatchError,
)
from .archive import Entry, read_archive

logger = logging.getLogger(__name__)

CHARTFILE_NAME = "Chart.yaml"
VALUES_NAME = "values.yaml"
DEPRECATED_VALUES_NAME = "values.toml"
TEMPLATES_PREFIX = "templates/"
CHARTS_PREFIX = "charts/"
ARCHIVE_EXTENSION = ".tgz"


def _check_archive_group(key: str, group: List[Entry], parent: str) -> None:
    """
    Garante que o grupo de `charts/<nome>.tgz` seja uma única entrada
    cujo caminho é exatamente a chave.

    Uma chave `.tgz` nunca é reinterpretada como diretório aninhado.
    """
    for entry in group:
        if entry.name != key:
            raise NestedArchiveMismatchError(expected=key, actual=entry.name, parent=parent)
    if len(group) != 1:
        raise NestedArchiveMismatchError(expected=key, actual=group[1].name, parent=parent)


def _load_dependency(key: str, group: List[Entry]) -> Chart:
    """
    Monta um chart dependente a partir do seu grupo de entradas.

    Decisões arquiteturais:
        - Uma chave terminada em `.tgz` é lida como arquivo compactado
          aninhado (o grupo já foi validado por `_check_archive_group`)
        - Em diretórios aninhados, entradas de um único segmento são
          ignoradas: os arquivos de um chart dependente vivem pelo menos
          um nível abaixo de `charts/`

    Raises:
        LoadError: Qualquer falha da leitura ou montagem recursiva.
    """
    if key.endswith(ARCHIVE_EXTENSION):
        return load_entries(read_archive(io.BytesIO(group[0].data)))

    sub: List[Entry] = []
    for entry in group:
        parts = entry.name.split("/", 1)
        if len(parts) < 2:
            continue
        sub.append(Entry(name=parts[1], data=entry.data))
    return load_entries(sub)


def load_entries(entries: Sequence[Entry]) -> Chart:
    """
    Classifica entradas e monta um `Chart` completo, recursivamente.

    Args:
        entries (Sequence[Entry]): Entradas com caminhos relativos à raiz
            do chart.

    Returns:
        Chart: Árvore imutável, com dependências já resolvidas.

    Raises:
        DeprecatedFormatError: Se `values.toml` estiver presente.
        InvalidChartfileError: Se `Chart.yaml` não puder ser parseado.
        MissingMetadataError: Se `Chart.yaml` faltar ou não declarar `name`.
        NestedArchiveMismatchError: Se `charts/<nome>.tgz` não for uma única
            entrada com exatamente esse caminho.
        DependencyLoadError: Se alguma dependência falhar; encapsula a causa
            com o nome da dependência e do chart pai.
    """
    metadata: Optional[Metadata] = None
    values: Optional[bytes] = None
    templates: List[Template] = []
    files: List[File] = []
    staged: Dict[str, List[Entry]] = {}

    for entry in entries:
        name = entry.name
        if name == CHARTFILE_NAME:
            metadata = parse_chartfile(entry.data)
        elif name == DEPRECATED_VALUES_NAME:
            raise DeprecatedFormatError(
                f"{DEPRECATED_VALUES_NAME} não é suportado; use {VALUES_NAME}"
            )
        elif name == VALUES_NAME:
            values = entry.data
        elif name.startswith(TEMPLATES_PREFIX):
            templates.append(Template(name=name, data=entry.data))
        elif name.startswith(CHARTS_PREFIX):
            rest = name[len(CHARTS_PREFIX):]
            key = rest.split("/", 1)[0]
            staged.setdefault(key, []).append(Entry(name=rest, data=entry.data))
        else:
            files.append(File(type_url=name, value=entry.data))

    if metadata is None or not metadata.name:
        raise MissingMetadataError(f"metadados do chart ({CHARTFILE_NAME}) ausentes")

    dependencies: List[Chart] = []
    for key, group in staged.items():
        if key.endswith(ARCHIVE_EXTENSION):
            _check_archive_group(key, group, metadata.name)
        try:
            dependency = _load_dependency(key, group)
        except LoadError as e:
            raise DependencyLoadError(dependency=key, parent=metadata.name, cause=e) from e
        logger.debug("dependência %s resolvida em %s", key, metadata.name)
        dependencies.append(dependency)

    logger.debug(
        "chart %s montado: %d templates, %d arquivos, %d dependências",
        metadata.name,
        len(templates),
        len(files),
        len(dependencies),
    )
    return Chart(
        metadata=metadata,
        values=values,
        templates=tuple(templates),
        files=tuple(files),
        dependencies=tuple(dependencies),
    )
