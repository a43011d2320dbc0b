# src/chartpack/core/loader/load.py
"""
Pontos de entrada canônicos do loader de charts.

Este módulo resolve a forma da entrada (diretório, arquivo compactado
ou stream em memória) e a encaminha ao leitor apropriado, sempre
finalizando no montador da árvore.

Política de despacho:
    - diretório            → varredura (`walk_directory`)
    - arquivo              → leitura tar gzip (`read_archive`)
    - stream ou `bytes`    → leitura tar gzip (`read_archive`)

Invariantes:
    - Arquivos abertos por este módulo são sempre fechados
    - O resultado é um `Chart` completo ou uma exceção; nunca parcial

Limites explícitos:
    - Não renderiza nem instala o chart
    - Não faz download de charts remotos
"""

from __future__ import annotations

import io
import logging
import os
import stat
from pathlib import Path
from typing import BinaryIO, Union

from ..chart.model import Chart
from ..errors import DirectoryNotAllowedError
from .archive import read_archive
from .assemble import load_entries
from .directory import walk_directory

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def load(name: PathLike) -> Chart:
    """
    Carrega um chart a partir de um caminho, descobrindo sua codificação.

    Esta é a forma preferencial de carregar um chart: diretórios são
    varridos e arquivos são lidos como tar gzip.

    Raises:
        FileNotFoundError: Se o caminho não existir.
        LoadError: Qualquer falha estrutural do chart.
    """
    info = os.stat(name)
    if stat.S_ISDIR(info.st_mode):
        return load_dir(name)
    return load_file(name)


def load_archive(source: Union[BinaryIO, bytes]) -> Chart:
    """Carrega um chart a partir de um stream binário ou de `bytes` em memória."""
    stream = io.BytesIO(source) if isinstance(source, (bytes, bytearray)) else source
    return load_entries(read_archive(stream))


def load_file(name: PathLike) -> Chart:
    """
    Carrega um chart a partir de um arquivo tar gzip em disco.

    Raises:
        FileNotFoundError: Se o arquivo não existir.
        DirectoryNotAllowedError: Se o caminho for um diretório.
        FormatError: Se o conteúdo não for tar gzip válido.
    """
    path = Path(name)
    if path.is_dir():
        raise DirectoryNotAllowedError(str(path))

    logger.debug("carregando chart compactado %s", path)
    with path.open("rb") as raw:
        return load_archive(raw)


def load_dir(name: PathLike) -> Chart:
    """Carrega um chart a partir de um diretório descompactado."""
    logger.debug("carregando chart do diretório %s", name)
    return load_entries(walk_directory(name))
