# src/chartpack/core/loader/archive.py
"""
Leitor canônico de charts compactados (tar + gzip).

Este módulo decodifica um stream de bytes no formato tar gzip em uma
sequência plana e ordenada de entradas `(caminho relativo, conteúdo)`,
que é então consumida pelo montador da árvore.

Formato esperado:
    - tar comprimido com gzip
    - exatamente um diretório envolvente no topo (por convenção, o
      nome do chart), cujo valor nunca é inspecionado

Política de leitura (v1):
    - Registros de diretório são descartados (a forma da árvore é
      inferida apenas dos caminhos)
    - O primeiro segmento de todo caminho é descartado
    - Registros não regulares (links, devices) produzem conteúdo vazio
    - Qualquer falha de descompressão ou decodificação aborta a leitura

Invariantes:
    - A ordem das entradas é a ordem dos registros no tar
    - Nenhum resultado parcial é retornado em caso de erro
    - O stream de descompressão é sempre fechado

Limites explícitos:
    - Não classifica entradas
    - Não fecha o stream recebido (responsabilidade do chamador)
    - Não extrai nada para o filesystem

Este módulo existe para isolar o formato de arquivo compactado
da lógica de montagem da árvore.
"""

from __future__ import annotations

import logging
import tarfile
import zlib
from dataclasses import dataclass
from typing import BinaryIO, List

from ..errors import EmptyArchiveError, FormatError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Entry:
    """Arquivo bufferizado para classificação; `name` usa `/` como separador."""

    name: str
    data: bytes


def _strip_top_dir(name: str) -> str:
    parts = name.split("/")
    return "/".join(parts[1:])


def read_archive(stream: BinaryIO) -> List[Entry]:
    """
    Decodifica um stream tar gzip em uma lista de entradas.

    O tar é lido em modo streaming (`r|gz`), de modo que o stream não
    precisa suportar `seek`. O conteúdo de cada registro é lido antes
    de avançar para o próximo.

    Decisões arquiteturais:
        - Um registro cujo caminho fica vazio após descartar o primeiro
          segmento indica um arquivo sem o diretório envolvente e é
          tratado como `FormatError`
        - Zero entradas após o filtro de diretórios é `EmptyArchiveError`

    Args:
        stream (BinaryIO): Stream binário com o conteúdo compactado.

    Returns:
        List[Entry]: Entradas na ordem em que aparecem no tar.

    Raises:
        FormatError: Se o stream não for gzip válido, se o tar estiver
            corrompido ou se algum registro não tiver diretório envolvente.
        EmptyArchiveError: Se nenhuma entrada for produzida.
    """
    entries: List[Entry] = []

    try:
        with tarfile.open(fileobj=stream, mode="r|gz") as tar:
            for member in tar:
                if member.isdir():
                    continue

                name = _strip_top_dir(member.name)
                if not name:
                    raise FormatError(
                        f"registro sem diretório envolvente no arquivo: {member.name!r}"
                    )

                data = b""
                if member.isreg():
                    extracted = tar.extractfile(member)
                    if extracted is not None:
                        data = extracted.read()

                entries.append(Entry(name=name, data=data))
    except (tarfile.TarError, EOFError, zlib.error) as e:
        raise FormatError(f"stream tar gzip inválido: {e}") from e

    if not entries:
        raise EmptyArchiveError("nenhum arquivo no chart compactado")

    logger.debug("arquivo compactado lido: %d entradas", len(entries))
    return entries
