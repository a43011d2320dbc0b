# src/chartpack/core/loader/directory.py
"""
Varredura de charts descompactados em diretório.

Produz a mesma sequência plana de `Entry` que o leitor de arquivos
compactados, com caminhos relativos à raiz absoluta do diretório e
separados por `/`.

Princípios fundamentais:
    - Apenas arquivos regulares produzem entradas
    - Qualquer erro de I/O aborta a varredura com `ChartIOError`

Invariantes:
    - A ordem de travessia é lexical (nomes ordenados a cada nível)
    - `ChartIOError.path` é sempre relativo à raiz

Limites explícitos:
    - Diretórios, FIFOs, sockets e devices não produzem entradas
    - Links simbólicos para diretórios não são seguidos
    - Não classifica entradas
"""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path
from typing import List, Union

from ..errors import ChartIOError
from .archive import Entry

logger = logging.getLogger(__name__)


def _relative(path: str, topdir: str) -> str:
    return os.path.relpath(path, topdir).replace(os.sep, "/")


def walk_directory(root: Union[str, Path]) -> List[Entry]:
    """Lê recursivamente todos os arquivos regulares sob `root`.

    Raises:
        ChartIOError: se a travessia ou a leitura de algum arquivo falhar;
            `path` contém o caminho relativo do item problemático.
    """
    topdir = os.path.abspath(root)

    def _on_error(err: OSError) -> None:
        rel = _relative(err.filename, topdir) if err.filename else "."
        raise ChartIOError(rel, err.strerror or str(err)) from err

    entries: List[Entry] = []
    for dirpath, dirnames, filenames in os.walk(topdir, onerror=_on_error):
        dirnames.sort()
        for filename in sorted(filenames):
            full = os.path.join(dirpath, filename)
            rel = _relative(full, topdir)
            try:
                if not stat.S_ISREG(os.stat(full).st_mode):
                    logger.debug("ignorando item não regular: %s", rel)
                    continue
                with open(full, "rb") as f:
                    data = f.read()
            except OSError as e:
                raise ChartIOError(rel, e.strerror or str(e)) from e
            entries.append(Entry(name=rel, data=data))

    logger.debug("diretório %s varrido: %d entradas", topdir, len(entries))
    return entries
