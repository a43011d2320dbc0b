# src/chartpack/core/loader/__init__.py
"""
Loader de charts do Chartpack.

Este pacote transforma um chart empacotado (diretório ou tar gzip)
em uma árvore imutável de `Chart`, resolvendo recursivamente as
dependências aninhadas em `charts/`.

Componentes:
    - archive   → leitura de tar gzip em entradas planas
    - directory → varredura de diretório em entradas planas
    - assemble  → classificação de entradas e montagem recursiva
    - load      → pontos de entrada e despacho por tipo de entrada

Invariantes:
    - Toda falha é fatal para a chamada de carregamento
    - Recursos abertos são sempre liberados
"""

from .archive import Entry, read_archive
from .assemble import (
    ARCHIVE_EXTENSION,
    CHARTFILE_NAME,
    CHARTS_PREFIX,
    DEPRECATED_VALUES_NAME,
    TEMPLATES_PREFIX,
    VALUES_NAME,
    load_entries,
)
from .directory import walk_directory
from .load import load, load_archive, load_dir, load_file

__all__ = [
    "ARCHIVE_EXTENSION",
    "CHARTFILE_NAME",
    "CHARTS_PREFIX",
    "DEPRECATED_VALUES_NAME",
    "TEMPLATES_PREFIX",
    "VALUES_NAME",
    "Entry",
    "load",
    "load_archive",
    "load_dir",
    "load_entries",
    "load_file",
    "read_archive",
    "walk_directory",
]
