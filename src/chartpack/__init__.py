# src/chartpack/__init__.py
"""
Chartpack — carregamento de charts de deploy empacotados.

Este pacote raiz define o namespace público do Chartpack, responsável
por ler um chart (diretório ou tar gzip) e montá-lo como uma árvore
imutável de nós tipados, incluindo dependências aninhadas.

Arquitetura em alto nível:
    - core.chart  → modelo da árvore (`Chart`, `Metadata`, ...)
    - core.loader → leitura e montagem recursiva
    - core.values → colaborador de values (YAML)
    - core.errors → exceções de carregamento

Limites explícitos:
    - Não renderiza nem instala charts
    - Não contém camada de CLI ou de rede
"""

from .core.chart import Chart, File, Maintainer, Metadata, Template
from .core.errors import (
    ChartIOError,
    DependencyLoadError,
    DeprecatedFormatError,
    DirectoryNotAllowedError,
    EmptyArchiveError,
    FormatError,
    InvalidChartfileError,
    LoadError,
    MissingMetadataError,
    NestedArchiveMismatchError,
)
from .core.loader import load, load_archive, load_dir, load_file

__all__ = [
    "Chart",
    "ChartIOError",
    "DependencyLoadError",
    "DeprecatedFormatError",
    "DirectoryNotAllowedError",
    "EmptyArchiveError",
    "File",
    "FormatError",
    "InvalidChartfileError",
    "LoadError",
    "Maintainer",
    "Metadata",
    "MissingMetadataError",
    "NestedArchiveMismatchError",
    "Template",
    "load",
    "load_archive",
    "load_dir",
    "load_file",
]
