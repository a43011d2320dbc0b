# src/chartpack/core/chart/__init__.py
"""
Modelo da árvore de charts do Chartpack.

Este pacote contém as estruturas imutáveis que representam um chart
carregado e o parser do seu arquivo de metadados (`Chart.yaml`).

Responsabilidades do pacote:
    - Definir `Chart`, `Metadata`, `Maintainer`, `Template` e `File`
    - Converter `Chart.yaml` em `Metadata`

Limites explícitos:
    - Não lê arquivos compactados nem diretórios
    - Não renderiza nem valida templates
"""

from .chartfile import load_chartfile, parse_chartfile
from .model import Chart, File, Maintainer, Metadata, Template

__all__ = [
    "Chart",
    "File",
    "Maintainer",
    "Metadata",
    "Template",
    "load_chartfile",
    "parse_chartfile",
]
