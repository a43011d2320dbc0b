# src/chartpack/core/chart/model.py
"""
Modelo de dados canônico da árvore de charts.

Este módulo define as estruturas imutáveis produzidas pelo loader:
um `Chart` por pacote, contendo metadados, o blob bruto de values,
templates, arquivos auxiliares opacos e dependências aninhadas.

Princípios fundamentais:
    - Cada nó é construído uma única vez, por inteiro
    - Nós são imutáveis após a construção (dataclasses frozen + tuplas)
    - Dependências pertencem exclusivamente ao chart pai (árvore, não grafo)

Invariantes:
    - `templates`, `files` e `dependencies` preservam a ordem de encontro
      na sequência de entradas
    - `values` é mantido byte a byte, sem parse

Limites explícitos:
    - Não renderiza templates
    - Não interpreta o conteúdo de `files`
    - Não valida semântica de values

Este módulo existe para oferecer uma representação estável
e comparável da árvore carregada às camadas seguintes.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class Maintainer:
    name: str = ""
    email: str = ""


@dataclass(frozen=True)
class Metadata:
    """
    Registro descritivo de um chart, lido de `Chart.yaml`.

    O único campo inspecionado pelo loader é `name`; os demais são
    transportados de forma opaca.
    """

    name: str = ""
    home: str = ""
    sources: Tuple[str, ...] = ()
    version: str = ""
    description: str = ""
    keywords: Tuple[str, ...] = ()
    maintainers: Tuple[Maintainer, ...] = ()
    engine: str = ""
    icon: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável (listas no lugar de tuplas)."""
        out = asdict(self)
        out["sources"] = list(self.sources)
        out["keywords"] = list(self.keywords)
        out["maintainers"] = [asdict(m) for m in self.maintainers]
        return out


@dataclass(frozen=True)
class Template:
    """Template do chart; `name` é o caminho relativo completo (`templates/...`)."""

    name: str
    data: bytes


@dataclass(frozen=True)
class File:
    """Arquivo auxiliar opaco: etiqueta (caminho relativo original) + conteúdo."""

    type_url: str
    value: bytes


@dataclass(frozen=True)
class Chart:
    """
    Nó da árvore de charts.

    Decisões arquiteturais:
        - `values` é `None` quando o chart não possui `values.yaml`
        - Dependências são outros `Chart`, nunca referências compartilhadas

    Invariantes:
        - `metadata.name` é sempre não vazio em charts produzidos pelo loader
    """

    metadata: Metadata
    values: Optional[bytes] = None
    templates: Tuple[Template, ...] = ()
    files: Tuple[File, ...] = ()
    dependencies: Tuple["Chart", ...] = field(default_factory=tuple)

    @property
    def name(self) -> str:
        return self.metadata.name
