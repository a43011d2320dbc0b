# tests/conftest.py
"""
Fixtures compartilhados para testes do Chartpack.

Este módulo define fixtures reutilizáveis que fornecem:
- o conteúdo de um chart mínimo e de um chart com dependências
- o mesmo chart materializado em diretório e em tar gzip

Decisões arquiteturais:
    - Charts são descritos como dict `caminho -> conteúdo`
    - Diretórios são escritos em `tmp_path`, nunca fora dele
    - Arquivos compactados são montados em memória

Invariantes:
    - Dados retornados são determinísticos e isolados
    - Nenhuma fixture executa o loader

Este módulo existe como infraestrutura de teste e não
como validação funcional do loader.
"""

from pathlib import Path
from typing import Dict

import pytest

from tests._helpers import chartfile, make_archive, write_tree


@pytest.fixture
def minimal_chart_files() -> Dict[str, bytes]:
    """Chart mínimo: apenas `Chart.yaml`."""
    return {"Chart.yaml": chartfile("minimal")}


@pytest.fixture
def full_chart_files() -> Dict[str, bytes]:
    """
    Chart com todas as categorias de entrada.

    Contém metadados, values, dois templates, um arquivo auxiliar,
    uma dependência em diretório (`charts/mariadb`) e uma dependência
    compactada (`charts/redis.tgz`).
    """
    redis_tgz = make_archive(
        {
            "Chart.yaml": chartfile("redis", "6.0.0"),
            "values.yaml": b"port: 6379\n",
            "templates/service.yaml": b"kind: Service\n",
        },
        top="redis",
    )
    return {
        "Chart.yaml": chartfile("frontend", "1.2.3"),
        "values.yaml": b"replicas: 2\nimage:\n  tag: latest\n",
        "templates/deployment.yaml": b"kind: Deployment\n",
        "templates/_helpers.tpl": b"{{/* helpers */}}\n",
        "README.md": b"# frontend\n",
        "charts/mariadb/Chart.yaml": chartfile("mariadb", "10.1.0"),
        "charts/mariadb/templates/statefulset.yaml": b"kind: StatefulSet\n",
        "charts/redis.tgz": redis_tgz,
    }


@pytest.fixture
def full_chart_dir(tmp_path: Path, full_chart_files) -> Path:
    return write_tree(tmp_path / "frontend", full_chart_files)


@pytest.fixture
def full_chart_archive(full_chart_files) -> bytes:
    return make_archive(full_chart_files, top="frontend")
