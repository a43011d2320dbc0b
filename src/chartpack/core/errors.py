# src/chartpack/core/errors.py
"""
Exceções canônicas do carregamento de charts do Chartpack.

Este módulo define a hierarquia oficial de exceções utilizadas durante
a leitura de arquivos compactados, a varredura de diretórios e a
montagem recursiva da árvore de charts.

As exceções aqui definidas representam **violações estruturais
explícitas** do formato de empacotamento, e não erros genéricos.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Toda falha é fatal para a chamada de carregamento que a encontrou
    - Nenhuma árvore parcial é retornada como sucesso
    - Falhas em dependências aninhadas carregam o contexto de cada nível

Invariantes:
    - Todas as exceções de carregamento herdam de `LoadError`
    - Exceções encapsuladas preservam a causa original via `__cause__`

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não representa erros de renderização ou deploy

Este módulo existe para garantir clareza,
consistência e rastreabilidade no tratamento de erros de carregamento.
"""

from __future__ import annotations

from typing import List, Optional


class LoadError(Exception):
    """
    Exceção base para erros de carregamento de charts.

    Todas as exceções levantadas durante leitura, classificação e
    montagem de um chart devem herdar desta classe, permitindo captura
    genérica pelo chamador.
    """


class FormatError(LoadError):
    """
    Exceção levantada quando o stream não é um tar gzip válido.

    Cobre falhas de descompressão, falhas de decodificação do tar em
    qualquer ponto da leitura e registros sem o diretório envolvente
    obrigatório.

    Invariantes:
        - Resultados parciais da leitura são descartados
    """


class EmptyArchiveError(FormatError):
    """Arquivo compactado decodificado sem nenhuma entrada utilizável."""


class MissingMetadataError(LoadError):
    """
    Exceção levantada quando o chart não possui `Chart.yaml`
    ou quando o metadado não declara `name`.
    """


class InvalidChartfileError(LoadError):
    """`Chart.yaml` presente, mas não parseável ou com campos de tipo inválido."""


class DeprecatedFormatError(LoadError):
    """
    Exceção levantada quando o chart contém `values.toml`.

    Decisões arquiteturais:
        - O formato legado é explicitamente não suportado
        - A presença do arquivo é erro fatal, não aviso
        - O erro ocorre mesmo que `values.yaml` também exista
    """


class NestedArchiveMismatchError(LoadError):
    """
    Exceção levantada quando um chart aninhado `charts/<nome>.tgz`
    não corresponde a uma única entrada com exatamente esse caminho.

    Atributos:
        expected: caminho esperado (a chave da dependência).
        actual: caminho efetivamente encontrado.
        parent: nome do chart que contém a dependência.
    """

    def __init__(self, expected: str, actual: str, parent: str) -> None:
        self.expected = expected
        self.actual = actual
        self.parent = parent
        super().__init__(
            f"erro ao descompactar tar em {parent}: esperado {expected}, recebido {actual}"
        )


class ChartIOError(LoadError):
    """
    Falha de leitura ou travessia do filesystem durante a varredura.

    O atributo `path` contém o caminho relativo ao diretório raiz
    do chart, para diagnóstico. A causa original (`OSError`) fica
    disponível em `__cause__`.
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"erro ao ler {path}: {reason}")


class DirectoryNotAllowedError(LoadError):
    """Um diretório foi passado onde era esperado um arquivo compactado."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"não é possível carregar um diretório como arquivo: {path}")


class DependencyLoadError(LoadError):
    """
    Falha ao carregar uma dependência aninhada.

    Cada nível de recursão encapsula a falha do nível abaixo com o nome
    da dependência e o nome do chart pai, de modo que a cadeia completa
    seja legível em `str(err)` e navegável via `chain`.

    Atributos:
        dependency: chave da dependência (ex.: `redis` ou `redis.tgz`).
        parent: nome do chart que contém a dependência.
    """

    def __init__(self, dependency: str, parent: str, cause: LoadError) -> None:
        self.dependency = dependency
        self.parent = parent
        super().__init__(f"erro ao carregar {dependency} em {parent}: {cause}")
        self.__cause__ = cause

    @property
    def chain(self) -> List[str]:
        """Nomes das dependências, do nível mais externo ao que falhou."""
        names: List[str] = []
        err: Optional[BaseException] = self
        while isinstance(err, DependencyLoadError):
            names.append(err.dependency)
            err = err.__cause__
        return names

    @property
    def root_cause(self) -> Optional[BaseException]:
        err: Optional[BaseException] = self
        while isinstance(err, DependencyLoadError):
            err = err.__cause__
        return err
