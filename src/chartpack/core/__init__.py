# src/chartpack/core/__init__.py
"""
Core do Chartpack.

Este pacote contém a implementação canônica da camada de
desserialização e montagem do formato de empacotamento de charts.

O core é projetado para ser:
    - determinístico
    - testável de forma isolada
    - livre de dependências de rede, cluster ou CLI

Componentes principais:
    - chart  → modelo imutável da árvore e parser de `Chart.yaml`
    - loader → leitura de tar gzip/diretórios e montagem recursiva
    - values → parse, navegação e serialização de values
    - errors → hierarquia de exceções do carregamento

Limites explícitos:
    - Não renderiza templates
    - Não executa deploy nem acompanha status de releases
"""
