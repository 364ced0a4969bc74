# src/atlas_keypath/core/__init__.py
"""
Core do Atlas KeyPath: engine de aninhamento e achatamento de KeyPaths.

Componentes principais:
    - keypath → decomposição de chaves por separador
    - builder → mapeamento plano/seccionado → árvore aninhada
    - merge   → merge recursivo de seções e merge de overrides
    - flatten → árvore aninhada → linhas `caminho = valor`
    - values  → codificação de escalares
    - options → opções imutáveis do codec
    - context → eventos estruturados e warnings por chamada
    - errors  → hierarquia canônica de exceções

Limites explícitos:
    - Não acessa filesystem
    - Não conhece formatos de superfície além das linhas `caminho = valor`
"""
