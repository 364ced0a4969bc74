# tests/conftest.py
"""
Fixtures compartilhados para testes do Atlas KeyPath.

Este módulo define fixtures reutilizáveis que fornecem:
- textos INI representativos (raiz + seções + seções aninhadas)
- árvores aninhadas prontas para encode
- contexto de observabilidade determinístico (CodecContext)

Decisões arquiteturais:
    - Fixtures são mantidas simples e explícitas
    - Dados retornados são determinísticos e isolados
    - Nenhuma fixture realiza I/O; testes que precisam de arquivos
      utilizam `tmp_path`

Limites explícitos:
    - Não substituir testes de integração do loader
    - Não conter lógica condicional complexa
"""

from datetime import datetime, timezone

import pytest


@pytest.fixture
def sample_ini_text() -> str:
    """
    INI com escalares de raiz, seção comum e seção com separador no nome.

    Usado por:
        - Testes do lexer INI
        - Testes de decode do IniFileAdapter
    """
    return """\
; configuração de exemplo
name = "demo"
debug = true

[database]
host = localhost
port = 5432
ratio = 0.5

[database.replica]
host = "r1"
"""


@pytest.fixture
def sample_tree() -> dict:
    """Árvore com escalares de raiz intercalados entre seções."""
    return {
        "app": {
            "name": "demo",
            "debug": False,
            "limits": {"max": 10, "ratio": 0.25},
        },
        "version": 3,
        "db": {"host": "localhost"},
    }


@pytest.fixture
def codec_ctx():
    """
    CodecContext determinístico (run_id e created_at fixos).

    O import é feito de forma lazy para melhorar a legibilidade dos erros
    quando o core não está disponível.
    """
    from atlas_keypath.core.context import CodecContext

    return CodecContext(
        run_id="run-test-001",
        created_at=datetime(2026, 1, 16, 0, 0, 0, tzinfo=timezone.utc),
        meta={"source": "pytest"},
    )
