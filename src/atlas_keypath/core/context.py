# src/atlas_keypath/core/context.py
"""
Contexto de observabilidade de uma chamada de decode/encode.

Este módulo define o `CodecContext`, a estrutura utilizada para registrar
eventos estruturados e warnings não fatais durante uma única operação de
leitura ou escrita de configuração.

Princípios fundamentais:
    - Isolamento por chamada (cada operação recebe seu próprio contexto)
    - O contexto é opcional: o core funciona sem ele
    - Ausência de estado global compartilhado

Invariantes:
    - Logs sempre incluem `run_id` e `step_id`
    - Warnings são agrupados por `step_id`
    - O contexto nunca altera o resultado de decode/encode

Limites explícitos:
    - Não persiste eventos
    - Não substitui exceções: erros estruturais continuam sendo levantados
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


@dataclass
class CodecContext:
    """
    Contexto de eventos e warnings de uma operação do codec.

    Campos:
        - run_id: identificador da operação (gerado se omitido)
        - created_at: instante de criação (UTC)
        - meta: metadados livres (ex.: caminho do arquivo)
        - events: eventos estruturados em ordem de registro
        - warnings: mensagens não fatais agrupadas por `step_id`
    """

    run_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    meta: Dict[str, Any] = field(default_factory=dict)

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)

    def log(self, *, step_id: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "run_id": self.run_id,
            "step_id": step_id,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, step_id: str, message: str) -> None:
        if step_id not in self.warnings:
            self.warnings[step_id] = []
        self.warnings[step_id].append(message)


def emit_warning(ctx: Optional[CodecContext], *, step_id: str, message: str, **extra: Any) -> None:
    """Registra um warning e o evento correspondente, se houver contexto."""
    if ctx is None:
        return
    ctx.add_warning(step_id=step_id, message=message)
    ctx.log(step_id=step_id, level="WARNING", message=message, **extra)
