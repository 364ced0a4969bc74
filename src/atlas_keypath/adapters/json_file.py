# src/atlas_keypath/adapters/json_file.py
"""Adapter JSON. JSON não possui comentários: a saída não tem cabeçalho."""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

from ..core.context import CodecContext
from .base import FileAdapter


class JsonFileAdapter(FileAdapter):
    name = "json"
    extensions = ("json",)
    comment_prefix = None

    def _decode(self, text: str, ctx: Optional[CodecContext]) -> Any:
        if not text.strip():
            return None
        return json.loads(text)

    def _encode(self, tree: Dict[str, Any], ctx: Optional[CodecContext]) -> str:
        return json.dumps(tree, indent=4, ensure_ascii=False) + "\n"
