"""
stepchain — Canonical Exceptions (v1)

Este módulo define a exceção base tipada do stepchain.

Objetivo:
- Permitir que camadas fora do engine (config, registry) levantem
  exceções semânticas com dados estruturados
- Evitar ValueError/RuntimeError genéricos em guardrails

Regras:
- O engine nunca encapsula exceções de handlers nestas classes.
- Exceções devem carregar apenas dados estruturados (serializáveis).
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class StepchainException(Exception):
    """Base class para exceções internas do stepchain.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Mensagem deve ser curta e humana
    """

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        hint: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = dict(details or {})
        self.hint = hint

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "details": dict(self.details),
            "hint": self.hint,
        }
