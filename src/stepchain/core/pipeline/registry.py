# src/stepchain/core/pipeline/registry.py
"""
Resolução declarativa de handlers.

Este módulo transforma referências textuais de handlers
(`"pacote.modulo:atributo"`) em callables e monta um Pipeline a partir
de uma configuração já resolvida pelo loader.

Decisões arquiteturais:
    - A resolução ocorre antes de qualquer execução
    - Referências inválidas são falhas fatais de configuração
    - A ordem declarada em `pipeline.handlers` é a ordem de execução
    - Referências repetidas são permitidas (o mesmo handler roda duas vezes)

Limites explícitos:
    - Não executa handlers
    - Não valida a assinatura dos callables resolvidos
"""

from __future__ import annotations

import importlib
from typing import Any, Dict, List

from stepchain.core.config.errors import HandlerResolutionError, InvalidConfigRootTypeError

from .pipeline import Pipeline, create_pipeline
from .types import Handler


def resolve_handler(ref: str) -> Handler:
    """
    Resolve `"modulo:atributo"` para um callable.

    O trecho após `:` pode ser um caminho pontuado (ex.: `Steps.normalize`).

    Raises:
        HandlerResolutionError: Formato inválido, módulo ou atributo
            inexistente, ou alvo não chamável.
    """
    if not isinstance(ref, str) or ref.count(":") != 1:
        raise HandlerResolutionError(
            f"Invalid handler reference: {ref!r}",
            details={"ref": ref},
            hint="Use the 'package.module:attribute' format",
        )

    module_name, _, attr_path = ref.partition(":")
    if not module_name.strip() or not attr_path.strip():
        raise HandlerResolutionError(
            f"Invalid handler reference: {ref!r}",
            details={"ref": ref},
            hint="Use the 'package.module:attribute' format",
        )

    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise HandlerResolutionError(
            f"Cannot import module '{module_name}'",
            details={"ref": ref, "exception_class": e.__class__.__name__},
        ) from e

    for part in attr_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as e:
            raise HandlerResolutionError(
                f"Attribute '{attr_path}' not found in '{module_name}'",
                details={"ref": ref, "missing": part},
            ) from e

    if not callable(target):
        raise HandlerResolutionError(
            f"Handler '{ref}' is not callable",
            details={"ref": ref, "type": type(target).__name__},
        )

    return target


def pipeline_from_config(config: Dict[str, Any]) -> Pipeline:
    """
    Monta um Pipeline a partir de `config["pipeline"]["handlers"]`.

    Ausência da seção `pipeline` (ou de `handlers`) produz um Pipeline vazio.

    Raises:
        InvalidConfigRootTypeError: Se a raiz ou `pipeline` não forem dict, ou
            `handlers` não for lista.
        HandlerResolutionError: Se alguma referência não puder ser resolvida.
    """
    if not isinstance(config, dict):
        raise InvalidConfigRootTypeError(
            f"Config root must be dict, got: {type(config).__name__}",
            details={"key": "<root>"},
        )

    # apenas None equivale a seção ausente; outros valores vazios são erro
    section = config.get("pipeline")
    if section is None:
        section = {}
    if not isinstance(section, dict):
        raise InvalidConfigRootTypeError(
            f"'pipeline' must be dict, got: {type(section).__name__}",
            details={"key": "pipeline"},
        )

    refs = section.get("handlers")
    if refs is None:
        refs = []
    if not isinstance(refs, list):
        raise InvalidConfigRootTypeError(
            f"'pipeline.handlers' must be list, got: {type(refs).__name__}",
            details={"key": "pipeline.handlers"},
        )

    handlers: List[Handler] = [resolve_handler(ref) for ref in refs]
    return create_pipeline(handlers)
