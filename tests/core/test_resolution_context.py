# tests/core/test_resolution_context.py
"""
Testes de logging estruturado e coleta de warnings no ResolutionContext.

Os testes asseguram que:
- eventos de log são registrados de forma estruturada
- cada evento contém metadados mínimos de rastreabilidade
- campos adicionais são preservados sem perda
- warnings são coletados e agrupados por etapa

Invariantes:
    - `resolution_id` está presente em todos os eventos de log
    - A coleção de eventos cresce de forma incremental

Limites explícitos:
    - Não valida formatação nem impressão dos eventos
"""

from datetime import datetime

import pytest

try:
    from tfnotify.core.context import ResolutionContext
except Exception as e:  # noqa: BLE001
    ResolutionContext = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """
    Garante que a API de logging e warnings do ResolutionContext esteja disponível.

    Falha imediatamente, com a lista exata de atributos esperados, quando
    o módulo de contexto não pode ser importado.
    """
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing ResolutionContext logging/warnings API. Implement:"
            "- src/tfnotify/core/context.py (log, add_warning, events, warnings)"
            f"Import error: {_IMPORT_ERR}"
        )


def test_structured_log_event():
    """
    Verifica que `log` produz um evento estruturado.

    Invariantes:
        - Cada chamada a `log` adiciona exatamente um evento
        - O evento contém etapa, nível, mensagem e timestamp
        - Metadados adicionais são mantidos no payload do evento
    """
    _require_imports()
    ctx = ResolutionContext(resolution_id="res-1")

    ctx.log(stage="load", level="INFO", message="hello", path="tfnotify.yaml")

    assert len(ctx.events) == 1
    ev = ctx.events[-1]
    assert ev["resolution_id"] == "res-1"
    assert ev["stage"] == "load"
    assert ev["level"] == "INFO"
    assert ev["message"] == "hello"
    assert ev["path"] == "tfnotify.yaml"
    assert datetime.fromisoformat(ev["timestamp"]).tzinfo is not None


def test_warning_collection():
    """
    Verifica que warnings são agrupados por etapa, em ordem de inserção,
    sem gerar eventos de log.
    """
    _require_imports()
    ctx = ResolutionContext()

    ctx.add_warning(stage="validate", message="w1")
    ctx.add_warning(stage="validate", message="w2")
    ctx.add_warning(stage="complement", message="w3")

    assert ctx.warnings == {"validate": ["w1", "w2"], "complement": ["w3"]}
    assert ctx.events == []


def test_contexts_are_isolated():
    _require_imports()
    a = ResolutionContext()
    b = ResolutionContext()

    a.log(stage="find", level="INFO", message="x")
    a.add_warning(stage="find", message="y")

    assert a.resolution_id != b.resolution_id
    assert b.events == []
    assert b.warnings == {}
