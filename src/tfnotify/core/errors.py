"""
tfnotify — Canonical Error Payloads (v1)

Este módulo define o padrão canônico de payload de erro do tfnotify.
Exceções de configuração são convertidas em payloads serializáveis para
que a CLI possa formatar mensagens e decidir o código de saída sem
interpretar texto livre.

Payloads devem ser:

- explícitos
- serializáveis
- acionáveis
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional

from .ci.names import supported_ci_names
from .config.errors import (
    ConfigError,
    ConfigFileNotFoundError,
    ConfigNotFoundError,
    ConfigParseError,
    MissingCIError,
    MissingFieldError,
    MissingNotifierError,
    UnsupportedCIError,
)


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TfnotifyErrorPayload:
    """
    Payload canônico de erro do tfnotify.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Arquivo de configuração
CONFIG_FILE_NOT_FOUND = "CONFIG_FILE_NOT_FOUND"
CONFIG_PARSE_ERROR = "CONFIG_PARSE_ERROR"
CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"

# Validação
CI_MISSING = "CI_MISSING"
CI_UNSUPPORTED = "CI_UNSUPPORTED"
CONFIG_MISSING_FIELD = "CONFIG_MISSING_FIELD"
NOTIFIER_MISSING = "NOTIFIER_MISSING"

CONFIG_ERROR = "CONFIG_ERROR"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def config_file_not_found(
    *,
    path: str,
    hint: str = "Verifique o caminho passado ao tfnotify ou remova-o para usar a busca pelos nomes padrão.",
) -> TfnotifyErrorPayload:
    return TfnotifyErrorPayload(
        type=CONFIG_FILE_NOT_FOUND,
        message="Arquivo de configuração não encontrado",
        details={"path": path},
        hint=hint,
    )


def config_parse_error(
    *,
    reason: str,
    path: Optional[str] = None,
    hint: str = "Corrija a sintaxe YAML e a estrutura das seções do arquivo de configuração.",
) -> TfnotifyErrorPayload:
    return TfnotifyErrorPayload(
        type=CONFIG_PARSE_ERROR,
        message="Arquivo de configuração inválido",
        details={"reason": reason, "path": path},
        hint=hint,
    )


def config_not_found(
    *,
    searched: List[str],
    hint: str = "Crie tfnotify.yaml no diretório atual (ou em um ancestral) ou informe o caminho explicitamente.",
) -> TfnotifyErrorPayload:
    return TfnotifyErrorPayload(
        type=CONFIG_NOT_FOUND,
        message="Nenhuma configuração do tfnotify encontrada",
        details={"searched": searched},
        hint=hint,
    )


def ci_missing(
    *,
    hint: str = "Declare `ci:` na configuração ou execute dentro de uma plataforma de CI detectável.",
) -> TfnotifyErrorPayload:
    return TfnotifyErrorPayload(
        type=CI_MISSING,
        message="Plataforma de CI não informada",
        details={"field": "ci"},
        hint=hint,
    )


def ci_unsupported(
    *,
    name: str,
    supported: List[str],
    hint: str = "Use um dos identificadores de CI suportados.",
) -> TfnotifyErrorPayload:
    return TfnotifyErrorPayload(
        type=CI_UNSUPPORTED,
        message="Plataforma de CI não suportada",
        details={"ci": name, "supported": supported},
        hint=hint,
    )


def config_missing_field(
    *,
    field_path: str,
    hint: str = "Preencha o campo na seção do notifier ou remova a seção da configuração.",
) -> TfnotifyErrorPayload:
    return TfnotifyErrorPayload(
        type=CONFIG_MISSING_FIELD,
        message="Campo obrigatório ausente na configuração do notifier",
        details={"field": field_path},
        hint=hint,
    )


def notifier_missing(
    *,
    hint: str = "Declare exatamente uma seção em `notifier:` (github, gitlab, slack ou typetalk).",
) -> TfnotifyErrorPayload:
    return TfnotifyErrorPayload(
        type=NOTIFIER_MISSING,
        message="Nenhum notifier configurado",
        details={"candidates": ["github", "gitlab", "slack", "typetalk"]},
        hint=hint,
    )


def error_payload_from(exc: ConfigError) -> TfnotifyErrorPayload:
    """Mapeia deterministicamente uma exceção de configuração para seu payload."""
    if isinstance(exc, ConfigFileNotFoundError):
        return config_file_not_found(path=exc.path)
    if isinstance(exc, ConfigParseError):
        return config_parse_error(reason=str(exc), path=exc.path)
    if isinstance(exc, ConfigNotFoundError):
        return config_not_found(searched=list(exc.searched))
    if isinstance(exc, MissingCIError):
        return ci_missing()
    if isinstance(exc, UnsupportedCIError):
        return ci_unsupported(name=exc.name, supported=supported_ci_names())
    if isinstance(exc, MissingFieldError):
        return config_missing_field(field_path=exc.field_path)
    if isinstance(exc, MissingNotifierError):
        return notifier_missing()
    return TfnotifyErrorPayload(type=CONFIG_ERROR, message=str(exc), details={})
