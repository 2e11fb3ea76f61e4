"""
tfnotify — resolução de configuração para notificações de terraform em CI.

Ponto de entrada público do core: a CLI chama `resolve_config` e recebe a
configuração validada junto com o tipo do notifier ativo.
"""

from .core.config.errors import ConfigError
from .core.config.model import Config
from .core.config.notifier import NotifierKind
from .core.config.resolve import ResolvedConfig, resolve_config
from .core.context import ResolutionContext
from .core.errors import error_payload_from

__all__ = [
    "Config",
    "ConfigError",
    "NotifierKind",
    "ResolutionContext",
    "ResolvedConfig",
    "error_payload_from",
    "resolve_config",
]
