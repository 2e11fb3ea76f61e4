# src/tfnotify/core/config/errors.py
"""
Exceções canônicas da camada de configuração do tfnotify.

Este módulo define a hierarquia oficial de exceções utilizadas durante
a localização, o carregamento, o complemento e a validação da
configuração.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais são tratados como falhas fatais
    - Mensagens de erro são curtas e direcionadas ao usuário

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma configuração parcial acompanha uma exceção

Limites explícitos:
    - Não formata mensagens para o terminal (responsabilidade da CLI)
    - Não realiza fallback ou recovery
"""

from __future__ import annotations

from typing import Optional, Sequence


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do tfnotify.

    Permite captura genérica de qualquer falha de resolução de
    configuração pela camada chamadora (CLI).
    """


class ConfigFileNotFoundError(ConfigError):
    """
    Exceção levantada quando o arquivo informado ao loader não existe.

    Atributos:
        path: caminho solicitado, preservado para diagnóstico.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"{path}: no config file")


class ConfigParseError(ConfigError):
    """Falha ao parsear o YAML ou ao mapear o conteúdo para o schema."""

    def __init__(self, message: str, *, path: Optional[str] = None) -> None:
        self.path = path
        super().__init__(message)


class InvalidConfigRootTypeError(ConfigParseError):
    """
    Exceção levantada quando o conteúdo raiz do arquivo não é um mapa.

    Listas ou escalares no root são inválidos: o schema do tfnotify é
    sempre um dicionário com chaves fixas.
    """


class ConfigNotFoundError(ConfigError):
    """
    Nenhum arquivo de configuração foi encontrado.

    Levantada tanto para caminho explícito inexistente quanto para a
    busca pelos nomes padrão sem sucesso.
    """

    def __init__(self, searched: Sequence[object] = ()) -> None:
        self.searched = tuple(str(s) for s in searched)
        super().__init__("config for tfnotify is not found at all")


class MissingCIError(ConfigError):
    """O campo `ci` está vazio."""

    def __init__(self) -> None:
        super().__init__("ci: need to be set")


class UnsupportedCIError(ConfigError):
    """O campo `ci` não corresponde a nenhuma plataforma suportada."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"{name}: not supported yet")


class MissingFieldError(ConfigError):
    """
    Campo obrigatório de uma seção de notifier definida está vazio.

    Atributos:
        field_path: caminho pontuado do campo (ex.: `slack.channel`).
    """

    def __init__(self, field_path: str) -> None:
        self.field_path = field_path
        super().__init__(f"{field_path} is missing")


class MissingNotifierError(ConfigError):
    """Nenhuma seção de notifier está definida."""

    def __init__(self) -> None:
        super().__init__("notifier is missing")
