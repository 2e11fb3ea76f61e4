# src/tfnotify/core/config/model.py
"""
Modelo de dados da configuração do tfnotify.

Este módulo define a representação interna explícita do arquivo
`tfnotify.yaml` e a materialização desse modelo a partir de um
dicionário já parseado.

Schema (chaves fixas):

    ci: <string>
    notifier:
      github:   {token, base_url, repository: {owner, name}}
      gitlab:   {token, base_url, repository: {owner, name}}
      slack:    {token, channel, bot}
      typetalk: {token, topic_id}
    terraform:
      default: {template}
      fmt:     {template}
      plan:    {template, when_add_or_update_only, when_destroy,
                when_no_changes, when_plan_error}
      apply:   {template}
      use_raw_output: <bool>

Decisões arquiteturais:
    - Todos os tipos são dataclasses imutáveis (frozen)
    - String vazia é o valor "não configurado" de qualquer campo texto
    - Cada seção de notifier expõe `is_defined()` explicitamente
    - Chaves desconhecidas são ignoradas; formas inválidas são erro

Invariantes:
    - `vars` e `source_path` nunca aparecem em `to_dict()`
    - `Config.from_dict(d)` nunca muta `d`

Limites explícitos:
    - Não lê arquivos (ver `loader`)
    - Não valida completude (ver `validator`)
    - Não interpreta templates do terraform
"""

from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Optional

from yaml.constructor import SafeConstructor

from .errors import ConfigParseError


# ---------------------------------------------------------------------------
# Coerção de valores
# ---------------------------------------------------------------------------

def _text(data: Mapping[str, Any], key: str, path: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    if isinstance(value, (_dt.date, _dt.datetime)):
        return value.isoformat()
    raise ConfigParseError(
        f"{path}.{key}: expected a scalar, got {type(value).__name__}" if path else
        f"{key}: expected a scalar, got {type(value).__name__}"
    )


def _flag(data: Mapping[str, Any], key: str, path: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    # escalares chegam como texto literal do loader; aceita os booleanos do YAML 1.1
    if isinstance(value, str) and value.lower() in SafeConstructor.bool_values:
        return SafeConstructor.bool_values[value.lower()]
    raise ConfigParseError(f"{path}.{key}: expected a boolean, got {value!r}")


def _section(data: Mapping[str, Any], key: str, path: str) -> Mapping[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        where = f"{path}.{key}" if path else key
        raise ConfigParseError(f"{where}: expected a mapping, got {type(value).__name__}")
    return value


def _drop_empty(d: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in d.items() if v}


# ---------------------------------------------------------------------------
# Notifiers
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Repository:
    """Coordenadas de um repositório (owner, name)."""

    owner: str = ""
    name: str = ""

    def is_defined(self) -> bool:
        return bool(self.owner or self.name)

    def fill(self, owner: str, name: str) -> "Repository":
        """Preenche apenas os campos vazios; valores explícitos são preservados."""
        return Repository(owner=self.owner or owner, name=self.name or name)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], path: str) -> "Repository":
        return cls(owner=_text(data, "owner", path), name=_text(data, "name", path))

    def to_dict(self) -> Dict[str, Any]:
        return {"owner": self.owner, "name": self.name}


@dataclass(frozen=True)
class GithubNotifier:
    token: str = ""
    base_url: str = ""
    repository: Repository = field(default_factory=Repository)

    def is_defined(self) -> bool:
        return bool(self.token or self.base_url or self.repository.is_defined())

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], path: str = "notifier.github") -> "GithubNotifier":
        return cls(
            token=_text(data, "token", path),
            base_url=_text(data, "base_url", path),
            repository=Repository.from_dict(
                _section(data, "repository", path), f"{path}.repository"
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "token": self.token,
            "base_url": self.base_url,
            "repository": self.repository.to_dict(),
        }


@dataclass(frozen=True)
class GitlabNotifier:
    token: str = ""
    base_url: str = ""
    repository: Repository = field(default_factory=Repository)

    def is_defined(self) -> bool:
        return bool(self.token or self.base_url or self.repository.is_defined())

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], path: str = "notifier.gitlab") -> "GitlabNotifier":
        return cls(
            token=_text(data, "token", path),
            base_url=_text(data, "base_url", path),
            repository=Repository.from_dict(
                _section(data, "repository", path), f"{path}.repository"
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "token": self.token,
            "base_url": self.base_url,
            "repository": self.repository.to_dict(),
        }


@dataclass(frozen=True)
class SlackNotifier:
    token: str = ""
    channel: str = ""
    bot: str = ""

    def is_defined(self) -> bool:
        return bool(self.token or self.channel or self.bot)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], path: str = "notifier.slack") -> "SlackNotifier":
        return cls(
            token=_text(data, "token", path),
            channel=_text(data, "channel", path),
            bot=_text(data, "bot", path),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"token": self.token, "channel": self.channel, "bot": self.bot}


@dataclass(frozen=True)
class TypetalkNotifier:
    token: str = ""
    topic_id: str = ""

    def is_defined(self) -> bool:
        return bool(self.token or self.topic_id)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], path: str = "notifier.typetalk") -> "TypetalkNotifier":
        return cls(
            token=_text(data, "token", path),
            topic_id=_text(data, "topic_id", path),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"token": self.token, "topic_id": self.topic_id}


@dataclass(frozen=True)
class Notifier:
    """Agregado das quatro seções de notifier, todas opcionais."""

    github: GithubNotifier = field(default_factory=GithubNotifier)
    gitlab: GitlabNotifier = field(default_factory=GitlabNotifier)
    slack: SlackNotifier = field(default_factory=SlackNotifier)
    typetalk: TypetalkNotifier = field(default_factory=TypetalkNotifier)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], path: str = "notifier") -> "Notifier":
        return cls(
            github=GithubNotifier.from_dict(_section(data, "github", path), f"{path}.github"),
            gitlab=GitlabNotifier.from_dict(_section(data, "gitlab", path), f"{path}.gitlab"),
            slack=SlackNotifier.from_dict(_section(data, "slack", path), f"{path}.slack"),
            typetalk=TypetalkNotifier.from_dict(_section(data, "typetalk", path), f"{path}.typetalk"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "github": self.github.to_dict(),
            "gitlab": self.gitlab.to_dict(),
            "slack": self.slack.to_dict(),
            "typetalk": self.typetalk.to_dict(),
        }


# ---------------------------------------------------------------------------
# Terraform (repassado sem interpretação ao colaborador de templates)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class WhenAddOrUpdateOnly:
    label: str = ""
    label_color: str = ""


@dataclass(frozen=True)
class WhenDestroy:
    label: str = ""
    template: str = ""
    label_color: str = ""


@dataclass(frozen=True)
class WhenNoChanges:
    label: str = ""
    label_color: str = ""


@dataclass(frozen=True)
class WhenPlanError:
    label: str = ""
    label_color: str = ""


@dataclass(frozen=True)
class Default:
    template: str = ""


@dataclass(frozen=True)
class Fmt:
    template: str = ""


@dataclass(frozen=True)
class Apply:
    template: str = ""


@dataclass(frozen=True)
class Plan:
    template: str = ""
    when_add_or_update_only: WhenAddOrUpdateOnly = field(default_factory=WhenAddOrUpdateOnly)
    when_destroy: WhenDestroy = field(default_factory=WhenDestroy)
    when_no_changes: WhenNoChanges = field(default_factory=WhenNoChanges)
    when_plan_error: WhenPlanError = field(default_factory=WhenPlanError)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], path: str = "terraform.plan") -> "Plan":
        def labelled(key: str) -> Mapping[str, Any]:
            return _section(data, key, path)

        add = labelled("when_add_or_update_only")
        destroy = labelled("when_destroy")
        no_changes = labelled("when_no_changes")
        plan_error = labelled("when_plan_error")
        return cls(
            template=_text(data, "template", path),
            when_add_or_update_only=WhenAddOrUpdateOnly(
                label=_text(add, "label", f"{path}.when_add_or_update_only"),
                label_color=_text(add, "label_color", f"{path}.when_add_or_update_only"),
            ),
            when_destroy=WhenDestroy(
                label=_text(destroy, "label", f"{path}.when_destroy"),
                template=_text(destroy, "template", f"{path}.when_destroy"),
                label_color=_text(destroy, "label_color", f"{path}.when_destroy"),
            ),
            when_no_changes=WhenNoChanges(
                label=_text(no_changes, "label", f"{path}.when_no_changes"),
                label_color=_text(no_changes, "label_color", f"{path}.when_no_changes"),
            ),
            when_plan_error=WhenPlanError(
                label=_text(plan_error, "label", f"{path}.when_plan_error"),
                label_color=_text(plan_error, "label_color", f"{path}.when_plan_error"),
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"template": self.template}
        blocks = {
            "when_add_or_update_only": {
                "label": self.when_add_or_update_only.label,
                "label_color": self.when_add_or_update_only.label_color,
            },
            "when_destroy": {
                "label": self.when_destroy.label,
                "template": self.when_destroy.template,
                "label_color": self.when_destroy.label_color,
            },
            "when_no_changes": {
                "label": self.when_no_changes.label,
                "label_color": self.when_no_changes.label_color,
            },
            "when_plan_error": {
                "label": self.when_plan_error.label,
                "label_color": self.when_plan_error.label_color,
            },
        }
        # blocos condicionais vazios são omitidos
        for key, block in blocks.items():
            block = _drop_empty(block)
            if block:
                out[key] = block
        return out


@dataclass(frozen=True)
class Terraform:
    default: Default = field(default_factory=Default)
    fmt: Fmt = field(default_factory=Fmt)
    plan: Plan = field(default_factory=Plan)
    apply: Apply = field(default_factory=Apply)
    use_raw_output: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], path: str = "terraform") -> "Terraform":
        return cls(
            default=Default(template=_text(_section(data, "default", path), "template", f"{path}.default")),
            fmt=Fmt(template=_text(_section(data, "fmt", path), "template", f"{path}.fmt")),
            plan=Plan.from_dict(_section(data, "plan", path), f"{path}.plan"),
            apply=Apply(template=_text(_section(data, "apply", path), "template", f"{path}.apply")),
            use_raw_output=_flag(data, "use_raw_output", path),
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "default": {"template": self.default.template},
            "fmt": {"template": self.fmt.template},
            "plan": self.plan.to_dict(),
            "apply": {"template": self.apply.template},
        }
        if self.use_raw_output:
            out["use_raw_output"] = True
        return out


# ---------------------------------------------------------------------------
# Raiz
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Config:
    """
    Valor raiz da configuração do tfnotify.

    Ciclo de vida:
        - construído uma vez por invocação (`load_file`)
        - complementado (`complement`) e validado (`validate`), cada etapa
          retornando um novo valor
        - tratado como somente leitura pelos colaboradores externos

    Campos:
        - ci: identificador da plataforma de CI (case-insensitive)
        - notifier: seções de notifier
        - terraform: templates por comando, repassados sem interpretação
        - vars: variáveis livres para templates, nunca serializadas
        - source_path: caminho do arquivo de origem, apenas diagnóstico
    """

    ci: str = ""
    notifier: Notifier = field(default_factory=Notifier)
    terraform: Terraform = field(default_factory=Terraform)
    vars: Dict[str, str] = field(default_factory=dict)
    source_path: Optional[str] = field(default=None, compare=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], *, source_path: Optional[str] = None) -> "Config":
        if not isinstance(data, dict):
            raise ConfigParseError(
                f"config root must be a mapping, got {type(data).__name__}", path=source_path
            )
        try:
            return cls(
                ci=_text(data, "ci", ""),
                notifier=Notifier.from_dict(_section(data, "notifier", "")),
                terraform=Terraform.from_dict(_section(data, "terraform", "")),
                source_path=source_path,
            )
        except ConfigParseError as e:
            if e.path is None and source_path is not None:
                raise ConfigParseError(str(e), path=source_path) from e
            raise

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ci": self.ci,
            "notifier": self.notifier.to_dict(),
            "terraform": self.terraform.to_dict(),
        }

    def with_vars(self, variables: Mapping[str, str]) -> "Config":
        return replace(self, vars={str(k): str(v) for k, v in variables.items()})
