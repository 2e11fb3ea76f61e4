# tests/conftest.py
"""
Fixtures compartilhados para testes do tfnotify.

Este módulo define fixtures reutilizáveis que fornecem:
- arquivos `tfnotify.yaml` típicos (como strings YAML)
- ambientes de CI simulados (dicionários injetados, nunca `os.environ`)
- resolvers de plataforma isolados do ambiente real do processo

Decisões arquiteturais:
    - O ambiente é sempre injetado: testes não dependem da CI onde rodam
    - Configurações são fornecidas como strings e escritas em `tmp_path`
      apenas pelos testes que exercitam o loader

Invariantes:
    - Nenhuma fixture lê ou altera `os.environ`
    - Todas as fixtures são determinísticas

Limites explícitos:
    - Não substituir testes de integração
    - Não conter lógica condicional complexa
"""

import pytest


# =====================================================
# Arquivos de configuração
# =====================================================

@pytest.fixture
def github_config_yaml() -> str:
    """
    YAML típico de um projeto que notifica no GitHub a partir da CircleCI,
    sem coordenadas de repositório (preenchidas pela CI).
    """
    return """\
ci: circleci
notifier:
  github:
    token: $GITHUB_TOKEN
    repository:
      owner: ""
      name: ""
terraform:
  fmt:
    template: |
      {{ .Title }}
  plan:
    template: |
      {{ .Title }}
      {{ .Body }}
    when_destroy:
      label: destroy
      label_color: d93f0b
  apply:
    template: |
      {{ .Result }}
"""


@pytest.fixture
def slack_config_yaml() -> str:
    """YAML típico de notificação no Slack a partir do Travis."""
    return """\
ci: travis-ci
notifier:
  slack:
    token: xoxb-token
    channel: C0123456
    bot: tfnotify
terraform:
  use_raw_output: true
"""


# =====================================================
# Ambientes de CI simulados
# =====================================================

@pytest.fixture
def circleci_env() -> dict:
    """Ambiente mínimo de um job da CircleCI para o repositório foo/bar."""
    return {
        "CIRCLECI": "true",
        "CIRCLE_PROJECT_USERNAME": "foo",
        "CIRCLE_PROJECT_REPONAME": "bar",
    }


@pytest.fixture
def github_actions_env() -> dict:
    """Ambiente mínimo do GitHub Actions para o repositório octo/infra."""
    return {
        "GITHUB_ACTIONS": "true",
        "GITHUB_REPOSITORY": "octo/infra",
    }


@pytest.fixture
def make_resolver():
    """
    Factory de `CIEnvironmentResolver` com ambiente injetado.

    O import é feito de forma lazy para que falhas no core apareçam como
    erro do teste, e não da coleta.

    Returns:
        Callable[[dict], CIEnvironmentResolver]
    """
    from tfnotify.core.ci.resolver import CIEnvironmentResolver

    def _make(env=None):
        return CIEnvironmentResolver(env=dict(env or {}))

    return _make


@pytest.fixture
def empty_resolver(make_resolver):
    """Resolver sem nenhuma variável de ambiente: nada é detectado nem preenchido."""
    return make_resolver({})


# =====================================================
# Busca de configuração
# =====================================================

@pytest.fixture
def no_ancestor_config(tmp_path):
    """
    Garante que nenhum ancestral de `tmp_path` contém um arquivo com nome padrão.

    A busca sem caminho explícito sobe até a raiz do filesystem; um
    `/tmp/tfnotify.yaml` esquecido no host faria a busca encontrá-lo.
    Nesse caso o teste é pulado, pois o resultado não depende do código.
    """
    from tfnotify.core.config.finder import DEFAULT_CONFIG_NAMES

    for directory in tmp_path.parents:
        for name in DEFAULT_CONFIG_NAMES:
            stray = directory / name
            if stray.is_file():
                pytest.skip(f"stray config outside the test sandbox: {stray}")
    return tmp_path
