# tests/core/config/test_complement.py
"""
Testes do complemento automático pela plataforma de CI (complement).

Os testes asseguram que:
- owner/name vazios do GitHub são preenchidos pelo descriptor
- valores explícitos nunca são sobrescritos
- `ci` vazio recebe o nome da plataforma detectada
- o complemento é idempotente e não muta a entrada
"""

from tfnotify.core.config.complement import complement
from tfnotify.core.config.model import (
    Config,
    GithubNotifier,
    GitlabNotifier,
    Notifier,
    Repository,
    SlackNotifier,
)
from tfnotify.core.context import ResolutionContext


def _github_config(ci="circleci", owner="", name=""):
    return Config(
        ci=ci,
        notifier=Notifier(
            github=GithubNotifier(token="t", repository=Repository(owner=owner, name=name))
        ),
    )


def test_fills_empty_github_repository(make_resolver, circleci_env):
    cfg = _github_config()

    out = complement(cfg, resolver=make_resolver(circleci_env))

    assert out.notifier.github.repository == Repository(owner="foo", name="bar")
    # entrada preservada
    assert cfg.notifier.github.repository == Repository()


def test_explicit_values_are_not_overwritten(make_resolver, circleci_env):
    cfg = _github_config(owner="mine")

    out = complement(cfg, resolver=make_resolver(circleci_env))

    assert out.notifier.github.repository == Repository(owner="mine", name="bar")


def test_noop_when_no_platform(empty_resolver):
    cfg = _github_config(ci="")

    assert complement(cfg, resolver=empty_resolver) == cfg


def test_noop_for_platform_without_implementation(make_resolver, circleci_env):
    # jenkins é suportado pela validação, mas não possui descriptor
    cfg = _github_config(ci="jenkins")

    assert complement(cfg, resolver=make_resolver(circleci_env)) == cfg


def test_detects_ci_when_empty(make_resolver, github_actions_env):
    cfg = _github_config(ci="")

    out = complement(cfg, resolver=make_resolver(github_actions_env))

    assert out.ci == "github-actions"
    assert out.notifier.github.repository == Repository(owner="octo", name="infra")


def test_explicit_ci_takes_precedence_over_detection(make_resolver, github_actions_env):
    env = dict(github_actions_env, CIRCLE_PROJECT_USERNAME="circle-owner", CIRCLE_PROJECT_REPONAME="circle-repo")
    cfg = _github_config(ci="CircleCI")

    out = complement(cfg, resolver=make_resolver(env))

    assert out.ci == "CircleCI"
    assert out.notifier.github.repository == Repository(owner="circle-owner", name="circle-repo")


def test_gitlab_and_slack_are_not_complemented(make_resolver, circleci_env):
    cfg = Config(
        ci="circleci",
        notifier=Notifier(
            gitlab=GitlabNotifier(token="t"),
            slack=SlackNotifier(channel="C1"),
        ),
    )

    assert complement(cfg, resolver=make_resolver(circleci_env)) == cfg


def test_complement_is_idempotent(make_resolver, circleci_env):
    resolver = make_resolver(circleci_env)
    once = complement(_github_config(), resolver=resolver)
    twice = complement(once, resolver=resolver)

    assert once == twice


def test_logs_platform(make_resolver, circleci_env):
    ctx = ResolutionContext()

    complement(_github_config(), resolver=make_resolver(circleci_env), ctx=ctx)

    assert ctx.events[-1]["stage"] == "complement"
    assert ctx.events[-1]["platform"] == "circleci"
