"""Built-in catalog of Statuspage status endpoints."""

from __future__ import annotations

from statuscli.config.settings import Config
from statuscli.errors.types import UnknownServiceError
from statuscli.models import Service, ServiceGroup


def _atlassian(product: str) -> str:
    return f"https://{product}.status.atlassian.com/api/v2/status.json"


BUILTIN_SERVICES: tuple[Service, ...] = (
    # atlassian
    Service("analytics", _atlassian("analytics"), ServiceGroup.ATLASSIAN),
    Service("atlas", _atlassian("atlas"), ServiceGroup.ATLASSIAN),
    Service("compass", _atlassian("compass"), ServiceGroup.ATLASSIAN),
    Service("confluence", _atlassian("confluence"), ServiceGroup.ATLASSIAN),
    Service("developer", _atlassian("developer"), ServiceGroup.ATLASSIAN),
    Service("guard", _atlassian("guard"), ServiceGroup.ATLASSIAN),
    Service(
        "jira-service-management",
        _atlassian("jira-service-management"),
        ServiceGroup.ATLASSIAN,
    ),
    Service("jira-software", _atlassian("jira-software"), ServiceGroup.ATLASSIAN),
    Service("opsgenie", _atlassian("opsgenie"), ServiceGroup.ATLASSIAN),
    Service("partners", _atlassian("partners"), ServiceGroup.ATLASSIAN),
    Service("support", _atlassian("support"), ServiceGroup.ATLASSIAN),
    Service("trello", _atlassian("trello"), ServiceGroup.ATLASSIAN),
    # crypto
    Service("hedera", "https://status.hedera.com/api/v2/status.json", ServiceGroup.CRYPTO),
    Service(
        "polygon",
        "https://status.polygon.technology/api/v2/status.json",
        ServiceGroup.CRYPTO,
    ),
    Service("solana", "https://status.solana.com/api/v2/status.json", ServiceGroup.CRYPTO),
    # server(less)
    Service(
        "cloudflare",
        "https://www.cloudflarestatus.com/api/v2/status.json",
        ServiceGroup.SERVERLESS,
    ),
    Service("flyio", "https://status.flyio.net/api/v2/status.json", ServiceGroup.SERVERLESS),
    Service(
        "netlify",
        "https://www.netlifystatus.com/api/v2/status.json",
        ServiceGroup.SERVERLESS,
    ),
    Service("render", "https://status.render.com/api/v2/status.json", ServiceGroup.SERVERLESS),
    Service(
        "supabase",
        "https://status.supabase.com/api/v2/status.json",
        ServiceGroup.SERVERLESS,
    ),
    Service(
        "vercel",
        "https://www.vercel-status.com/api/v2/status.json",
        ServiceGroup.SERVERLESS,
    ),
    # saas
    Service("bitbucket", _atlassian("bitbucket"), ServiceGroup.SAAS),
    Service("github", "https://www.githubstatus.com/api/v2/status.json", ServiceGroup.SAAS),
    Service("npm", "https://status.npmjs.org/api/v2/status.json", ServiceGroup.SAAS),
    Service("canva", "https://www.canvastatus.com/api/v2/status.json", ServiceGroup.SAAS),
    Service("figma", "https://status.figma.com/api/v2/status.json", ServiceGroup.SAAS),
)


def get_services(config: Config | None = None) -> dict[str, Service]:
    """Return all known services keyed by name, sorted by name.

    Services from the config file are added to the built-in catalog; a
    configured name that matches a built-in one replaces its URL but keeps
    its group.
    """
    services = {service.name: service for service in BUILTIN_SERVICES}

    if config is not None:
        for name, url in config.services.items():
            existing = services.get(name)
            group = existing.group if existing else ServiceGroup.CUSTOM
            services[name] = Service(name, url, group)

    return dict(sorted(services.items()))


def get_service(name: str, config: Config | None = None) -> Service:
    """Look up a single service by name.

    Raises:
        UnknownServiceError: If no service has this name
    """
    services = get_services(config)
    try:
        return services[name]
    except KeyError:
        raise UnknownServiceError(
            f"Unknown service: {name}",
            remediation="Run 'statuscli list' to see available services.",
        ) from None


def list_service_names(config: Config | None = None) -> list[str]:
    """Return sorted service names."""
    return list(get_services(config))
