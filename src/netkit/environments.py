"""Preset deployment targets and construction from settings."""

from netkit.constants import API_KEY_HEADER, DEFAULT_BASE_URL, EnvironmentName
from netkit.models.config import Settings
from netkit.models.environment import AppEnvironment, CachePolicy, TransportConfig

__all__ = ["PRESETS", "PRODUCTION", "TESTING", "environment_from_settings"]

PRODUCTION = AppEnvironment(
    name=EnvironmentName.PRODUCTION,
    base_url=DEFAULT_BASE_URL,
    transport=TransportConfig(default_headers={API_KEY_HEADER: "production-key"}),
)

TESTING = AppEnvironment(
    name=EnvironmentName.TESTING,
    base_url=DEFAULT_BASE_URL,
    transport=TransportConfig(
        cache_policy=CachePolicy.RELOAD_IGNORING_CACHE,
        default_headers={API_KEY_HEADER: "test-key"},
    ),
)

PRESETS: dict[EnvironmentName, AppEnvironment] = {
    EnvironmentName.PRODUCTION: PRODUCTION,
    EnvironmentName.TESTING: TESTING,
}


def environment_from_settings(settings: Settings) -> AppEnvironment:
    """
    Build the environment selected by ``settings``.

    Starts from the named preset and applies the base URL, API key and
    timeout overrides. Always returns a new instance; presets are untouched.
    """
    preset = PRESETS[settings.environment]

    headers = dict(preset.transport.default_headers)
    if settings.api_key is not None:
        headers[API_KEY_HEADER] = settings.api_key.get_secret_value()

    return AppEnvironment(
        name=preset.name,
        base_url=settings.base_url or preset.base_url,
        transport=TransportConfig(
            timeout=settings.timeout,
            cache_policy=preset.transport.cache_policy,
            default_headers=headers,
        ),
    )
