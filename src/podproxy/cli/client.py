"""Shared PodmanProxy for CLI commands."""

from __future__ import annotations

from ..config import ProxyConfig, load_config
from ..log_level import LogLevel
from ..podman import PodmanProxy

_proxy: PodmanProxy | None = None
_config: ProxyConfig | None = None


def _configure(
    podman: str | None = None, log_level: LogLevel | str | None = None,
) -> tuple[PodmanProxy, ProxyConfig]:
    global _proxy, _config

    config = load_config()
    overrides: dict[str, object] = {}
    if podman:
        overrides["podman"] = podman
    if log_level:
        overrides["log_level"] = LogLevel.parse(log_level)
    if overrides:
        config = config.model_copy(update=overrides)

    _config = config
    _proxy = PodmanProxy.from_config(config)
    return _proxy, _config


def configure(podman: str | None = None, log_level: LogLevel | str | None = None) -> PodmanProxy:
    """Create the CLI proxy from the config files plus command line overrides."""
    proxy, _ = _configure(podman, log_level)
    return proxy


def get_proxy() -> PodmanProxy:
    """Get the proxy, configuring it from the config files on first use."""
    if _proxy is None:
        return configure()
    return _proxy


def get_config() -> ProxyConfig:
    """Get the effective config, configuring the proxy on first use."""
    if _config is None:
        _, config = _configure()
        return config
    return _config
