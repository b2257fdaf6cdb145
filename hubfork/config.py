"""
Host configuration store.

Resolves the identity and access token used for a host. Sources, in order:
the GITHUB_TOKEN/GITHUB_USER environment variables, the JSON host file, and
finally an interactive prompt whose answer is saved back to the host file.
"""

import json
import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

import click

from hubfork.client import GitHubClient
from hubfork.exceptions import ConfigurationError
from hubfork.logging import get_logger
from hubfork.types.project import DEFAULT_HOST, GIT_PROTOCOLS, HostCredentials
from hubfork.urls import normalize_host

logger = get_logger("config")

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "hubfork" / "hosts.json"
DEFAULT_PROTOCOL = "ssh"

PromptFn = Callable[..., str]
LoginLookup = Callable[[str, str], str]


def _lookup_login(host: str, token: str) -> str:
    with GitHubClient(host=host, token=token) as client:
        return client.users.current()


class HostConfig:
    """
    Credential and protocol settings for every known host.

    Example:
        ```python
        config = HostConfig.from_env()
        credentials = config.prompt_for_host("github.com")
        print(credentials.user)
        ```
    """

    def __init__(
        self,
        path: str | Path = DEFAULT_CONFIG_PATH,
        environ: Mapping[str, str] | None = None,
        prompt: PromptFn | None = None,
        login_lookup: LoginLookup | None = None,
    ) -> None:
        """
        Initialize the store.

        Args:
            path: JSON file holding {host: {user, token, protocol}}
            environ: Environment to read overrides from (default: os.environ)
            prompt: Prompt function used when no credentials are stored (default: click.prompt)
            login_lookup: Function mapping (host, token) to a login (default: GET /user)
        """
        self.path = Path(path)
        self.environ = os.environ if environ is None else environ
        self.prompt = prompt or click.prompt
        self.login_lookup = login_lookup or _lookup_login
        self._hosts: dict[str, dict[str, Any]] | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "HostConfig":
        """
        Create a store from environment variables.

        Environment variables:
            HUBFORK_CONFIG: Path of the host file (optional, default: ~/.config/hubfork/hosts.json)
        """
        environ = os.environ if environ is None else environ
        path = environ.get("HUBFORK_CONFIG") or DEFAULT_CONFIG_PATH
        return cls(path=path, environ=environ)

    def known_hosts(self) -> list[str]:
        """
        Hosts whose remotes count as hosted projects.

        github.com is always known; GITHUB_HOST adds comma separated
        Enterprise hosts, and so does every host in the host file.
        """
        hosts = [DEFAULT_HOST]
        extra = self.environ.get("GITHUB_HOST", "")
        candidates = [h.strip() for h in extra.split(",")] + list(self._load())
        for host in candidates:
            if host:
                host = normalize_host(host)
                if host not in hosts:
                    hosts.append(host)
        return hosts

    def protocol(self, host: str) -> str:
        """
        Protocol for clone URLs generated for a host.

        Raises:
            ConfigurationError: If the configured protocol is not supported
        """
        protocol = (
            self.environ.get("HUBFORK_PROTOCOL")
            or self._load().get(host, {}).get("protocol")
            or DEFAULT_PROTOCOL
        ).lower()
        if protocol not in GIT_PROTOCOLS:
            raise ConfigurationError(
                f"Invalid git protocol: {protocol}. Must be one of {', '.join(GIT_PROTOCOLS)}"
            )
        return protocol

    def prompt_for_host(self, host: str) -> HostCredentials:
        """
        Resolve credentials for a host, prompting if none are stored.

        Args:
            host: Host name, e.g. "github.com"

        Returns:
            HostCredentials with the user login and token

        Raises:
            HubForkError: If the token is rejected or the host file is unusable
        """
        token = self.environ.get("GITHUB_TOKEN")
        if token:
            user = self.environ.get("GITHUB_USER") or self.login_lookup(host, token)
            logger.debug("Using GITHUB_TOKEN for %s as %s", host, user)
            return HostCredentials(host=host, user=user, token=token)

        entry = self._load().get(host, {})
        if entry.get("token") and entry.get("user"):
            logger.debug("Using stored credentials for %s as %s", host, entry["user"])
            return HostCredentials(
                host=host,
                user=entry["user"],
                token=entry["token"],
            )

        token = self.prompt(f"{host} token", hide_input=True).strip()
        if not token:
            raise ConfigurationError(f"no access token given for {host}")
        user = self.login_lookup(host, token)
        self.save_host(host, user, token)
        return HostCredentials(host=host, user=user, token=token)

    def save_host(self, host: str, user: str, token: str) -> None:
        """Store credentials for a host in the host file (mode 0600)."""
        hosts = dict(self._load())
        entry = dict(hosts.get(host, {}))
        entry.update({"user": user, "token": token})
        hosts[host] = entry

        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w") as f:
            # An existing file keeps its old mode under O_CREAT.
            self.path.chmod(0o600)
            f.write(json.dumps(hosts, indent=2, sort_keys=True) + "\n")
        self._hosts = hosts
        logger.info("Saved credentials for %s to %s", host, self.path)

    def _load(self) -> dict[str, dict[str, Any]]:
        if self._hosts is not None:
            return self._hosts

        if not self.path.exists():
            self._hosts = {}
            return self._hosts

        try:
            data = json.loads(self.path.read_text())
        except (OSError, ValueError) as e:
            raise ConfigurationError(f"cannot read {self.path}: {e}") from e

        if not isinstance(data, dict) or not all(
            isinstance(v, dict) for v in data.values()
        ):
            raise ConfigurationError(
                f"{self.path} must map host names to {{user, token}} objects"
            )

        self._hosts = {normalize_host(k): v for k, v in data.items()}
        return self._hosts
