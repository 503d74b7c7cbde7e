"""Client for the policy compute engine REST API."""

from __future__ import annotations

from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any

import requests

from .models import ContainerCluster, ContainerWorkloadProfile, VirtualService


class APIError(Exception):
    """The API answered with an error status."""

    def __init__(self, status_code: int, status: str, body: str = "") -> None:
        self.status_code = status_code
        self.status = status
        self.body = body
        message = f"API error: status {status_code} - {status}"
        if body:
            message = f"{message} - {body}"
        super().__init__(message)


def _status_line(response: requests.Response) -> str:
    reason = response.reason
    if not reason:
        try:
            reason = HTTPStatus(response.status_code).phrase
        except ValueError:
            reason = ""
    return f"{response.status_code} {reason}".rstrip()


@dataclass
class PCE:
    """Connection settings for one policy compute engine."""

    host: str
    user: str
    key: str = field(repr=False)
    version: str

    @property
    def base_url(self) -> str:
        return f"{self.host}/api/{self.version}"

    def _url(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        return self.base_url + path

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        body: Any = None,
    ) -> Any:
        with requests.Session() as session:
            session.auth = (self.user, self.key)
            response = session.request(
                method, self._url(path), params=params, json=body
            )
        if response.status_code > 399:
            raise APIError(response.status_code, _status_line(response), response.text)
        if not response.content or "json" not in response.headers.get("Content-Type", ""):
            return None
        return response.json()

    def get_container_clusters(self) -> list[ContainerCluster]:
        """Return every container cluster of the organisation."""
        data = self._request("GET", "/orgs/1/container_clusters")
        return [ContainerCluster.from_dict(item) for item in data or []]

    def get_container_workload_profiles_by_container_cluster_href(
        self, href: str
    ) -> list[ContainerWorkloadProfile]:
        """Return the workload profiles of the cluster at ``href``."""
        data = self._request("GET", f"{href}/container_workload_profiles")
        return [ContainerWorkloadProfile.from_dict(item) for item in data or []]

    def put_container_workload_profile_by_href(
        self, href: str, profile: ContainerWorkloadProfile
    ) -> ContainerWorkloadProfile:
        """Update the profile at ``href`` and return what the API sent back."""
        data = self._request("PUT", href, body=profile.to_dict())
        return ContainerWorkloadProfile.from_dict(data or {})

    def get_virtual_services_by_parameter(
        self, key: str, value: str, pversion: str
    ) -> list[VirtualService]:
        """Return virtual services of policy version ``pversion`` filtered by ``key``."""
        data = self._request(
            "GET",
            f"/orgs/1/sec_policy/{pversion}/virtual_services",
            params={key: value},
        )
        return [VirtualService.from_dict(item) for item in data or []]


def new_pce(host: str, user: str, key: str, version: str) -> PCE:
    """Create a client for the engine at ``host``."""
    return PCE(host=host, user=user, key=key, version=version)