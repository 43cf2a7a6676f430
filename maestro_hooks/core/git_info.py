"""
Repository status payload and the HTTP client that fetches it.

The status endpoint answers ``GET <endpoint>[?project_path=<path>]`` with a
JSON body shaped like ``RepoStatus.to_dict()``.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

from maestro_hooks.config import GIT_INFO_ENDPOINT

SCHEMA_PATH = Path(__file__).parent.parent / "schemas" / "repo-status.json"

# Characters encodeURIComponent leaves alone besides the RFC 3986 unreserved set
_URI_COMPONENT_SAFE = "!*'()"


class GitInfoError(Exception):
    """The status request failed or its body could not be decoded."""


def _as_text(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass
class BranchStatus:
    """Ahead/behind counts of a non-current branch."""

    branch: str
    ahead: Optional[int] = None
    behind: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"branch": self.branch}
        if self.ahead is not None:
            data["ahead"] = self.ahead
        if self.behind is not None:
            data["behind"] = self.behind
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BranchStatus":
        return cls(
            branch=_as_text(data.get("branch")),
            ahead=data.get("ahead"),
            behind=data.get("behind"),
        )


@dataclass
class RepoStatus:
    """Status of the repository behind a project.

    Attributes
    ----------
    current_branch : str
        Checked-out branch. Read as "" when the payload omits it.
    commits_ahead : int, optional
        Commits on the current branch not yet pushed upstream.
    commits_behind : int, optional
        Upstream commits not yet pulled.
    other_branches : List[BranchStatus]
        Remaining local branches, in server order.
    """

    current_branch: str
    commits_ahead: Optional[int] = None
    commits_behind: Optional[int] = None
    other_branches: List[BranchStatus] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"current_branch": self.current_branch}
        if self.commits_ahead is not None:
            data["commits_ahead"] = self.commits_ahead
        if self.commits_behind is not None:
            data["commits_behind"] = self.commits_behind
        if self.other_branches:
            data["other_branches"] = [b.to_dict() for b in self.other_branches]
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RepoStatus":
        return cls(
            current_branch=_as_text(data.get("current_branch")),
            commits_ahead=data.get("commits_ahead"),
            commits_behind=data.get("commits_behind"),
            other_branches=[
                BranchStatus.from_dict(b) for b in data.get("other_branches") or []
            ],
        )

    def validate(self, strict: bool = False) -> bool:
        """Validate against the bundled JSON schema.

        Parameters
        ----------
        strict : bool
            If True, raise on failure instead of returning False.

        Returns
        -------
        bool
            True if valid, False otherwise.
        """
        try:
            import jsonschema

            with open(SCHEMA_PATH) as f:
                schema = json.load(f)
            jsonschema.validate(self.to_dict(), schema)
            return True
        except ImportError:
            if strict:
                raise ImportError("jsonschema required for validation")
            return True  # Skip validation if jsonschema not installed
        except Exception:
            if strict:
                raise
            return False


def build_git_info_url(
    endpoint: str = GIT_INFO_ENDPOINT, project_path: Optional[str] = None
) -> str:
    """Status URL, with ``project_path`` appended only when non-empty."""
    if not project_path:
        return endpoint
    return f"{endpoint}?project_path={quote(project_path, safe=_URI_COMPONENT_SAFE)}"


class GitInfoClient:
    """Async client for the repository status endpoint.

    Parameters
    ----------
    base_url : str
        Prefix for the endpoint ("" keeps requests relative).
    endpoint : str
        Path of the status endpoint.
    client : httpx.AsyncClient, optional
        Client to send requests with. One is created lazily if omitted.

    Examples
    --------
    >>> async with GitInfoClient(base_url="http://localhost:4000") as git:
    ...     status = await git.fetch("/repo/a")
    """

    def __init__(
        self,
        base_url: str = "",
        endpoint: str = GIT_INFO_ENDPOINT,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.base_url = base_url
        self.endpoint = endpoint
        self._client = client

    @property
    def client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers={"Accept": "application/json"},
                follow_redirects=True,
            )
        return self._client

    def build_url(self, project_path: Optional[str] = None) -> str:
        return build_git_info_url(self.endpoint, project_path)

    async def fetch(self, project_path: Optional[str] = None) -> RepoStatus:
        """Fetch and decode the status of ``project_path``.

        Raises
        ------
        GitInfoError
            On transport errors, error status codes or an undecodable body.
        """
        url = self.build_url(project_path)
        try:
            response = await self.client.get(url)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPError as e:
            raise GitInfoError(f"Request to {url} failed: {e}") from e
        except ValueError as e:
            raise GitInfoError(f"Invalid JSON from {url}: {e}") from e

        if not isinstance(data, dict):
            raise GitInfoError(f"Expected a JSON object from {url}, got {type(data).__name__}")
        try:
            return RepoStatus.from_dict(data)
        except (AttributeError, TypeError) as e:
            raise GitInfoError(f"Malformed status from {url}: {e}") from e

    async def aclose(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "GitInfoClient":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.aclose()
