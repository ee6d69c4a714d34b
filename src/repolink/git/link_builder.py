"""Build provider-specific web links to files in a repository."""

import posixpath
import re

from repolink.core.models.link import LineRange, Provider

_GITHUB_RE = re.compile(r"^(git@github\.com|https://github\.com)", re.IGNORECASE)
_BITBUCKET_RE = re.compile(r"^(git@bitbucket\.org|https://[^/]*bitbucket)", re.IGNORECASE)
_SSH_RE = re.compile(r"^git@([^:]+):(.+)$", re.IGNORECASE)
_BITBUCKET_HOST_RE = re.compile(r"^https://(?:[^/@]*@)?[^/@]*?bitbucket", re.IGNORECASE)
_SCHEME_HOST_RE = re.compile(r"^(https://[^/]+)", re.IGNORECASE)


def classify_provider(remote_url: str) -> Provider | None:
    """Return the hosting provider for a remote URL, or None if unsupported."""
    if _GITHUB_RE.match(remote_url):
        return Provider.GITHUB
    if _BITBUCKET_RE.match(remote_url):
        return Provider.BITBUCKET
    return None


def normalize_remote_url(remote_url: str) -> str:
    """Normalize a git remote URL to an HTTPS browsing URL.

    Handles:
    - git@github.com:org/repo.git -> https://github.com/org/repo
    - https://github.com/org/repo.git -> https://github.com/org/repo
    - https://user@bitbucket.org/team/proj.git -> https://bitbucket.org/team/proj

    Normalizing an already-normalized URL returns it unchanged.
    """
    url = remote_url.strip()

    # Convert SSH to HTTPS
    ssh_match = _SSH_RE.match(url)
    if ssh_match:
        host, path = ssh_match.groups()
        url = f"https://{host}/{path}"

    # Drop credentials or account prefixes in front of the bitbucket host
    url = _BITBUCKET_HOST_RE.sub("https://bitbucket", url, count=1)

    url = _SCHEME_HOST_RE.sub(lambda m: m.group(1).lower(), url, count=1)
    url = url.rstrip("/")
    url = re.sub(r"\.git$", "", url, flags=re.IGNORECASE)
    return url


class LinkBuilder:
    """Formats file links for GitHub and Bitbucket.

    - GitHub: https://github.com/org/repo/blob/main/path#L10-L20
    - Bitbucket: https://bitbucket.org/team/repo/src/main/path#path-10:20
    """

    def build(
        self,
        remote_url: str,
        branch: str,
        file_path: str,
        line_range: LineRange | None = None,
    ) -> str | None:
        """Build a link, or return None when the provider is not supported."""
        provider = classify_provider(remote_url)
        if provider is None:
            return None

        base = normalize_remote_url(remote_url)
        file_path = file_path.lstrip("/")
        if provider is Provider.GITHUB:
            return self._github_link(base, branch, file_path, line_range)
        return self._bitbucket_link(base, branch, file_path, line_range)

    @staticmethod
    def _github_link(
        base: str, branch: str, file_path: str, line_range: LineRange | None
    ) -> str:
        url = f"{base}/blob/{branch}/{file_path}"
        if line_range:
            url += f"#L{line_range.start}-L{line_range.end}"
        return url

    @staticmethod
    def _bitbucket_link(
        base: str, branch: str, file_path: str, line_range: LineRange | None
    ) -> str:
        url = f"{base}/src/{branch}/{file_path}"
        if line_range:
            basename = posixpath.basename(file_path)
            url += f"#{basename}-{line_range.start}:{line_range.end}"
        return url


def build_link(
    remote_url: str,
    branch: str,
    file_path: str,
    line_range: LineRange | None = None,
) -> str | None:
    """Build a link to ``file_path`` on ``branch``; None for unsupported hosts."""
    return LinkBuilder().build(remote_url, branch, file_path, line_range)
