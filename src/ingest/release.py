import os, json
from dataclasses import dataclass

# Release event as GitHub delivers it (see GITHUB_EVENT_PATH)
@dataclass
class ReleaseEvent:
    tag_name: str
    prerelease: bool = False
    body: str = ""
    action: str = "published"
    repository_owner: str | None = None


def _owner_from_env() -> str | None:
    return os.getenv("GITHUB_REPOSITORY_OWNER") or None

def load_release_event(path: str) -> ReleaseEvent:
    """Read a `release` webhook payload from disk.

    Only the fields the announcement needs are kept. A null body is treated as
    empty; a payload without a release or tag is rejected.
    """
    with open(path, "r", encoding="utf-8") as f:
        payload = json.load(f)

    if not isinstance(payload, dict):
        raise ValueError(f"{path}: expected a JSON object at top level")
    release = payload.get("release")
    if not isinstance(release, dict):
        raise ValueError(f"{path}: not a release event (no 'release' object)")
    tag = release.get("tag_name")
    if not tag:
        raise ValueError(f"{path}: release has no tag_name")

    owner = ((payload.get("repository") or {}).get("owner") or {}).get("login")
    return ReleaseEvent(
        tag_name=str(tag),
        prerelease=bool(release.get("prerelease", False)),
        body=release.get("body") or "",
        action=payload.get("action") or "published",
        repository_owner=owner or _owner_from_env(),
    )

def release_from_args(tag_name: str, prerelease: bool = False, body: str | None = None) -> ReleaseEvent:
    if not tag_name:
        raise ValueError("tag_name is required")
    return ReleaseEvent(
        tag_name=tag_name,
        prerelease=prerelease,
        body=body or "",
        repository_owner=_owner_from_env(),
    )
