import os, yaml
from dataclasses import dataclass

from src.format.message import PREVIEW_URL, STABLE_URL
from src.util.text import DEFAULT_MAX_LENGTH, DEFAULT_MARKER
from src.senders.discord import SUPPRESS_EMBEDS


@dataclass
class AnnounceConfig:
    product: str = "Zed"
    owner: str | None = "zed-industries"
    preview_url: str = PREVIEW_URL
    stable_url: str = STABLE_URL
    max_length: int = DEFAULT_MAX_LENGTH
    truncation_symbol: str = DEFAULT_MARKER
    flags: int = SUPPRESS_EMBEDS
    username: str | None = None
    avatar_url: str | None = None


def load_config(path: str = "release.yml") -> AnnounceConfig:
    """Load release.yml (if present) and apply env overrides.

    Env knobs:
      ANNOUNCE_OWNER       : repository owner allowed to announce
      ANNOUNCE_MAX_LENGTH  : message cap (default: 2000)
    """
    raw: dict = {}
    if os.path.exists(path):
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a mapping at top level")

    cfg = AnnounceConfig()
    urls = raw.get("urls") or {}
    cfg.preview_url = urls.get("preview", cfg.preview_url)
    cfg.stable_url = urls.get("stable", cfg.stable_url)

    for key in ("product", "owner", "truncation_symbol", "username", "avatar_url"):
        if key in raw:
            setattr(cfg, key, raw.get(key))
    if "max_length" in raw:
        cfg.max_length = int(raw.get("max_length"))
    if "flags" in raw:
        cfg.flags = int(raw.get("flags"))

    owner_env = os.getenv("ANNOUNCE_OWNER")
    if owner_env:
        cfg.owner = owner_env
    max_env = os.getenv("ANNOUNCE_MAX_LENGTH")
    if max_env:
        cfg.max_length = int(max_env)
    return cfg
