import os, requests, logging

log = logging.getLogger(__name__)

# https://discord.com/developers/docs/resources/message#message-object-message-flags
SUPPRESS_EMBEDS = 1 << 2
CONTENT_LIMIT = 2000

# Post a message to a Discord channel via webhook; raises on any failure
def send_discord(
    content: str,
    webhook_url: str | None = None,
    flags: int = SUPPRESS_EMBEDS,
    username: str | None = None,
    avatar_url: str | None = None,
    timeout: float = 10,
) -> None:
    url = webhook_url or os.getenv("DISCORD_WEBHOOK_URL", "")
    if not url:
        raise RuntimeError("Missing DISCORD_WEBHOOK_URL")
    if not content or not content.strip():
        raise ValueError("Refusing to send an empty Discord message")
    if len(content) > CONTENT_LIMIT:
        raise ValueError(f"Discord message is {len(content)} chars (limit {CONTENT_LIMIT})")

    data = {"content": content, "flags": flags}
    if username:
        data["username"] = username
    if avatar_url:
        data["avatar_url"] = avatar_url

    try:
        r = requests.post(url, json=data, timeout=timeout)
        r.raise_for_status()
    except requests.HTTPError as e:
        status = e.response.status_code if e.response is not None else "?"
        raise requests.HTTPError(f"Discord webhook returned HTTP {status}", response=e.response) from None
    except requests.RequestException as e:
        # urllib3 messages carry the URL path, which holds the webhook token
        raise type(e)(f"Discord webhook request failed ({type(e).__name__})") from None

    log.info("discord: sent %d chars (flags=%d)", len(content), flags)
