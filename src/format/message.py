from jinja2 import Template

from src.ingest.release import ReleaseEvent
from src.util.text import truncate, DEFAULT_MAX_LENGTH, DEFAULT_MARKER

PREVIEW_URL = "https://zed.dev/releases/preview/latest"
STABLE_URL = "https://zed.dev/releases/stable/latest"

# <...> around the link keeps Discord from unfurling it
ANNOUNCE_TMPL = Template(
    "📣 {{ product }} [{{ tag }}](<{{ url }}>) was just released!"
    "{% if body %}\n\n{{ body }}{% endif %}"
)

def select_url(is_prerelease: bool, preview_url: str = PREVIEW_URL, stable_url: str = STABLE_URL) -> str:
    return preview_url if is_prerelease else stable_url

def render_announcement(release: ReleaseEvent, url: str, product: str = "Zed") -> str:
    return ANNOUNCE_TMPL.render(product=product, tag=release.tag_name, url=url, body=release.body)

def build_message(
    release: ReleaseEvent,
    product: str = "Zed",
    preview_url: str = PREVIEW_URL,
    stable_url: str = STABLE_URL,
    max_length: int = DEFAULT_MAX_LENGTH,
    marker: str = DEFAULT_MARKER,
) -> tuple[str, str]:
    """Return (release_url, message) with the message capped at max_length."""
    url = select_url(release.prerelease, preview_url, stable_url)
    text = render_announcement(release, url, product)
    return url, truncate(text, max_length, marker)
