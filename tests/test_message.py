import pytest

from src.ingest.release import ReleaseEvent
from src.format.message import (
    PREVIEW_URL, STABLE_URL, select_url, render_announcement, build_message,
)
from src.util.text import truncate


def test_select_url():
    assert select_url(True) == "https://zed.dev/releases/preview/latest"
    assert select_url(False) == "https://zed.dev/releases/stable/latest"
    assert select_url(True, "p", "s") == "p"


def test_truncate_short_text_unchanged():
    text = "x" * 2000
    assert truncate(text, 2000, "...") is text
    assert truncate("", 2000, "...") == ""


def test_truncate_long_text():
    out = truncate("abcdefghij" * 250, 2000, "...")
    assert len(out) == 2000
    assert out.endswith("...")
    assert out[:-3] == ("abcdefghij" * 250)[:1997]


def test_truncate_is_idempotent():
    once = truncate("y" * 5000, 2000, "...")
    assert truncate(once, 2000, "...") == once


def test_truncate_rejects_bad_bounds():
    with pytest.raises(ValueError):
        truncate("hello", 0)
    with pytest.raises(ValueError):
        truncate("hello", 2, "...")


def test_stable_release_message():
    release = ReleaseEvent(tag_name="v1.2.0", prerelease=False, body="Bug fixes.")
    url, message = build_message(release)
    assert url == STABLE_URL
    assert message == (
        "📣 Zed [v1.2.0](<https://zed.dev/releases/stable/latest>) was just released!\n\nBug fixes."
    )


def test_prerelease_uses_preview_url():
    release = ReleaseEvent(tag_name="v1.3.0-pre", prerelease=True, body="Preview notes.")
    url, message = build_message(release)
    assert url == PREVIEW_URL
    assert f"(<{PREVIEW_URL}>)" in message


def test_body_is_not_escaped():
    release = ReleaseEvent(tag_name="v1", body="- Fixed `a < b` & {{ braces }}")
    assert render_announcement(release, STABLE_URL).endswith("- Fixed `a < b` & {{ braces }}")


def test_empty_body_leaves_header_only():
    release = ReleaseEvent(tag_name="v1.2.0", body="")
    assert render_announcement(release, STABLE_URL) == (
        "📣 Zed [v1.2.0](<https://zed.dev/releases/stable/latest>) was just released!"
    )


def test_long_notes_are_truncated():
    release = ReleaseEvent(tag_name="v2.0.0", body="- change\n" * 500)
    _, message = build_message(release)
    assert len(message) == 2000
    assert message.endswith("...")
    assert message.startswith("📣 Zed [v2.0.0]")
