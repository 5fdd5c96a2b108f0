import os, argparse, uuid
from datetime import datetime
from dotenv import load_dotenv

from src.ingest.release import ReleaseEvent, load_release_event, release_from_args
from src.format.message import build_message
from src.util.config import AnnounceConfig, load_config
from src.senders.discord import send_discord


# --------------------------------- logging ------------------------------------

def _now_local():
    tz_name = os.getenv("TZ")
    if tz_name:
        try:
            from zoneinfo import ZoneInfo
            return datetime.now(ZoneInfo(tz_name))
        except Exception:
            pass
    return datetime.now()

def _log_announcement(tag: str, message: str, outdir: str = "data") -> str:
    os.makedirs(outdir, exist_ok=True)
    now = _now_local()
    path = os.path.join(outdir, f"announce-{now.strftime('%Y%m%d')}.txt")
    with open(path, "a", encoding="utf-8") as f:
        f.write(f"\n=== Run {now.strftime('%Y%m%d_%H%M%S')} ({tag}) ===\n")
        f.write(message.strip() + "\n")
    return path

def _set_outputs(outputs: dict) -> None:
    """Expose values as step outputs when running under GitHub Actions."""
    path = os.getenv("GITHUB_OUTPUT")
    if not path:
        return
    with open(path, "a", encoding="utf-8") as f:
        for key, value in outputs.items():
            # heredoc form so multi-line content survives
            delimiter = f"ghadelimiter_{uuid.uuid4()}"
            f.write(f"{key}<<{delimiter}\n{value}\n{delimiter}\n")


# ----------------------------------- gate -------------------------------------

def should_announce(release: ReleaseEvent, owner: str | None) -> tuple[bool, str]:
    if release.action != "published":
        return False, f"action is '{release.action}', not 'published'"
    if owner and release.repository_owner != owner:
        hint = " (pass --owner or --skip-owner-check for local runs)" if release.repository_owner is None else ""
        return False, f"repository owner '{release.repository_owner}' != '{owner}'{hint}"
    return True, ""


# --------------------------------- CLI args -----------------------------------

def _parse_args(argv=None):
    p = argparse.ArgumentParser(description="Announce a published release on Discord")
    p.add_argument("--event-path", type=str, default=None, help="Release event JSON (default: $GITHUB_EVENT_PATH)")
    p.add_argument("--tag", type=str, default=None, help="Release tag for local runs (skips the event file; combine with --owner or --skip-owner-check)")
    p.add_argument("--prerelease", action="store_true", help="Treat --tag as a prerelease")
    p.add_argument("--body", type=str, default=None, help="Release notes text")
    p.add_argument("--body-file", type=str, default=None, help="Read release notes from a file")
    p.add_argument("--config", type=str, default="release.yml", help="YAML config path")
    p.add_argument("--max-length", type=int, default=None, help="Override max message length")
    p.add_argument("--truncation-symbol", type=str, default=None, help="Override truncation marker")
    p.add_argument("--owner", type=str, default=None, help="Override the repository owner gate")
    p.add_argument("--skip-owner-check", action="store_true", help="Announce regardless of repository owner")
    p.add_argument("--dry-run", action="store_true", help="Do everything except post to Discord")
    p.add_argument("--debug", action="store_true", help="Verbose debug logging to stdout")
    return p.parse_args(argv)

def _load_release(args) -> ReleaseEvent:
    if args.tag:
        body = args.body
        if args.body_file:
            with open(args.body_file, "r", encoding="utf-8") as f:
                body = f.read()
        return release_from_args(args.tag, args.prerelease, body)

    path = args.event_path or os.getenv("GITHUB_EVENT_PATH")
    if not path:
        raise SystemExit("No release given: pass --tag or --event-path (or set GITHUB_EVENT_PATH)")
    return load_release_event(path)

def _apply_overrides(cfg: AnnounceConfig, args) -> AnnounceConfig:
    if args.max_length is not None:
        cfg.max_length = args.max_length
    if args.truncation_symbol is not None:
        cfg.truncation_symbol = args.truncation_symbol
    if args.owner is not None:
        cfg.owner = args.owner
    if args.skip_owner_check:
        cfg.owner = None
    return cfg


# ----------------------------------- main -------------------------------------

def main(argv=None) -> int:
    load_dotenv()
    args = _parse_args(argv)
    debug = args.debug or bool(os.getenv("DEBUG"))

    # 1) config + event
    cfg = _apply_overrides(load_config(args.config), args)
    release = _load_release(args)
    if debug:
        print(f"[config] product={cfg.product} owner={cfg.owner} max_length={cfg.max_length} flags={cfg.flags}")
        print(f"[event] tag={release.tag_name} prerelease={release.prerelease} "
              f"owner={release.repository_owner} body_chars={len(release.body)}")

    # 2) gate
    ok, reason = should_announce(release, cfg.owner)
    if not ok:
        print(f"[gate] skipped: {reason}")
        return 0

    # 3) url + message
    url, message = build_message(
        release,
        product=cfg.product,
        preview_url=cfg.preview_url,
        stable_url=cfg.stable_url,
        max_length=cfg.max_length,
        marker=cfg.truncation_symbol,
    )
    if debug:
        print(f"[message] url={url} chars={len(message)}")
    _set_outputs({"url": url, "content": message})

    # 4) deliver (unless dry-run)
    if args.dry_run:
        print(message)
    else:
        if debug:
            print(f"[send] discord chars={len(message)}")
        send_discord(message, flags=cfg.flags, username=cfg.username, avatar_url=cfg.avatar_url)

    # 5) log
    log_path = _log_announcement(release.tag_name, message)
    print(f"Wrote announcement to: {log_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())


# Local examples:
# uv run python -m src.main --tag v1.2.0 --body "Bug fixes." --skip-owner-check --dry-run --debug
# uv run python -m src.main --event-path event.json --dry-run
