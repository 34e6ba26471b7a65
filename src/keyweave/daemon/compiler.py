from __future__ import annotations

from pathlib import Path
import argparse
import logging

from keyweave.binds.frontend import ProfileFrontend

from .backend import DaemonBackend

logger = logging.getLogger(__name__)


def compile_profile_file(
    in_path: str | Path,
    out_path: str | Path,
    *,
    indent: int | None = 2,
    skip_unlowerable: bool = False,
) -> None:
    """End-to-end compilation: profile file (JSON/TOML) -> daemon profile JSON file."""

    in_path = Path(in_path)
    out_path = Path(out_path)

    frontend = ProfileFrontend()
    profile = frontend.parse_profile(frontend.load(in_path))

    backend = DaemonBackend(skip_unlowerable=skip_unlowerable)
    ll_profile = backend.compile(profile)

    json_str = ll_profile.model_dump_json(indent=indent)
    out_path.write_text(json_str + "\n", encoding="utf-8")
    logger.info("Wrote %s", out_path)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Compile a keyweave profile into the daemon's low-level profile json."
    )
    parser.add_argument("profile", help="Profile path (.json or .toml)")
    parser.add_argument("out", help="Output low-level profile json path")
    parser.add_argument("--indent", type=int, default=2, help="JSON indent (default: 2)")
    parser.add_argument(
        "--skip-unlowerable",
        action="store_true",
        help="Drop remappings whose bind cannot be lowered (repeat, app open) instead of failing",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    compile_profile_file(
        args.profile,
        args.out,
        indent=args.indent,
        skip_unlowerable=args.skip_unlowerable,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
