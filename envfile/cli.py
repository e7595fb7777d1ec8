"""Audit secret-file env vars without printing their contents."""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from envfile import config
from envfile.errors import ConfigurationError
from envfile.log_redact import install_log_redaction
from envfile.reader import EnvFileReader

logger = logging.getLogger("envfile.cli")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _binding(raw: str) -> tuple[str, str]:
    env_name, sep, property_name = raw.partition("=")
    if not sep or not env_name.strip() or not property_name.strip():
        raise argparse.ArgumentTypeError(f"expected ENV=PROPERTY, got {raw!r}")
    return env_name, property_name


def parse_args(args: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="envfile-check",
        description="Check that env vars point at readable, non-blank secret files",
    )
    parser.add_argument("names", nargs="*", metavar="NAME", help="Required secret file env var")
    parser.add_argument(
        "--optional",
        action="append",
        default=[],
        metavar="NAME",
        help="Secret file env var that may be unset or blank",
    )
    parser.add_argument(
        "--set",
        dest="bindings",
        action="append",
        type=_binding,
        default=[],
        metavar="ENV=PROPERTY",
        help="Read ENV and publish its content as PROPERTY",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=config.LOG_LEVEL if config.LOG_LEVEL in LOG_LEVELS else "WARNING",
    )
    parsed = parser.parse_args(args)
    if not (parsed.names or parsed.optional or parsed.bindings):
        parser.error("at least one NAME, --optional NAME or --set ENV=PROPERTY is required")
    env_names = [env_name for env_name, _ in parsed.bindings]
    duplicates = sorted({name for name in env_names if env_names.count(name) > 1})
    if duplicates:
        parser.error(f"--set given more than once for: {', '.join(duplicates)}")
    return parsed


def _check(reader: EnvFileReader, name: str, required: bool) -> bool:
    try:
        content = reader.read(name, required=required)
    except (ConfigurationError, OSError, UnicodeDecodeError) as exc:
        print(f"fail  {name}: {exc}")
        return False
    if content:
        print(f"ok    {name} ({len(content)} chars)")
    else:
        print(f"empty {name}")
    return True


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )
    install_log_redaction()

    reader = EnvFileReader()
    failures = 0
    for name in args.names:
        if not _check(reader, name, required=True):
            failures += 1
    for name in args.optional:
        if not _check(reader, name, required=False):
            failures += 1

    if args.bindings:
        try:
            bindings = dict(args.bindings)
            reader.read_and_set(bindings)
        except (ConfigurationError, OSError, UnicodeDecodeError) as exc:
            print(f"fail  --set: {exc}")
            failures += 1
        else:
            for env_name, property_name in bindings.items():
                print(f"set   {property_name} <- {env_name}")

    if failures:
        logger.warning("%d secret file check(s) failed", failures)
        return 1
    return 0
