from __future__ import annotations

import json
import os
import sys
from dataclasses import dataclass
from typing import Any

from dotenv import load_dotenv
from rich.console import Console

from .versions import SECP256K1


class CodecCliError(Exception):
    pass


class UsageError(CodecCliError):
    pass


class OpError(CodecCliError):
    pass


ADDRCODEC_PLAIN_JSON = "ADDRCODEC_PLAIN_JSON"
ADDRCODEC_QUIET = "ADDRCODEC_QUIET"
ADDRCODEC_DEFAULT_SEED_ALGORITHM = "ADDRCODEC_DEFAULT_SEED_ALGORITHM"

_ERROR_CONSOLE = Console(stderr=True)


def _eprint(msg: str) -> None:
    print(msg, file=sys.stderr)


def _rich_error(msg: str) -> None:
    _ERROR_CONSOLE.print(f"[bold red]error:[/bold red] {msg}", markup=True, highlight=False)


def _bootstrap_env() -> None:
    # Discover and load .env without overriding already-exported values.
    load_dotenv()


@dataclass(frozen=True)
class GlobalOpts:
    pretty: bool
    quiet: bool
    default_seed_algorithm: str = SECP256K1


def _env_or_none(*names: str) -> str | None:
    for n in names:
        v = (os.environ.get(n) or "").strip()
        if v:
            return v
    return None


def _truthy(raw: str | None) -> bool:
    return str(raw or "").strip().lower() in {"1", "true", "yes", "on"}


def _apply_global_env(*, plain_json: bool, quiet: bool) -> GlobalOpts:
    plain = plain_json or _truthy(_env_or_none(ADDRCODEC_PLAIN_JSON))
    return GlobalOpts(
        pretty=not plain,
        quiet=quiet or _truthy(_env_or_none(ADDRCODEC_QUIET)),
        default_seed_algorithm=(
            _env_or_none(ADDRCODEC_DEFAULT_SEED_ALGORITHM) or SECP256K1
        ).lower(),
    )


def _print_json(obj: Any, *, pretty: bool) -> None:
    if pretty:
        sys.stdout.write(json.dumps(obj, indent=2, sort_keys=True) + "\n")
    else:
        sys.stdout.write(json.dumps(obj, separators=(",", ":"), sort_keys=True) + "\n")


def _parse_hex(raw: str, *, label: str) -> bytes:
    s = (raw or "").strip()
    if s[:2].lower() == "0x":
        s = s[2:]
    if not s:
        raise UsageError(f"missing {label}")
    try:
        return bytes.fromhex(s)
    except ValueError as e:
        raise UsageError(f"invalid {label}: {e}") from e
