from __future__ import annotations

import importlib
import sys

import typer

from . import __version__
from . import codec
from .cli_shared import (
    GlobalOpts,
    OpError,
    UsageError,
    _apply_global_env,
    _bootstrap_env,
    _eprint,
    _parse_hex,
    _print_json,
    _rich_error,
)
from .errors import AddressCodecError
from .versions import (
    ACCOUNT_ID,
    ACCOUNT_PUBLIC_KEY,
    ANY_SEED,
    NODE_PUBLIC_KEY,
    VersionProfile,
    VersionSet,
)

# Newer typer releases bundle their own click; take the usage-error base from
# the same package that defines typer.Exit.
_ClickException = importlib.import_module(typer.Exit.__module__).ClickException

KINDS: dict[str, VersionProfile | VersionSet] = {
    "account": ACCOUNT_ID,
    "account-public": ACCOUNT_PUBLIC_KEY,
    "node-public": NODE_PUBLIC_KEY,
    "seed": ANY_SEED,
}

app = typer.Typer(
    name="addrcodec",
    help="Encode, decode and validate ledger addresses, public keys and seeds.",
    no_args_is_help=True,
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"addrcodec {__version__}")
        raise typer.Exit(code=0)


def _ctx_global(ctx: typer.Context) -> GlobalOpts:
    if isinstance(ctx.obj, dict) and isinstance(ctx.obj.get("g"), GlobalOpts):
        return ctx.obj["g"]
    return _apply_global_env(plain_json=False, quiet=False)


def _resolve_kind(kind: str) -> VersionProfile | VersionSet:
    target = KINDS.get((kind or "").strip().lower())
    if target is None:
        raise UsageError(f"unknown kind {kind!r} (expected one of: {', '.join(KINDS)})")
    return target


@app.callback()
def app_callback(
    ctx: typer.Context,
    plain_json: bool = typer.Option(False, "--plain-json", help="Emit compact JSON output"),
    quiet: bool = typer.Option(False, "--quiet", help="Reduce stderr logging"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    del version
    ctx.obj = {"g": _apply_global_env(plain_json=plain_json, quiet=quiet)}


@app.command("encode", help="Encode hex payload bytes as a base58check string.")
def encode_cmd(
    ctx: typer.Context,
    kind: str = typer.Argument(..., help="account, account-public, node-public or seed"),
    payload_hex: str = typer.Argument(..., help="Payload bytes as hex"),
    algorithm: str = typer.Option(
        "",
        "--algorithm",
        help="Seed algorithm: secp256k1 or ed25519 (env default: ADDRCODEC_DEFAULT_SEED_ALGORITHM)",
    ),
) -> None:
    g = _ctx_global(ctx)
    target = _resolve_kind(kind)
    payload = _parse_hex(payload_hex, label="payload hex")
    out: dict[str, object] = {"kind": "addrcodec.encode.v1", "identifierKind": kind}
    try:
        if isinstance(target, VersionSet):
            algo = (algorithm or "").strip().lower()
            if not algo:
                algo = g.default_seed_algorithm
                if not g.quiet:
                    _eprint(f"note: no --algorithm given, using {algo}")
            out["algorithm"] = algo
            out["encoded"] = codec.encode_with(payload, algo, target)
        else:
            if algorithm:
                raise UsageError("--algorithm only applies to kind 'seed'")
            out["encoded"] = codec.encode(payload, target)
    except AddressCodecError as e:
        raise OpError(f"encode failed: {e}") from e
    _print_json(out, pretty=g.pretty)


@app.command("decode", help="Decode a base58check string to hex payload bytes.")
def decode_cmd(
    ctx: typer.Context,
    kind: str = typer.Argument(..., help="account, account-public, node-public or seed"),
    text: str = typer.Argument(..., help="Encoded identifier"),
) -> None:
    g = _ctx_global(ctx)
    target = _resolve_kind(kind)
    out: dict[str, object] = {"kind": "addrcodec.decode.v1", "identifierKind": kind}
    try:
        if isinstance(target, VersionSet):
            seed = codec.decode_any(text, target)
            out["algorithm"] = seed.algorithm
            out["payloadHex"] = seed.payload.hex().upper()
        else:
            out["payloadHex"] = codec.decode(text, target).hex().upper()
    except AddressCodecError as e:
        raise OpError(f"decode failed: {e}") from e
    _print_json(out, pretty=g.pretty)


@app.command("validate", help="Check an encoded identifier (exit 0 if valid, 1 if not).")
def validate_cmd(
    ctx: typer.Context,
    kind: str = typer.Argument(..., help="account, account-public, node-public or seed"),
    text: str = typer.Argument(..., help="Encoded identifier"),
) -> None:
    g = _ctx_global(ctx)
    result = codec.try_decode(text, _resolve_kind(kind))
    out: dict[str, object] = {
        "kind": "addrcodec.validate.v1",
        "identifierKind": kind,
        "valid": result.ok,
    }
    if result.algorithm:
        out["algorithm"] = result.algorithm
    if result.error is not None:
        out["error"] = type(result.error).__name__
        out["message"] = str(result.error)
    _print_json(out, pretty=g.pretty)
    if not result.ok:
        raise typer.Exit(code=1)


@app.command("kinds", help="List identifier kinds with their prefix bytes and payload length.")
def kinds_cmd(ctx: typer.Context) -> None:
    g = _ctx_global(ctx)
    items: list[dict[str, object]] = []
    for kind, target in KINDS.items():
        members = list(target) if isinstance(target, VersionSet) else [("", target)]
        for algorithm, profile in members:
            item: dict[str, object] = {
                "identifierKind": kind,
                "profile": profile.name,
                "prefixHex": profile.prefix.hex().upper(),
                "payloadLength": profile.payload_length,
            }
            if algorithm:
                item["algorithm"] = algorithm
            items.append(item)
    _print_json({"kind": "addrcodec.kinds.v1", "items": items}, pretty=g.pretty)


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    try:
        _bootstrap_env()
        result = app(args=argv, prog_name="addrcodec", standalone_mode=False)
        if result is None:
            return 0
        return int(result)
    except typer.Exit as e:
        return int(e.exit_code)
    except _ClickException as e:
        _rich_error(e.format_message())
        return int(e.exit_code)
    except UsageError as e:
        _rich_error(str(e))
        return 2
    except OpError as e:
        _rich_error(str(e))
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
