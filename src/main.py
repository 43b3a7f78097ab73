"""
sha256-core - Main Entry Point
Command line front end for the from-scratch SHA-256 implementation.
Run as `sha256-core` once installed, or `python -m src.main`.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer

from .core_crypto.sha256 import sha256, HashAllocationError
from .integration.reference_check import self_test, verify_against_reference


app = typer.Typer(name="sha256-core", no_args_is_help=True, add_completion=False,
                  help="From-scratch SHA-256 (FIPS 180-4)")


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _digest(data: bytes, check: bool) -> str:
    try:
        digest = sha256(data)
    except HashAllocationError as e:
        _fail("not enough memory to hash input", e)
    if check and not verify_against_reference(data):
        _fail("digest does not match the reference implementation")
    return digest.hex()


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ):
    """Compute SHA-256 digests of text, files, or the built-in test vectors."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command(name="hash")
def hash_cmd(
    text: Annotated[str, typer.Argument(help="Text to hash (UTF-8 encoded)")],
    check: Annotated[bool, typer.Option("--check", help="Cross-check against the cryptography package")] = False,
    ):
    """Print the hex digest of a text argument."""
    typer.echo(_digest(text.encode("utf-8"), check))


@app.command(name="file")
def file_cmd(
    path: Annotated[Path, typer.Argument(help="File to hash (read fully into memory)")],
    check: Annotated[bool, typer.Option("--check", help="Cross-check against the cryptography package")] = False,
    ):
    """Print the hex digest of a file's contents."""
    try:
        data = path.read_bytes()
    except OSError as e:
        _fail(f"cannot read {path}", e)
    typer.echo(f"{_digest(data, check)}  {path}")


@app.command(name="selftest")
def selftest_cmd():
    """Run known-answer and padding boundary vectors."""
    results = self_test()
    for result in results:
        typer.echo(str(result))

    failed = sum(1 for r in results if not r.passed)
    typer.echo(f"Overall: {len(results) - failed}/{len(results)} vectors passed")
    if failed:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
