from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from vigcrack.classical.common import norm_key_alpha
from vigcrack.classical.vigenere import decrypt as vigenere_decrypt
from vigcrack.classical.vigenere import encrypt as vigenere_encrypt
from vigcrack.core.features import DEFAULT_MAX_LEN
from vigcrack.core.session import CrackSession
from vigcrack.core.utils import normalize_az
from vigcrack.errors import CrackError

app = typer.Typer(help="vigcrack: Vigenère key-length estimation, key recovery and decryption.")

_SHELL_HELP = """Vigenere Cracker
e <in_file> <key_file> <out_file>: encrypt
l <in_file>: load ciphertext
g <max_len>: guess key length
p <n>: list top n lengths and IC
k <len>: set key length
a: analyze columns and fill key with best shifts
c <n>: show top n shifts per column
s <pos> <letter>: set key letter
d [<out_file>]: decrypt
q: quit"""


@app.callback()
def _init(verbose: bool = typer.Option(False, "--verbose", "-v", help="Log analysis steps to stderr.")):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _read_az(path: Path) -> str:
    return normalize_az(path.read_text(encoding="utf-8", errors="replace"))


def _emit(text: str, output: Optional[Path]) -> None:
    if output is None:
        typer.echo(text)
    else:
        output.write_text(text, encoding="utf-8")


def _encrypt_file(input_file: Path, key_file: Path, output: Path) -> None:
    ct = vigenere_encrypt(_read_az(input_file), _read_az(key_file))
    output.write_text(ct, encoding="utf-8")


def _echo_candidates(session: CrackSession, top: int) -> None:
    typer.echo("Length\tIC")
    for c in session.top_candidates(top):
        typer.echo(f"{c.length}\t{c.score:.5f}")


def _echo_columns(session: CrackSession, top: int) -> None:
    # more than 26 just shows every hypothesis
    for col, row in enumerate(session.hypotheses):
        shown = "  ".join(f"{h.shift}({h.deviation:.5f})" for h in row[:top])
        typer.echo(f"col {col:2d}: {shown}")


@app.command()
def encrypt(
    input_file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    key_file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    output: Path = typer.Argument(..., dir_okay=False, writable=True),
):
    """Encrypt a plaintext file with the key read from another file."""
    try:
        _encrypt_file(input_file, key_file, output)
    except CrackError as e:
        raise typer.BadParameter(str(e), param_hint="KEY_FILE")


@app.command()
def guess(
    input_file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    max_len: int = typer.Option(DEFAULT_MAX_LEN, "--max-len", "-m", envvar="VIGCRACK_MAX_LEN", min=1),
    top: int = typer.Option(10, "--top", "-t", envvar="VIGCRACK_TOP", min=1),
):
    """Rank candidate key lengths by average index of coincidence."""
    session = CrackSession()
    try:
        session.load(_read_az(input_file))
        session.estimate_lengths(max_len)
    except CrackError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    _echo_candidates(session, top)


@app.command()
def columns(
    input_file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    key_length: int = typer.Option(..., "--key-length", "-k", min=1),
    top: int = typer.Option(5, "--top", "-t", envvar="VIGCRACK_TOP", min=1),
):
    """Show the best key-letter hypotheses for every column."""
    session = CrackSession()
    try:
        session.load(_read_az(input_file))
        session.set_key_length(key_length)
        session.analyze_columns()
    except CrackError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    _echo_columns(session, top)
    typer.echo(f"best key: {session.auto_fill_key()}")


@app.command()
def decrypt(
    input_file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    key: str = typer.Option(..., "--key", "-k", help="Key letters; non-letters are ignored."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", dir_okay=False),
):
    """Decrypt when you already have the key."""
    try:
        pt = vigenere_decrypt(_read_az(input_file), norm_key_alpha(key))
    except CrackError as e:
        raise typer.BadParameter(str(e), param_hint="--key")
    _emit(pt, output)


@app.command()
def crack(
    input_file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    max_len: int = typer.Option(DEFAULT_MAX_LEN, "--max-len", "-m", envvar="VIGCRACK_MAX_LEN", min=1),
    output: Optional[Path] = typer.Option(None, "--output", "-o", dir_okay=False),
):
    """Estimate the key length, recover the key and decrypt in one go."""
    session = CrackSession()
    try:
        session.load(_read_az(input_file))
        result = session.auto_crack(max_len)
    except CrackError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"key_length={result.key_length}  key={result.key}  ic={result.score:.5f}")
    _emit(result.plaintext, output)


def _dispatch(session: CrackSession, cmd: str, args: list[str]) -> bool:
    """Run one shell command. Returns False when the shell should stop."""
    if cmd == "q":
        return False
    if cmd == "e":
        _encrypt_file(Path(args[0]), Path(args[1]), Path(args[2]))
        typer.echo(f"Encrypted to {args[2]}.")
    elif cmd == "l":
        session.load(_read_az(Path(args[0])))
        typer.echo(f"Loaded {len(session.ciphertext)} letters.")
    elif cmd == "g":
        session.estimate_lengths(int(args[0]))
    elif cmd == "p":
        _echo_candidates(session, int(args[0]))
    elif cmd == "k":
        session.set_key_length(int(args[0]))
    elif cmd == "a":
        session.analyze_columns()
        typer.echo(f"Key: {session.auto_fill_key()}")
    elif cmd == "c":
        _echo_columns(session, int(args[0]) if args else 5)
    elif cmd == "s":
        session.set_key_letter(int(args[0]), args[1])
        typer.echo(f"Key: {session.key_text()}")
    elif cmd == "d":
        _emit(session.decrypt(), Path(args[0]) if args else None)
    else:
        typer.echo("Unknown command!", err=True)
    return True


@app.command()
def shell():
    """Interactive session: load, guess, analyze and tweak the key by hand."""
    typer.echo(_SHELL_HELP)
    session = CrackSession()
    stdin = typer.get_text_stream("stdin")

    for line in stdin:
        parts = line.split()
        if not parts:
            continue
        try:
            if not _dispatch(session, parts[0], parts[1:]):
                break
        except IndexError:
            typer.echo(f"Missing argument for '{parts[0]}'.", err=True)
        except (CrackError, ValueError, OSError) as e:
            typer.echo(f"Error: {e}", err=True)


def main():
    app()


if __name__ == "__main__":
    main()
