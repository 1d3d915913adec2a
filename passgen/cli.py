"""CLI for passgen."""

from __future__ import annotations

import logging
import sys

import click

from passgen import __version__
from passgen.config import (
    DEFAULT_DICTIONARY,
    DEFAULT_DIGITS,
    DEFAULT_ENTROPY_BITS,
    DEFAULT_SOURCE,
    MIN_WORD_LENGTH,
    Settings,
)
from passgen.errors import PassgenError


@click.group()
@click.version_option(__version__)
@click.option("-v", "--verbose", is_flag=True, help="Log every drawn symbol to stderr.")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """passgen: passphrases and PINs with a guaranteed minimum entropy."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    if verbose and not logging.getLogger().handlers:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


_source_option = click.option(
    "--source",
    default=DEFAULT_SOURCE,
    envvar="PASSGEN_SOURCE",
    show_default=True,
    help="Random source: a name from 'scan' or a device/file path.",
)
_dictionary_option = click.option(
    "--dictionary",
    "dictionary_path",
    default=DEFAULT_DICTIONARY,
    envvar="PASSGEN_DICTIONARY",
    show_default=True,
    help="Whitespace-separated word list.",
)
_min_length_option = click.option(
    "--min-length",
    default=MIN_WORD_LENGTH,
    type=int,
    envvar="PASSGEN_MIN_LENGTH",
    show_default=True,
    help="Drop dictionary words shorter than this.",
)


# ────────────────────────────────────────────────────────────
# Secrets
# ────────────────────────────────────────────────────────────


@main.command(context_settings={"ignore_unknown_options": True})
@click.argument("bits", required=False)
@_dictionary_option
@_source_option
@_min_length_option
@click.pass_context
def words(ctx: click.Context, bits: str | None, dictionary_path: str, source: str, min_length: int) -> None:
    """Make a passphrase at least as strong as a BITS bit secret (default 64)."""
    from passgen.generate import generate_passphrase, parse_count
    from passgen.report import entropy_report

    settings = Settings(
        dictionary_path=dictionary_path,
        source=source,
        min_word_length=min_length,
        verbose=ctx.obj["verbose"],
    )
    try:
        wanted = parse_count(bits, DEFAULT_ENTROPY_BITS)
        secret = generate_passphrase(wanted, settings)
    except PassgenError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    rep = entropy_report(secret)
    click.echo(f"We are going to make a password at least as strong as a {wanted} bit secret")
    click.echo(secret.rendered)
    click.echo(f"Your password has {rep.entropy} bits of entropy in its makeup.")
    click.echo(f"Your password is roughly equivalent to {rep.length} base32 elements")


@main.command(context_settings={"ignore_unknown_options": True})
@click.argument("digits", required=False)
@_source_option
@click.pass_context
def pin(ctx: click.Context, digits: str | None, source: str) -> None:
    """Make a PIN of DIGITS decimal digits (default 8)."""
    from passgen.generate import generate_pin, parse_count
    from passgen.report import entropy_report

    settings = Settings(source=source, verbose=ctx.obj["verbose"])
    try:
        wanted = parse_count(digits, DEFAULT_DIGITS)
        secret = generate_pin(wanted, settings)
    except PassgenError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    rep = entropy_report(secret)
    click.echo(f"We are going to make a pin that has {wanted} digits.")
    click.echo(click.style(secret.rendered, fg="green"))
    click.echo(f"Your pin has {rep.entropy} digits in its makeup.")
    click.echo(f"That is about {rep.information_bits:.1f} bits of information.")


# ────────────────────────────────────────────────────────────
# Diagnostics
# ────────────────────────────────────────────────────────────


@main.command()
@_dictionary_option
@_min_length_option
def stats(dictionary_path: str, min_length: int) -> None:
    """Show word-length statistics for a dictionary."""
    from passgen.dictionary import filter_short, length_histogram, read_words

    try:
        wordlist = read_words(dictionary_path)
    except PassgenError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo("Dictionary statistics: ")
    for length, count in length_histogram(wordlist).items():
        click.echo(f"{length} character words: {count}")

    needed = Settings().domain_size
    usable = len(filter_short(wordlist, min_length))
    click.echo()
    click.echo(f"Total words:  {len(wordlist):,}")
    click.echo(f"Usable words: {usable:,} (at least {min_length} characters)")
    click.echo(f"Domain size:  {needed:,} {'✓' if usable >= needed else '✗ too few'}")


@main.command()
def scan() -> None:
    """List the random sources available on this machine."""
    from passgen.platform import detect_available_sources, platform_info

    info = platform_info()
    click.echo(f"Platform: {info['system']} {info['machine']} (Python {info['python']})")
    click.echo()

    sources = detect_available_sources()
    click.echo(f"Found {len(sources)} available random source(s):\n")
    for src in sources:
        click.echo(f"  ✅ {src.name:<10} {src.description}")
    if not sources:
        click.echo("  (none found)")
