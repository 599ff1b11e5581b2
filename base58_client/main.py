#!/usr/bin/env python3
"""Base58 Client - CLI tool for Base58 encoding and decoding.

Usage:
    base58-client [global-options] <command> [options]

Examples:
    base58-client encode "Hello"                # -> 9Ajdvzr
    base58-client decode 9Ajdvzr                # -> Hello
    base58-client encode -r -i key.bin          # Encode a binary file
    base58-client decode -r -i key.b58 -o key.bin
    base58-client check 9Ajdvzr 0OIl            # Validate strings
"""

import sys
from pathlib import Path

import click

from .core import base58


def io_options(f):
    """Decorator to add common input/output options."""
    f = click.option('--output', '-o', type=click.Path(dir_okay=False),
                     help='Output file (default: stdout)')(f)
    f = click.option('--raw', '-r', is_flag=True, help='Treat the payload as raw bytes')(f)
    f = click.option('--input', '-i', 'input_', type=click.Path(allow_dash=True),
                     help='Read input from a file (use - for stdin)')(f)
    return f


def read_input(text, input_, binary=False):
    """Return the payload from the TEXT argument or the --input file."""
    if text is not None and input_ is not None:
        raise click.UsageError("Cannot use both TEXT and --input")
    if text is None and input_ is None:
        raise click.UsageError("Either TEXT or --input must be specified")

    if text is not None:
        return text.encode('utf-8') if binary else text

    if input_ == '-':
        data = sys.stdin.buffer.read()
    else:
        path = Path(input_)
        if not path.exists():
            raise click.ClickException(f"File not found: {input_}")
        data = path.read_bytes()

    if binary:
        return data

    try:
        return data.decode('utf-8')
    except UnicodeDecodeError:
        raise click.ClickException("Input is not valid UTF-8 text. Use --raw for binary data.")


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.option('--dry-run', '-n', is_flag=True, help='Show what would be done')
@click.pass_context
def cli(ctx, verbose, dry_run):
    """Base58 Client - encode and decode Base58 text."""
    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose
    ctx.obj['dry_run'] = dry_run


@cli.command('encode')
@click.argument('text', required=False)
@io_options
@click.pass_context
def cmd_encode(ctx, text, input_, raw, output):
    """Encode text or a file to Base58.

    Text is encoded as UTF-8 first. With --raw the --input file is read
    as binary and its bytes are encoded unchanged.

    Example:
        base58-client encode "Hello World"
        base58-client encode -r -i logo.png -o logo.b58
    """
    data = read_input(text, input_, binary=raw)
    if not raw:
        if input_ is not None:
            # Strip the trailing newline of files and piped text
            data = data.rstrip('\r\n')
        data = data.encode('utf-8')

    encoded = base58.encode(data)

    if ctx.obj['verbose']:
        click.echo(f"Input:    {len(data)} bytes", err=True)
        click.echo(f"Encoded:  {len(encoded)} chars (base58)", err=True)

    write_text(ctx, encoded, output, newline=True)


@cli.command('decode')
@click.argument('text', required=False)
@io_options
@click.option('--replace', is_flag=True,
              help='Replace invalid UTF-8 with U+FFFD instead of failing')
@click.pass_context
def cmd_decode(ctx, text, input_, raw, output, replace):
    """Decode a Base58 string.

    The decoded bytes are printed as UTF-8 text. Use --raw for binary
    payloads, or --replace to substitute undecodable bytes.

    Example:
        base58-client decode 9Ajdvzr
        base58-client decode -r -i logo.b58 -o logo.png
    """
    encoded = read_input(text, input_)
    if input_ is not None:
        encoded = encoded.strip()

    try:
        decoded_bytes = base58.decode(encoded)
    except base58.InvalidCharacterError as e:
        raise click.ClickException(str(e))

    if ctx.obj['verbose']:
        click.echo(f"Input:    {len(encoded)} chars (base58)", err=True)
        click.echo(f"Decoded:  {len(decoded_bytes)} bytes", err=True)

    if raw:
        write_bytes(ctx, decoded_bytes, output)
        return

    try:
        decoded_text = decoded_bytes.decode('utf-8', 'replace' if replace else 'strict')
    except UnicodeDecodeError:
        raise click.ClickException(
            "Payload is not valid UTF-8 text. Use --raw for binary data or --replace.")

    write_text(ctx, decoded_text, output)


@cli.command('check')
@click.argument('texts', nargs=-1, required=True)
@click.pass_context
def cmd_check(ctx, texts):
    """Check whether strings are valid Base58.

    Exits with status 1 if any string is invalid.

    Example:
        base58-client check 9Ajdvzr JxF12TrwUP45BMd
    """
    all_valid = True
    for text in texts:
        if base58.is_valid_base58(text):
            click.echo(f"valid    {text}")
            continue

        all_valid = False
        click.echo(f"invalid  {text}")
        if ctx.obj['verbose']:
            found = base58.find_invalid_character(text)
            if found is None:
                click.echo("  empty string", err=True)
            else:
                position, char = found
                click.echo(f"  bad character {char!r} at position {position}", err=True)

    if not all_valid:
        ctx.exit(1)


@cli.command('alphabet')
@click.pass_context
def cmd_alphabet(ctx):
    """Show the Base58 alphabet."""
    if not ctx.obj['verbose']:
        click.echo(base58.ALPHABET)
        return

    for index, char in enumerate(base58.ALPHABET):
        click.echo(f"{index:2}  {char}")


@cli.command('help')
@click.argument('topic', required=False)
@click.pass_context
def cmd_help(ctx, topic):
    """Show help for a command.

    Examples:
        base58-client help          # General help
        base58-client help decode   # Help for 'decode' command
    """
    if topic is None:
        click.echo(ctx.parent.get_help())
        return

    if topic not in cli.commands:
        raise click.ClickException(f"Unknown topic: '{topic}'. Try 'help' to list commands.")

    cmd = cli.commands[topic]
    with click.Context(cmd, info_name=topic, parent=ctx.parent) as sub_ctx:
        click.echo(cmd.get_help(sub_ctx))


def write_text(ctx, text, output, newline=False):
    if ctx.obj['dry_run']:
        click.echo(f"Would write {len(text)} chars to {output or 'stdout'}")
        return

    if output:
        Path(output).write_bytes((text + '\n' if newline else text).encode('utf-8'))
        click.echo(f"Saved to: {output} ({len(text)} chars)", err=True)
    else:
        click.echo(text)


def write_bytes(ctx, data, output):
    if ctx.obj['dry_run']:
        click.echo(f"Would write {len(data)} bytes to {output or 'stdout'}")
        return

    if output:
        Path(output).write_bytes(data)
        click.echo(f"Saved to: {output} ({len(data)} bytes)", err=True)
    else:
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()


def main():
    """Entry point."""
    cli(obj={})


if __name__ == '__main__':
    main()
