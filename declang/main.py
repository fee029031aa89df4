import logging
from typing import TextIO

import click

from declang.helper import LexicalError
from declang.tokenize import tokenize


@click.command()
@click.argument("filename", type=click.File("r"), default="-")
@click.option("-o", "--output", type=click.File("w"), default="-")
@click.option("-v", "--verbose", is_flag=True, help="Log scanner progress.")
def main(filename: TextIO, output: TextIO, verbose: bool):
    if verbose:
        logging.basicConfig()
        logging.getLogger("declang").setLevel(logging.DEBUG)
    expression = filename.read()
    try:
        tokens = tokenize(expression)
    except LexicalError as e:
        click.echo(str(e), err=True)
        click.echo(e.diagnostic(), err=True, nl=False)
        raise SystemExit(1)

    for token in tokens:
        output.write(f"{token.line}:{token.column}\t{token.kind.name}\t{token.value}\n")


if __name__ == "__main__":
    main()
