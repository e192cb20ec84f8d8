"""
cenglex - CENG Lexical Analyzer Command-Line Interface
======================================================

Scans a CENG source file and writes one line per token to a .lex file.

Usage Examples
--------------
Default files (code_file.ceng -> code.lex):
    $ cenglex

Explicit input and output:
    $ cenglex prog.ceng -o prog.lex

Print the dump instead of writing a file:
    $ cenglex prog.ceng --stdout

Scan the built-in demo program:
    $ cenglex --demo --stdout
"""

import functools
import logging
import sys
from pathlib import Path
from typing import Optional

import click

from ceng_lexer import __version__
from ceng_lexer.cli.errors import handle_cli_exception
from ceng_lexer.config import LexerConfig
from ceng_lexer.lexer import scan
from ceng_lexer.loader import load_source
from ceng_lexer.sink import TokenSink, write_tokens

logger = logging.getLogger(__name__)


# A short program touching every token kind
DEMO_SOURCE = b"""\
/* demo program */
int main() {
    int count = 10;
    char greeting = "hello";
    while (count >= -1) {
        count--; // count down
    }
    return 0;
}
"""


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "source",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output token file (default: code.lex, or $CENG_OUTPUT_FILE)",
)
@click.option(
    "--stdout", "to_stdout",
    is_flag=True,
    help="Print tokens to standard output instead of writing a file",
)
@click.option(
    "--demo",
    is_flag=True,
    help="Scan the built-in demo program instead of a file",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="cenglex")
def main(
    source: Optional[Path],
    output: Optional[Path],
    to_stdout: bool,
    demo: bool,
    verbose: bool,
) -> None:
    """
    Tokenize a CENG source file.

    SOURCE is the file to scan (default: code_file.ceng, or
    $CENG_SOURCE_FILE).

    \b
    Examples:
        cenglex                        # code_file.ceng -> code.lex
        cenglex prog.ceng -o prog.lex  # Explicit files
        cenglex prog.ceng --stdout     # Print tokens
        cenglex --demo --stdout        # Built-in example
    """
    config = LexerConfig.from_env()
    if source is not None:
        config.source_file = source
    if output is not None:
        config.output_file = output
    config.verbose = config.verbose or verbose

    setup_logging(config.verbose)
    logger.debug(f"Configuration: {config}")

    # Keep stdout clean for the dump when printing tokens
    status = functools.partial(click.echo, err=to_stdout)

    status("CENG Lexical Analyzer")
    status("=====================")

    try:
        if demo:
            status("Reading source from built-in demo...")
            data = DEMO_SOURCE
        else:
            status(f"Reading source from file {config.source_file}...")
            data = load_source(config.source_file)

        status("Lexing source file...")
        tokens = scan(data)

        if to_stdout:
            count = TokenSink(sys.stdout).write(tokens)
            status(f"Done! {count} lexemes written to standard output")
        else:
            status("Writing lexemes to file...")
            count = write_tokens(tokens, config.output_file)
            status(f"Done! {count} lexemes written to {config.output_file}")

    except Exception as e:
        handle_cli_exception(e, verbose=config.verbose)


if __name__ == "__main__":
    main()
