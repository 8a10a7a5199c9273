import logging
from typing import TextIO

import click

from schematic.aggregate import analyze, format_report


@click.command()
@click.argument("filename", type=click.File("r"), default="-")
@click.option("-o", "--output", type=click.File("w"), default="-")
@click.option("--trace", is_flag=True, help="Log each pipeline stage.")
def main(filename: TextIO, output: TextIO, trace: bool):
    if trace:
        logging.basicConfig(level=logging.INFO, format="%(message)s")
    expression = filename.read()
    report = analyze(expression)
    output.write(format_report(report))


if __name__ == "__main__":
    main()
