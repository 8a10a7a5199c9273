import typer

from schematic.aggregate import format_report, summarize
from schematic.token import TokenType, describe_token
from schematic.tokenize import tokenize

app = typer.Typer()


@app.command(context_settings={"ignore_unknown_options": True})
def main(expression: str, tokens: bool = typer.Option(False, "--tokens")):
    token_list = tokenize(expression)
    if tokens:
        for token in token_list:
            if token.kind != TokenType.Filler:
                print(describe_token(token))
    print(format_report(summarize(token_list)), end="", flush=True)


if __name__ == "__main__":
    app()
