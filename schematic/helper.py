def error_message(expression: str, location: int, message: str) -> str:
    messages = [f"{expression}\n", f"{' ' * location}^ {message}\n"]
    return "".join(messages)


def error_at(line_number: int, expression: str, location: int, message: str) -> str:
    return f"line {line_number + 1}, column {location + 1}:\n" + error_message(
        expression, location, message
    )
