"""USERDIR demo command.

Prints a short walkthrough of the calculator helpers and of the user
directory service running against an in-memory backend. Everything goes to
stdout; nothing is persisted.
"""

import click

from userdir.bootstrap import DEMO_DESCRIPTOR, bootstrap
from userdir.domain import Calculator

TITLE = "USERDIR demo"


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def _calculator_lines(calc: Calculator) -> list[str]:
    return [
        "Calculator:",
        f"  5 + 3 = {calc.add(5, 3)}",
        f"  10 - 4 = {calc.subtract(10, 4)}",
        f"  6 * 7 = {calc.multiply(6, 7)}",
        f"  15.0 / 3.0 = {calc.divide(15.0, 3.0)}",
        f"  5! = {calc.factorial(5)}",
        f"  sqrt(16.0) = {calc.square_root(16.0)}",
        "",
        "Boolean operations:",
        f"  Is 5 positive? {_yes_no(calc.is_positive(5))}",
        f"  Is 4 even? {_yes_no(calc.is_even(4))}",
        "",
        "String operations:",
        f"  Concatenate 'Hello' + ' World': {calc.concatenate('Hello', ' World')}",
        f"  Uppercase 'test': {calc.to_upper_case('test')}",
    ]


def _directory_lines() -> list[str]:
    container = bootstrap(DEMO_DESCRIPTOR)
    directory = container.directory
    lines = [
        f"User directory ({DEMO_DESCRIPTOR}):",
        f"  Connected? {_yes_no(directory.initialize_connection(DEMO_DESCRIPTOR))}",
        f"  Created Alice? {_yes_no(directory.create_user('Alice', 25))}",
        f"  Created Bob? {_yes_no(directory.create_user('Bob', 30))}",
        f"  User 1: {directory.get_user_info(1)}",
        f"  Total users: {directory.get_total_users()}",
        f"  Removed user 2? {_yes_no(directory.remove_user(2))}",
        f"  Total users: {directory.get_total_users()}",
    ]
    container.backend.disconnect()
    return lines


@click.command()
def demo() -> None:
    """Print the calculator and user-directory walkthrough."""
    lines = [TITLE, "=" * len(TITLE), ""]
    lines += _calculator_lines(Calculator())
    lines += [""]
    lines += _directory_lines()
    click.echo("\n".join(lines))
