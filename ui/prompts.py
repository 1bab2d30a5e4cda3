"""
Interactive user prompts for the license header checker.

When neither -a (add) nor -r (replace) is given on the command line, a run only
reports. In interactive mode the user is instead asked which changes to apply
before the scan starts.

Dependencies:
    - inquirer: Interactive terminal prompts
    - rich: Terminal formatting and colors
    - typer: CLI framework integration
"""

import inquirer  # type: ignore
from inquirer.themes import GreenPassion  # type: ignore
from rich import print as pr
import typer

ADD_CHOICE = ("Add the license header to files that have none", "add")
REPLACE_CHOICE = ("Replace license headers that differ from the target one", "replace")


def make_action_selection() -> tuple[bool, bool]:
    """
    Ask which changes the run may apply to the scanned files.

    Both choices are pre-selected, so hitting [ENTER] straight away fixes every
    file. Submitting an empty selection keeps the run report-only.

    Returns:
        tuple[bool, bool]: (add, replace) as selected by the user.

    Raises:
        typer.Exit: If the prompt is cancelled (e.g. Ctrl+C).
    """
    pr("\n[bold green]Which changes should be applied to the scanned files?[/bold green]\n")

    questions = [
        inquirer.Checkbox(
            "actions",
            message="Make your selection with [SPACEBAR], then hit [ENTER] to submit",
            choices=[ADD_CHOICE, REPLACE_CHOICE],
            default=[ADD_CHOICE[1], REPLACE_CHOICE[1]],
        ),
    ]

    answers = inquirer.prompt(questions, theme=GreenPassion())
    if not answers:
        raise typer.Exit(code=1)

    selection: list[str] = answers["actions"]
    return "add" in selection, "replace" in selection
