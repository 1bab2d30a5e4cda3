"""
Tests for the prompts module using pytest.

Tests cover:
- make_action_selection: mapping checkbox answers to the add and replace flags
"""

import pytest
import typer

from ui.prompts import ADD_CHOICE, REPLACE_CHOICE, make_action_selection


@pytest.mark.unit
@pytest.mark.mock
@pytest.mark.parametrize(
    "selection, expected",
    [
        (["add", "replace"], (True, True)),
        (["add"], (True, False)),
        (["replace"], (False, True)),
        ([], (False, False)),
    ],
)
def test_make_action_selection(mocker, selection, expected):
    """Should turn the selected choices into (add, replace)."""
    mocker.patch("ui.prompts.inquirer.prompt", return_value={"actions": selection})

    assert make_action_selection() == expected


@pytest.mark.unit
@pytest.mark.mock
def test_make_action_selection_defaults_to_every_change(mocker):
    """Should pre-select both changes in the checkbox."""
    mock_prompt = mocker.patch(
        "ui.prompts.inquirer.prompt", return_value={"actions": ["add", "replace"]}
    )

    make_action_selection()

    question = mock_prompt.call_args[0][0][0]
    assert question.name == "actions"
    assert question.default == [ADD_CHOICE[1], REPLACE_CHOICE[1]]


@pytest.mark.unit
@pytest.mark.mock
def test_make_action_selection_cancelled(mocker):
    """Should exit with code 1 when the prompt is cancelled."""
    mocker.patch("ui.prompts.inquirer.prompt", return_value=None)

    with pytest.raises(typer.Exit) as exc_info:
        make_action_selection()

    assert exc_info.value.exit_code == 1
