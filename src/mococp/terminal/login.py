# SPDX-License-Identifier: MIT

from enum import Enum
from typing import Annotated

import typer

from mococp.repository.configuration import CONFIGURATION_REPO
from mococp.service.select import ask_question, mandatory_validator
from mococp.terminal.connect import open_jira_client, open_moco_client
from mococp.terminal.errors import report_errors
from mococp.view.header import header, success


class LoginSystem(str, Enum):
    moco = "moco"
    jira = "jira"


def login(
    system: Annotated[
        LoginSystem, typer.Argument(help="System to log in to")
    ] = LoginSystem.moco,
) -> None:
    """Login into (Moco/Jira)."""
    with report_errors():
        if system == LoginSystem.jira:
            login_jira()
        else:
            login_moco()


def login_moco() -> None:
    header("Moco Login")

    moco_company = ask_question("Enter Moco company name: ", mandatory_validator)
    api_key = ask_question("Enter your personal API key: ", mandatory_validator)
    bot_api_key = ask_question("Enter the Moco Bot API key: ", mandatory_validator)

    CONFIGURATION_REPO.update_config(
        moco_company=moco_company,
        moco_api_key=api_key,
        moco_bot_api_key=bot_api_key,
    )

    firstname = ask_question("Enter firstname: ", mandatory_validator)
    lastname = ask_question("Enter lastname:  ", mandatory_validator)

    with open_moco_client(CONFIGURATION_REPO.get_config()) as client:
        user_id = client.get_user_id(firstname, lastname)

    if user_id is None:
        typer.echo(f"Error: No Moco user named {firstname} {lastname}", err=True)
        raise typer.Exit(1)

    CONFIGURATION_REPO.update_config(moco_user_id=user_id)
    CONFIGURATION_REPO.flush()
    success("🤩 Logged in 🤩")


def login_jira() -> None:
    header("Jira Tempo Login")

    api_key = ask_question("Enter your Tempo API token: ", mandatory_validator)
    CONFIGURATION_REPO.update_config(jira_tempo_api_key=api_key)

    with open_jira_client(CONFIGURATION_REPO.get_config()) as client:
        client.test_login()

    CONFIGURATION_REPO.flush()
    success("🤩 Logged in 🤩")
