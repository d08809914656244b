# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

import platformdirs

APP_NAME = "mococp"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

MOCO_URL_TEMPLATE = "https://{company}.mocoapp.com/api/v1"
TEMPO_URL = "https://api.tempo.io/core/3"

WeekStart = Literal[
    "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"
]
WEEK_DAYS: tuple[WeekStart, ...] = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)


class Configuration(TypedDict):
    moco_company: Optional[str]
    moco_api_key: Optional[str]
    moco_bot_api_key: Optional[str]
    moco_user_id: Optional[int]
    jira_tempo_api_key: Optional[str]
    week_start: WeekStart
    request_timeout: float


def get_default_configuration() -> Configuration:
    return {
        "moco_company": None,
        "moco_api_key": None,
        "moco_bot_api_key": None,
        "moco_user_id": None,
        "jira_tempo_api_key": None,
        "week_start": "monday",
        "request_timeout": 30.0,
    }
