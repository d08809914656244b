# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from types import TracebackType
from typing import Any, Literal, Optional, cast

import httpx

from mococp import configuration
from mococp.client.error import ApiError, NotLoggedInError
from mococp.model.activity import Activity, CreateActivity, EditActivity
from mococp.model.employment import Employment
from mococp.model.performance_report import PerformanceReport
from mococp.model.project import Project
from mococp.time import DateRange, date_to_str, today_local

logger = logging.getLogger(__name__)

TimerControl = Literal["start", "stop"]


class MocoClient:
    """Moco REST API client; one method per endpoint."""

    def __init__(
        self,
        config: configuration.Configuration,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        # Private copy, the client never writes configuration back
        self._config = deepcopy(config)
        self._client = httpx.Client(
            timeout=self._config["request_timeout"], transport=transport
        )

    def __enter__(self) -> "MocoClient":
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def __credentials(self, bot: bool = False) -> tuple[str, str]:
        company = self._config["moco_company"]
        api_key = (
            self._config["moco_bot_api_key"] if bot else self._config["moco_api_key"]
        )
        missing = []
        if company is None:
            missing.append("moco_company")
        if api_key is None:
            missing.append("moco_bot_api_key" if bot else "moco_api_key")
        if company is None or api_key is None:
            raise NotLoggedInError("Moco", missing)
        return company, api_key

    def __user_id(self) -> int:
        user_id = self._config["moco_user_id"]
        if user_id is None:
            raise NotLoggedInError("Moco", ["moco_user_id"])
        return user_id

    def __request(
        self,
        method: str,
        path: str,
        bot: bool = False,
        params: Optional[list[tuple[str, str]]] = None,
        json: Optional[Any] = None,
    ) -> httpx.Response:
        company, api_key = self.__credentials(bot)
        url = f"{configuration.MOCO_URL_TEMPLATE.format(company=company)}/{path}"
        logger.debug("%s %s params=%s", method, url, params)

        try:
            response = self._client.request(
                method,
                url,
                params=params,
                json=json,
                headers={"Authorization": f"Token token={api_key}"},
            )
        except httpx.HTTPError as e:
            logger.error("%s %s failed: %s", method, url, e)
            raise ApiError(f"Request to Moco failed: {e}") from e

        if response.is_error:
            logger.error(
                "%s %s returned %s: %s",
                method,
                url,
                response.status_code,
                response.text,
            )
            raise ApiError(
                f"Moco answered {method} {path} with {response.status_code}",
                status_code=response.status_code,
            )
        return response

    def get_user_id(self, firstname: str, lastname: str) -> Optional[int]:
        employments = cast(
            list[Employment], self.__request("GET", "users/employments").json()
        )
        for employment in employments:
            user = employment["user"]
            if user["firstname"] == firstname and user["lastname"] == lastname:
                return user["id"]
        return None

    def get_activities(
        self,
        from_date: str,
        to_date: str,
        task_id: Optional[int] = None,
        term: Optional[str] = None,
    ) -> list[Activity]:
        params = [
            ("from", from_date),
            ("to", to_date),
            ("user_id", str(self.__user_id())),
        ]
        if task_id is not None:
            params.append(("task_id", str(task_id)))
        if term is not None:
            params.append(("term", term))

        return cast(
            list[Activity], self.__request("GET", "activities", params=params).json()
        )

    def list_activities(self, date_range: DateRange) -> list[Activity]:
        start, end = date_range
        return self.get_activities(date_to_str(start), date_to_str(end))

    def list_activities_today(self) -> list[Activity]:
        today = date_to_str(today_local())
        return self.get_activities(today, today)

    def get_activity(self, activity_id: int) -> Activity:
        return cast(Activity, self.__request("GET", f"activities/{activity_id}").json())

    def create_activity(self, payload: CreateActivity) -> Activity:
        return cast(
            Activity, self.__request("POST", "activities", json=dict(payload)).json()
        )

    def edit_activity(self, activity_id: int, payload: EditActivity) -> None:
        self.__request("PUT", f"activities/{activity_id}", json=dict(payload))

    def delete_activity(self, activity_id: int) -> None:
        self.__request("DELETE", f"activities/{activity_id}")

    def control_activity_timer(self, activity_id: int, control: TimerControl) -> None:
        self.__request("PATCH", f"activities/{activity_id}/{control}_timer")

    def list_projects(self) -> list[Project]:
        return cast(
            list[Project],
            self.__request(
                "GET", "projects/assigned", params=[("active", "true")]
            ).json(),
        )

    def get_overtime_report(self) -> PerformanceReport:
        return cast(
            PerformanceReport,
            self.__request(
                "GET", f"users/{self.__user_id()}/performance_report", bot=True
            ).json(),
        )
