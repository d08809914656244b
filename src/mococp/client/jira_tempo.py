# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from types import TracebackType
from typing import Optional, cast

import httpx

from mococp import configuration
from mococp.client.error import ApiError, NotLoggedInError
from mococp.model.worklog import WorklogResponse

logger = logging.getLogger(__name__)


class JiraTempoClient:
    def __init__(
        self,
        config: configuration.Configuration,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._config = deepcopy(config)
        self._client = httpx.Client(
            base_url=configuration.TEMPO_URL,
            timeout=self._config["request_timeout"],
            transport=transport,
        )

    def __enter__(self) -> "JiraTempoClient":
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

    def __get(
        self, path: str, params: Optional[list[tuple[str, str]]] = None
    ) -> httpx.Response:
        token = self._config["jira_tempo_api_key"]
        if token is None:
            raise NotLoggedInError("Jira", ["jira_tempo_api_key"])

        logger.debug("GET %s/%s params=%s", configuration.TEMPO_URL, path, params)
        try:
            response = self._client.get(
                path, params=params, headers={"Authorization": f"Bearer {token}"}
            )
        except httpx.HTTPError as e:
            logger.error("GET %s failed: %s", path, e)
            raise ApiError(f"Request to Tempo failed: {e}") from e

        if response.is_error:
            logger.error("GET %s returned %s", path, response.status_code)
            raise ApiError(
                f"Tempo answered GET {path} with {response.status_code}",
                status_code=response.status_code,
            )
        return response

    def test_login(self) -> None:
        """Raise unless the stored token is accepted by Tempo."""
        self.__get("globalconfiguration")

    def get_worklogs(self, from_date: str, to_date: str) -> WorklogResponse:
        return cast(
            WorklogResponse,
            self.__get(
                "worklogs", params=[("from", from_date), ("to", to_date)]
            ).json(),
        )
