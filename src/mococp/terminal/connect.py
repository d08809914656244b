# SPDX-License-Identifier: MIT

from typing import Optional

import httpx

from mococp.client.jira_tempo import JiraTempoClient
from mococp.client.moco import MocoClient
from mococp.configuration import Configuration

# Replaced in tests with an httpx.MockTransport
TRANSPORT: Optional[httpx.BaseTransport] = None


def open_moco_client(config: Configuration) -> MocoClient:
    return MocoClient(config, transport=TRANSPORT)


def open_jira_client(config: Configuration) -> JiraTempoClient:
    return JiraTempoClient(config, transport=TRANSPORT)
