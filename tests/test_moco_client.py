"""
Tests for the Moco and Tempo HTTP clients against an httpx.MockTransport.
"""

import httpx
import pytest

from factories import make_activity, make_performance_report, make_project
from mococp.client.error import ApiError, NotLoggedInError
from mococp.client.jira_tempo import JiraTempoClient
from mococp.client.moco import MocoClient
from mococp.time import date_from_str

API = "/api/v1"


@pytest.fixture
def moco(config, fake_moco):
    with MocoClient(config, transport=fake_moco.transport()) as client:
        yield client


@pytest.mark.unit
def test_requests_target_company_host_with_token(moco, fake_moco):
    fake_moco.on("GET", f"{API}/activities", [make_activity(1)])

    moco.get_activities("2024-01-01", "2024-01-07")

    request = fake_moco.requests[0]
    assert request.url.host == "acme.mocoapp.com"
    assert request.headers["Authorization"] == "Token token=personal-key"


@pytest.mark.unit
def test_get_activities_sends_filters(moco, fake_moco):
    fake_moco.on("GET", f"{API}/activities", [])

    moco.get_activities("2024-01-01", "2024-01-07", task_id=7, term="review")

    params = fake_moco.requests[0].url.params
    assert params["from"] == "2024-01-01"
    assert params["to"] == "2024-01-07"
    assert params["user_id"] == "42"
    assert params["task_id"] == "7"
    assert params["term"] == "review"


@pytest.mark.unit
def test_list_activities_uses_range_dates(moco, fake_moco):
    fake_moco.on("GET", f"{API}/activities", [make_activity(1)])
    date_range = (
        date_from_str("2024-02-01").start_of("day"),
        date_from_str("2024-02-29").end_of("day"),
    )

    activities = moco.list_activities(date_range)

    params = fake_moco.requests[0].url.params
    assert (params["from"], params["to"]) == ("2024-02-01", "2024-02-29")
    assert activities[0]["id"] == 1


@pytest.mark.unit
def test_missing_user_id_raises_not_logged_in(config, fake_moco):
    config["moco_user_id"] = None

    with MocoClient(config, transport=fake_moco.transport()) as client:
        with pytest.raises(NotLoggedInError) as excinfo:
            client.list_activities_today()

    assert excinfo.value.missing == ["moco_user_id"]
    assert fake_moco.requests == []


@pytest.mark.unit
def test_missing_credentials_raises_not_logged_in(config, fake_moco):
    config["moco_company"] = None
    config["moco_api_key"] = None

    with MocoClient(config, transport=fake_moco.transport()) as client:
        with pytest.raises(NotLoggedInError, match="mococp login moco"):
            client.list_projects()

    assert fake_moco.requests == []


@pytest.mark.unit
def test_overtime_report_uses_bot_key(moco, fake_moco):
    fake_moco.on(
        "GET", f"{API}/users/42/performance_report", make_performance_report()
    )

    report = moco.get_overtime_report()

    assert report["annually"]["variation_until_today"] == 3.25
    request = fake_moco.requests[0]
    assert request.headers["Authorization"] == "Token token=bot-key"


@pytest.mark.unit
def test_error_status_raises_api_error(moco, fake_moco):
    fake_moco.on("GET", f"{API}/activities/9", {"message": "gone"}, status=404)

    with pytest.raises(ApiError) as excinfo:
        moco.get_activity(9)

    assert excinfo.value.status_code == 404


@pytest.mark.unit
def test_transport_failure_raises_api_error(config):
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    with MocoClient(config, transport=httpx.MockTransport(refuse)) as client:
        with pytest.raises(ApiError) as excinfo:
            client.list_projects()

    assert excinfo.value.status_code is None


@pytest.mark.unit
def test_get_user_id_matches_full_name(moco, fake_moco):
    fake_moco.on(
        "GET",
        f"{API}/users/employments",
        [
            {"id": 1, "user": {"id": 5, "firstname": "Ada", "lastname": "Byron"}},
            {"id": 2, "user": {"id": 6, "firstname": "Ada", "lastname": "Lovelace"}},
        ],
    )

    assert moco.get_user_id("Ada", "Lovelace") == 6
    assert moco.get_user_id("Grace", "Hopper") is None


@pytest.mark.unit
def test_list_projects_requests_active_assigned(moco, fake_moco):
    fake_moco.on(
        "GET", f"{API}/projects/assigned", [make_project(1, "Website", [])]
    )

    projects = moco.list_projects()

    assert projects[0]["name"] == "Website"
    assert fake_moco.requests[0].url.params["active"] == "true"


@pytest.mark.unit
def test_create_edit_delete_activity(moco, fake_moco):
    fake_moco.on("POST", f"{API}/activities", make_activity(10))
    fake_moco.on("PUT", f"{API}/activities/10", make_activity(10))
    fake_moco.on("DELETE", f"{API}/activities/10", None, status=204)

    created = moco.create_activity(
        {
            "date": "2024-01-01",
            "project_id": 100,
            "task_id": 200,
            "hours": 1.5,
            "description": "work",
        }
    )
    moco.edit_activity(
        10,
        {
            "project_id": 100,
            "task_id": 200,
            "date": "2024-01-02",
            "description": "more work",
            "hours": 2.0,
        },
    )
    moco.delete_activity(10)

    assert created["id"] == 10
    post, put, delete = fake_moco.requests
    assert fake_moco.body(post)["hours"] == 1.5
    assert fake_moco.body(put)["date"] == "2024-01-02"
    assert delete.method == "DELETE"


@pytest.mark.unit
def test_timer_control_patches_activity(moco, fake_moco):
    fake_moco.on("PATCH", f"{API}/activities/10/start_timer", make_activity(10))
    fake_moco.on("PATCH", f"{API}/activities/10/stop_timer", make_activity(10))

    moco.control_activity_timer(10, "start")
    moco.control_activity_timer(10, "stop")

    assert [request.url.path for request in fake_moco.requests] == [
        f"{API}/activities/10/start_timer",
        f"{API}/activities/10/stop_timer",
    ]


@pytest.mark.unit
def test_tempo_client_sends_bearer_token(config, fake_moco):
    fake_moco.on("GET", "/core/3/globalconfiguration", {})
    fake_moco.on(
        "GET",
        "/core/3/worklogs",
        {
            "results": [
                {
                    "tempoWorklogId": 1,
                    "issue": {"key": "PRJ-1"},
                    "timeSpentSeconds": 3600,
                    "startDate": "2024-01-01",
                }
            ]
        },
    )

    with JiraTempoClient(config, transport=fake_moco.transport()) as client:
        client.test_login()
        worklogs = client.get_worklogs("2024-01-01", "2024-01-31")

    assert worklogs["results"][0]["issue"]["key"] == "PRJ-1"
    login, listing = fake_moco.requests
    assert login.url.host == "api.tempo.io"
    assert login.headers["Authorization"] == "Bearer tempo-token"
    assert listing.url.params["from"] == "2024-01-01"


@pytest.mark.unit
def test_tempo_client_requires_token(config, fake_moco):
    config["jira_tempo_api_key"] = None

    with JiraTempoClient(config, transport=fake_moco.transport()) as client:
        with pytest.raises(NotLoggedInError, match="mococp login jira"):
            client.test_login()


@pytest.mark.unit
def test_tempo_client_rejected_token(config, fake_moco):
    fake_moco.on("GET", "/core/3/globalconfiguration", {}, status=401)

    with JiraTempoClient(config, transport=fake_moco.transport()) as client:
        with pytest.raises(ApiError) as excinfo:
            client.test_login()

    assert excinfo.value.status_code == 401
