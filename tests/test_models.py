import pytest
from pydantic import ValidationError

from newrelic_appid.models import parse_applications


def test_single_wrapper_object() -> None:
    payload = {
        "applications": [
            {
                "id": 42,
                "name": "checkout",
                "language": "python",
                "health_status": "green",
                "reporting": True,
                "last_reported_at": "2024-05-01T12:00:00+00:00",
                "application_summary": {"throughput": 12.0},
                "links": {"servers": [], "application_hosts": [1, 2]},
            }
        ],
        "links": {"application.servers": "/v2/servers?ids={server_ids}"},
    }

    records = parse_applications(payload)

    assert len(records) == 1
    record = records[0]
    assert record.id == 42
    assert record.health_status == "green"
    assert record.last_reported_at is not None
    assert record.links is not None
    assert record.links.application_hosts == [1, 2]


def test_optional_fields_may_be_absent() -> None:
    records = parse_applications({"applications": [{"id": 1, "name": "a"}]})
    assert records[0].language is None
    assert records[0].links is None


def test_missing_applications_key_means_no_records() -> None:
    assert parse_applications({}) == []


def test_array_of_wrappers_preserves_order() -> None:
    payload = [
        {"applications": [{"id": 7, "name": "a"}, {"id": 99, "name": "a"}]},
        {"applications": [{"id": 3, "name": "a"}]},
    ]
    assert [record.id for record in parse_applications(payload)] == [7, 99, 3]


@pytest.mark.parametrize(
    "payload",
    [
        "not-an-object",
        {"applications": "nope"},
        {"applications": [{"id": "forty-two", "name": "a"}]},
        [{"applications": [{"name": "missing id"}]}],
    ],
)
def test_malformed_payloads_raise(payload: object) -> None:
    with pytest.raises(ValidationError):
        parse_applications(payload)


def test_null_incidental_fields_are_tolerated() -> None:
    payload = {
        "applications": [
            {"id": 5, "name": "a", "language": None, "links": {"servers": None}},
        ],
        "links": {"application.servers": None, "application.server": "/v2/servers/{server_id}"},
    }

    records = parse_applications(payload)

    assert [record.id for record in records] == [5]
    assert records[0].links is not None
    assert records[0].links.servers is None


def test_null_applications_means_no_records() -> None:
    assert parse_applications({"applications": None}) == []
