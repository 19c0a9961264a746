"""Client task schemas — wire payloads with business rules on hours.

Invariants:
    - estimatedHours: number in [0.5, 24], multiple of 0.5
    - actualHours (update only): number in [0.1, 100], multiple of 0.1
    - dueDate arrives as text and is only parsed when converting to storage
    - Client input never sets owner, rewards or completion
"""

from datetime import datetime, timezone
from decimal import Decimal

import pytest
from pydantic import ValidationError

from batcave.core.domain_types import TaskDomain, TaskPriority
from batcave.core.errors import ValidationFailure
from batcave.core.validation import validate_payload
from batcave.schemas.task import (
    ClientTask, ClientTaskCreate, ClientTaskUpdate, ClientUpdateTask,
    TaskCreate, TaskUpdate,
)


HOUR_RULE_ERRORS = {"greater_than_equal", "less_than_equal", "multiple_of"}


def _client_payload(**overrides) -> dict:
    payload = {
        "title": "Leg day",
        "domain": "fitness",
        "estimatedHours": 1.5,
    }
    payload.update(overrides)
    return payload


# --- ClientTaskCreate: estimatedHours bounds ----------------------------------

@pytest.mark.parametrize("hours", [0.5, 1, 7.5, 24])
def test_estimated_hours_within_bounds_accepted(hours):
    task = ClientTaskCreate.model_validate(_client_payload(estimatedHours=hours))
    assert task.estimated_hours == hours


@pytest.mark.parametrize("hours", [0.4, 0.3, 0, -1, 24.5, 25, 1.25])
def test_estimated_hours_out_of_rule_rejected(hours):
    with pytest.raises(ValidationFailure) as exc_info:
        validate_payload(ClientTaskCreate, _client_payload(estimatedHours=hours))
    [error] = exc_info.value.errors
    assert error.field == "estimatedHours"
    assert error.type in HOUR_RULE_ERRORS


def test_estimated_hours_must_be_a_number_not_text():
    with pytest.raises(ValidationError):
        ClientTaskCreate.model_validate(_client_payload(estimatedHours="2.5"))


def test_estimated_hours_rejects_nan():
    with pytest.raises(ValidationError):
        ClientTaskCreate.model_validate(_client_payload(estimatedHours=float("nan")))


def test_estimated_hours_required_on_client_create():
    payload = _client_payload()
    del payload["estimatedHours"]
    with pytest.raises(ValidationFailure) as exc_info:
        validate_payload(ClientTaskCreate, payload)
    assert exc_info.value.fields == {"estimatedHours"}


# --- ClientTaskCreate: shape --------------------------------------------------

def test_missing_title_and_domain_reported_together():
    with pytest.raises(ValidationFailure) as exc_info:
        validate_payload(ClientTaskCreate, {"estimatedHours": 0.3})
    assert exc_info.value.fields == {"title", "domain", "estimatedHours"}


def test_client_create_strips_owner_and_server_fields():
    task = ClientTaskCreate.model_validate(_client_payload(
        userId="someone-else", id="t-evil", xpReward=500, euReward=50,
        isCompleted=True, completedAt="2026-01-01T00:00:00Z",
        createdAt="2020-01-01T00:00:00Z", updatedAt="2020-01-01T00:00:00Z",
    ))
    assert set(task.model_dump()) == {
        "title", "description", "domain", "priority",
        "estimated_hours", "due_date",
    }


def test_client_create_keeps_due_date_as_text():
    task = ClientTaskCreate.model_validate(_client_payload(dueDate="2026-10-20T17:00:00Z"))
    assert task.due_date == "2026-10-20T17:00:00Z"


def test_client_aliases():
    assert ClientTask is ClientTaskCreate
    assert ClientUpdateTask is ClientTaskUpdate


# --- ClientTaskCreate.to_insert -----------------------------------------------

def test_to_insert_applies_session_owner_and_fixed_point_hours():
    client = ClientTaskCreate.model_validate(_client_payload(
        userId="someone-else", priority="urgent", dueDate="2026-10-20T17:00:00Z",
    ))
    insert = client.to_insert("u-session")
    assert isinstance(insert, TaskCreate)
    assert insert.user_id == "u-session"
    assert insert.domain is TaskDomain.FITNESS
    assert insert.priority is TaskPriority.URGENT
    assert insert.estimated_hours == Decimal("1.5")
    assert str(insert.estimated_hours) == "1.5"
    assert insert.due_date == datetime(2026, 10, 20, 17, 0, tzinfo=timezone.utc)


def test_to_insert_treats_empty_due_date_as_absent():
    insert = ClientTaskCreate.model_validate(_client_payload(dueDate="")).to_insert("u-1")
    assert insert.due_date is None


def test_to_insert_rejects_unparseable_due_date():
    client = ClientTaskCreate.model_validate(_client_payload(dueDate="next tuesday"))
    with pytest.raises(ValidationFailure) as exc_info:
        client.to_insert("u-1")
    [error] = exc_info.value.errors
    assert exc_info.value.schema == "TaskCreate"
    assert "datetime" in error.type


# --- ClientTaskUpdate ---------------------------------------------------------

@pytest.mark.parametrize("hours", [0.1, 0.3, 2.5, 100])
def test_actual_hours_within_bounds_accepted(hours):
    update = ClientTaskUpdate.model_validate({"actualHours": hours})
    assert update.actual_hours == hours


@pytest.mark.parametrize("hours", [0, 0.05, 100.5, 100.05, 2.55, 150])
def test_actual_hours_out_of_rule_rejected(hours):
    with pytest.raises(ValidationFailure) as exc_info:
        validate_payload(ClientTaskUpdate, {"actualHours": hours})
    [error] = exc_info.value.errors
    assert error.field == "actualHours"
    assert error.type in HOUR_RULE_ERRORS


def test_update_estimated_hours_uses_same_rule_as_create():
    ClientTaskUpdate.model_validate({"estimatedHours": 0.5})
    with pytest.raises(ValidationError):
        ClientTaskUpdate.model_validate({"estimatedHours": 1.25})


def test_update_title_only():
    update = ClientTaskUpdate.model_validate({"title": "New title"})
    assert update.model_dump(exclude_unset=True) == {"title": "New title"}


def test_update_strips_owner_and_completion_fields():
    update = ClientTaskUpdate.model_validate({
        "userId": "someone-else", "isCompleted": True,
        "completedAt": "2026-01-01T00:00:00Z", "xpReward": 10,
    })
    assert update.model_dump(exclude_unset=True) == {}
    for name in ("user_id", "is_completed", "completed_at", "xp_reward", "eu_reward"):
        assert name not in ClientTaskUpdate.model_fields


def test_update_reports_all_bad_fields():
    with pytest.raises(ValidationFailure) as exc_info:
        validate_payload(ClientTaskUpdate, {
            "estimatedHours": 30, "actualHours": 0, "domain": "gaming",
        })
    assert exc_info.value.fields == {"estimatedHours", "actualHours", "domain"}


# --- ClientTaskUpdate.to_update -----------------------------------------------

def test_to_update_converts_only_sent_fields():
    update = ClientTaskUpdate.model_validate({
        "actualHours": 1.5, "dueDate": "2026-11-01T09:30:00Z",
    }).to_update()
    assert isinstance(update, TaskUpdate)
    assert update.changes() == {
        "actual_hours": Decimal("1.5"),
        "due_date": datetime(2026, 11, 1, 9, 30, tzinfo=timezone.utc),
    }


def test_to_update_clears_due_date_and_actual_hours():
    update = ClientTaskUpdate.model_validate({
        "dueDate": "", "actualHours": None,
    }).to_update()
    assert update.changes() == {"due_date": None, "actual_hours": None}


def test_to_update_rejects_unparseable_due_date():
    with pytest.raises(ValidationFailure):
        ClientTaskUpdate.model_validate({"dueDate": "soon"}).to_update()
