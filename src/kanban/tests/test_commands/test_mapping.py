from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from kanban.mapping import project as project_mapper
from kanban.mapping.common import as_utc, replace_record
from kanban.models import Project, ProjectStatus, Secretariat
from kanban.schemas.project import ProjectRequest


def test_as_utc_treats_naive_as_utc():
    naive = datetime(2025, 1, 1, 12, 0)

    assert as_utc(naive) == datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)
    assert as_utc(None) is None


def test_as_utc_converts_offsets():
    plus_three = datetime(2025, 1, 1, 15, 0, tzinfo=timezone(timedelta(hours=3)))

    assert as_utc(plus_three).hour == 12
    assert as_utc(plus_three).tzinfo == timezone.utc


def test_replace_record_copies_columns_and_applies_changes():
    original = Secretariat(id=7, uuid=uuid4(), name="Old", description="kept")

    copy = replace_record(original, name="New")

    assert copy is not original
    assert copy.id == 7
    assert copy.uuid == original.uuid
    assert copy.name == "New"
    assert copy.description == "kept"


def test_replace_record_rejects_unknown_columns():
    with pytest.raises(AttributeError):
        replace_record(Secretariat(name="x"), budget=10)


def test_project_request_accepts_camel_case_and_maps_to_input():
    secretariat_uuid = uuid4()
    request = ProjectRequest.model_validate({
        "name": "  Portal  ",
        "status": "TODO",
        "expectedStart": "2025-01-01T03:00:00+03:00",
        "expectedEnd": "2025-02-01T00:00:00",
        "secretariatId": str(secretariat_uuid),
    })

    data = project_mapper.to_create_input(request)

    assert data.name == "Portal"
    assert data.expected_start == datetime(2025, 1, 1, tzinfo=timezone.utc)
    assert data.expected_end.tzinfo == timezone.utc
    assert data.secretariat_uuid == secretariat_uuid
    assert data.days_late is None


def test_status_replacement_only_changes_status():
    now = datetime(2025, 5, 1, tzinfo=timezone.utc)
    existing = Project(
        id=1, uuid=uuid4(), name="P", status="TODO",
        expected_start=now, expected_end=now, days_late=2,
    )

    replaced = project_mapper.status_replacement_record(existing, ProjectStatus.DONE, now)

    assert replaced.status == "DONE"
    assert replaced.updated_at == now
    assert replaced.days_late == 2
    assert replaced.name == "P"
