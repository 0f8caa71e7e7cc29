"""Tests for notification payloads and the Notification envelope."""
import pytest

from eventprogress.core.exceptions import NotificationError
from eventprogress.core.types import (
    JobEndInfo,
    JobStartInfo,
    Notification,
    NotificationKind,
    StageInfo,
    TaskInfo,
)


def test_task_display_name():
    info = TaskInfo(task_id=1, locality="NODE_LOCAL", host="h1", attempt=0)
    assert info.display_name == "ID1:NODE_LOCAL:h1(attempt 0)"


def test_job_description_fallback():
    info = JobStartInfo(3, {"other": "x"})
    assert info.description("spark.job.description", "<unknown>") == "<unknown>"
    assert JobStartInfo(3, {"k": ""}).description("k", "<unknown>") == ""


@pytest.mark.parametrize("notification, kind, payload_type", [
    (Notification.event(), NotificationKind.EVENT, type(None)),
    (Notification.task_start(1, "ANY", "h"), NotificationKind.TASK_START, TaskInfo),
    (Notification.task_end(1, "ANY", "h"), NotificationKind.TASK_END, TaskInfo),
    (Notification.stage_submitted(1, "s"), NotificationKind.STAGE_SUBMITTED, StageInfo),
    (Notification.stage_completed(1, "s"), NotificationKind.STAGE_COMPLETED, StageInfo),
    (Notification.job_start(1), NotificationKind.JOB_START, JobStartInfo),
    (Notification.job_end(1), NotificationKind.JOB_END, JobEndInfo),
])
def test_factories(notification, kind, payload_type):
    assert notification.kind is kind
    assert isinstance(notification.payload, payload_type)


def test_kind_accepts_string_value():
    notification = Notification("job_end", JobEndInfo(4))
    assert notification.kind is NotificationKind.JOB_END


def test_unknown_kind_rejected():
    with pytest.raises(NotificationError, match="Unknown notification kind"):
        Notification("executor_added")


@pytest.mark.parametrize("kind, payload", [
    (NotificationKind.EVENT, JobEndInfo(1)),
    (NotificationKind.TASK_START, None),
    (NotificationKind.JOB_END, JobStartInfo(1)),
    (NotificationKind.STAGE_COMPLETED, TaskInfo(1, "ANY", "h")),
])
def test_mismatched_payload_rejected(kind, payload):
    with pytest.raises(NotificationError):
        Notification(kind, payload)


def test_job_start_properties_are_copied():
    props = {"spark.job.description": "ETL"}
    notification = Notification.job_start(7, props)
    props["spark.job.description"] = "changed"
    assert notification.payload.properties == {"spark.job.description": "ETL"}
