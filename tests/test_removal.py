import asyncio
import io
from typing import List

import pytest
from rich.console import Console

from conftest import E3, GROUP_A

from license_guardian.core.removal import LicenseRemovalDriver, auto_confirm
from license_guardian.integrations.confirmation import ConsoleConfirmation, WhatIfConfirmation
from license_guardian.integrations.directory import MockDirectoryService
from license_guardian.models.license import AssignmentPath, LicenseReportRow, RemovalStatus


class RecordingSleep:
    def __init__(self, events: List):
        self.events = events

    async def __call__(self, seconds):
        self.events.append(("sleep", seconds))


class RecordingDirectory(MockDirectoryService):
    def __init__(self, events: List, **kwargs):
        super().__init__(**kwargs)
        self.events = events
        self.queries = 0

    async def list_subscribed_skus(self):
        self.queries += 1
        return await super().list_subscribed_skus()

    async def remove_license(self, user_id, sku_id):
        self.events.append(("remove", user_id))
        await super().remove_license(user_id, sku_id)


@pytest.fixture
def events():
    return []


@pytest.fixture
def recording_directory(events, skus, users):
    return RecordingDirectory(events, skus=skus, users=users)


def _driver(directory, events, delay=3):
    return LicenseRemovalDriver(directory, sleep=RecordingSleep(events), throttle_delay_seconds=delay)


def test_removes_direct_assignments_with_delay_before_each_call(recording_directory, events):
    driver = _driver(recording_directory, events)

    outcomes = asyncio.run(driver.remove_licenses(AssignmentPath.DIRECTLY, sku="ENTERPRISEPACK"))

    assert [outcome.status for outcome in outcomes] == [RemovalStatus.REMOVED, RemovalStatus.REMOVED]
    assert events == [("sleep", 3), ("remove", "carl"), ("sleep", 3), ("remove", "zoe")]
    assert recording_directory.remove_calls == [
        {"user_id": "carl", "add_licenses": [], "remove_licenses": [E3]},
        {"user_id": "zoe", "add_licenses": [], "remove_licenses": [E3]},
    ]
    assert E3 not in recording_directory.users["carl"].assigned_licenses


def test_per_call_delay_overrides_default(recording_directory, events):
    driver = _driver(recording_directory, events, delay=5)

    asyncio.run(
        driver.remove_licenses(AssignmentPath.DIRECTLY, sku="ENTERPRISEPACK", throttle_delay_seconds=0)
    )

    assert [event for event in events if event[0] == "sleep"] == [("sleep", 0), ("sleep", 0)]


def test_directly_and_group_keeps_group_assignment(recording_directory, events):
    driver = _driver(recording_directory, events)

    outcomes = asyncio.run(driver.remove_licenses(AssignmentPath.DIRECTLY_AND_GROUP, check_all=True))

    assert [outcome.row.user_id for outcome in outcomes] == ["adam"]
    adam = recording_directory.users["adam"]
    assert E3 in adam.assigned_licenses
    assert [state.assigned_by_group for state in adam.assignment_states if state.sku_id == E3] == [GROUP_A]


@pytest.mark.parametrize("path", [AssignmentPath.FROM_GROUP, "FromGroup", "Sideways"])
def test_rejects_non_removable_path_before_any_call(recording_directory, events, path):
    driver = _driver(recording_directory, events)

    with pytest.raises(ValueError):
        asyncio.run(driver.remove_licenses(path, check_all=True))

    assert recording_directory.queries == 0
    assert recording_directory.remove_calls == []
    assert events == []


def test_remove_rows_refuses_group_only_rows(recording_directory, events, skus, users):
    row = LicenseReportRow(
        user_id="mia",
        display_name="Mia Group",
        user_principal_name="mia@contoso.com",
        account_enabled=True,
        sync_enabled=False,
        sku_id=E3,
        sku_part_number="ENTERPRISEPACK",
        path=AssignmentPath.FROM_GROUP,
    )
    driver = _driver(recording_directory, events)

    with pytest.raises(ValueError):
        asyncio.run(driver.remove_rows([row]))

    assert recording_directory.remove_calls == []


@pytest.mark.parametrize("delay", [-1, 1.5, True, "2"])
def test_rejects_invalid_delay(recording_directory, events, delay):
    with pytest.raises(ValueError):
        _driver(recording_directory, events, delay=delay)


def test_declined_rows_are_skipped_not_failed(recording_directory, events):
    driver = _driver(recording_directory, events)

    outcomes = asyncio.run(
        driver.remove_licenses(
            AssignmentPath.DIRECTLY,
            sku="ENTERPRISEPACK",
            confirm=lambda row: row.user_id == "zoe",
        )
    )

    statuses = {outcome.row.user_id: outcome.status for outcome in outcomes}
    assert statuses == {"carl": RemovalStatus.SKIPPED, "zoe": RemovalStatus.REMOVED}
    assert events == [("sleep", 3), ("remove", "zoe")]


def test_failed_row_does_not_stop_later_rows(recording_directory, events):
    recording_directory.failing_users.add("carl")
    driver = _driver(recording_directory, events)

    outcomes = asyncio.run(driver.remove_licenses(AssignmentPath.DIRECTLY, sku="ENTERPRISEPACK"))

    assert [outcome.status for outcome in outcomes] == [RemovalStatus.FAILED, RemovalStatus.REMOVED]
    assert "Throttled" in outcomes[0].error
    assert [event for event in events if event[0] == "remove"] == [("remove", "carl"), ("remove", "zoe")]


def test_failed_call_is_not_retried(recording_directory, events):
    recording_directory.failing_users.update({"carl", "zoe"})
    driver = _driver(recording_directory, events)

    asyncio.run(driver.remove_licenses(AssignmentPath.DIRECTLY, sku="ENTERPRISEPACK"))

    assert len(recording_directory.remove_calls) == 2


def test_what_if_confirmation_performs_no_mutation(recording_directory, events):
    what_if = WhatIfConfirmation()
    driver = _driver(recording_directory, events)

    outcomes = asyncio.run(
        driver.remove_licenses(AssignmentPath.DIRECTLY, check_all=True, confirm=what_if)
    )

    assert all(outcome.status == RemovalStatus.SKIPPED for outcome in outcomes)
    assert [row.user_id for row in what_if.simulated] == ["carl", "zoe", "adam"]
    assert recording_directory.remove_calls == []
    assert events == []


def test_auto_confirm_accepts_everything():
    assert auto_confirm(None) is True


def test_console_confirmation_all_answer_accepts_remaining(monkeypatch):
    answers = iter(["n", "a"])
    monkeypatch.setattr(
        "license_guardian.integrations.confirmation.Prompt.ask",
        lambda *_args, **_kwargs: next(answers),
    )
    gate = ConsoleConfirmation()
    row = LicenseReportRow(
        user_id="u",
        display_name="U",
        user_principal_name="u@contoso.com",
        account_enabled=True,
        sync_enabled=False,
        sku_id=E3,
        sku_part_number="ENTERPRISEPACK",
        path=AssignmentPath.DIRECTLY,
    )

    assert [gate(row), gate(row), gate(row)] == [False, True, True]


def test_console_confirmation_quit_declines_remaining(monkeypatch):
    answers = iter(["y", "q"])
    monkeypatch.setattr(
        "license_guardian.integrations.confirmation.Prompt.ask",
        lambda *_args, **_kwargs: next(answers),
    )
    gate = ConsoleConfirmation()
    row = LicenseReportRow(
        user_id="u",
        display_name="U",
        user_principal_name="u@contoso.com",
        account_enabled=True,
        sync_enabled=False,
        sku_id=E3,
        sku_part_number="ENTERPRISEPACK",
        path=AssignmentPath.DIRECTLY,
    )

    assert [gate(row), gate(row), gate(row)] == [True, False, False]


def _bracketed_row():
    return LicenseReportRow(
        user_id="weird",
        display_name="Weird [/b] Name",
        user_principal_name="weird@contoso.com",
        account_enabled=True,
        sync_enabled=False,
        sku_id=E3,
        sku_part_number="ENTERPRISEPACK",
        friendly_name="Office 365 E3 [trial]",
        path=AssignmentPath.DIRECTLY,
    )


def test_console_confirmation_prompt_renders_markup_like_names(monkeypatch):
    output = io.StringIO()
    console = Console(file=output, width=200)
    prompts = []

    def fake_ask(prompt, **_kwargs):
        prompts.append(prompt)
        console.print(prompt)
        return "y"

    monkeypatch.setattr("license_guardian.integrations.confirmation.Prompt.ask", fake_ask)

    assert ConsoleConfirmation(console)(_bracketed_row()) is True
    assert "Weird [/b] Name" in output.getvalue()
    assert "Office 365 E3 [trial]" in output.getvalue()


def test_what_if_confirmation_prints_names_verbatim():
    output = io.StringIO()
    gate = WhatIfConfirmation(Console(file=output, width=200))

    assert gate(_bracketed_row()) is False
    assert "Weird [/b] Name" in output.getvalue()
