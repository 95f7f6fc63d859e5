"""
Name: FormController Tests

Responsibilities:
  - Validation gate before the handler runs
  - Single-flight submission
  - reset() semantics
"""

import asyncio

import pytest

from folder_dialog.application.form_controller import FormController

pytestmark = pytest.mark.unit


class _Handler:
    def __init__(self, *, hold: bool = False, error: Exception | None = None):
        self.calls = []
        self.error = error
        self.release = asyncio.Event()
        if not hold:
            self.release.set()

    async def __call__(self, data):
        self.calls.append(data)
        await self.release.wait()
        if self.error is not None:
            raise self.error


@pytest.mark.asyncio
async def test_invalid_submit_sets_errors_and_skips_handler():
    form = FormController()
    handler = _Handler()

    ran = await form.submit(handler)

    assert ran is False
    assert handler.calls == []
    assert form.field_errors == {"name": "Folder name is required"}
    assert form.is_submitting is False


@pytest.mark.asyncio
async def test_valid_submit_runs_handler_and_clears_flag():
    form = FormController()
    form.set_field("name", "Contracts")
    handler = _Handler()

    ran = await form.submit(handler)

    assert ran is True
    assert [d.name for d in handler.calls] == ["Contracts"]
    assert form.is_submitting is False


@pytest.mark.asyncio
async def test_is_submitting_only_while_handler_in_flight():
    form = FormController()
    form.set_field("name", "Contracts")
    handler = _Handler(hold=True)

    task = asyncio.create_task(form.submit(handler))
    await asyncio.sleep(0)
    assert form.is_submitting is True

    handler.release.set()
    await task
    assert form.is_submitting is False


@pytest.mark.asyncio
async def test_second_submit_while_in_flight_is_noop():
    form = FormController()
    form.set_field("name", "Contracts")
    handler = _Handler(hold=True)

    first = asyncio.create_task(form.submit(handler))
    await asyncio.sleep(0)
    second = await form.submit(handler)

    handler.release.set()
    assert await first is True
    assert second is False
    assert len(handler.calls) == 1


@pytest.mark.asyncio
async def test_handler_exception_propagates_and_clears_flag():
    form = FormController()
    form.set_field("name", "Contracts")
    handler = _Handler(error=RuntimeError("boom"))

    with pytest.raises(RuntimeError):
        await form.submit(handler)

    assert form.is_submitting is False


@pytest.mark.asyncio
async def test_errors_cleared_on_next_attempt():
    form = FormController()
    await form.submit(_Handler())
    assert form.field_errors

    form.set_field("name", "Contracts")
    await form.submit(_Handler())
    assert form.field_errors == {}


@pytest.mark.asyncio
async def test_reset_clears_value_and_errors():
    form = FormController()
    await form.submit(_Handler())
    form.set_field("name", "draft")

    form.reset()

    snapshot = form.snapshot()
    assert snapshot.name == ""
    assert snapshot.field_errors == {}
    assert snapshot.is_submitting is False


def test_set_field_does_not_validate_eagerly():
    form = FormController()
    form.set_field("name", "")
    assert form.field_errors == {}


def test_set_unknown_field_raises():
    form = FormController()
    with pytest.raises(KeyError):
        form.set_field("color", "red")
