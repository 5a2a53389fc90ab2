from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest

from ticketdesk.handlers.tickets import TicketHandler, TicketValidationError, validate_create_payload
from ticketdesk.storage.repository import TicketRepository, TicketStoreError


class RecordingRepo:
    """Repositorio falso: registra llamadas o falla a demanda."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.calls = []

    def create(self, title, description):
        self.calls.append(("create", title, description))
        if self.fail:
            raise TicketStoreError("boom")
        raise AssertionError("not expected")

    def list_all(self):
        self.calls.append(("list_all",))
        if self.fail:
            raise TicketStoreError("boom")
        return []


def make_handler(tmp_path: Path) -> TicketHandler:
    repo = TicketRepository(tmp_path / "tickets.json")
    repo.initialize()
    return TicketHandler(repo)


@pytest.mark.parametrize(
    "payload",
    [
        None,
        {},
        {"description": "d"},
        {"title": "t"},
        {"title": None, "description": "d"},
        {"title": "t", "description": None},
        {"title": "", "description": "d"},
        {"title": "t", "description": ""},
        {"title": "", "description": ""},
    ],
)
def test_missing_or_empty_fields_rejected(payload):
    repo = RecordingRepo()
    status, body = TicketHandler(repo).create_ticket(payload)
    assert status == 400
    assert body == {"error": "Title and description are required fields"}
    assert repo.calls == []


def test_validate_rejects_non_strings():
    with pytest.raises(TicketValidationError):
        validate_create_payload({"title": 5, "description": "d"})


def test_create_then_list(tmp_path: Path):
    handler = make_handler(tmp_path)
    status, created = handler.create_ticket({"title": "Fix login bug", "description": "Users can't log in"})
    assert status == 201
    assert set(created) == {"id", "title", "description", "createdAt"}
    status, listed = handler.list_tickets()
    assert status == 200
    assert listed == [created]


def test_list_empty(tmp_path: Path):
    assert make_handler(tmp_path).list_tickets() == (200, [])


def test_store_fault_maps_to_503():
    repo = RecordingRepo(fail=True)
    handler = TicketHandler(repo)
    assert handler.create_ticket({"title": "t", "description": "d"}) == (503, {"error": "Ticket store unavailable"})
    assert handler.list_tickets() == (503, {"error": "Ticket store unavailable"})


def test_health_does_not_touch_store():
    repo = RecordingRepo(fail=True)
    handler = TicketHandler(repo)
    assert handler.health() == (200, {"status": "OK"})
    assert repo.calls == []


def test_concurrent_create_requests(tmp_path: Path):
    handler = make_handler(tmp_path)
    titles = [f"ticket {i}" for i in range(50)]
    with ThreadPoolExecutor(max_workers=10) as pool:
        results = list(pool.map(lambda t: handler.create_ticket({"title": t, "description": "x"}), titles))
    assert all(status == 201 for status, _ in results)
    status, listed = handler.list_tickets()
    assert len(listed) == 50
    assert sorted(t["title"] for t in listed) == sorted(titles)
