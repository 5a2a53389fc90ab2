import sys
import tempfile
from pathlib import Path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from ticketdesk.handlers.tickets import TicketHandler  # noqa: E402
from ticketdesk.storage.repository import TicketRepository  # noqa: E402

samples = [
    {"title": "Fix login bug", "description": "Users can't log in with special chars"},
    {"title": "Slow dashboard", "description": "Dashboard takes 10s to load"},
    {"title": "", "description": "sin título"},
    {"description": "falta el título"},
]

with tempfile.TemporaryDirectory() as tmp:
    repo = TicketRepository(Path(tmp) / "tickets.json")
    repo.initialize()
    handler = TicketHandler(repo)
    for s in samples:
        status, body = handler.create_ticket(s)
        print(f">> {s!r}\n{status} {body}\n")
    status, body = handler.list_tickets()
    print(f"GET /tickets -> {status}, {len(body)} tickets")
