import json
import sys
import tempfile
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from ticketdesk.app.config import Settings  # noqa: E402
from ticketdesk.app.server import create_app  # noqa: E402

DOCS_FILE = ROOT / "docs" / "openapi.json"


def build_openapi() -> dict:
    # data_dir temporal para no crear data/ al exportar
    with tempfile.TemporaryDirectory() as tmp:
        app = create_app(Settings(data_dir=tmp))
        return app.openapi()


if __name__ == "__main__":
    DOCS_FILE.parent.mkdir(parents=True, exist_ok=True)
    doc = build_openapi()
    DOCS_FILE.write_text(json.dumps(doc, ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"Actualizada {DOCS_FILE}")
