import json
import os
import runpy


def test_export_openapi_runs(monkeypatch):
    """Ejecuta el script de exportación de OpenAPI y verifica el documento generado."""
    repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
    monkeypatch.chdir(repo_root)

    runpy.run_path("scripts/export_openapi.py", run_name="__main__")

    docs_file = os.path.join(repo_root, "docs", "openapi.json")
    assert os.path.exists(docs_file)
    with open(docs_file, encoding="utf-8") as fh:
        doc = json.load(fh)
    assert set(doc["paths"]) >= {"/tickets", "/health"}


def test_smoke_tickets_runs(capsys):
    repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
    runpy.run_path(os.path.join(repo_root, "scripts", "smoke_tickets.py"), run_name="__main__")
    out = capsys.readouterr().out
    assert "GET /tickets -> 200, 2 tickets" in out
