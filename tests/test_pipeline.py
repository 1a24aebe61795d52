"""
End-to-end tests for the index -> interpret -> execute pipeline.
"""

import asyncio
import json
from unittest.mock import AsyncMock, MagicMock

import pytest
from bs4 import BeautifulSoup

from sitescribe_core import pipeline
from sitescribe_core.pipeline import process, process_command
from sitescribe_logs import RunLogger


@pytest.fixture
def page(tmp_path):
    path = tmp_path / "page.html"
    path.write_text("<html><body><h1>Old Title</h1></body></html>", encoding="utf-8")
    return path


def load(path):
    return BeautifulSoup(path.read_text(encoding="utf-8"), "html.parser")


def test_change_heading(page):
    outcome = process(str(page), "change heading to New Title", use_llm=False)

    assert outcome["message"] == "Success"
    [result] = outcome["results"]
    assert result["action"] == "changeText"
    assert result["selector"] == "h1"
    assert result["status"] == "modified"
    assert load(page).h1.get_text() == "New Title"


def test_add_contact_form(page):
    outcome = process(str(page.parent), "add contact form", use_llm=False)

    [result] = outcome["results"]
    assert result["action"] == "addBlock"
    assert result["selector"] == "body"
    names = {el["name"] for el in load(page).select("form input, form textarea")}
    assert {"name", "email", "subject", "message"} <= names


def test_unrecognized_command(page):
    before = page.read_text(encoding="utf-8")

    outcome = process(str(page), "xyzzy plugh", use_llm=False)

    assert outcome == {"message": "No actions generated", "results": []}
    assert page.read_text(encoding="utf-8") == before


def test_setting_command_without_documents(tmp_path):
    (tmp_path / "notes.md").write_text("# Notes", encoding="utf-8")

    outcome = process(str(tmp_path), "change theme to dark", use_llm=False)

    assert outcome["results"] == [{
        "action": "changeTheme", "file": None, "selector": None,
        "status": "modified", "message": "Theme changed to dark", "theme": "dark",
    }]


def test_missing_path(tmp_path):
    outcome = process(str(tmp_path / "missing"), "help", use_llm=False)

    assert outcome["message"] == "Error processing command"
    assert "missing" in outcome["error"]


def test_injected_llm_plan(page):
    plan = [{"action": "changeText", "file": str(page), "selector": "h1", "oldText": "Old", "newText": "Fresh"}]
    llm = MagicMock()
    llm.ainvoke = AsyncMock(return_value={"text": json.dumps(plan)})

    outcome = asyncio.run(process_command(str(page), "refresh the title", llm=llm))

    assert outcome["results"][0]["status"] == "modified"
    assert load(page).h1.get_text() == "Fresh Title"


def test_unavailable_llm_falls_back_to_rules(page, monkeypatch):
    monkeypatch.setattr(pipeline, "setup_llm", MagicMock(side_effect=ValueError("API token required")))

    outcome = process(str(page), "change heading to New Title", use_llm=True)

    assert outcome["message"] == "Success"
    pipeline.setup_llm.assert_called_once()


def test_run_log_written(page, tmp_path):
    run_logger = RunLogger("change heading to X", str(page), log_dir=str(tmp_path / "logs"), session_id="e2e")

    process(str(page), "change heading to X", use_llm=False, run_logger=run_logger)

    with open(run_logger.log_path, encoding="utf-8") as f:
        content = f.read()
    assert "SiteScribe Run Log" in content
    assert "## Index" in content
    assert "### Results" in content
    assert "✅ SUCCESS" in content


def test_run_log_for_failed_index(tmp_path):
    run_logger = RunLogger("help", None, log_dir=str(tmp_path / "logs"), session_id="fail")

    process(str(tmp_path / "missing"), "help", use_llm=False, run_logger=run_logger)

    with open(run_logger.log_path, encoding="utf-8") as f:
        assert "❌ FAILED" in f.read()


class TestBareDocument:
    """A file holding only "<h1>Old Title</h1>", without html/head/body"""

    @pytest.fixture
    def bare(self, tmp_path):
        path = tmp_path / "page.html"
        path.write_text("<h1>Old Title</h1>", encoding="utf-8")
        return path

    def test_change_heading(self, bare):
        outcome = process(str(bare), "change heading to New Title", use_llm=False)

        assert [r["status"] for r in outcome["results"]] == ["modified"]
        assert load(bare).h1.get_text() == "New Title"

    def test_add_contact_form(self, bare):
        outcome = process(str(bare), "add contact form", use_llm=False)

        assert [r["status"] for r in outcome["results"]] == ["modified"]
        soup = load(bare)
        assert soup.body.form is not None
        assert soup.body.h1.get_text() == "Old Title"

    def test_background_color(self, bare):
        outcome = process(str(bare), "set background color to blue", use_llm=False)

        assert [r["status"] for r in outcome["results"]] == ["modified"]
        assert load(bare).body["style"] == "background-color: blue"

    def test_color_input_with_value(self, bare):
        outcome = process(str(bare), "add a color input and set its value to #ff0000", use_llm=False)

        assert [(r["action"], r["status"]) for r in outcome["results"]] == [("addBlock", "modified")]
        soup = load(bare)
        assert soup.body.get("style") is None
        assert soup.select_one('input[type="color"]')["value"] == "#ff0000"
