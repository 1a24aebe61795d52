"""
Tests for two-tier command interpretation.
"""

import asyncio
import json
from unittest.mock import AsyncMock, MagicMock

from sitescribe_core.actions import ChangeText, ShowHelp
from sitescribe_core.interpreter import interpret
from sitescribe_core.models import ElementDescriptor, HtmlRecord, SiteIndex, TextRecord


def make_index():
    html = HtmlRecord(file="site/page.html", items=[
        ElementDescriptor(tag="h1", text="Old Title", selector="h1", file="site/page.html"),
    ])
    return SiteIndex(root_dir="site", files=["site/page.html"], records=[html])


def make_llm(text):
    llm = MagicMock()
    llm.ainvoke = AsyncMock(return_value={"text": text})
    return llm


def test_rules_without_llm():
    actions = asyncio.run(interpret(make_index(), "change heading to New Title"))
    assert actions == [ChangeText(file="site/page.html", selector="h1", new_text="New Title")]


def test_llm_plan_wins():
    llm = make_llm(json.dumps([{"action": "showHelp"}]))

    actions = asyncio.run(interpret(make_index(), "change heading to New Title", llm=llm))

    assert actions == [ShowHelp()]


def test_empty_llm_plan_falls_back_to_rules():
    llm = make_llm("[]")

    actions = asyncio.run(interpret(make_index(), "change heading to New Title", llm=llm))

    assert actions == [ChangeText(file="site/page.html", selector="h1", new_text="New Title")]
    llm.ainvoke.assert_awaited_once()


def test_malformed_llm_plan_falls_back_to_rules():
    llm = make_llm("I cannot help with that")
    actions = asyncio.run(interpret(make_index(), "change heading to New Title", llm=llm))
    assert len(actions) == 1


def test_failing_llm_falls_back_to_rules():
    llm = MagicMock()
    llm.ainvoke = AsyncMock(side_effect=TimeoutError("timeout"))
    actions = asyncio.run(interpret(make_index(), "change heading to New Title", llm=llm))
    assert len(actions) == 1


def test_document_commands_need_markup():
    index = SiteIndex(root_dir="site", files=["site/a.md"], records=[TextRecord(file="site/a.md", lines=["x"])])
    assert asyncio.run(interpret(index, "change heading to New Title")) == []


def test_no_match():
    assert asyncio.run(interpret(make_index(), "xyzzy plugh")) == []


def test_run_logger_records_tier():
    run_logger = MagicMock()
    asyncio.run(interpret(make_index(), "change heading to X", run_logger=run_logger))
    run_logger.log_kv.assert_any_call("tier", "rules")
