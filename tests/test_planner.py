"""
Tests for the LLM planner (tier 1).
"""

import asyncio
import json
from unittest.mock import AsyncMock, MagicMock

from sitescribe_core.actions import ChangeText, ShowHelp
from sitescribe_core.models import ElementDescriptor, HtmlRecord, SiteIndex, TextRecord
from sitescribe_core.planner import SYSTEM_PROMPT, build_user_prompt, parse_plan, plan_actions

PLAN = [{"action": "changeText", "file": "a.html", "selector": "h1", "oldText": "*", "newText": "Hi"}]


def make_index():
    html = HtmlRecord(file="a.html", items=[
        ElementDescriptor(tag="h1", text="Hello", selector="h1", file="a.html"),
        ElementDescriptor(tag="p", text="Body", selector="p", file="a.html"),
    ])
    text = TextRecord(file="b.md", lines=["# Notes", "more"])
    return SiteIndex(root_dir=".", files=["a.html", "b.md"], records=[html, text])


def make_llm(text=None, error=None):
    llm = MagicMock()
    llm.ainvoke = AsyncMock(return_value={"text": text}, side_effect=error)
    return llm


class TestPrompt:
    def test_summary_lines(self):
        prompt = build_user_prompt(make_index(), "change heading to Hi", max_documents=30, max_headings=3)

        assert prompt.startswith("User command: change heading to Hi\n")
        assert '- HTML a.html: headings=["Hello"]' in prompt
        assert '- TEXT b.md: firstLine="# Notes"' in prompt

    def test_document_limit(self):
        records = [TextRecord(file=f"{i}.md", lines=[str(i)]) for i in range(40)]
        prompt = build_user_prompt(SiteIndex(root_dir=".", records=records), "x", max_documents=30, max_headings=3)

        assert sum(1 for line in prompt.splitlines() if line.startswith("- TEXT")) == 30

    def test_empty_site(self):
        prompt = build_user_prompt(SiteIndex(root_dir="."), "x", max_documents=30, max_headings=3)
        assert "(no documents)" in prompt

    def test_system_prompt_describes_schema(self):
        for field_name in ["oldText", "newText", "parentSelector", "htmlBlock", "templateType", "animationType"]:
            assert field_name in SYSTEM_PROMPT


class TestParsePlan:
    def test_bare_array(self):
        assert parse_plan(json.dumps(PLAN)) == [ChangeText(file="a.html", selector="h1", new_text="Hi")]

    def test_code_fences(self):
        text = "```json\n" + json.dumps(PLAN) + "\n```"
        assert len(parse_plan(text)) == 1

    def test_actions_wrapper(self):
        assert parse_plan(json.dumps({"actions": [{"action": "showHelp"}]})) == [ShowHelp()]

    def test_invalid_element_empties_plan(self):
        assert parse_plan(json.dumps(PLAN + [{"action": "explode"}])) == []
        assert parse_plan(json.dumps([{"action": "changeText", "file": "a.html"}])) == []

    def test_non_json_and_wrong_shapes(self):
        assert parse_plan("Sure! Here is what I would do.") == []
        assert parse_plan("") == []
        assert parse_plan(json.dumps({"result": []})) == []
        assert parse_plan("42") == []
        assert parse_plan("[]") == []


class TestPlanActions:
    def test_uses_system_prompt(self):
        llm = make_llm(json.dumps(PLAN))

        actions = asyncio.run(plan_actions(llm, make_index(), "change heading to Hi"))

        assert len(actions) == 1
        llm.ainvoke.assert_awaited_once()
        assert llm.ainvoke.await_args.kwargs["system"] == SYSTEM_PROMPT
        assert "change heading to Hi" in llm.ainvoke.await_args.args[0]

    def test_llm_failure_gives_empty_plan(self):
        llm = make_llm(error=RuntimeError("API error 500: boom"))
        assert asyncio.run(plan_actions(llm, make_index(), "x")) == []

    def test_plain_string_response(self):
        llm = MagicMock()
        llm.ainvoke = AsyncMock(return_value=json.dumps(PLAN))
        assert len(asyncio.run(plan_actions(llm, make_index(), "x"))) == 1

    def test_run_logger_receives_prompt_and_response(self):
        llm = make_llm("[]")
        run_logger = MagicMock()

        asyncio.run(plan_actions(llm, make_index(), "x", run_logger=run_logger))

        run_logger.log_code.assert_any_call("json", "[]")
