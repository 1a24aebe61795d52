#!/usr/bin/env python3
"""
LLM planner (tier 1)

Asks a language model to translate a command into the action wire schema.
The answer is best-effort: any failure or any element that does not decode to
a valid action yields an empty plan, and the interpreter falls back to the
rule-based matchers.
"""

import json
import logging
import time
from typing import Any, List, Optional

from .actions import Action, ActionError, actions_from_list
from .config import config
from .models import HtmlRecord, SiteIndex, TextRecord

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are an assistant that edits website files. Translate the user's command into a JSON array "
    "of actions. Respond with the JSON array only, no prose.\n\n"
    "Each action is an object with an \"action\" field naming its kind and these camelCase fields:\n"
    "- changeText: file, selector, oldText (\"*\" replaces the whole text), newText\n"
    "- addBlock: file, parentSelector, htmlBlock\n"
    "- updateImage: file, selector, newSrc\n"
    "- changeStyle: file, selector, property, value\n"
    "- modifyStyle: file, selector, style (e.g. \"color: red; margin: 0\")\n"
    "- modifyAttribute / addAttribute: file, selector, attribute, value\n"
    "- removeAttribute: file, selector, attribute\n"
    "- backup: file, timestamp (optional)\n"
    "- applyTemplate: file, templateType (modern|professional|minimal|colorful)\n"
    "- addAnimation: file, selector, animationType (fade|slide|bounce|rotate)\n"
    "- changeTheme: theme; changeFontSize: size; changeLanguage: language\n"
    "- setAutoSave / setNotifications / setFullscreen: enabled (true|false)\n"
    "- showShortcuts, showFileHistory, exportSettings, importSettings, showHelp, showAbout, "
    "resetSettings: no fields\n\n"
    "Use file paths exactly as listed in the site summary and CSS selectors that exist in the file. "
    "Return [] if the command cannot be mapped."
)


def summarize_record(record: Any, max_headings: int) -> str:
    if isinstance(record, HtmlRecord):
        return f"HTML {record.file}: headings={json.dumps(record.headings(max_headings), ensure_ascii=False)}"
    if isinstance(record, TextRecord):
        return f"TEXT {record.file}: firstLine={json.dumps(record.first_line, ensure_ascii=False)}"
    return f"{getattr(record, 'type', '?').upper()} {getattr(record, 'file', '?')}"


def build_user_prompt(
    site_index: SiteIndex,
    command: str,
    max_documents: Optional[int] = None,
    max_headings: Optional[int] = None,
) -> str:
    """Bounded prompt: the command plus one line per indexed document"""
    max_documents = max_documents if max_documents is not None else config.summary_documents
    max_headings = max_headings if max_headings is not None else config.summary_headings
    lines = [summarize_record(r, max_headings) for r in site_index.records[:max_documents]]
    summary = "\n".join(f"- {line}" for line in lines) or "- (no documents)"
    return f"User command: {command}\nSite summary:\n{summary}\n\nActions (JSON array only):"


def _strip_fences(s: str) -> str:
    s = s.strip()
    if s.startswith("```"):
        s = s.split("\n", 1)[1] if "\n" in s else ""
        if s.rstrip().endswith("```"):
            s = s.rsplit("```", 1)[0]
    return s.strip()


def parse_plan(text: str) -> List[Action]:
    """
    Decode a model answer into actions.

    Accepts a bare JSON array or an object with an "actions" array. Anything
    else, or any element that fails validation, gives [].
    """
    raw = _strip_fences(text or "")
    if not raw:
        return []
    try:
        data = json.loads(raw)
    except ValueError as e:
        logger.warning(f"Planner returned non-JSON output: {e}")
        return []
    if isinstance(data, dict):
        data = data.get("actions")
    if not isinstance(data, list):
        logger.warning("Planner output is not an action array")
        return []
    try:
        return actions_from_list(data)
    except ActionError as e:
        logger.warning(f"Planner output rejected: {e}")
        return []


async def plan_actions(llm: Any, site_index: SiteIndex, command: str, run_logger: Any = None) -> List[Action]:
    prompt = build_user_prompt(site_index, command)
    if run_logger:
        run_logger.log_text("LLM prompt:")
        run_logger.log_code("text", prompt)
    try:
        t0 = time.time()
        response = await llm.ainvoke(prompt, system=SYSTEM_PROMPT)
        elapsed_ms = int((time.time() - t0) * 1000)
        text = response["text"] if isinstance(response, dict) and "text" in response else str(response)
    except Exception as e:
        logger.warning(f"LLM planning failed, falling back to rules: {e}")
        if run_logger:
            run_logger.log_text("LLM error, falling back to rules:")
            run_logger.log_code("text", str(e))
        return []
    logger.debug(f"LLM answered in {elapsed_ms} ms")
    if run_logger:
        run_logger.log_kv("llm_ms", str(elapsed_ms))
        run_logger.log_text("LLM raw response:")
        run_logger.log_code("json", text)
    return parse_plan(text)
