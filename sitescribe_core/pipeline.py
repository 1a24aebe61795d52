#!/usr/bin/env python3
"""
Edit pipeline: index -> interpret -> execute

The site is re-indexed for every command; nothing is cached between calls.
"""

import asyncio
import logging
import time
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .config import config
from .error_handler import create_error_response, format_error_for_logging
from .executor import ActionExecutor
from .indexer import index_site
from .interpreter import interpret
from .llm_factory import setup_llm
from .models import MESSAGE_NO_ACTIONS, MESSAGE_SUCCESS, SiteIndex

logger = logging.getLogger(__name__)


def _resolve_llm(llm: Any, use_llm: Optional[bool]) -> Any:
    if llm is not None:
        return llm
    if use_llm is None:
        use_llm = config.llm_enabled
    if not use_llm:
        return None
    try:
        return setup_llm()
    except Exception as e:
        logger.warning(f"LLM unavailable, using rule-based matchers only: {e}")
        return None


def _log_index(run_logger: Any, site_index: SiteIndex) -> None:
    if not run_logger:
        return
    run_logger.log_heading("Index")
    run_logger.log_kv("Root", site_index.root_dir)
    run_logger.log_kv("Documents", str(len(site_index.records)))
    rows = [[r.type, r.file] for r in site_index.records]
    run_logger.log_table(["Type", "File"], rows)


async def process_command(
    path: Union[str, Path],
    command: str,
    llm: Any = None,
    use_llm: Optional[bool] = None,
    run_logger: Any = None,
    include_details: bool = False,
) -> Dict[str, Any]:
    """
    Process one natural-language command against a file or folder.

    Returns:
        {"message": "Success", "results": [...]} when actions were applied,
        {"message": "No actions generated", "results": []} when nothing matched,
        {"message": "Error processing command", "error": "..."} on a fatal error,
        with a "details" explanation when include_details is set
    """
    t0 = time.time()
    try:
        site_index = index_site(path)
    except Exception as e:
        logger.error(format_error_for_logging(e, context="index"))
        if run_logger:
            run_logger.log_error(str(e))
            run_logger.finalize(success=False, duration_ms=int((time.time() - t0) * 1000), error=str(e))
        return create_error_response(e, context="index", include_details=include_details)

    logger.info(f"Indexed {len(site_index.records)} document(s) under {site_index.root_dir}")
    _log_index(run_logger, site_index)

    if run_logger:
        run_logger.log_heading("Interpretation")
    actions = await interpret(site_index, command, llm=_resolve_llm(llm, use_llm), run_logger=run_logger)

    if not actions:
        logger.info(f"No actions generated for: {command}")
        if run_logger:
            run_logger.log_warning(MESSAGE_NO_ACTIONS)
            run_logger.finalize(success=True, duration_ms=int((time.time() - t0) * 1000))
        return {"message": MESSAGE_NO_ACTIONS, "results": []}

    results = [r.to_dict() for r in ActionExecutor().apply(actions)]
    if run_logger:
        run_logger.log_heading("Execution")
        run_logger.log_action_results(results)
        run_logger.finalize(success=True, duration_ms=int((time.time() - t0) * 1000))
    return {"message": MESSAGE_SUCCESS, "results": results}


def process(path: Union[str, Path], command: str, **kwargs: Any) -> Dict[str, Any]:
    """Synchronous wrapper around process_command"""
    return asyncio.run(process_command(path, command, **kwargs))
