"""Two-tier command interpretation: LLM plan first, rule cascade second"""

import logging
from typing import Any, List

from .actions import Action
from .matchers import CommandContext, run_cascade
from .models import SiteIndex
from .planner import plan_actions

logger = logging.getLogger(__name__)

TIER_LLM = "llm"
TIER_RULES = "rules"


async def interpret(site_index: SiteIndex, command: str, llm: Any = None, run_logger: Any = None) -> List[Action]:
    if llm is not None:
        actions = await plan_actions(llm, site_index, command, run_logger=run_logger)
        if actions:
            logger.info(f"LLM planned {len(actions)} action(s)")
            _log_tier(run_logger, TIER_LLM, actions)
            return actions
        logger.info("LLM plan empty, using rule-based matchers")

    ctx = CommandContext(command, target_file=site_index.primary_document())
    actions = run_cascade(ctx)
    logger.info(f"Rule-based matchers produced {len(actions)} action(s)")
    _log_tier(run_logger, TIER_RULES, actions)
    return actions


def _log_tier(run_logger: Any, tier: str, actions: List[Action]) -> None:
    if not run_logger:
        return
    run_logger.log_kv("tier", tier)
    run_logger.log_json([a.to_dict() for a in actions], title="Actions")
