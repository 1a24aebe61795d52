"""
sitescribe_core package: document indexer, command interpreter and action executor

Usage:
    from sitescribe_core import process

    outcome = process("./site", "change heading to Welcome", use_llm=False)
"""
from .config import Config, config
from .actions import ACTION_TYPES, Action, action_from_dict, actions_from_list
from .executor import ActionExecutor, apply_actions
from .indexer import index_site
from .interpreter import interpret
from .llm_config import LLMConfig
from .llm_factory import setup_llm, create_llm_client
from .models import ActionResult, SiteIndex
from .pipeline import process, process_command

__all__ = [
    # Core
    "Config",
    "config",
    "process",
    "process_command",
    # Pipeline stages
    "index_site",
    "interpret",
    "ActionExecutor",
    "apply_actions",
    # Data model
    "ACTION_TYPES",
    "Action",
    "ActionResult",
    "SiteIndex",
    "action_from_dict",
    "actions_from_list",
    # LLM
    "LLMConfig",
    "setup_llm",
    "create_llm_client",
]
