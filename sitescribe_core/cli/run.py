#!/usr/bin/env python3
"""
SiteScribe CLI - apply a natural-language command to a site folder

Usage:
    sitescribe ./site "change heading to Welcome"
    sitescribe ./site/index.html "add a contact form" --no-llm
    sitescribe ./site "set background to #fafafa" --provider ollama/qwen2.5:7b --run-log
"""

import argparse
import asyncio
import json
import logging
import shlex
import sys
from typing import Any, List, Optional

from ..config import config
from ..llm_config import LLMConfig
from ..llm_factory import setup_llm
from ..models import MESSAGE_ERROR
from ..pipeline import process_command

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sitescribe",
        description="SiteScribe - edit HTML documents with natural-language commands",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("path", help="Site folder or single document")
    parser.add_argument("command", help='Command, e.g. "change heading to Welcome"')
    parser.add_argument("--no-llm", action="store_true", help="Use the rule-based matchers only")
    parser.add_argument("--provider", help="LLM provider/model, e.g. openai/gpt-4o-mini or ollama/qwen2.5:7b")
    parser.add_argument("--run-log", action="store_true", default=config.run_log_enabled,
                        help="Write a Markdown run report")
    parser.add_argument("--log-dir", default=str(config.log_dir), help="Directory for run reports")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output; error outcomes include an explanation")
    return parser


def _build_llm(args) -> Any:
    if args.no_llm or not args.provider:
        return None
    try:
        return setup_llm(LLMConfig(
            provider=args.provider,
            api_token=config.llm_api_token,
            base_url=config.llm_base_url,
            temperature=config.temperature,
            max_tokens=config.num_predict,
            timeout=config.llm_timeout,
        ))
    except Exception as e:
        logger.warning(f"Cannot use provider {args.provider}: {e}")
        return None


def _build_run_logger(args, argv: List[str]) -> Any:
    if not args.run_log:
        return None
    from sitescribe_logs import create_run_logger
    return create_run_logger(
        command=args.command,
        path=args.path,
        command_line=" ".join(shlex.quote(a) for a in ["sitescribe", *argv]),
        log_dir=args.log_dir,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point"""
    argv = list(sys.argv[1:] if argv is None else argv)
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, config.log_level, logging.INFO),
        format=LOG_FORMAT,
    )

    run_logger = _build_run_logger(args, argv)
    outcome = asyncio.run(process_command(
        args.path,
        args.command,
        llm=_build_llm(args),
        use_llm=False if args.no_llm else None,
        run_logger=run_logger,
        include_details=args.verbose,
    ))

    print(json.dumps(outcome, indent=2, ensure_ascii=False))
    if run_logger:
        logger.info(f"Run log: {run_logger.log_path}")
    return 1 if outcome.get("message") == MESSAGE_ERROR else 0


if __name__ == "__main__":
    sys.exit(main())
