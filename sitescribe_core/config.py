#!/usr/bin/env python3
from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

load_dotenv()

@dataclass
class Config:
    """Application configuration"""
    llm_enabled: bool = os.getenv("SITESCRIBE_LLM_ENABLED", "true").lower() in ["true", "1", "yes"]
    llm_provider: str = os.getenv("SITESCRIBE_LLM_PROVIDER", "openai/gpt-4o-mini")
    llm_api_token: Optional[str] = os.getenv("SITESCRIBE_LLM_API_TOKEN") or None
    llm_base_url: Optional[str] = os.getenv("SITESCRIBE_LLM_BASE_URL") or None
    temperature: float = float(os.getenv("SITESCRIBE_TEMPERATURE", "0.1"))
    num_predict: int = int(os.getenv("SITESCRIBE_NUM_PREDICT", "2048"))
    llm_timeout: int = int(os.getenv("SITESCRIBE_LLM_TIMEOUT", "300"))

    # Planner prompt sizing
    summary_documents: int = int(os.getenv("SITESCRIBE_SUMMARY_DOCUMENTS", "30"))
    summary_headings: int = int(os.getenv("SITESCRIBE_SUMMARY_HEADINGS", "3"))

    # Indexer
    text_preview_lines: int = int(os.getenv("SITESCRIBE_TEXT_PREVIEW_LINES", "500"))

    # Logging
    log_level: str = os.getenv("SITESCRIBE_LOG_LEVEL", "INFO").upper()
    run_log_enabled: bool = os.getenv("SITESCRIBE_RUN_LOG", "false").lower() in ["true", "1", "yes"]
    log_dir: Path = Path(os.getenv("SITESCRIBE_LOG_DIR", "./logs"))

config = Config()
