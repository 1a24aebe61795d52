#!/usr/bin/env python3
"""Installation verification script for sitescribe."""

import sys
from pathlib import Path
import importlib
import importlib.metadata


def print_header(text):
    """Print a formatted header."""
    print(f"\n{'='*70}")
    print(f"  {text}")
    print(f"{'='*70}\n")


def print_check(text):
    """Print a check being performed."""
    print(f"Checking {text}...", end=" ")


def print_ok():
    """Print OK status."""
    print("✓ OK")


def print_fail(reason=""):
    """Print FAIL status."""
    if reason:
        print(f"✗ FAIL ({reason})")
    else:
        print("✗ FAIL")


def print_warn(reason=""):
    """Print WARNING status."""
    if reason:
        print(f"⚠ WARNING ({reason})")
    else:
        print("⚠ WARNING")


def check_python_version():
    """Check Python version."""
    print_check("Python version")
    version = sys.version_info
    if version >= (3, 10):
        print_ok()
        print(f"  Python {version.major}.{version.minor}.{version.micro}")
        return True
    else:
        print_fail(f"Python 3.10+ required, found {version.major}.{version.minor}")
        return False


def check_package_installation():
    """Check if sitescribe package is installed."""
    print_check("sitescribe package")
    try:
        version = importlib.metadata.version("sitescribe")
        print_ok()
        print(f"  Version: {version}")
        return True
    except importlib.metadata.PackageNotFoundError:
        print_warn("not installed, running from source")
        return True


def check_dependencies():
    """Check if all dependencies are installed."""
    print_check("Python dependencies")
    required = ["bs4", "soupsieve", "aiohttp", "dotenv"]

    missing = []
    for module in required:
        try:
            importlib.import_module(module)
        except ImportError:
            missing.append(module)

    if not missing:
        print_ok()
        return True
    else:
        print_fail(f"missing: {', '.join(missing)}")
        return False


def check_env_file():
    """Check if .env file exists."""
    print_check(".env configuration")
    env_file = Path.cwd() / ".env"

    if env_file.exists():
        print_ok()
        return True
    else:
        print_warn("not found")
        print("  Settings come from SITESCRIBE_* environment variables")
        return True  # Not critical


def check_llm_config():
    """Check that the configured planner LLM can be built."""
    from ..config import config
    from ..llm_config import LLMConfig

    print_check("LLM configuration")
    if not config.llm_enabled:
        print_warn("disabled (SITESCRIBE_LLM_ENABLED=false), rule-based matchers only")
        return True

    llm_config = LLMConfig(
        provider=config.llm_provider,
        api_token=config.llm_api_token,
        base_url=config.llm_base_url,
    )
    try:
        llm_config.validate()
    except ValueError as e:
        print_warn(str(e))
        print("  Commands still work through the rule-based matchers")
        return True

    print_ok()
    print(f"  Provider: {llm_config.provider_name}, model: {llm_config.model_name}")
    print(f"  Endpoint: {llm_config.base_url}")
    return True


def check_log_dir():
    """Check that the run report directory is writable."""
    from ..config import config

    print_check("log directory")
    log_dir = config.log_dir
    if not log_dir.exists():
        print_warn(f"{log_dir} does not exist, it is created on the first --run-log")
        return True
    probe = log_dir / ".sitescribe-doctor"
    try:
        probe.write_text("ok", encoding="utf-8")
        probe.unlink()
    except OSError as e:
        print_fail(str(e))
        return False
    print_ok()
    return True


def check_sitescribe_modules():
    """Check if sitescribe_core modules are importable."""
    print_check("sitescribe_core modules")

    try:
        from sitescribe_core import config, indexer, interpreter, executor, pipeline  # noqa: F401
        from sitescribe_logs import RunLogger  # noqa: F401
        print_ok()
        return True
    except ImportError as e:
        print_fail(str(e))
        return False


def main():
    """Run all verification checks."""
    print_header("SiteScribe Installation Verification")

    checks = [
        ("Python Version", check_python_version, True),
        ("Package", check_package_installation, False),
        ("Dependencies", check_dependencies, True),
        ("Configuration", check_env_file, False),
        ("LLM", check_llm_config, False),
        ("Logs", check_log_dir, False),
        ("Modules", check_sitescribe_modules, True),
    ]

    print("Running diagnostics...\n")

    passed = 0
    failed = 0
    warnings = 0
    critical_failed = False

    for name, check_func, critical in checks:
        try:
            result = check_func()
            if result:
                passed += 1
            else:
                if critical:
                    failed += 1
                    critical_failed = True
                else:
                    warnings += 1
        except Exception as e:
            print_fail(f"error: {e}")
            if critical:
                failed += 1
                critical_failed = True
            else:
                warnings += 1

    print_header("Summary")

    total = len(checks)
    print(f"Total checks: {total}")
    print(f"  ✓ Passed:   {passed}")
    if warnings > 0:
        print(f"  ⚠ Warnings: {warnings}")
    if failed > 0:
        print(f"  ✗ Failed:   {failed}")

    print()

    if critical_failed:
        print("✗ Critical issues found! Please fix the failed checks above.")
        print("\nRecommended actions:")
        print("  1. Make sure Python 3.10+ is installed")
        print("  2. Reinstall sitescribe: pip install -e .")
        return 1
    elif warnings > 0:
        print("⚠ Installation is functional but some optional features may be limited.")
        return 0
    else:
        print("✓ All checks passed! Your installation is ready to use.")
        print("\nTry:")
        print('  sitescribe ./site "change heading to Welcome" --no-llm')
        return 0


if __name__ == "__main__":
    sys.exit(main())
