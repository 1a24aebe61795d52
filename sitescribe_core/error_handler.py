"""
User-Friendly Error Handler.

Converts technical errors into helpful messages with actionable suggestions.
"""

from typing import Dict, Optional
import logging

from .models import MESSAGE_ERROR

logger = logging.getLogger(__name__)


def format_user_friendly_error(
    error: Exception,
    context: str = "general",
    technical_details: Optional[str] = None
) -> Dict:
    """
    Convert technical error to user-friendly message.

    Args:
        error: The exception that occurred
        context: Context where error occurred (e.g., "index", "execute")
        technical_details: Additional technical information

    Returns:
        Dictionary with user-friendly error information:
        {
            "message": str,          # User-friendly message
            "suggestion": str,       # Actionable suggestion
            "technical": str,        # Technical details
            "severity": str,         # "critical", "error", "warning"
            "can_retry": bool        # Whether retry might help
        }
    """
    error_str = str(error)

    for pattern, friendly_error in ERROR_MAPPINGS.items():
        if pattern.lower() in error_str.lower():
            result = friendly_error.copy()
            result["technical"] = technical_details or error_str
            logger.debug(f"Mapped error to user-friendly: {result['message']}")
            return result

    return {
        "message": "An unexpected error occurred while processing the command",
        "suggestion": "Check the logs for technical details or try again",
        "technical": technical_details or error_str,
        "severity": "error",
        "can_retry": True
    }


# Error mappings: pattern -> user-friendly info (first match wins)
ERROR_MAPPINGS = {
    # File system errors
    "no such file": {
        "message": "The file or folder does not exist",
        "suggestion": "Check the path and make sure the site folder is mounted",
        "severity": "critical",
        "can_retry": False
    },
    "permission denied": {
        "message": "No permission to read or write the document",
        "suggestion": "Check file permissions of the site folder",
        "severity": "error",
        "can_retry": False
    },

    # Document errors
    "no elements found": {
        "message": "No element in the document matches the selector",
        "suggestion": "Check the selector or rephrase the command to name an existing element",
        "severity": "warning",
        "can_retry": False
    },
    "parent element not found": {
        "message": "The element to insert into does not exist",
        "suggestion": "Make sure the document has the target container (e.g. <body>)",
        "severity": "warning",
        "can_retry": False
    },
    "unknown action": {
        "message": "The requested edit is not supported",
        "suggestion": "Use one of the supported action kinds",
        "severity": "error",
        "can_retry": False
    },
    "unknown animation": {
        "message": "The requested animation preset does not exist",
        "suggestion": "Use fade, slide, bounce or rotate",
        "severity": "warning",
        "can_retry": False
    },

    # LLM / network errors
    "timeout": {
        "message": "The language model took too long to answer",
        "suggestion": "Try again, use a faster model or run with --no-llm",
        "severity": "warning",
        "can_retry": True
    },
    "connection refused": {
        "message": "Cannot connect to the language model service",
        "suggestion": "Check SITESCRIBE_LLM_BASE_URL and that the service is running",
        "severity": "error",
        "can_retry": True
    },
    "api error": {
        "message": "The language model API returned an error",
        "suggestion": "Check the API token and the model name in SITESCRIBE_LLM_PROVIDER",
        "severity": "error",
        "can_retry": True
    },
    "api token": {
        "message": "The language model API token is missing",
        "suggestion": "Set SITESCRIBE_LLM_API_TOKEN or the provider's API key variable",
        "severity": "critical",
        "can_retry": False
    },

    # Parsing errors
    "json": {
        "message": "The language model answer could not be parsed",
        "suggestion": "The rule-based matchers will be used instead; rephrase the command if nothing changes",
        "severity": "warning",
        "can_retry": True
    },
}


def get_error_category(error: Exception) -> str:
    """
    Categorize error type.

    Returns:
        Category name: "io", "selector", "action", "llm", "network", "parse", "unknown"
    """
    error_str = str(error).lower()

    # ConnectionError and TimeoutError are OSErrors too
    if isinstance(error, (ConnectionError, TimeoutError)) or any(k in error_str for k in ["timeout", "connection", "network"]):
        return "network"
    elif isinstance(error, OSError) or any(k in error_str for k in ["no such file", "permission denied", "is a directory"]):
        return "io"
    elif any(k in error_str for k in ["selector", "no elements found", "parent element"]):
        return "selector"
    elif any(k in error_str for k in ["unknown action", "missing field", "animation"]):
        return "action"
    elif any(k in error_str for k in ["llm", "model", "api", "ollama", "provider"]):
        return "llm"
    elif any(k in error_str for k in ["json", "expecting", "decode"]):
        return "parse"
    else:
        return "unknown"


def format_error_for_logging(error: Exception, context: str = "") -> str:
    """
    Format error for structured logging.

    Args:
        error: The exception
        context: Additional context

    Returns:
        Formatted error string for logs
    """
    friendly = format_user_friendly_error(error, context)

    lines = [
        f"❌ {friendly['message']}",
        f"💡 {friendly['suggestion']}",
        f"🔧 Technical: {friendly['technical']}"
    ]

    if context:
        lines.insert(0, f"📍 Context: {context}")

    return "\n".join(lines)


def create_error_response(
    error: Exception,
    context: str = "",
    include_details: bool = False
) -> Dict:
    """
    Create the failure outcome returned by the pipeline and the CLI.

    Args:
        error: The exception
        context: Where the error occurred
        include_details: Whether to add the user-friendly explanation

    Returns:
        {"message": "Error processing command", "error": str(error)} plus an
        optional "details" entry
    """
    response = {
        "message": MESSAGE_ERROR,
        "error": str(error),
    }

    if include_details:
        friendly = format_user_friendly_error(error, context)
        response["details"] = {
            "message": friendly["message"],
            "suggestion": friendly["suggestion"],
            "severity": friendly["severity"],
            "can_retry": friendly["can_retry"],
            "category": get_error_category(error),
        }

    return response
