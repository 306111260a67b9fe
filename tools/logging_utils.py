# =============================================================================
# tools/logging_utils.py  -  Console logging for tool calls
# =============================================================================
# We log to STDERR because the MCP server talks to its client over STDOUT
# (stdin/stdout is the MCP transport).  Log lines on stdout would corrupt
# the JSON-RPC stream.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + parameters)
#     - GREEN for response envelopes
#     - YELLOW for intermediate status (validation rejections, failures)
#
# configure_logging() is called once from main.py.  Importing this module
# has no side effects, so tests and library users keep their own logging.
# =============================================================================

import json
import logging
import sys
from typing import Any

logger = logging.getLogger("tools")

# ANSI color codes for terminal output
_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses (JSON output)
_YELLOW = "\033[33m"   # Status messages
_RESET = "\033[0m"     # Reset to default terminal color

LOG_FORMAT = "%(asctime)s [MCP] %(message)s"
LOG_DATEFMT = "%H:%M:%S"


def configure_logging(level: str = "INFO") -> None:
    """Send all log records to stderr in the server's console format."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        stream=sys.stderr,
        force=True,
    )


def log_request(tool_name: str, **params: Any) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def log_response(tool_name: str, result: dict) -> dict:
    """Log the response envelope as compact JSON in GREEN, then return it."""
    logger.info(
        f"{_GREEN}  ← {tool_name} response: "
        f"{json.dumps(result, separators=(',', ':'), ensure_ascii=False)}{_RESET}"
    )
    return result
