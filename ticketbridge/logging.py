"""Logging configuration for the ticket bridge.

Console output uses loguru color tags with structured extras appended as
key=value pairs.
"""

import sys
from typing import TYPE_CHECKING

from loguru import logger


if TYPE_CHECKING:
    from loguru import Record


COLORS = {
    "slate": "#6B7A8F",  # Timestamps, separators
    "mist": "#A9B4C2",  # Module names, extras
    "paper": "#F2F4F7",  # Message text
    "sky": "#4A90D9",  # Info, URLs
    "leaf": "#4CAF7A",  # Success
    "amber": "#F2B134",  # Warnings
    "brick": "#C0392B",  # Errors
}

RESET = "\033[0m"


def _log_format(record: "Record") -> str:
    """Build the loguru format string for one record.

    Args:
        record: Loguru record containing log metadata, message, and level.

    Returns:
        Format string with loguru color tags.
    """
    level = record["level"].name

    level_colors = {
        "TRACE": f"<fg {COLORS['slate']}>",
        "DEBUG": f"<fg {COLORS['mist']}>",
        "INFO": f"<fg {COLORS['sky']}>",
        "SUCCESS": f"<fg {COLORS['leaf']}>",
        "WARNING": f"<fg {COLORS['amber']}>",
        "ERROR": f"<fg {COLORS['brick']}>",
        "CRITICAL": f"<fg {COLORS['brick']}><bold>",
    }

    color = level_colors.get(level, f"<fg {COLORS['paper']}>")
    close = "</>"

    # Format: timestamp | level | module | message [extra]
    fmt = (
        f"<fg {COLORS['slate']}>{{time:HH:mm:ss}}{close}"
        f" <fg {COLORS['slate']}>│{close} "
        f"{color}{{level: <8}}{close}"
        f"<fg {COLORS['slate']}>│{close} "
        f"<fg {COLORS['mist']}>{{name}}{close}"
        f"<fg {COLORS['slate']}>:{close}"
        f"<fg {COLORS['paper']}>{{message}}{close}"
    )

    extra = record["extra"]
    if extra:
        extra_str = " ".join(f"{k}={v!r}" for k, v in extra.items())
        # Escape braces so extras are not parsed as format fields
        extra_str = extra_str.replace("{", "{{").replace("}", "}}")
        # Escape tags so extras are not parsed as colors
        extra_str = extra_str.replace("<", r"\<")
        fmt += f" <fg {COLORS['mist']}>│ {extra_str}{close}"

    fmt += "\n"

    if record["exception"]:
        fmt += "{exception}\n"

    return fmt


def configure_logging(level: str = "INFO") -> None:
    """Replace loguru's default handler with the bridge's stderr format.

    Args:
        level: Minimum log level to display (e.g., "DEBUG", "INFO", "WARNING").
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level=level.upper(),
        format=_log_format,
        colorize=True,
    )


def log_server_startup(host: str, port: int, jira_url: str, version: str) -> None:
    """Write the server's listen address and backend to stderr.

    Args:
        host: Server bind host address.
        port: Server bind port number.
        jira_url: Base URL of the Jira site requests are forwarded to.
        version: Application version string.
    """
    amber = _ansi_color(COLORS["amber"])
    sky = _ansi_color(COLORS["sky"])
    leaf = _ansi_color(COLORS["leaf"])
    mist = _ansi_color(COLORS["mist"])

    config_lines = [
        f"  {mist}Version:{RESET}  {amber}v{version}{RESET}",
        f"  {mist}Server:{RESET}   {sky}http://{host}:{port}{RESET}",
        f"  {mist}Jira:{RESET}     {leaf}{jira_url}{RESET}",
        "",
    ]
    sys.stderr.write("\n".join(config_lines))
    sys.stderr.flush()


def _ansi_color(hex_color: str) -> str:
    """Convert hex color code to ANSI 24-bit escape sequence.

    Args:
        hex_color: Hex color string with or without # prefix (e.g., "#F2B134").

    Returns:
        ANSI escape code for 24-bit RGB foreground color.
    """
    hex_color = hex_color.lstrip("#")
    r, g, b = int(hex_color[0:2], 16), int(hex_color[2:4], 16), int(hex_color[4:6], 16)
    return f"\033[38;2;{r};{g};{b}m"
