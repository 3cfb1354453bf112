"""
debug_logger.py
---------------
Colourised console logger filtered by category and verbosity.

Every line is tagged with the time, the calling class (or module) and the
kind of message:

    [12:03:44] [CollisionManager][TRACE] Player hit 1x, size=28.00, score=30

Usage:
    DebugLogger.warn("Failed to save high score", category="storage")
"""

import sys
from datetime import datetime


# ===========================================================
# Logger Configuration
# ===========================================================

class LoggerConfig:
    """Which categories print, and how verbose the console is."""

    ENABLE_LOGGING = True
    LOG_LEVEL = "INFO"  # NONE, ERROR, WARN, INFO, VERBOSE

    CATEGORIES = {
        # Startup
        "loading": False,
        "system": True,
        "display": True,
        "input": True,
        "debug_hud": True,

        # Game Loop
        "game_state": True,
        "timing": False,

        # Simulation
        "entity_spawn": False,
        "collision": False,
        "combat": False,
        "storage": True,

        # Rendering
        "render": True,
    }


# ===========================================================
# ANSI Colors
# ===========================================================

class Colors:
    """ANSI escape codes for terminal colors."""
    RESET = "\033[0m"
    WHITE = "\033[97m"
    GREEN = "\033[92m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    BLUE = "\033[94m"
    YELLOW = "\033[93m"


# Message kind -> (colour, minimum LOG_LEVEL that prints it)
KINDS = {
    "SYSTEM": (Colors.MAGENTA, "INFO"),
    "STATE": (Colors.CYAN, "INFO"),
    "ACTION": (Colors.GREEN, "INFO"),
    "TRACE": (Colors.BLUE, "VERBOSE"),
    "WARN": (Colors.YELLOW, "WARN"),
}

LEVEL_VALUES = {
    "NONE": 0,
    "ERROR": 1,
    "WARN": 2,
    "INFO": 3,
    "VERBOSE": 4,
}


# ===========================================================
# Debug Logger
# ===========================================================

class DebugLogger:
    """Static logger; all state lives in LoggerConfig."""

    LINE_LENGTH = 59
    STATUS_COLUMN = 30

    @staticmethod
    def enabled(category: str, kind: str = "SYSTEM") -> bool:
        """True if a message of this kind and category would be printed."""
        if not LoggerConfig.ENABLE_LOGGING:
            return False
        if not LoggerConfig.CATEGORIES.get(category, False):
            return False
        _, level = KINDS[kind]
        return LEVEL_VALUES[level] <= LEVEL_VALUES.get(LoggerConfig.LOG_LEVEL, LEVEL_VALUES["INFO"])

    @staticmethod
    def _caller_name() -> str:
        """Class of the caller's `self`/`cls`, else its module in PascalCase."""
        try:
            frame = sys._getframe(3)
        except ValueError:
            return "Unknown"

        owner = frame.f_locals.get("self") or frame.f_locals.get("cls")
        if owner is not None:
            return owner.__name__ if isinstance(owner, type) else type(owner).__name__

        module = frame.f_code.co_filename.replace("\\", "/").rsplit("/", 1)[-1]
        return "".join(part.capitalize() for part in module.removesuffix(".py").split("_"))

    @staticmethod
    def _emit(kind: str, msg: str, category: str):
        if not DebugLogger.enabled(category, kind):
            return

        color, _ = KINDS[kind]
        timestamp = datetime.now().strftime("%H:%M:%S")
        print(f"{color}[{timestamp}] [{DebugLogger._caller_name()}][{kind}] {msg}{Colors.RESET}")

    # ===========================================================
    # Public Log Methods
    # ===========================================================

    @staticmethod
    def system(msg: str, category: str = "system"):
        DebugLogger._emit("SYSTEM", msg, category)

    @staticmethod
    def state(msg: str, category: str = "game_state"):
        """State transitions."""
        DebugLogger._emit("STATE", msg, category)

    @staticmethod
    def action(msg: str, category: str = "system"):
        """Something the player or the game just did."""
        DebugLogger._emit("ACTION", msg, category)

    @staticmethod
    def trace(msg: str, category: str = "collision"):
        """Per-frame detail, only at VERBOSE."""
        DebugLogger._emit("TRACE", msg, category)

    @staticmethod
    def warn(msg: str, category: str = "system"):
        DebugLogger._emit("WARN", msg, category)

    # ===========================================================
    # Startup Report
    # ===========================================================

    @staticmethod
    def section(title: str):
        """Print a boxed section header."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        rule = "─" * DebugLogger.LINE_LENGTH
        print(f"\n{Colors.WHITE}{rule}\n{f'[{title}]'.center(DebugLogger.LINE_LENGTH)}{Colors.RESET}\n")

    @staticmethod
    def init_entry(module: str, status: str = "OK"):
        """Print `> Module ........ [OK]` aligned to the status column."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        print(DebugLogger.format_entry(module, status))

    @staticmethod
    def init_sub(detail: str, level: int = 1):
        """Print an indented bullet under the last init entry."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        print(f"{' ' * (level * 4)}• {Colors.WHITE}{detail}{Colors.RESET}")

    @staticmethod
    def format_entry(module: str, status: str) -> str:
        prefix = f"> {module}"
        status_str = f"[{status}]"
        pad = max(DebugLogger.STATUS_COLUMN - len(prefix), 1)
        dots = max(DebugLogger.LINE_LENGTH - len(prefix) - pad - 1 - len(status_str), 1)
        status_color = Colors.GREEN if status.upper() == "OK" else Colors.WHITE
        return (
            f"{Colors.WHITE}{prefix}{' ' * pad}{'.' * dots} "
            f"{status_color}{status_str}{Colors.RESET}"
        )
