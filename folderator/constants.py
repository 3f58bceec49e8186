"""Default configuration settings for folderator."""

from __future__ import annotations

# --- Alias naming ---
ALIAS_PREFIX = "go-"
FALLBACK_SLUG = "dir"
FIRST_COLLISION_SUFFIX = 2

# --- Generated shell session ---
ITERATE_FUNCTION = "iterate"
DIRS_VARIABLE = "__FOLDERATOR_DIRS"
PROMPT_VARIABLE = "PROMPT_CHAR"
SESSION_DIR_PREFIX = "folderator-"
RC_FILE_MODE = 0o600
DEFAULT_SHELL = "zsh"

# --- Exit codes ---
EXIT_USAGE = 2
