"""Built-in default configuration for cmdtype."""

from __future__ import annotations

DEFAULT_CONFIG_DICT = {
    # Empty means "use $BUILTIN_TYPE_BIN or /usr/bin/type".
    "builtin_type_bin": "",
}
