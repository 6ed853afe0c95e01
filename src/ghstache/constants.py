from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates public constants to reduce cross-module coupling. The
error templates are part of the observable contract: callers match on them,
so they must stay verbatim.
"""

DEFAULT_BEGIN: str = '{{'
DEFAULT_END: str = '}}'

# Closer for the {{{name}}} form, only recognised under the default set.
UNESCAPED_END: str = '}}}'

# Smallest legal directive body is "=X X=".
MIN_SET_DELIMITER_LEN: int = 5

ERR_UNCLOSED_TAG: str = 'Unclosed tag at {offset}'
ERR_INVALID_SET_DELIMITER: str = 'Invalid set delimiter tag at {offset}'
ERR_UNOPENED_SECTION: str = 'Unopened section "{name}" at {offset}'
ERR_UNCLOSED_SECTION: str = 'Unclosed section "{name}" at {offset}'
ERR_LAMBDA2_VARIABLE: str = 'Lambda with render argument is not allowed for regular variables'

ENV_STRICT: str = 'GHSTACHE_STRICT'
ENV_DELIMITERS: str = 'GHSTACHE_DELIMITERS'
ENV_JSON_LOGS: str = 'GHSTACHE_JSON_LOGS'
ENV_LOG_LEVEL: str = 'GHSTACHE_LOG_LEVEL'
ENV_TRACE_RENDER: str = 'GHSTACHE_TRACE_RENDER'
ENV_VERSION: str = 'GHSTACHE_VERSION'
