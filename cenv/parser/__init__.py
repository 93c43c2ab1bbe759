"""Marker resolution and section rewriting for env files."""

from .markers import DEFAULT_COMMENT_CHAR, MarkerResolver, resolve_keyword
from .policies import (
    DEFAULT_POLICY,
    ActivationPolicy,
    LooseActivation,
    StrictActivation,
    available_policies,
    get_policy,
)
from .rewriter import EnvRewriter, list_available_keywords, parse_env
from .state import INITIAL_STATUS, transition

__all__ = [
    "ActivationPolicy",
    "DEFAULT_COMMENT_CHAR",
    "DEFAULT_POLICY",
    "EnvRewriter",
    "INITIAL_STATUS",
    "LooseActivation",
    "MarkerResolver",
    "StrictActivation",
    "available_policies",
    "get_policy",
    "list_available_keywords",
    "parse_env",
    "resolve_keyword",
    "transition",
]
