"""Identifier generators: CUID2 row keys, upload object names and public prompt codes."""

import secrets

from cuid2 import cuid_wrapper

_next_cuid = cuid_wrapper()

PROMPT_CODE_SPACE = 10_000


def generate_cuid() -> str:
    """New CUID2 string, used for primary keys and stored upload names."""
    return str(_next_cuid())


def generate_prompt_code() -> str:
    """Random public prompt code in 0000-9999, zero padded to four digits."""
    return f"{secrets.randbelow(PROMPT_CODE_SPACE):04d}"
