"""
Pytest configuration for padded_cell tests.

Provides:
- Hypothesis profiles (select with HYPOTHESIS_PROFILE, default "default")
- A small table-driven transformation helper shared across test files
"""

import os
from typing import Callable, Dict

from hypothesis import settings

# =============================================================================
# Hypothesis Configuration
# =============================================================================
# print_blob=True makes failures easy to reproduce.
# "ci" keeps random search but caps examples so the suite stays fast.

settings.register_profile("default", print_blob=True, derandomize=False)
settings.register_profile("ci", print_blob=True, derandomize=False, max_examples=50)
settings.register_profile("thorough", print_blob=True, max_examples=1000)

settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "default"))


# =============================================================================
# Shared Test Utilities
# =============================================================================

def table_transform(table: Dict[str, str]) -> Callable[[str], str]:
    """
    Build a transformation from an explicit mapping.

    Strings missing from the table are fixed points.
    """

    def transform(text: str) -> str:
        return table.get(text, text)

    return transform
