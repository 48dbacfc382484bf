"""Pytest configuration for formlocalizer test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: CI runs with 50 examples (fast feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- HYPOTHESIS_PROFILE env var -> explicit override
- CI=true environment variable -> "ci" profile
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from formlocalizer import TemplateEntry, TemplateUsage, TranslationStore

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# SHARED FIXTURES
# =============================================================================


@pytest.fixture
def populated_store() -> TranslationStore:
    """Store with entries in all three tables."""
    store = TranslationStore(locale="de-DE")
    store.add("greeting", "Hallo")
    store.add("Size;Large", "Groß")
    store.add_values("colors", ["rot", "grün", "blau"])
    store.add_template(
        "Name", TemplateEntry(TemplateUsage.NOT_UNDERSTOOD, ["Wie bitte?", "Nochmal?"])
    )
    store.add_template(
        "Age", TemplateEntry(TemplateUsage.NOT_UNDERSTOOD, ["Wie bitte?", "Nochmal?"])
    )
    store.add_template("Age", TemplateEntry(TemplateUsage.INTEGER, ["Bitte eine Zahl"]))
    return store
