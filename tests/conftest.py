"""Shared pytest fixtures and Hypothesis profiles for LingoEngine.

Profiles (max_examples):
    dev      500, default for local runs
    ci       50, derandomized; chosen when CI=true
    verbose  100, prints every example

HYPOTHESIS_PROFILE=<name> overrides the automatic choice.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from lingoengine.diagnostics import CollectingReporter
from lingoengine.runtime import PluralizationRule, PluralRuleStore

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
    2. CI=true env var (GitHub Actions auto-detection)
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
def reporter() -> CollectingReporter:
    """Fresh reporter that records diagnostics."""
    return CollectingReporter()


@pytest.fixture
def english_only_store() -> PluralRuleStore:
    """Store with a single explicit English-like rule and no CLDR data."""
    return PluralRuleStore(
        {"en": PluralizationRule.from_expressions("en", {"one": "n is 1"})}
    )
