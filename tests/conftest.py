# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Pytest configuration and fixtures shared by omniquality tests."""

from __future__ import annotations

import pytest

# =========================================================================
# Basic Sample Data Fixtures
# =========================================================================


@pytest.fixture
def sample_pattern_markdown() -> str:
    """A well-formed pattern in the standard markdown layout."""
    return """# IDENTITY and PURPOSE

You are an expert meeting analyst who extracts decisions and owners.

# STEPS

- Read the full transcript
- Identify every decision and its owner
- Rate the urgency of each follow-up

# OUTPUT

- DECISIONS: each decision in one sentence
- ACTION ITEMS: owner, task and HIGH/MEDIUM/LOW priority
- RISKS: open questions that block progress

# OUTPUT INSTRUCTIONS

- Score overall meeting effectiveness (1-10)
- Order action items by priority

# INPUT

INPUT:
"""
