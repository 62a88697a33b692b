from __future__ import annotations

import copy
from typing import Any, Dict

import pytest


DEFAULT_INPUT: Dict[str, Any] = {
    "prompt": "Launch our AI-native video agent that builds kinetic marketing spots",
    "targetAudience": "Growth teams at product-led SaaS startups",
    "goal": "Drive waitlist sign-ups",
    "tone": "bold",
    "platform": "TikTok",
    "durationSeconds": 45,
    "aspectRatio": "9:16",
    "brandKeywords": ["AI-native", "Kinetic", "Conversion-first"],
    "callToAction": "Join the waitlist",
    "includeCaptions": True,
}


@pytest.fixture
def raw_brief() -> Dict[str, Any]:
    return copy.deepcopy(DEFAULT_INPUT)


@pytest.fixture
def brief(raw_brief):
    from motiondirector.specs.models.brief import parse_brief

    return parse_brief(raw_brief)
