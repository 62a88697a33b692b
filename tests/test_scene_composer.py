from __future__ import annotations

import pytest

from motiondirector.planning.scene_composer import (
    BEAT_TEMPLATES,
    PLATFORM_PROFILES,
    TONE_PROFILES,
    allocate_durations,
    compose_scenes,
    select_beats,
)
from motiondirector.specs.common.enums import Beat, Platform, Tone
from motiondirector.specs.models.brief import parse_brief


def _brief(raw, **overrides):
    data = dict(raw)
    data.update(overrides)
    return parse_brief(data)


def test_profiles_cover_every_enum_value():
    assert set(TONE_PROFILES) == set(Tone)
    assert set(PLATFORM_PROFILES) == set(Platform)
    assert set(BEAT_TEMPLATES) == set(Beat)


@pytest.mark.parametrize(
    "duration,platform,count",
    [
        (20, Platform.TIKTOK, 4),
        (30, Platform.TIKTOK, 4),
        (31, Platform.TIKTOK, 5),
        (45, Platform.TIKTOK, 5),
        (60, Platform.INSTAGRAM_REELS, 5),
        (61, Platform.YOUTUBE_SHORTS, 6),
        (91, Platform.TIKTOK, 7),
        (25, Platform.LINKEDIN, 4),
        (26, Platform.LINKEDIN, 5),
        (46, Platform.YOUTUBE, 6),
        (76, Platform.YOUTUBE, 7),
        (150, Platform.LINKEDIN, 7),
    ],
)
def test_select_beats_follows_duration_policy(duration, platform, count):
    beats = select_beats(duration, platform)
    assert len(beats) == count
    assert beats[0] is Beat.HOOK
    assert beats[-1] is Beat.CTA


def test_longer_durations_add_detail_beats():
    assert Beat.FEATURE not in select_beats(45, Platform.TIKTOK)
    assert Beat.FEATURE in select_beats(75, Platform.TIKTOK)
    assert Beat.WORKFLOW in select_beats(120, Platform.TIKTOK)


def test_allocate_durations_is_exact_and_respects_minimum():
    assert allocate_durations(45, [12, 16, 20, 14, 10]) == [8, 10, 12, 9, 6]
    durations = allocate_durations(12, [1, 1, 10])
    assert sum(durations) == 12
    assert min(durations) >= 3


def test_allocate_durations_rejects_impossible_split():
    with pytest.raises(ValueError):
        allocate_durations(8, [1, 1, 1])
    with pytest.raises(ValueError):
        allocate_durations(30, [])


@pytest.mark.parametrize("platform", list(Platform))
def test_scene_durations_sum_to_brief_duration(raw_brief, platform):
    for duration in range(20, 151):
        brief = _brief(raw_brief, durationSeconds=duration, platform=platform.value)
        scenes = compose_scenes(brief)
        assert sum(s.duration for s in scenes) == duration
        assert all(s.duration >= 3 for s in scenes)


def test_scene_ids_are_unique_and_index_derived(brief):
    scenes = compose_scenes(brief)
    assert [s.id for s in scenes] == [f"scene-{i}" for i in range(1, len(scenes) + 1)]


def test_every_scene_has_three_broll_ideas(brief):
    assert all(len(s.brollIdeas) == 3 for s in compose_scenes(brief))


def test_composition_is_deterministic(raw_brief):
    first = compose_scenes(_brief(raw_brief))
    second = compose_scenes(_brief(raw_brief))
    assert [s.model_dump() for s in first] == [s.model_dump() for s in second]


@pytest.mark.parametrize("other", [t for t in Tone if t is not Tone.BOLD])
def test_tone_changes_scene_text(raw_brief, other):
    bold = compose_scenes(_brief(raw_brief))
    changed = compose_scenes(_brief(raw_brief, tone=other.value))
    assert [s.model_dump() for s in bold] != [s.model_dump() for s in changed]
    assert bold[0].visualDirection != changed[0].visualDirection


@pytest.mark.parametrize(
    "keywords",
    [
        [],
        ["Cinematic"],
        ["AI-native", "Kinetic"],
        ["AI-native", "Kinetic", "Conversion-first", "A", "B", "C", "D"],
    ],
)
def test_keywords_change_scene_text(raw_brief, keywords):
    base = compose_scenes(_brief(raw_brief))
    changed = compose_scenes(_brief(raw_brief, brandKeywords=keywords))
    assert [s.model_dump() for s in base] != [s.model_dump() for s in changed]


def test_keywords_rotate_across_scenes(raw_brief):
    scenes = compose_scenes(_brief(raw_brief, brandKeywords=["Alpha", "Beta"]))
    assert scenes[0].onScreenText.startswith("Alpha")
    assert "Alpha" in scenes[2].visualDirection
    assert "Beta" in scenes[3].brollIdeas[1]
    assert "Alpha / Beta" in scenes[-1].visualDirection


def test_goal_is_the_motif_without_keywords(raw_brief):
    scenes = compose_scenes(_brief(raw_brief, brandKeywords=[]))
    assert scenes[0].onScreenText.startswith("Drive waitlist sign-ups")


def test_cta_scene_closes_on_call_to_action(brief):
    last = compose_scenes(brief)[-1]
    assert last.title == "Call to Action"
    assert last.onScreenText == "Join the waitlist"
    assert "end card" in last.transitions
