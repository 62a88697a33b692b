"""
Deterministic scene composition.

Turns a Brief into an ordered list of timed Scenes. Output depends only on the
brief: the same brief always yields the same scenes.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from motiondirector.shared.config import BROLL_IDEAS_PER_SCENE, MIN_SCENE_SECONDS
from motiondirector.specs.common.enums import AspectRatio, Beat, Platform, Tone
from motiondirector.specs.models.brief import Brief
from motiondirector.specs.models.plan import Scene


@dataclass(frozen=True)
class ToneProfile:
    opener: str
    voice: str
    camera: str
    palette: str
    transition: str
    sound: str
    closer: str


@dataclass(frozen=True)
class PlatformProfile:
    short_form: bool
    style: str
    safe_zone: str


@dataclass(frozen=True)
class BeatTemplate:
    title: str
    purpose: str
    voiceover: str
    on_screen: str
    visual: str
    accent: str
    broll: Tuple[str, str, str]


TONE_PROFILES: Dict[Tone, ToneProfile] = {
    Tone.BOLD: ToneProfile(
        opener="Stop scrolling.",
        voice="punchy, high-conviction delivery",
        camera="hard push-ins and snap zooms",
        palette="high-contrast neon on deep black",
        transition="Whip pan with motion blur",
        sound="sub-bass hits and riser swells",
        closer="Move now.",
    ),
    Tone.FRIENDLY: ToneProfile(
        opener="Hey there!",
        voice="warm, conversational delivery",
        camera="handheld medium shots with gentle drift",
        palette="soft daylight pastels",
        transition="Soft cross-dissolve",
        sound="light claps and airy chimes",
        closer="We'd love to have you.",
    ),
    Tone.INSPIRATIONAL: ToneProfile(
        opener="Imagine what's possible.",
        voice="uplifting, measured delivery",
        camera="slow crane rises and sweeping dollies",
        palette="golden-hour warmth with lens flares",
        transition="Light-leak wipe",
        sound="swelling strings and reverb tails",
        closer="Your next chapter starts here.",
    ),
    Tone.PLAYFUL: ToneProfile(
        opener="Okay, plot twist!",
        voice="bouncy, tongue-in-cheek delivery",
        camera="quick bounces and stop-motion pops",
        palette="saturated candy colors",
        transition="Bouncy scale-pop cut",
        sound="cartoon boings and snappy percussion",
        closer="Go on, have some fun with it.",
    ),
    Tone.SERIOUS: ToneProfile(
        opener="Here is what matters.",
        voice="calm, authoritative delivery",
        camera="locked-off tripod frames and slow pushes",
        palette="muted slate and steel tones",
        transition="Clean hard cut",
        sound="low drones and restrained piano",
        closer="Make the informed choice.",
    ),
}

PLATFORM_PROFILES: Dict[Platform, PlatformProfile] = {
    Platform.TIKTOK: PlatformProfile(
        short_form=True,
        style="native TikTok pacing with jump cuts",
        safe_zone="text clear of the right action rail and bottom caption bar",
    ),
    Platform.INSTAGRAM_REELS: PlatformProfile(
        short_form=True,
        style="polished Reels pacing with beat-synced cuts",
        safe_zone="text inside the central 4:5 safe area",
    ),
    Platform.YOUTUBE_SHORTS: PlatformProfile(
        short_form=True,
        style="loopable Shorts pacing with a seamless restart",
        safe_zone="text above the bottom channel overlay",
    ),
    Platform.LINKEDIN: PlatformProfile(
        short_form=False,
        style="professional LinkedIn pacing with clear data points",
        safe_zone="text large enough for muted autoplay in feed",
    ),
    Platform.YOUTUBE: PlatformProfile(
        short_form=False,
        style="cinematic YouTube pacing with room to breathe",
        safe_zone="text clear of the progress bar and end-screen area",
    ),
}

ASPECT_FRAMING: Dict[AspectRatio, str] = {
    AspectRatio.VERTICAL: "vertical full-bleed 9:16 framing",
    AspectRatio.SQUARE: "centered 1:1 square framing",
    AspectRatio.HORIZONTAL: "wide 16:9 cinematic framing",
}

BEAT_TEMPLATES: Dict[Beat, BeatTemplate] = {
    Beat.HOOK: BeatTemplate(
        title="Hook",
        purpose="Stop the scroll and frame the promise for {audience}.",
        voiceover="{opener} {prompt}",
        on_screen="{keyword}: {headline}",
        visual="Open cold on a striking {keyword} visual metaphor",
        accent="impact hit on the first frame",
        broll=(
            "Extreme close-up of {keyword} detail in motion",
            "Fast reveal of the product hero shot",
            "Reaction shot of {audience} leaning in",
        ),
    ),
    Beat.TENSION: BeatTemplate(
        title="The Problem",
        purpose="Surface the friction {audience} feel today.",
        voiceover="Right now, {audience} lose time to the old way of working. There's a faster way to {goal}.",
        on_screen="The old way is holding you back",
        visual="Split-screen of cluttered legacy workflow versus a clean canvas",
        accent="muffled low-pass filter on the bed",
        broll=(
            "Overflowing inbox and scattered browser tabs",
            "Clock ticking over a stalled progress bar",
            "{audience} sighing at a crowded dashboard",
        ),
    ),
    Beat.REVEAL: BeatTemplate(
        title="The Reveal",
        purpose="Introduce the product as the answer.",
        voiceover="Meet the answer: {prompt}",
        on_screen="Meet {headline}",
        visual="Product reveal with {keyword} typography locking into place",
        accent="filter opens up with a bright whoosh",
        broll=(
            "Interface animating in with {keyword} accents",
            "Logo lockup resolving from particles",
            "Hands tapping through the first screen",
        ),
    ),
    Beat.FEATURE: BeatTemplate(
        title="Feature Deep Dive",
        purpose="Show the capability that makes {keyword} real.",
        voiceover="With {keyword} built in, every step moves you closer to {goal}.",
        on_screen="{keyword}, built in",
        visual="Macro UI walkthrough with animated callouts on the {keyword} feature",
        accent="UI ticks and soft clicks on each callout",
        broll=(
            "Screen capture zooming into the {keyword} panel",
            "Animated callout arrows tracing the flow",
            "Before-and-after comparison wipe",
        ),
    ),
    Beat.WORKFLOW: BeatTemplate(
        title="Workflow in Action",
        purpose="Walk through the end-to-end flow in real time.",
        voiceover="From first idea to finished result, the whole flow runs in minutes.",
        on_screen="From idea to launch in minutes",
        visual="Time-lapse of the workflow with step counters ticking up",
        accent="rhythmic step-sequencer pulses",
        broll=(
            "Time-lapse of a project board moving to done",
            "Step counter animating one through three",
            "Team high-five over a shipped {keyword} launch",
        ),
    ),
    Beat.PROOF: BeatTemplate(
        title="Proof",
        purpose="Earn trust with outcomes that matter to {audience}.",
        voiceover="Teams like yours already use it to {goal}.",
        on_screen="Built to {goal}",
        visual="Metric counters and testimonial cards animating in sequence",
        accent="rising arpeggio under each stat",
        broll=(
            "Metric counter rolling up to a headline number",
            "Testimonial quote card with {keyword} highlight",
            "Logo wall of happy customers",
        ),
    ),
    Beat.CTA: BeatTemplate(
        title="Call to Action",
        purpose="Convert attention into a single clear action.",
        voiceover="{cta}. {closer}",
        on_screen="{cta}",
        visual="End card with {brand} brand lockup and pulsing CTA button",
        accent="final stinger resolving on the tonic",
        broll=(
            "Pulsing CTA button with cursor tap",
            "Brand lockup over {keyword} motif",
            "QR code or link sticker sliding in",
        ),
    ),
}

BEAT_WEIGHTS: Dict[Beat, int] = {
    Beat.HOOK: 12,
    Beat.TENSION: 16,
    Beat.REVEAL: 20,
    Beat.FEATURE: 18,
    Beat.WORKFLOW: 16,
    Beat.PROOF: 14,
    Beat.CTA: 10,
}

BEAT_SEQUENCES: Dict[int, Tuple[Beat, ...]] = {
    4: (Beat.HOOK, Beat.TENSION, Beat.REVEAL, Beat.CTA),
    5: (Beat.HOOK, Beat.TENSION, Beat.REVEAL, Beat.PROOF, Beat.CTA),
    6: (Beat.HOOK, Beat.TENSION, Beat.REVEAL, Beat.FEATURE, Beat.PROOF, Beat.CTA),
    7: (Beat.HOOK, Beat.TENSION, Beat.REVEAL, Beat.FEATURE, Beat.WORKFLOW, Beat.PROOF, Beat.CTA),
}

# Upper duration bound (inclusive) for 4, 5 and 6 scenes; longer runs get 7.
_SHORT_FORM_THRESHOLDS = (30, 60, 90)
_LONG_FORM_THRESHOLDS = (25, 45, 75)


def select_beats(duration_seconds: int, platform: Platform) -> Tuple[Beat, ...]:
    """Pick the beat sequence for a duration on a given platform."""
    thresholds = _SHORT_FORM_THRESHOLDS if PLATFORM_PROFILES[platform].short_form else _LONG_FORM_THRESHOLDS
    count = 4
    for bound in thresholds:
        if duration_seconds <= bound:
            break
        count += 1
    return BEAT_SEQUENCES[count]


def allocate_durations(total: int, weights: Sequence[int], minimum: int = MIN_SCENE_SECONDS) -> List[int]:
    """Split `total` seconds proportionally to `weights`.

    Largest-remainder rounding keeps the sum exact; scenes under `minimum` are
    topped up one second at a time from the longest scene.
    """
    if not weights:
        raise ValueError("at least one weight is required")
    if total < minimum * len(weights):
        raise ValueError(f"{total}s cannot hold {len(weights)} scenes of at least {minimum}s")

    weight_sum = sum(weights)
    exact = [total * w / weight_sum for w in weights]
    durations = [math.floor(x) for x in exact]
    leftover = total - sum(durations)
    by_remainder = sorted(range(len(weights)), key=lambda i: (-(exact[i] - durations[i]), i))
    for i in by_remainder[:leftover]:
        durations[i] += 1

    for i in range(len(durations)):
        while durations[i] < minimum:
            donor = max(range(len(durations)), key=lambda j: (durations[j], -j))
            durations[donor] -= 1
            durations[i] += 1
    return durations


def _headline(prompt: str, words: int = 6) -> str:
    parts = prompt.split()
    text = " ".join(parts[:words])
    return text.rstrip(".,;:!?")


def _sentence(text: str) -> str:
    text = text.strip()
    return text if text.endswith((".", "!", "?")) else f"{text}."


def _lower_first(text: str) -> str:
    return text[:1].lower() + text[1:] if text else text


def _keyword_for(brief: Brief, index: int) -> str:
    if brief.brandKeywords:
        return brief.brandKeywords[index % len(brief.brandKeywords)]
    return _headline(brief.goal, words=3)


def compose_scenes(brief: Brief) -> List[Scene]:
    """Build the ordered, timed scene list for a brief."""
    beats = select_beats(brief.durationSeconds, brief.platform)
    durations = allocate_durations(brief.durationSeconds, [BEAT_WEIGHTS[b] for b in beats])
    tone = TONE_PROFILES[brief.tone]
    platform = PLATFORM_PROFILES[brief.platform]
    framing = ASPECT_FRAMING[brief.aspectRatio]

    scenes: List[Scene] = []
    for index, (beat, duration) in enumerate(zip(beats, durations)):
        template = BEAT_TEMPLATES[beat]
        keyword = _keyword_for(brief, index)
        fields = {
            "audience": brief.targetAudience,
            "goal": _lower_first(brief.goal.rstrip(".")),
            "prompt": _sentence(brief.prompt),
            "headline": _headline(brief.prompt),
            "keyword": keyword,
            "brand": " / ".join(brief.brandKeywords) or keyword,
            "cta": brief.callToAction.rstrip(".!"),
            "opener": tone.opener,
            "closer": tone.closer,
        }
        if index + 1 < len(beats):
            transitions = f"{tone.transition} into {BEAT_TEMPLATES[beats[index + 1]].title.lower()}"
        else:
            transitions = f"{tone.transition} onto a held end card"

        scenes.append(
            Scene(
                id=f"scene-{index + 1}",
                title=template.title,
                purpose=template.purpose.format(**fields),
                duration=duration,
                voiceover=template.voiceover.format(**fields),
                onScreenText=template.on_screen.format(**fields),
                visualDirection=(
                    f"{template.visual.format(**fields)}. {tone.camera.capitalize()} in {tone.palette}; "
                    f"{framing}, {platform.style}, {platform.safe_zone}."
                ),
                transitions=transitions,
                brollIdeas=[idea.format(**fields) for idea in template.broll[:BROLL_IDEAS_PER_SCENE]],
                soundDesign=f"{tone.sound.capitalize()}, {template.accent}; voice: {tone.voice}.",
            )
        )
    return scenes


__all__ = [
    "TONE_PROFILES",
    "PLATFORM_PROFILES",
    "ASPECT_FRAMING",
    "BEAT_TEMPLATES",
    "BEAT_WEIGHTS",
    "BEAT_SEQUENCES",
    "select_beats",
    "allocate_durations",
    "compose_scenes",
]
