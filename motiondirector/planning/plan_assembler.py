"""
Deterministic plan assembly.

Combines a Brief with its composed scenes into a full Plan: narrative, captions,
soundtrack direction, generation prompts, automation steps and delivery checks.
"""
from __future__ import annotations

from typing import Dict, List, Sequence

from motiondirector.specs.common.enums import AspectRatio, Platform, Tone
from motiondirector.specs.common.errors import InternalSynthesisError, PlanValidationError
from motiondirector.specs.models.brief import Brief
from motiondirector.specs.models.plan import AiAssets, Plan, PlanMetadata, Scene, Soundtrack, validate_plan

from .scene_composer import ASPECT_FRAMING, PLATFORM_PROFILES, TONE_PROFILES, compose_scenes


TONE_SOUNDTRACK: Dict[Tone, Soundtrack] = {
    Tone.BOLD: Soundtrack(
        mood="Confident and electric",
        tempo="128 BPM, driving",
        instrumentation="Distorted synth bass, punchy 808 drums, risers and impact hits",
    ),
    Tone.FRIENDLY: Soundtrack(
        mood="Warm and upbeat",
        tempo="105 BPM, bouncy",
        instrumentation="Ukulele, hand claps, light acoustic guitar and glockenspiel",
    ),
    Tone.INSPIRATIONAL: Soundtrack(
        mood="Hopeful and soaring",
        tempo="90 BPM building to 120 BPM",
        instrumentation="Piano ostinato, swelling strings and cinematic percussion",
    ),
    Tone.PLAYFUL: Soundtrack(
        mood="Cheeky and bright",
        tempo="118 BPM, skipping",
        instrumentation="Pizzicato strings, whistles, marimba and toy percussion",
    ),
    Tone.SERIOUS: Soundtrack(
        mood="Focused and assured",
        tempo="80 BPM, steady",
        instrumentation="Ambient pads, low piano and a subtle pulse",
    ),
}

TONE_VOICES: Dict[Tone, str] = {
    Tone.BOLD: "Deep, high-energy narrator with crisp consonants and short pauses",
    Tone.FRIENDLY: "Warm, smiling narrator speaking like a helpful teammate",
    Tone.INSPIRATIONAL: "Resonant narrator with a slow build and lifted endings",
    Tone.PLAYFUL: "Bright, animated narrator with comic timing",
    Tone.SERIOUS: "Measured, low-register narrator with an even cadence",
}

EXPORT_RESOLUTION: Dict[AspectRatio, str] = {
    AspectRatio.VERTICAL: "1080x1920",
    AspectRatio.SQUARE: "1080x1080",
    AspectRatio.HORIZONTAL: "1920x1080",
}

PUBLISH_STEPS: Dict[Platform, str] = {
    Platform.TIKTOK: "Schedule through the TikTok Content Posting API at peak audience hours",
    Platform.INSTAGRAM_REELS: "Publish through the Instagram Graph API with a custom cover frame",
    Platform.YOUTUBE_SHORTS: "Upload through the YouTube Data API with the #Shorts tag",
    Platform.LINKEDIN: "Publish natively on LinkedIn with alt text and a first-comment link",
    Platform.YOUTUBE: "Upload through the YouTube Data API with chapters built from the scene list",
}


def _headline(prompt: str, words: int = 8) -> str:
    return " ".join(prompt.split()[:words]).rstrip(".,;:!?")


def assemble_plan(brief: Brief, scenes: Sequence[Scene]) -> Plan:
    """Build a Plan from a brief and its scenes."""
    tone = TONE_PROFILES[brief.tone]
    platform = PLATFORM_PROFILES[brief.platform]
    framing = ASPECT_FRAMING[brief.aspectRatio]
    resolution = EXPORT_RESOLUTION[brief.aspectRatio]
    headline = _headline(brief.prompt)
    goal = brief.goal.rstrip(".")
    cta = brief.callToAction.rstrip(".")
    brand = ", ".join(brief.brandKeywords) if brief.brandKeywords else headline

    summary = (
        f"A {len(scenes)}-scene {brief.tone.value} {brief.platform.value} spot "
        f"({brief.durationSeconds}s, {brief.aspectRatio.value}) for {brief.targetAudience}: "
        f"{headline}. Goal: {goal}."
    )
    hook = f"{tone.opener} {headline}, built for {brief.targetAudience} who want to {goal[:1].lower() + goal[1:]}."

    images: List[str] = [f"Hero key art: {headline}, {tone.palette}, {framing}"]
    images.extend(f"Brand texture plate around '{keyword}', {tone.palette}" for keyword in brief.brandKeywords)
    images.append(f"{brief.platform.value} cover frame with the title '{scenes[0].onScreenText}'")

    motion: List[str] = [
        f"{scene.title}: {tone.camera}, {scene.duration}s, {scene.transitions.lower()}"
        for scene in scenes[:-1]
    ]
    motion.append(f"CTA end card: {cta} ({brand} lockup, {platform.style})")

    automation = [
        f"Generate voiceover per scene with the '{brief.tone.value}' voice profile and align to scene timings",
        f"Render image plates for each scene at {resolution}",
        f"Assemble {len(scenes)} scenes in order with {tone.transition.lower()} transitions",
    ]
    if brief.includeCaptions:
        automation.append("Burn in captions from the caption pack and export an SRT sidecar")
    else:
        automation.append("Export a clean master without burned-in captions")
    automation.append(PUBLISH_STEPS[brief.platform])

    checklist = [
        f"Export {resolution} ({brief.aspectRatio.value}) H.264 at 30 fps",
        f"Runtime is {brief.durationSeconds}s across {len(scenes)} scenes",
        f"Keep {platform.safe_zone}",
        f"CTA '{cta}' readable for the full final {scenes[-1].duration}s",
        "Loudness normalized to -14 LUFS integrated",
    ]
    if brief.includeCaptions:
        checklist.append("Captions proofread and synced to voiceover")
    else:
        checklist.append("On-screen text carries the message with sound off")
    if platform.short_form:
        checklist.append("First frame works as a thumbnail and the loop restarts cleanly")
    else:
        checklist.append("Custom thumbnail and description copy approved")

    return Plan(
        summary=summary,
        hook=hook,
        narrativeArc=[f"{scene.title}: {scene.purpose}" for scene in scenes],
        scenes=list(scenes),
        captions=[scene.onScreenText for scene in scenes] if brief.includeCaptions else [],
        soundtrack=TONE_SOUNDTRACK[brief.tone],
        aiAssets=AiAssets(images=images, voice=TONE_VOICES[brief.tone], motion=motion),
        automation=automation,
        deliveryChecklist=checklist,
        metadata=PlanMetadata(
            durationSeconds=brief.durationSeconds,
            aspectRatio=brief.aspectRatio.value,
            platform=brief.platform.value,
        ),
    )


def guard_plan(plan: Plan, brief: Brief) -> Plan:
    """Re-check an assembled plan before it leaves the deterministic path."""
    try:
        checked = validate_plan(plan.model_dump(mode="json"))
    except PlanValidationError as exc:
        raise InternalSynthesisError("Assembled plan failed validation", details=exc.details) from exc

    problems: List[str] = []
    if checked.total_duration != brief.durationSeconds:
        problems.append(f"scene durations sum to {checked.total_duration}s, expected {brief.durationSeconds}s")
    expected_captions = len(checked.scenes) if brief.includeCaptions else 0
    if len(checked.captions) != expected_captions:
        problems.append(f"{len(checked.captions)} captions, expected {expected_captions}")
    if (
        checked.metadata.durationSeconds != brief.durationSeconds
        or checked.metadata.platform != brief.platform.value
        or checked.metadata.aspectRatio != brief.aspectRatio.value
    ):
        problems.append("metadata does not mirror the brief")
    if problems:
        raise InternalSynthesisError("Assembled plan is inconsistent", details={"problems": problems})
    return checked


def build_plan(brief: Brief) -> Plan:
    """Deterministic path: compose scenes, assemble, guard."""
    return guard_plan(assemble_plan(brief, compose_scenes(brief)), brief)


def build_single_scene_plan(brief: Brief) -> Plan:
    """Last-resort plan with one scene spanning the whole runtime."""
    cta = brief.callToAction.rstrip(".")
    scene = Scene(
        id="scene-1",
        title="Full Spot",
        purpose=f"Deliver the full message to {brief.targetAudience}.",
        duration=brief.durationSeconds,
        voiceover=f"{brief.prompt.rstrip('.')}. {cta}.",
        onScreenText=cta,
        visualDirection=f"Single continuous shot, {ASPECT_FRAMING[brief.aspectRatio]}.",
        transitions="Cut to end card",
        brollIdeas=[],
        soundDesign="Soundtrack bed only.",
    )
    return Plan(
        summary=f"Single-scene {brief.platform.value} fallback ({brief.durationSeconds}s): {_headline(brief.prompt)}.",
        hook=_headline(brief.prompt),
        narrativeArc=[f"{scene.title}: {scene.purpose}"],
        scenes=[scene],
        captions=[scene.onScreenText] if brief.includeCaptions else [],
        soundtrack=TONE_SOUNDTRACK[brief.tone],
        aiAssets=AiAssets(images=[], voice=TONE_VOICES[brief.tone], motion=[f"CTA end card: {cta}"]),
        automation=[PUBLISH_STEPS[brief.platform]],
        deliveryChecklist=[f"Runtime is {brief.durationSeconds}s"],
        metadata=PlanMetadata(
            durationSeconds=brief.durationSeconds,
            aspectRatio=brief.aspectRatio.value,
            platform=brief.platform.value,
        ),
    )


__all__ = [
    "TONE_SOUNDTRACK",
    "TONE_VOICES",
    "assemble_plan",
    "guard_plan",
    "build_plan",
    "build_single_scene_plan",
]
