from enum import Enum

class Tone(str, Enum):
    BOLD = "bold"
    FRIENDLY = "friendly"
    INSPIRATIONAL = "inspirational"
    PLAYFUL = "playful"
    SERIOUS = "serious"

class Platform(str, Enum):
    TIKTOK = "TikTok"
    INSTAGRAM_REELS = "Instagram Reels"
    YOUTUBE_SHORTS = "YouTube Shorts"
    LINKEDIN = "LinkedIn"
    YOUTUBE = "YouTube"

class AspectRatio(str, Enum):
    VERTICAL = "9:16"
    SQUARE = "1:1"
    HORIZONTAL = "16:9"

class Beat(str, Enum):
    HOOK = "hook"
    TENSION = "tension"
    REVEAL = "reveal"
    FEATURE = "feature"
    WORKFLOW = "workflow"
    PROOF = "proof"
    CTA = "cta"

class GatewayState(str, Enum):
    IDLE = "idle"
    REQUESTING = "requesting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
