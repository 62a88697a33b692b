"""Runtime configuration for the MotionDirector function app"""

import os

# Remote synthesis (OpenAI Responses API)
RESPONSES_URL = os.getenv('MOTIONDIRECTOR_RESPONSES_URL', 'https://api.openai.com/v1/responses')
DEFAULT_MODEL = os.getenv('MOTIONDIRECTOR_DEFAULT_MODEL', 'gpt-4.1-mini')
REMOTE_TIMEOUT_SECONDS = 12.0  # fixed deadline, one attempt

# Logging
LOG_LEVEL = os.getenv('MOTIONDIRECTOR_LOG_LEVEL', 'INFO').upper()
AZURE_SDK_LOG_LEVEL = (os.getenv('AZURE_SDK_LOG_LEVEL') or '').upper()

# Brief bounds
MIN_DURATION_SECONDS = 20
MAX_DURATION_SECONDS = 150
MAX_PROMPT_CHARS = 600
MAX_BRAND_KEYWORDS = 12

# Scene composition
MIN_SCENE_SECONDS = 3
BROLL_IDEAS_PER_SCENE = 3
