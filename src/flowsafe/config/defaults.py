"""Default configuration values."""

# Minimum complexity score routed to the premium tier
DEFAULT_PREMIUM_THRESHOLD = 3

# Context length (characters) above which a task counts as long-context
DEFAULT_CONTEXT_LENGTH_THRESHOLD = 8000

# Priority/stakes levels that mark a task as quality-critical
DEFAULT_CRITICAL_PRIORITIES = [
    "high",
    "critical",
]

# Analysis types that count as complex
DEFAULT_COMPLEX_ANALYSIS_TYPES = [
    "complex",
    "advanced",
]

# Output types that require synthesis
DEFAULT_SYNTHESIS_OUTPUT_TYPES = [
    "strategic",
    "synthesis",
]

# Model names per tier
DEFAULT_PREMIUM_MODEL = "claude-3-5-sonnet"
DEFAULT_STANDARD_MODEL = "gemini-1.5-flash"

# Characters of input kept in global failure debug info
DEFAULT_PREVIEW_CHARS = 1000

DEFAULT_LOG_LEVEL = "WARNING"
