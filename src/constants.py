"""All magic values live here — no inline literals anywhere else."""

# Providers
PROVIDER_OPENAI = "openai"
PROVIDER_GROQ = "groq"

OPENAI_BASE_URL = "https://api.openai.com/v1"
GROQ_BASE_URL = "https://api.groq.com/openai/v1"

# OpenAI transcription models
OPENAI_MODELS = ("whisper-1", "gpt-4o-transcribe", "gpt-4o-mini-transcribe")
OPENAI_DEFAULT_MODEL = "gpt-4o-mini-transcribe"
OPENAI_KEY_PREFIX = "sk-"

# Groq only serves these two; anything else falls back to the default.
GROQ_MODELS = ("whisper-large-v3", "whisper-large-v3-turbo")
GROQ_DEFAULT_MODEL = "whisper-large-v3"
GROQ_KEY_PREFIX = "gsk_"

# Request shaping
RESPONSE_FORMAT = "json"
TEMPERATURE_MIN: float = 0.0
TEMPERATURE_MAX: float = 1.0
MIN_KEY_LENGTH = 20

# Config defaults
DEFAULT_PROVIDER = PROVIDER_OPENAI
DEFAULT_TEMPERATURE = "0.0"
DEFAULT_LANGUAGE = "en"
DEFAULT_REQUEST_TIMEOUT = "30"
DEFAULT_MAX_RETRIES = "1"
DEFAULT_LOG_LEVEL = "INFO"

# Credential masking
MASK_VISIBLE_CHARS = 5
MASK_FILL = "•••••"
MASK_SHORT = "***"
MASK_EMPTY = "Not set"

# Credential problems
MSG_KEY_EMPTY = "API key is empty"
MSG_KEY_WHITESPACE = "API key contains whitespace"
MSG_KEY_NOT_ASCII = "API key contains non-printable or non-ASCII characters"

# Log messages
MSG_KEY_FORMAT_UNUSUAL = "%s API key %s has an unusual format"
MSG_VALIDATING_KEY = "Validating %s API key %s"
MSG_KEY_VALID = "%s API key validated"
MSG_KEY_REJECTED = "%s API key rejected: %s"
MSG_TRANSCRIBING = "Transcribing %s with %s model %s"
MSG_TRANSCRIBED = "%s transcribed %s (%.1fs)"
MSG_TRANSCRIBE_FAILED = "%s transcription failed: %s"
MSG_TEMPERATURE_CLAMPED = "Temperature %s clamped to %s"
MSG_MODEL_FALLBACK = "%s does not serve model %r — using %s"
MSG_MODEL_PASSTHROUGH = "Model %r is not a known OpenAI transcription model, sending as-is"
MSG_PROVIDER_CREATED = "Created %s transcription provider"
MSG_STARTING = "Starting with %s provider, API key %s"

# Error details
MSG_AUDIO_EMPTY = "Audio file is empty"
MSG_AUDIO_UNREADABLE = "Cannot read audio file: %s"
MSG_NO_TEXT = "Response carried no transcript text"
MSG_EMPTY_TRANSCRIPT = "No speech recognized in the recording"
MSG_BAD_TEMPERATURE = "Temperature must be a finite number, got %s"
MSG_CANCELLED = "Operation was cancelled"
MSG_UNKNOWN_ERROR = "Unknown error"

# CLI replies
CMD_CHECK_KEY = "check-key"
CMD_TRANSCRIBE = "transcribe"
MSG_CLI_KEY_OK = "API key accepted by %s"
MSG_CLI_KEY_BAD = "API key rejected by %s: %s"
MSG_CLI_FAILED = "Transcription failed: %s"
