"""Static configuration for lazycommit.

User-provided values (the API key) live in ~/.lazycommit.yaml and are
handled by lazycommit.global_config. Everything here is fixed per release.
"""

# ============================================================
# CREDENTIALS
# ============================================================

# Environment variable checked before the config file
API_KEY_ENV_VAR = "OPENAI_TOKEN"

# Config file in the user's home directory and the key holding the API key
CONFIG_FILE_NAME = ".lazycommit.yaml"
API_KEY_CONFIG_KEY = "openai_api_key"


# ============================================================
# COMPLETION REQUEST
# ============================================================

OPENAI_BASE_URL = "https://api.openai.com/v1"
MODEL = "gpt-3.5-turbo"
MAX_TOKENS = 150

# Number of independent suggestions requested in a single call
NUM_SUGGESTIONS = 5
