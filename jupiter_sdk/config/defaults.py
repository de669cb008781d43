"""Default config locations and environment variable names."""

DEFAULT_CONFIG_PATH = "jupiter.yaml"

API_KEY_ENV = "JUPITER_API_KEY"
BASE_URL_ENV = "JUPITER_BASE_URL"
WALLET_ENV = "JUPITER_WALLET"
