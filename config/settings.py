from dotenv import load_dotenv
import os

load_dotenv()


def get_env_int(var_name, default=0):
    value = os.getenv(var_name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


BECH32_MAX_LENGTH = get_env_int("BECH32_MAX_LENGTH", 90)
DEFAULT_HRP = os.getenv("DEFAULT_HRP", "xch")

CHIA_DB_PATH = os.getenv("CHIA_DB_PATH", ":memory:")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
