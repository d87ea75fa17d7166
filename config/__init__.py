"""Settings modules for the timekeeping library.

Each module defines UTC_OFFSET_MINUTES, OFFSET_NAME, STANDARD_ENTRY,
STANDARD_EXIT, DEBUG and LOG_LEVEL. HR_TIMEKEEPING_ENV picks one; APP_ENV is
honoured when the host application already sets it.
"""

import os

ENV_VARS = ("HR_TIMEKEEPING_ENV", "APP_ENV")

_MODULES = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
    "dev": "config.development",
    "development": "config.development",
}


def current_env() -> str:
    for name in ENV_VARS:
        value = os.getenv(name)
        if value:
            return value.strip().lower()
    return "development"


def get_settings_module() -> str:
    return _MODULES.get(current_env(), "config.development")
