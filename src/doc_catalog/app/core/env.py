from __future__ import annotations

import os
import warnings
from enum import StrEnum
from functools import cache


class Env(StrEnum):
    LOCAL = "local"
    DEV   = "dev"
    TEST  = "test"
    PROD  = "prod"


ALIASES: dict[str, Env] = {
    "development": Env.DEV,
    "testing": Env.TEST,
    "preview": Env.TEST,
    "production": Env.PROD,
}

# Checked in order; the first one set wins.
ENV_VARS = ("CATALOG_ENV", "APP_ENV")


def normalize_env(raw: str | None) -> Env | None:
    if not raw:
        return None
    val = raw.strip().lower()
    try:
        return Env(val)
    except ValueError:
        return ALIASES.get(val)


@cache
def get_env() -> Env:
    """
    Resolve the catalog's environment once from CATALOG_ENV, then APP_ENV.

    Unset means LOCAL; an unknown value also means LOCAL, with a warning.
    """
    raw = next((os.environ[var] for var in ENV_VARS if os.getenv(var)), None)
    env = normalize_env(raw)
    if env is None:
        if raw:
            warnings.warn(
                f"Unrecognized environment '{raw}', defaulting to 'local'.",
                RuntimeWarning,
                stacklevel=2,
            )
        env = Env.LOCAL
    return env


def pick(*, prod, nonprod, env: Env | None = None):
    """Return ``prod`` in production and ``nonprod`` everywhere else."""
    return prod if (env or get_env()) is Env.PROD else nonprod
