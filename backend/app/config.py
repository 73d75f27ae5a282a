import os
from dataclasses import dataclass, field
from typing import Optional, Set

from dynaconf import Dynaconf

from backend.app.constants import DEFAULTS

from socialnet.config.settings import LoaderConfig, SocialNetConfig
from socialnet.utils.text import parse_characteristics


ENVVAR_PREFIX = "SOCIALNET"


def build_settings() -> Dynaconf:
    return Dynaconf(
        envvar_prefix=ENVVAR_PREFIX,
        load_dotenv=True,
        settings_files=[],
    )


def _get(settings: Dynaconf, key: str) -> str:
    value = settings.get(key, DEFAULTS[key])
    # Every key here is a plain string; take the environment value verbatim
    # instead of its TOML reading ("true" would otherwise become True).
    raw = os.environ.get(f"{ENVVAR_PREFIX}_{key}")
    if raw is not None:
        return raw
    return "" if value is None else str(value)


@dataclass(frozen=True)
class AppConfig:
    # ---------------- Data ----------------
    data_path: str = DEFAULTS["DATA_PATH"]

    # ---------------- Runner ----------------
    log_level: str = DEFAULTS["LOG_LEVEL"]
    message_keyword: str = DEFAULTS["MESSAGE_KEYWORD"]
    target_characteristics: str = DEFAULTS["TARGET_CHARACTERISTICS"]

    # ---------------- Socialnet Policy ----------------
    socialnet: SocialNetConfig = field(default_factory=SocialNetConfig)

    @classmethod
    def from_settings(cls, settings: Optional[Dynaconf] = None) -> "AppConfig":
        settings = settings if settings is not None else build_settings()
        return cls(
            data_path=_get(settings, "DATA_PATH"),
            log_level=_get(settings, "LOG_LEVEL").upper(),
            message_keyword=_get(settings, "MESSAGE_KEYWORD"),
            target_characteristics=_get(settings, "TARGET_CHARACTERISTICS"),
            socialnet=SocialNetConfig(
                loader=LoaderConfig(
                    edges_marker=_get(settings, "EDGES_MARKER"),
                    encoding=_get(settings, "FILE_ENCODING"),
                ),
            ),
        )

    def target_set(self) -> Set[str]:
        return parse_characteristics(self.target_characteristics)
