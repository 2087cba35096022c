import os
from dataclasses import dataclass

DEFAULT_BASE_URL = "http://www.kobis.or.kr/kobisopenapi/webservice/rest"


@dataclass(frozen=True)
class KobisConfig:
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    request_timeout: int = 30


@dataclass(frozen=True)
class AppConfig:
    kobis: KobisConfig
    log_level: str = "INFO"


def load_config() -> AppConfig:
    """Load and validate all configuration from environment variables."""
    missing = []

    def _get(name: str, default: str = "") -> str:
        val = os.environ.get(name, "").strip()
        if not val:
            if not default:
                missing.append(name)
            return default
        return val

    api_key = _get("KOBIS_API_KEY")
    base_url = _get("KOBIS_BASE_URL", DEFAULT_BASE_URL).rstrip("/")
    raw_timeout = _get("KOBIS_TIMEOUT", "30")
    log_level = _get("LOG_LEVEL", "INFO")

    if missing:
        raise ValueError(
            f"Missing required environment variables: {', '.join(missing)}"
        )

    try:
        timeout = int(raw_timeout)
    except ValueError:
        raise ValueError(f"KOBIS_TIMEOUT must be an integer, got '{raw_timeout}'")
    if timeout <= 0:
        raise ValueError(f"KOBIS_TIMEOUT must be positive, got {timeout}")

    return AppConfig(
        kobis=KobisConfig(
            api_key=api_key,
            base_url=base_url,
            request_timeout=timeout,
        ),
        log_level=log_level,
    )
