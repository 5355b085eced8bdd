"""Load prompts from the packaged YAML file and build generator instructions."""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

import yaml

from astrovogue.core.errors import ConfigurationError
from astrovogue.core.logging import get_logger

logger = get_logger(__name__)

PROMPT_PATH = Path(__file__).parent / "prompts" / "prompt_versions.yaml"
KINDS = ("daily", "personalized")


@lru_cache(maxsize=4)
def _load_file(path: Path = PROMPT_PATH) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    logger.info(f"Loaded prompt file {path.name} (current={data.get('current')})")
    return data


def load_prompt(
    lang: str, kind: str, version_key: Optional[str] = None, path: Path = PROMPT_PATH
) -> Dict[str, str]:
    """Return ``{"system", "guidance"}`` for a language and request kind.

    Raises:
        ConfigurationError: the version, language or kind is not in the file.
    """
    data = _load_file(path)
    version_key = version_key or data.get("current", "v1")
    version_data = data.get("versions", {}).get(version_key)
    if not version_data:
        valid_keys = list(data.get("versions", {}).keys())
        raise ConfigurationError(
            f"Version '{version_key}' not found in {path.name}. Available: {valid_keys}"
        )

    prompt = version_data.get(lang, {}).get(kind)
    if not prompt or not prompt.get("system"):
        raise ConfigurationError(f"No '{kind}' prompt for language '{lang}' in {version_key}")
    return {"system": prompt["system"], "guidance": prompt.get("guidance", "")}


def validate_prompts(langs: Iterable[str]) -> None:
    for lang in langs:
        for kind in KINDS:
            load_prompt(lang, kind)


def build_user_prompt(
    kind: str,
    day: str,
    sun_name: str,
    rising_name: Optional[str],
    fields: Iterable[str],
    guidance: str,
) -> str:
    """JSON request descriptor, then the required keys and field guidance."""
    descriptor: Dict[str, Any] = {"kind": kind, "day": day, "sun": sun_name}
    if kind == "personalized":
        descriptor["rising"] = rising_name
    keys = ", ".join(fields)
    return (
        json.dumps(descriptor, ensure_ascii=False)
        + "\n"
        + f"Produce only these JSON keys: {{ {keys} }}. "
        + guidance
    )
