"""Policy loader for the JSON configuration file."""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from seb_kiosk.domain.errors import ConfigError, PolicyValidationError
from seb_kiosk.domain.models.config_load_result import ConfigLoadResult
from seb_kiosk.domain.models.policy import Policy

logger = logging.getLogger(__name__)

# JSON key -> expected type, as worded in error messages
_EXPECTED_TYPES: dict[str, str] = {
    "startUrl": "a string",
    "allowedDomains": "an array",
    "userAgentSuffix": "a string",
    "clientVersion": "a string",
    "clientType": "a string",
    "sendConfigKey": "a boolean",
}


def _field_alias(error: dict[str, Any]) -> str:
    loc = error.get("loc") or ()
    return str(loc[0]) if loc else "<root>"


def _message_for(exc: ValidationError) -> str:
    """Turn the first pydantic error into a field-specific message."""
    error = exc.errors()[0]
    field = _field_alias(error)
    if error.get("type") == "missing":
        return f"Missing required field: {field}"
    expected = _EXPECTED_TYPES.get(field)
    if expected is None:
        return f"Invalid field '{field}': {error.get('msg', 'invalid value')}"
    return f"Field '{field}' must be {expected}"


class PolicyLoader:
    """Loads a :class:`Policy` from a JSON file.

    A policy is either returned fully valid or not at all.
    """

    @staticmethod
    def parse(data: Any) -> Policy:
        """Build a policy from already-decoded JSON.

        Raises:
            ConfigError: Wrong shape, missing ``startUrl`` or a field of the wrong type.
            PolicyValidationError: ``startUrl`` is empty, malformed or not https.
        """
        if not isinstance(data, dict):
            raise ConfigError("Root JSON element is not an object")

        try:
            # JSON keys are the camelCase aliases only; field names are for Python callers.
            policy = Policy.model_validate(data, by_alias=True, by_name=False)
        except ValidationError as e:
            raise ConfigError(_message_for(e)) from e

        problem = policy.start_url_problem()
        if problem is not None:
            raise PolicyValidationError(problem)
        return policy

    @staticmethod
    def load(path: str | Path) -> Policy:
        """Read and validate the policy file at ``path``.

        Raises:
            ConfigError: The file is unreadable, is not JSON or has the wrong shape.
            PolicyValidationError: The start URL is unusable.
        """
        config_path = Path(path)
        try:
            raw = config_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Failed to open config file: {config_path}") from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ConfigError(f"JSON parse error at line {e.lineno} column {e.colno}: {e.msg}") from e

        return PolicyLoader.parse(data)

    @staticmethod
    def try_load(path: str | Path) -> ConfigLoadResult:
        """Like :meth:`load`, but reports failure in the result instead of raising."""
        try:
            policy = PolicyLoader.load(path)
        except PolicyValidationError as e:
            return ConfigLoadResult.failed(str(e), kind="policy")
        except ConfigError as e:
            return ConfigLoadResult.failed(str(e), kind="config")
        logger.debug(f"Loaded policy from {path}")
        return ConfigLoadResult.ok(policy)
