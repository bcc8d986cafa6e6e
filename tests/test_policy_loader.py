"""Tests for loading the policy file."""

import json
from pathlib import Path

import pytest

from seb_kiosk.adapters.config import PolicyLoader
from seb_kiosk.domain.errors import ConfigError, PolicyValidationError


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "policy.json"
    path.write_text(content, encoding="utf-8")
    return path


def _write_json(tmp_path: Path, data: object) -> Path:
    return _write(tmp_path, json.dumps(data))


class TestLoadValidPolicy:
    """Tests for successful loads."""

    def test_full_policy_is_loaded(self, tmp_path: Path) -> None:
        """Given every field, when loading, then the policy carries them all."""
        path = _write_json(
            tmp_path,
            {
                "startUrl": "https://exam.example.com",
                "allowedDomains": ["example.com", "cdn.net"],
                "userAgentSuffix": "SEB/3.0",
                "clientVersion": "3.0.0",
                "clientType": "SEB-Kiosk",
                "sendConfigKey": False,
            },
        )

        policy = PolicyLoader.load(path)

        assert policy.start_url == "https://exam.example.com"
        assert policy.allowed_domains == ("example.com", "cdn.net")
        assert policy.user_agent_suffix == "SEB/3.0"
        assert policy.get_client_version() == "3.0.0"
        assert policy.get_client_type() == "SEB-Kiosk"
        assert policy.send_config_key is False

    def test_minimal_policy_gets_defaults(self, tmp_path: Path) -> None:
        path = _write_json(tmp_path, {"startUrl": "https://x.com"})

        policy = PolicyLoader.load(str(path))

        assert policy.allowed_domains == ()
        assert policy.send_config_key is True
        assert policy.get_client_version() == "0.1.0"

    def test_unknown_keys_are_ignored(self, tmp_path: Path) -> None:
        path = _write_json(tmp_path, {"startUrl": "https://x.com", "browserExamKey": "abc"})

        assert PolicyLoader.load(path).start_url == "https://x.com"

    def test_non_string_domain_entries_are_skipped(self, tmp_path: Path) -> None:
        path = _write_json(tmp_path, {"startUrl": "https://x.com", "allowedDomains": ["a.com", 42, "b.com"]})

        assert PolicyLoader.load(path).allowed_domains == ("a.com", "b.com")


class TestLoadInvalidPolicy:
    """Tests for rejected policy files."""

    def test_missing_start_url(self, tmp_path: Path) -> None:
        path = _write_json(tmp_path, {"allowedDomains": ["x.com"]})

        with pytest.raises(ConfigError, match="Missing required field: startUrl"):
            PolicyLoader.load(path)

    def test_field_names_are_not_accepted_as_keys(self, tmp_path: Path) -> None:
        """Given snake_case keys only, when loading, then startUrl is still reported missing."""
        path = _write_json(
            tmp_path,
            {"start_url": "https://x.com", "allowed_domains": ["x.com"], "send_config_key": False},
        )

        with pytest.raises(ConfigError, match="Missing required field: startUrl"):
            PolicyLoader.load(path)

    def test_field_names_do_not_override_aliases(self, tmp_path: Path) -> None:
        path = _write_json(
            tmp_path,
            {"startUrl": "https://x.com", "allowedDomains": ["x.com"], "allowed_domains": ["evil.com"]},
        )

        policy = PolicyLoader.load(path)

        assert policy.allowed_domains == ("x.com",)
        assert policy.send_config_key is True

    def test_send_config_key_must_be_boolean(self, tmp_path: Path) -> None:
        """Given sendConfigKey "yes", when loading, then it is rejected rather than coerced."""
        path = _write_json(tmp_path, {"startUrl": "https://x.com", "sendConfigKey": "yes"})

        with pytest.raises(ConfigError, match="Field 'sendConfigKey' must be a boolean"):
            PolicyLoader.load(path)

    def test_allowed_domains_must_be_array(self, tmp_path: Path) -> None:
        path = _write_json(tmp_path, {"startUrl": "https://x.com", "allowedDomains": "x.com"})

        with pytest.raises(ConfigError, match="Field 'allowedDomains' must be an array"):
            PolicyLoader.load(path)

    def test_start_url_must_be_string(self, tmp_path: Path) -> None:
        path = _write_json(tmp_path, {"startUrl": 5})

        with pytest.raises(ConfigError, match="Field 'startUrl' must be a string"):
            PolicyLoader.load(path)

    def test_http_start_url_is_a_validation_error(self, tmp_path: Path) -> None:
        path = _write_json(tmp_path, {"startUrl": "http://x.com"})

        with pytest.raises(PolicyValidationError, match="startUrl must use HTTPS scheme, got: http"):
            PolicyLoader.load(path)

    def test_empty_start_url_is_a_validation_error(self, tmp_path: Path) -> None:
        path = _write_json(tmp_path, {"startUrl": ""})

        with pytest.raises(PolicyValidationError, match="cannot be empty"):
            PolicyLoader.load(path)

    def test_malformed_json(self, tmp_path: Path) -> None:
        path = _write(tmp_path, '{"startUrl": "https://x.com",')

        with pytest.raises(ConfigError, match="JSON parse error at line 1"):
            PolicyLoader.load(path)

    def test_root_must_be_object(self, tmp_path: Path) -> None:
        path = _write_json(tmp_path, ["https://x.com"])

        with pytest.raises(ConfigError, match="Root JSON element is not an object"):
            PolicyLoader.load(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "absent.json"

        with pytest.raises(ConfigError, match="Failed to open config file"):
            PolicyLoader.load(path)

    def test_policy_error_is_a_config_error(self) -> None:
        assert issubclass(PolicyValidationError, ConfigError)


class TestTryLoad:
    """try_load reports failures in the result."""

    def test_success(self, tmp_path: Path) -> None:
        result = PolicyLoader.try_load(_write_json(tmp_path, {"startUrl": "https://x.com"}))

        assert result.success is True
        assert result.policy is not None
        assert result.error_message is None

    def test_config_failure(self, tmp_path: Path) -> None:
        result = PolicyLoader.try_load(tmp_path / "absent.json")

        assert result.success is False
        assert result.policy is None
        assert result.error_kind == "config"

    def test_policy_failure(self, tmp_path: Path) -> None:
        result = PolicyLoader.try_load(_write_json(tmp_path, {"startUrl": "ftp://x.com"}))

        assert result.success is False
        assert result.error_kind == "policy"
        assert result.error_message == "startUrl must use HTTPS scheme, got: ftp"
