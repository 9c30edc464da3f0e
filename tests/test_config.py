"""Unit tests for estimator.core.config: settings validation and defaults."""

import unittest

from pydantic import ValidationError

from estimator.core.config import Settings


def _settings(**kwargs: object) -> Settings:
    # _env_file=None keeps a developer's local .env out of the tests.
    return Settings(_env_file=None, **kwargs)


class TestSettingsDefaults(unittest.TestCase):
    """Defaults match the RHEL Jira instance's field ids."""

    def test_defaults(self) -> None:
        settings = _settings()
        self.assertEqual(settings.JIRA_PROJECT_KEY, "RHEL")
        self.assertEqual(settings.JIRA_STORY_POINTS_FIELD, "customfield_12310243")
        self.assertEqual(settings.JIRA_PRIORITY_FIELD, "priority")
        self.assertEqual(settings.JIRA_REQUEST_TIMEOUT_SEC, 30.0)


class TestSettingsValidation(unittest.TestCase):
    """Field validators normalize or reject values."""

    def test_base_url_trailing_slash_stripped(self) -> None:
        settings = _settings(JIRA_BASE_URL=" https://issues.example.com/ ")
        self.assertEqual(settings.JIRA_BASE_URL, "https://issues.example.com")

    def test_blank_base_url_is_none(self) -> None:
        self.assertIsNone(_settings(JIRA_BASE_URL="  ").JIRA_BASE_URL)

    def test_base_url_requires_http(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(JIRA_BASE_URL="ftp://issues.example.com")

    def test_project_key(self) -> None:
        self.assertEqual(_settings(JIRA_PROJECT_KEY="FOO").JIRA_PROJECT_KEY, "FOO")
        with self.assertRaises(ValidationError):
            _settings(JIRA_PROJECT_KEY="rhel")

    def test_timeout_range(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(JIRA_REQUEST_TIMEOUT_SEC=0)
        with self.assertRaises(ValidationError):
            _settings(JIRA_REQUEST_TIMEOUT_SEC=121)

    def test_empty_field_id_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(JIRA_STORY_POINTS_FIELD=" ")

    def test_log_level_normalized(self) -> None:
        self.assertEqual(_settings(LOG_LEVEL="debug").LOG_LEVEL, "DEBUG")
        with self.assertRaises(ValidationError):
            _settings(LOG_LEVEL="verbose")

    def test_color(self) -> None:
        self.assertTrue(_settings(COLOR=True, NO_COLOR=None).color_enabled)
        self.assertFalse(_settings(COLOR=False, NO_COLOR=None).color_enabled)
        self.assertFalse(_settings(COLOR=True, NO_COLOR="1").color_enabled)

    def test_token_is_secret(self) -> None:
        settings = _settings(JIRA_API_TOKEN="abc")
        self.assertEqual(settings.JIRA_API_TOKEN.get_secret_value(), "abc")
        self.assertNotIn("abc", repr(settings))
