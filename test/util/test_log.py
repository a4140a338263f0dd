import unittest
from unittest.mock import patch

from pydantic import BaseModel

from util import log
from util.config import config


class Probe(BaseModel):
    url: str
    reachable: bool


class LogTest(unittest.TestCase):
    original_log_level: str

    def setUp(self):
        self.original_log_level = config.log_level

    def tearDown(self):
        config.log_level = self.original_log_level

    def test_single_message_is_returned(self):
        config.log_level = "error"
        self.assertEqual(log.i("Hello"), "Hello")

    def test_multiple_arguments_form_a_tree(self):
        config.log_level = "error"
        message = log.d("Header", "first", "second")
        self.assertEqual(message, "Header\n ├─ first\n └─ second")

    def test_pydantic_arguments_are_dumped(self):
        config.log_level = "error"
        message = log.d("Probe", Probe(url = "https://example.org", reachable = True))
        self.assertIn("Probe: {'url': 'https://example.org', 'reachable': True}", message)

    def test_exceptions_are_referenced_in_message(self):
        config.log_level = "error"
        with patch("util.log.logger"):
            message = log.e("Failed", ValueError("boom"))
        self.assertEqual(message, "Failed\n ├─ ! ValueError (see below)")

    @patch("util.log.logger")
    def test_messages_below_level_are_skipped(self, mock_logger):
        config.log_level = "warn"
        log.i("Quiet")
        mock_logger.info.assert_not_called()

    @patch("util.log.logger")
    def test_messages_at_level_go_to_server_logger(self, mock_logger):
        config.log_level = "info"
        log.i("Loud")
        log.w("Louder")
        mock_logger.info.assert_called_once_with("Loud")
        mock_logger.warning.assert_called_once_with("Louder")

    @patch("util.log.logger")
    def test_exceptions_are_always_logged(self, mock_logger):
        config.log_level = "error"
        log.d("Hidden", RuntimeError("visible"))
        mock_logger.debug.assert_not_called()
        mock_logger.error.assert_any_call("Message: visible")

    @patch("builtins.print")
    @patch("util.log.logger")
    def test_local_level_prints_everything(self, mock_logger, mock_print):
        config.log_level = "local"
        log.t("Tracing")
        mock_print.assert_called_once_with("[T] Tracing")
        mock_logger.debug.assert_not_called()
