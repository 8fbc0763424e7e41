import unittest
from unittest.mock import Mock, patch

import openai

from mdchat import CompletionError, OpenAIClientWrapper
from .test_base import make_reply


class TestClientWrapper(unittest.TestCase):
    def setUp(self):
        self.spinner_patcher = patch("mdchat.core.client.Spinner")
        self.mock_spinner_cls = self.spinner_patcher.start()
        self.mock_client = Mock()
        self.wrapper = OpenAIClientWrapper(self.mock_client)
        self.messages = [
            {"role": "system", "content": "be terse"},
            {"role": "user", "content": "2+2"},
        ]

    def tearDown(self):
        self.spinner_patcher.stop()

    def test_returns_first_choice_content(self):
        self.mock_client.chat.completions.create.return_value = make_reply("4")

        reply = self.wrapper.chat_completion(model="gpt-x", messages=self.messages)

        self.assertEqual(reply, "4")
        self.mock_client.chat.completions.create.assert_called_once_with(
            model="gpt-x", messages=self.messages
        )
        spinner = self.mock_spinner_cls.return_value
        spinner.start.assert_called_once()
        spinner.stop.assert_called_once()

    def test_none_content_becomes_empty_string(self):
        self.mock_client.chat.completions.create.return_value = make_reply(None)
        self.assertEqual(self.wrapper.chat_completion("gpt-x", self.messages), "")

    def test_api_error_is_wrapped(self):
        self.mock_client.chat.completions.create.side_effect = openai.OpenAIError("network down")

        with self.assertRaises(CompletionError) as ctx:
            self.wrapper.chat_completion("gpt-x", self.messages)

        self.assertIn("network down", str(ctx.exception))
        self.mock_spinner_cls.return_value.stop.assert_called_once()

    def test_empty_choices_is_an_error(self):
        self.mock_client.chat.completions.create.return_value = Mock(choices=[])

        with self.assertRaises(CompletionError):
            self.wrapper.chat_completion("gpt-x", self.messages)
