import io
import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from rich.console import Console

from mdchat.utils import RenderError, render_response
from mdchat.utils.render import load_style

STYLES_DIR = str(Path(__file__).resolve().parent.parent / "styles")


class TestRender(unittest.TestCase):
    def setUp(self):
        self.output = io.StringIO()
        self.console_patcher = patch(
            "mdchat.utils.render.console",
            Console(file=self.output, width=120, highlight=False),
        )
        self.console_patcher.start()
        self.tmp = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmp.cleanup()
        self.console_patcher.stop()

    def _styles_dir(self, path):
        return patch.dict(os.environ, {"MDCHAT_STYLES_DIR": path})

    def test_bundled_styles_load(self):
        with self._styles_dir(STYLES_DIR):
            for style in ("dark", "light"):
                with self.subTest(style=style):
                    theme, code_theme = load_style(style)
                    self.assertIn("markdown.h1", theme.styles)
                    self.assertTrue(code_theme)

    def test_renders_header_and_markdown(self):
        with self._styles_dir(STYLES_DIR):
            render_response("# Answer\n\nUse `git rebase`.", "dark", "Bot", "gpt-x")

        output = self.output.getvalue()
        self.assertIn("Bot (gpt-x):", output)
        self.assertIn("Answer", output)
        self.assertIn("git rebase", output)
        self.assertNotIn("# Answer", output)

    def test_missing_style(self):
        with self._styles_dir(self.tmp.name):
            with self.assertRaises(RenderError):
                render_response("hi", "nope", "Bot", "gpt-x")
        self.assertEqual(self.output.getvalue(), "")

    def test_malformed_style(self):
        Path(self.tmp.name, "broken.json").write_text("[1, 2]")
        Path(self.tmp.name, "badcolour.json").write_text(
            json.dumps({"markdown.h1": "bold not-a-colour-xyz"})
        )

        with self._styles_dir(self.tmp.name):
            for style in ("broken", "badcolour"):
                with self.subTest(style=style):
                    with self.assertRaises(RenderError):
                        load_style(style)

    def test_style_with_invalid_utf8(self):
        Path(self.tmp.name, "garbled.json").write_bytes(b'{"markdown.h1": "\xff\xfe bold"}')

        with self._styles_dir(self.tmp.name):
            with self.assertRaises(RenderError):
                load_style("garbled")

    def test_code_theme_defaults(self):
        Path(self.tmp.name, "plain.json").write_text(json.dumps({"markdown.h1": "bold"}))
        with self._styles_dir(self.tmp.name):
            _, code_theme = load_style("plain")
        self.assertEqual(code_theme, "monokai")
