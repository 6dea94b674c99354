import json
import subprocess
import sys
import unittest

import yaml


def _run(*args: str, stdin: str | None = None) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, "-m", "souptag.cli_render", *args],
        input=stdin,
        capture_output=True,
        text=True,
    )


class CliRenderTest(unittest.TestCase):
    def test_renders_markup_argument(self) -> None:
        result = _run('<div class="class1 class2" id="divid">inner text<!-- Comment --></div>')

        self.assertEqual(result.returncode, 0, result.stderr)
        self.assertEqual(result.stdout, '<div id="divid" class="class1 class2">inner text<!-- Comment --></div>\n')

    def test_reads_stdin_when_no_argument(self) -> None:
        result = _run("--parser", "lxml", stdin="<select><option>x</option></select>")

        self.assertEqual(result.returncode, 0, result.stderr)
        self.assertEqual(result.stdout, "<select><option>x</option></select>\n")

    def test_json_tree_dump(self) -> None:
        result = _run("--format", "json", '<input type="checkbox" checked>')

        self.assertEqual(result.returncode, 0, result.stderr)
        tree = json.loads(result.stdout)
        self.assertEqual(tree["kind"], "checkbox")
        self.assertTrue(tree["checked"])
        self.assertEqual(tree["attrs"], {"type": "checkbox", "checked": ""})

    def test_yaml_tree_dump(self) -> None:
        result = _run("--format", "yaml", '<a href="/x">go</a>')

        self.assertEqual(result.returncode, 0, result.stderr)
        tree = yaml.safe_load(result.stdout)
        self.assertEqual(tree["kind"], "link")
        self.assertEqual(tree["children"], [{"kind": "literal", "text": "go"}])

    def test_raw_text_flag(self) -> None:
        result = _run("--raw-text", "<p>a &amp; b</p>")
        self.assertEqual(result.stdout, "<p>a & b</p>\n")

    def test_warns_about_ignored_siblings(self) -> None:
        result = _run("<p>one</p><p>two</p>")

        self.assertEqual(result.returncode, 0, result.stderr)
        self.assertEqual(result.stdout, "<p>one</p>\n")
        self.assertIn("ignoring 1 top-level element", result.stderr)

    def test_lxml_head_elements_are_not_wrapped(self) -> None:
        result = _run("--parser", "lxml", '<meta charset="u"><div></div>')

        self.assertEqual(result.returncode, 0, result.stderr)
        self.assertEqual(result.stdout, '<meta charset="u" />\n')
        self.assertIn("ignoring 1 top-level element(s) after <meta>", result.stderr)

    def test_fails_without_element(self) -> None:
        result = _run("just text")

        self.assertEqual(result.returncode, 1)
        self.assertIn("no element", result.stderr)

    def test_rejects_unknown_parser(self) -> None:
        result = _run("--parser", "html5lib", "<p></p>")

        self.assertNotEqual(result.returncode, 0)
        self.assertIn("Invalid options", result.stderr)


if __name__ == "__main__":
    unittest.main()
