import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

import review_helper.cli as cli
from review_helper.vcs.backend import BackendError, DiffSummary, DiffSummaryFile, RepositoryStatus


class DummyGitClient:
    def __init__(self, root, paths=None, status=None, fail=False):
        self.root = root
        self.paths = paths or []
        self._status = status or RepositoryStatus()
        self.fail = fail

    def diff_summary(self):
        if self.fail:
            raise BackendError("fatal: bad object")
        return DiffSummary(
            files=[DiffSummaryFile(file=p, insertions=1) for p in self.paths],
            insertions=len(self.paths),
        )

    def file_diff(self, path):
        return f"+change in {path}\n"

    def status(self):
        return self._status

    def diff_stat(self):
        return f" {len(self.paths)} files changed"


class CliTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.runner = CliRunner()
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def invoke(self, client, args, **kwargs):
        with patch.object(cli, "detect_repository", return_value=Path("/repo")):
            with patch.object(cli, "GitClient", return_value=client):
                return self.runner.invoke(cli.main, args, **kwargs)


class TestChangesCommand(CliTestCase):
    def test_lists_files(self) -> None:
        client = DummyGitClient(Path("/repo"), paths=["a.py", "dist/x.js"])
        result = self.invoke(client, ["changes", "--show-diff"])
        self.assertEqual(result.exit_code, cli.EXIT_SUCCESS, result.output)
        self.assertIn("Found 1 changed file", result.output)
        self.assertIn("+change in a.py", result.output)
        self.assertNotIn("dist/x.js", result.output)

    def test_json_output(self) -> None:
        client = DummyGitClient(Path("/repo"), paths=["a.py"])
        result = self.invoke(client, ["changes", "--json"])
        self.assertEqual(result.exit_code, cli.EXIT_SUCCESS)
        self.assertEqual(json.loads(result.output), [{"file": "a.py", "diff": "+change in a.py\n"}])

    def test_no_changes(self) -> None:
        result = self.invoke(DummyGitClient(Path("/repo")), ["changes"])
        self.assertEqual(result.exit_code, cli.EXIT_NO_CHANGES)

    def test_vcs_failure(self) -> None:
        result = self.invoke(DummyGitClient(Path("/repo"), fail=True), ["changes"])
        self.assertEqual(result.exit_code, cli.EXIT_VCS_FAILURE)

    def test_not_a_repository(self) -> None:
        with patch.object(cli.GitClient, "find_repo_root", return_value=None):
            result = self.runner.invoke(cli.main, ["changes", "--root", str(self.tmp)])
        self.assertEqual(result.exit_code, cli.EXIT_NO_REPO)


class TestCommitMessageCommand(CliTestCase):
    def test_prints_inferred_message(self) -> None:
        client = DummyGitClient(Path("/repo"), paths=["new.ts"], status=RepositoryStatus(created=["new.ts"]))
        result = self.invoke(client, ["commit-message"])
        self.assertEqual(result.exit_code, cli.EXIT_SUCCESS, result.output)
        self.assertTrue(result.output.startswith("feat(new): add new functionality to new"))

    def test_explicit_type_and_json(self) -> None:
        client = DummyGitClient(Path("/repo"), paths=["a.py"], status=RepositoryStatus(created=["a.py"]))
        result = self.invoke(client, ["commit-message", "--type", "chore", "--json"])
        self.assertEqual(result.exit_code, cli.EXIT_SUCCESS, result.output)
        data = json.loads(result.output)
        self.assertEqual(data["type"], "chore")
        self.assertEqual(data["files_changed"], 1)
        self.assertEqual(data["summary_text"], " 1 files changed")

    def test_invalid_type_is_usage_error(self) -> None:
        result = self.invoke(DummyGitClient(Path("/repo")), ["commit-message", "--type", "perf"])
        self.assertEqual(result.exit_code, cli.EXIT_INVALID_USAGE)

    def test_default_type_from_config(self) -> None:
        config_path = self.tmp / "config.json"
        config_path.write_text(json.dumps({"default_commit_type": "docs"}), encoding="utf-8")
        client = DummyGitClient(Path("/repo"), paths=["a.py"], status=RepositoryStatus(created=["a.py"]))
        with patch.dict(os.environ, {"REVIEW_HELPER_CONFIG": str(config_path)}):
            result = self.invoke(client, ["commit-message"])
        self.assertTrue(result.output.startswith("docs(a): update documentation for a"))

    def test_config_error(self) -> None:
        config_path = self.tmp / "config.json"
        config_path.write_text("{broken", encoding="utf-8")
        with patch.dict(os.environ, {"REVIEW_HELPER_CONFIG": str(config_path)}):
            result = self.invoke(DummyGitClient(Path("/repo")), ["commit-message"])
        self.assertEqual(result.exit_code, cli.EXIT_CONFIG_ERROR)


class TestReportCommand(CliTestCase):
    def test_writes_report_from_option(self) -> None:
        result = self.runner.invoke(
            cli.main, ["report", "--dir", str(self.tmp), "--name", "review", "--content", "hello"]
        )
        self.assertEqual(result.exit_code, cli.EXIT_SUCCESS, result.output)
        self.assertIn("hello", (self.tmp / "review.md").read_text(encoding="utf-8"))

    def test_reads_content_from_stdin(self) -> None:
        result = self.runner.invoke(
            cli.main, ["report", "--dir", str(self.tmp), "--name", "piped"], input="from stdin\n"
        )
        self.assertEqual(result.exit_code, cli.EXIT_SUCCESS, result.output)
        self.assertIn("from stdin", (self.tmp / "piped.md").read_text(encoding="utf-8"))

    def test_empty_content_rejected(self) -> None:
        result = self.runner.invoke(cli.main, ["report", "--dir", str(self.tmp), "--name", "r"], input="  \n")
        self.assertEqual(result.exit_code, cli.EXIT_INVALID_USAGE)

    def test_write_failure(self) -> None:
        missing = self.tmp / "missing"
        result = self.runner.invoke(cli.main, ["report", "--dir", str(missing), "--name", "r", "--content", "x"])
        self.assertEqual(result.exit_code, cli.EXIT_WRITE_FAILURE)


class TestReviewCommand(CliTestCase):
    def test_full_review(self) -> None:
        notes = self.tmp / "notes.md"
        notes.write_text("Consider adding tests.", encoding="utf-8")
        client = DummyGitClient(Path("/repo"), paths=["src/app.py"], status=RepositoryStatus(modified=["src/app.py"]))
        result = self.invoke(
            client,
            ["review", "--dir", str(self.tmp), "--name", "review", "--notes", str(notes)],
        )
        self.assertEqual(result.exit_code, cli.EXIT_SUCCESS, result.output)
        self.assertIn("Suggested commit message", result.output)
        text = (self.tmp / "review.md").read_text(encoding="utf-8")
        self.assertIn("- src/app.py", text)
        self.assertIn("fix(app): resolve issues in app", text)
        self.assertIn("Consider adding tests.", text)

    def test_review_without_changes(self) -> None:
        result = self.invoke(DummyGitClient(Path("/repo")), ["review", "--dir", str(self.tmp)])
        self.assertEqual(result.exit_code, cli.EXIT_NO_CHANGES)
        self.assertFalse(list(self.tmp.iterdir()))


class TestToolsCommand(CliTestCase):
    def test_lists_operations(self) -> None:
        result = self.runner.invoke(cli.main, ["tools"])
        self.assertEqual(result.exit_code, cli.EXIT_SUCCESS)
        for name in ("list_changes", "draft_commit_message", "write_report"):
            self.assertIn(name, result.output)


if __name__ == "__main__":
    unittest.main()
