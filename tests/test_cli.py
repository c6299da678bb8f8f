# tests\test_cli.py
import hashlib

import pytest

from pathfixer.cli import main
from pathfixer.core.domain.engine import apply_rules
from pathfixer.core.domain.rules import build_rules


def digest(path) -> str:
    return hashlib.sha256(path.read_bytes()).hexdigest()


class TestDryRun:
    def test_reports_and_leaves_file(self, page_file, test_settings, capsys):
        before = digest(page_file)

        code = main(["--dry-run", f"--file={page_file}"], config=test_settings)

        out = capsys.readouterr().out
        assert code == 0
        assert "Mode: DRY RUN (preview only)" in out
        assert "✓ CSS bundle paths (sb/): 1 replacement(s)" in out
        assert "Total replacements: 11" in out
        assert "--- Preview (first 5 changes) ---" in out
        assert "Line 4:" in out
        assert "... and 5 more changes" in out
        assert "ℹ️  Dry run mode - no files were modified" in out
        assert "✓ All paths appear to be correctly formatted" in out
        assert out.rstrip().endswith("=== Done ===")
        assert digest(page_file) == before

    def test_already_fixed_page(self, page_file, test_settings, capsys):
        main([f"--file={page_file}"], config=test_settings)
        capsys.readouterr()

        code = main(["--dry-run", f"--file={page_file}"], config=test_settings)

        out = capsys.readouterr().out
        assert code == 0
        assert "✓ No changes needed - all paths are already correct!" in out
        assert "--- Preview" not in out
        assert "--- Validation ---" not in out


class TestLive:
    def test_rewrites_file(self, page_file, sample_page, test_settings, capsys):
        code = main([f"--file={page_file}"], config=test_settings)

        out = capsys.readouterr().out
        expected = apply_rules(sample_page, build_rules(test_settings.rewrite_config())).text
        assert code == 0
        assert "Mode: LIVE (will modify files)" in out
        assert f"✅ Successfully updated {page_file}" in out
        assert "--- Validation ---" in out
        assert page_file.read_bytes().decode("utf-8") == expected

    def test_second_live_run_leaves_file_identical(self, page_file, test_settings, capsys):
        main([f"--file={page_file}"], config=test_settings)
        before = digest(page_file)

        code = main([f"--file={page_file}"], config=test_settings)

        out = capsys.readouterr().out
        assert code == 0
        assert out.count("✓ No changes needed") == 1
        assert digest(page_file) == before

    def test_default_file(self, tmp_path, sample_page, test_settings, capsys):
        target = tmp_path / "www.fecredit.com.vn" / "index.html"
        target.parent.mkdir()
        target.write_text(sample_page, encoding="utf-8")

        code = main([], config=test_settings)

        assert code == 0
        assert f"Target file: {target}" in capsys.readouterr().out
        assert 'href="/fecredit/www.fecredit.com.vn/sb/app.css"' in target.read_text(encoding="utf-8")


class TestMissingFile:
    def test_exits_with_failure(self, tmp_path, test_settings, capsys):
        missing = tmp_path / "nope.html"

        code = main([f"--file={missing}"], config=test_settings)

        captured = capsys.readouterr()
        assert code == 1
        assert f"Error: File not found: {missing}" in captured.err
        assert "--- Changes Summary ---" not in captured.out

    def test_unreadable_target_exits_with_failure(self, page_file, test_settings, capsys):
        """A path that passes the existence check but cannot be opened is reported, not raised."""
        target = f"{page_file}/"

        code = main([f"--file={target}"], config=test_settings)

        captured = capsys.readouterr()
        assert code == 1
        assert f"Error: File not found: {target}" in captured.err
        assert "--- Changes Summary ---" not in captured.out


class TestArguments:
    @pytest.mark.parametrize("flag", ["--dry", "--fi=index.html"])
    def test_abbreviations_rejected(self, flag, test_settings, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main([flag], config=test_settings)

        assert excinfo.value.code == 2
        assert "unrecognized arguments" in capsys.readouterr().err
