"""Tests for tagcloud.cli module."""

from pathlib import Path
from unittest.mock import patch

import pytest

from tagcloud.cli import main, parse_word_count
from tagcloud.core.errors import MalformedNumberError


@pytest.fixture
def input_file(tmp_path: Path) -> Path:
    """Create an input text file with six distinct words."""
    path = tmp_path / "input.txt"
    path.write_text("the cat sat on the mat the cat ran\n")
    return path


class TestParseWordCount:
    """Tests for parse_word_count function."""

    def test_parses_integer(self) -> None:
        """Test parsing with surrounding whitespace."""
        assert parse_word_count(" 12\n") == 12

    def test_rejects_non_integer(self) -> None:
        """Non-integers raise MalformedNumberError."""
        with pytest.raises(MalformedNumberError):
            parse_word_count("twelve")
        with pytest.raises(MalformedNumberError):
            parse_word_count("1.5")


class TestCLIArguments:
    """Tests for the non-interactive CLI."""

    def test_generates_cloud(self, input_file: Path, tmp_path: Path, capsys) -> None:
        """Test that a cloud is written and summarized."""
        output = tmp_path / "cloud.html"
        with patch("sys.argv", ["tagcloud", str(input_file), "-o", str(output), "-n", "3"]):
            result = main()

        assert result == 0
        html = output.read_text()
        assert "<h2>Top 3 words in" in html
        assert html.index(">cat<") < html.index(">mat<") < html.index(">the<")
        assert "Top 3 of 6 words" in capsys.readouterr().out

    def test_missing_input_returns_error(self, tmp_path: Path, capsys) -> None:
        """A missing input file returns 1 and writes nothing."""
        output = tmp_path / "cloud.html"
        with patch("sys.argv", ["tagcloud", str(tmp_path / "none.txt"), "-o", str(output), "-n", "1"]):
            result = main()

        assert result == 1
        assert not output.exists()
        assert "Error" in capsys.readouterr().err

    def test_out_of_range_count_returns_error(self, input_file: Path, tmp_path: Path, capsys) -> None:
        """A count beyond the distinct words returns 1."""
        output = tmp_path / "cloud.html"
        with patch("sys.argv", ["tagcloud", str(input_file), "-o", str(output), "-n", "7"]):
            result = main()

        assert result == 1
        assert not output.exists()
        assert "outside the valid range" in capsys.readouterr().err

    def test_non_numeric_count_returns_error(self, input_file: Path, tmp_path: Path, capsys) -> None:
        """A non-numeric count returns 1."""
        output = tmp_path / "cloud.html"
        with patch("sys.argv", ["tagcloud", str(input_file), "-o", str(output), "-n", "lots"]):
            result = main()

        assert result == 1
        assert "not an integer" in capsys.readouterr().err

    def test_missing_config_returns_error(self, input_file: Path, tmp_path: Path) -> None:
        """A missing config file returns 1."""
        with patch(
            "sys.argv",
            ["tagcloud", str(input_file), "-o", str(tmp_path / "c.html"), "-n", "1",
             "--config", str(tmp_path / "none.yml")],
        ):
            assert main() == 1

    def test_unknown_encoding_returns_error(self, input_file: Path, tmp_path: Path, capsys) -> None:
        """An unknown --encoding returns 1 without a traceback."""
        output = tmp_path / "cloud.html"
        with patch(
            "sys.argv",
            ["tagcloud", str(input_file), "-o", str(output), "-n", "1", "--encoding", "bogus"],
        ):
            result = main()

        assert result == 1
        assert not output.exists()
        assert "encoding" in capsys.readouterr().err

    def test_unusable_cache_dir_returns_error(self, tmp_path: Path, capsys) -> None:
        """A cache dir that cannot be created is reported for URL inputs."""
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        config = tmp_path / "tagcloud.yml"
        config.write_text(f"cache_dir: {blocker / 'sub'}\n")
        output = tmp_path / "cloud.html"

        with patch(
            "sys.argv",
            ["tagcloud", "https://example.com/book.txt", "-o", str(output), "-n", "1",
             "--config", str(config)],
        ), patch("tagcloud.url.requests.get") as mock_get:
            result = main()

        assert result == 1
        assert not output.exists()
        mock_get.assert_not_called()
        assert "Error opening files" in capsys.readouterr().err

    def test_stylesheet_override(self, input_file: Path, tmp_path: Path) -> None:
        """--stylesheet replaces the linked stylesheet."""
        output = tmp_path / "cloud.html"
        with patch(
            "sys.argv",
            ["tagcloud", str(input_file), "-o", str(output), "-n", "1", "--stylesheet", "my.css"],
        ):
            assert main() == 0

        assert 'href="my.css"' in output.read_text()

    def test_help_shows_usage(self, capsys) -> None:
        """Test that --help shows usage information."""
        with patch("sys.argv", ["tagcloud", "--help"]):
            with pytest.raises(SystemExit) as exc_info:
                main()
            assert exc_info.value.code == 0

        assert "tag cloud" in capsys.readouterr().out


class TestCLIInteractive:
    """Tests for prompting when arguments are omitted."""

    def test_prompts_for_everything(self, input_file: Path, tmp_path: Path) -> None:
        """Input, output and N are read from prompts."""
        output = tmp_path / "cloud.html"
        answers = [str(input_file), str(output), "2"]

        with patch("sys.argv", ["tagcloud"]), patch("builtins.input", side_effect=answers):
            result = main()

        assert result == 0
        assert output.read_text().count("<span") == 2

    def test_reprompts_out_of_range(self, input_file: Path, tmp_path: Path, capsys) -> None:
        """Out-of-range counts are asked again."""
        output = tmp_path / "cloud.html"

        with patch("sys.argv", ["tagcloud", str(input_file), "-o", str(output)]), \
             patch("builtins.input", side_effect=["-1", "10", "6"]) as mock_input:
            result = main()

        assert result == 0
        assert mock_input.call_count == 3
        assert capsys.readouterr().out.count("Input outside range.") == 2
        assert output.read_text().count("<span") == 6

    def test_non_numeric_prompt_aborts(self, input_file: Path, tmp_path: Path, capsys) -> None:
        """A non-numeric answer aborts with 1."""
        output = tmp_path / "cloud.html"

        with patch("sys.argv", ["tagcloud", str(input_file), "-o", str(output)]), \
             patch("builtins.input", side_effect=["abc"]):
            result = main()

        assert result == 1
        assert not output.exists()
        assert "not an integer" in capsys.readouterr().err

    def test_closed_stdin_returns_error(self, tmp_path: Path) -> None:
        """End of input while prompting returns 1."""
        with patch("sys.argv", ["tagcloud"]), patch("builtins.input", side_effect=EOFError):
            assert main() == 1


class TestCLIClean:
    """Tests for --clean and --clean-list."""

    @pytest.fixture(autouse=True)
    def _isolate_cache(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Keep the default download cache inside the test directory."""
        monkeypatch.chdir(tmp_path)

    def test_clean_list(self, tmp_path: Path, capsys) -> None:
        """--clean-list shows existing files without removing them."""
        output = tmp_path / "cloud.html"
        output.write_text("<html></html>")

        with patch("sys.argv", ["tagcloud", "-o", str(output), "--clean-list"]):
            result = main()

        assert result == 0
        assert output.exists()
        assert str(output) in capsys.readouterr().out

    def test_clean_permanent(self, tmp_path: Path) -> None:
        """--clean --permanent -y deletes the output."""
        output = tmp_path / "cloud.html"
        output.write_text("<html></html>")

        with patch("sys.argv", ["tagcloud", "-o", str(output), "--clean", "--permanent", "-y"]):
            result = main()

        assert result == 0
        assert not output.exists()

    def test_clean_cancelled(self, tmp_path: Path, capsys) -> None:
        """Declining the confirmation keeps files."""
        output = tmp_path / "cloud.html"
        output.write_text("<html></html>")

        with patch("sys.argv", ["tagcloud", "-o", str(output), "--clean"]), \
             patch("builtins.input", return_value="n"):
            result = main()

        assert result == 0
        assert output.exists()
        assert "Cancelled." in capsys.readouterr().out

    def test_clean_nothing(self, tmp_path: Path, capsys) -> None:
        """Nothing to clean is not an error."""
        with patch("sys.argv", ["tagcloud", "-o", str(tmp_path / "none.html"), "--clean", "-y"]):
            assert main() == 0
        assert "No files to clean." in capsys.readouterr().out
