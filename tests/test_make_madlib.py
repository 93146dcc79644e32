"""End-to-end runs of the make_madlib command.

Run with: python -m pytest tests/test_make_madlib.py -v
"""
import logging

import pytest

import make_madlib
from madlib.errors import EXIT_USAGE


def _errors(caplog):
    return [record.getMessage() for record in caplog.records if record.levelno >= logging.ERROR]


class TestScenarios:
    """The worked examples: one word per category so every choice is fixed."""

    def test_success(self, tmp_path, write_file, story_words, caplog):
        words = write_file("words.json", story_words)
        story = write_file("story.txt", "My friend [person] was [adverb] [verb]ing until arriving at [place].\n")
        output = tmp_path / "out.txt"

        with caplog.at_level(logging.INFO, logger="madlib"):
            assert make_madlib.main([str(words), str(story), str(output)]) == 0

        assert output.read_text(encoding="utf-8") == "My friend Alice was quickly runing until arriving at park.\n"
        assert "Output file generated '{}'".format(output) in caplog.text

    def test_numeric_coercion(self, tmp_path, write_file):
        words = write_file("words.json", '[{"word":42,"type":"number"}]')
        story = write_file("story.txt", "I have [number] apples.")
        output = tmp_path / "out.txt"

        assert make_madlib.main([str(words), str(story), str(output)]) == 0
        assert output.read_text(encoding="utf-8").splitlines() == ["I have 42 apples."]

    def test_missing_field(self, tmp_path, write_file, caplog):
        words = write_file("words.json", '[{"word":"Alice"}]')
        story = write_file("story.txt", "[person]\n")
        output = tmp_path / "out.txt"

        assert make_madlib.main([str(words), str(story), str(output)]) == 5

        errors = _errors(caplog)
        assert len(errors) == 1
        assert "MissingField" in errors[0]
        assert str(words) in errors[0]
        assert "line 1" in errors[0]
        assert not output.exists()

    def test_unknown_category_in_dictionary(self, tmp_path, write_file, caplog):
        words = write_file("words.json", '[{"word":"Alice","type":"wizard"}]')
        story = write_file("story.txt", "[person]\n")
        output = tmp_path / "out.txt"

        assert make_madlib.main([str(words), str(story), str(output)]) == 6
        assert "UnknownCategory" in _errors(caplog)[0]
        assert not output.exists()

    def test_malformed_input(self, tmp_path, write_file, caplog):
        words = write_file("words.json", '[{"word":"Alice","type":"person"}')
        story = write_file("story.txt", "[person]\n")
        output = tmp_path / "out.txt"

        assert make_madlib.main([str(words), str(story), str(output)]) == 4
        assert "MalformedInput" in _errors(caplog)[0]
        assert not output.exists()

    def test_empty_lines_are_dropped(self, tmp_path, write_file):
        words = write_file("words.json", [{"word": "cat", "type": "noun"}])
        story = write_file("story.txt", "A [noun].\n\nB [noun].")
        output = tmp_path / "out.txt"

        assert make_madlib.main([str(words), str(story), str(output)]) == 0
        assert output.read_text(encoding="utf-8").splitlines() == ["A cat.", "B cat."]


class TestProperties:

    def test_count_and_preservation(self, tmp_path, write_file, story_words):
        lines = ["plain line", "", "  [ unclosed", "x[verb]ing", "", "", "[person]!"]
        words = write_file("words.json", story_words)
        story = write_file("story.txt", "\n".join(lines) + "\n")
        output = tmp_path / "out.txt"

        assert make_madlib.main([str(words), str(story), str(output)]) == 0

        result = output.read_text(encoding="utf-8").splitlines()
        assert result == ["plain line", "  [ unclosed", "xruning", "Alice!"]

    def test_same_seed_same_story(self, tmp_path, write_file):
        words = write_file("words.json", [{"word": w, "type": "noun"} for w in ["cat", "dog", "owl", "eel", "yak"]])
        story = write_file("story.txt", "[noun] [noun] [noun]\n[noun] [noun]\n")
        first = tmp_path / "first.txt"
        second = tmp_path / "second.txt"

        assert make_madlib.main([str(words), str(story), str(first), "--seed", "11"]) == 0
        assert make_madlib.main([str(words), str(story), str(second), "--seed", "11"]) == 0
        assert first.read_bytes() == second.read_bytes()


class TestFailures:

    def test_missing_dictionary(self, tmp_path, write_file, caplog):
        story = write_file("story.txt", "[noun]\n")
        output = tmp_path / "out.txt"

        assert make_madlib.main([str(tmp_path / "nope.json"), str(story), str(output)]) == 3
        assert "InputNotFound" in _errors(caplog)[0]
        assert not output.exists()

    def test_missing_template(self, tmp_path, write_file, story_words, caplog):
        words = write_file("words.json", story_words)
        output = tmp_path / "out.txt"

        assert make_madlib.main([str(words), str(tmp_path / "nope.txt"), str(output)]) == 3
        assert "nope.txt" in _errors(caplog)[0]
        assert not output.exists()

    def test_empty_pool_names_template_line(self, tmp_path, write_file, story_words, caplog):
        words = write_file("words.json", story_words)
        story = write_file("story.txt", "[person]\n\n[noun]\n")
        output = tmp_path / "out.txt"

        assert make_madlib.main([str(words), str(story), str(output)]) == 7
        message = _errors(caplog)[0]
        assert "EmptyPool" in message
        assert str(story) in message
        assert "line 3" in message
        assert not output.exists()

    @pytest.mark.parametrize("argv", [[], ["a"], ["a", "b"], ["a", "b", "c", "d"]])
    def test_wrong_argument_count(self, tmp_path, capsys, argv):
        with pytest.raises(SystemExit) as excinfo:
            make_madlib.main(argv)
        assert excinfo.value.code == EXIT_USAGE

        err = capsys.readouterr().err
        assert err.startswith("USAGE:")
        assert len(err.strip().splitlines()) == 1


def test_output_directory_is_reported_as_not_found(tmp_path, write_file, story_words, caplog):
    words = write_file("words.json", story_words)
    story = write_file("story.txt", "[person]\n")
    output = tmp_path / "outdir"
    output.mkdir()

    assert make_madlib.main([str(words), str(story), str(output)]) == 3
    message = _errors(caplog)[0]
    assert "InputNotFound" in message
    assert str(output) in message


def test_csv_dictionary(tmp_path, write_file):
    words = write_file("words.csv", "word,type\nAlice,person\n")
    story = write_file("story.txt", "Hello, [person].\n")
    output = tmp_path / "out.txt"

    assert make_madlib.main([str(words), str(story), str(output)]) == 0
    assert output.read_text(encoding="utf-8") == "Hello, Alice.\n"
