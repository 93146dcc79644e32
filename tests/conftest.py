import json

import pytest


class FirstChoice(object):
    """Random source that always picks the first word of a pool."""

    def __init__(self):
        self.calls = []

    def randrange(self, stop):
        self.calls.append(stop)
        return 0


@pytest.fixture
def first_choice():
    return FirstChoice()


@pytest.fixture
def write_file(tmp_path):
    def _write(name, content):
        path = tmp_path / name
        if not isinstance(content, str):
            content = json.dumps(content)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def story_words():
    return [
        {"word": "Alice", "type": "person"},
        {"word": "quickly", "type": "adverb"},
        {"word": "run", "type": "verb"},
        {"word": "park", "type": "place"},
    ]
