import pytest


class ScriptedRng:
    """randint stub that replays fixed indices and checks the requested bounds."""
    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        value = self.values.pop(0) if self.values else a
        assert a <= value <= b, f"{value} outside [{a}, {b}]"
        return value


class ScriptedInput:
    """Stands in for input(): records prompts and raises EOFError when out of answers."""
    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, prompt=""):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@pytest.fixture
def scripted_rng():
    return ScriptedRng


@pytest.fixture
def scripted_input():
    return ScriptedInput


@pytest.fixture
def corpus_file(tmp_path):
    path = tmp_path / "cat.txt"
    path.write_text("the cat sat\non the mat\n", encoding="utf-8")
    return str(path)
