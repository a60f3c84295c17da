import pytest
from erlnew.utils.shell import yes

@pytest.mark.parametrize("answer, expected", [
    ("", True),
    ("y", True),
    ("Yes", True),
    ("  YES \n", True),
    ("n", False),
    ("no", False),
    ("sure", False),
])
def test_yes(answer, expected):
    assert yes("Continue?", input_func=lambda _prompt: answer) is expected

def test_yes_prompt_suffix():
    prompts = []
    yes("Continue?", input_func=lambda p: prompts.append(p) or "")
    assert prompts == ["Continue? [Yn] "]

def test_yes_eof_declines():
    def closed(_prompt):
        raise EOFError
    assert yes("Continue?", input_func=closed) is False
