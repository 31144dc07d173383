import json

import pytest

import export_utils

SAMPLE_TOKENS = {
    "colors": {
        "primary": {"value": "#FF0000", "description": "Brand red"},
        "ink": {"value": "#222"},
        "overlay": {"value": "rgba(0, 0, 0, 0.5)"},
    },
    "spacing": {
        "sm": {"value": "4px"},
        "md": {"value": "8px"},
    },
    "typography": {
        "font-size": {
            "body": {"value": "16px"},
        }
    },
}


@pytest.fixture(autouse=True)
def reset_quiet():
    export_utils.set_quiet(False)
    yield
    export_utils.set_quiet(False)


@pytest.fixture
def sample_tokens():
    return json.loads(json.dumps(SAMPLE_TOKENS))


@pytest.fixture
def tokens_file(tmp_path, sample_tokens):
    path = tmp_path / "design-tokens.json"
    path.write_text(json.dumps(sample_tokens), encoding="utf-8")
    return path
