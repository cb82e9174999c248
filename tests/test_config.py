from intervalset.config import ShellConfig


def test_defaults(monkeypatch):
    for name in ["INTERVALSET_LOG_LEVEL", "INTERVALSET_PROMPT", "INTERVALSET_TITLE"]:
        monkeypatch.delenv(name, raising=False)

    config = ShellConfig()

    assert config.log_level == "WARNING"
    assert config.prompt == "Enter choice: "
    assert config.title == "Interval Manager"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("INTERVALSET_TITLE", "Ranges")
    monkeypatch.setenv("INTERVALSET_LOG_LEVEL", "DEBUG")

    config = ShellConfig()

    assert config.title == "Ranges"
    assert config.log_level == "DEBUG"


def test_keyword_overrides_environment(monkeypatch):
    monkeypatch.setenv("INTERVALSET_TITLE", "Ranges")

    assert ShellConfig(title="Other").title == "Other"
