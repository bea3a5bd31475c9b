import json

import pytest

from sak import version


@pytest.mark.parametrize(
    "number, metadata, expected",
    [
        ("1.0.0", "beta.1", "1.0.0+beta.1"),
        ("1.0.0", "", "1.0.0"),
        ("0.0.1", "unreleased", "0.0.1+unreleased"),
    ],
)
def test_get_version(monkeypatch, number, metadata, expected):
    monkeypatch.setattr(version, "VERSION", number)
    monkeypatch.setattr(version, "BUILD_METADATA", metadata)
    assert version.get_version() == expected


def test_build_info_reads_git_metadata(monkeypatch):
    monkeypatch.setenv("SAK_GIT_COMMIT", "abc123")
    monkeypatch.delenv("SAK_GIT_TAG", raising=False)
    info = version.get_build_info()

    assert info.git_commit == "abc123"
    assert info.cpu_count >= 1
    assert json.loads(json.dumps(info.to_dict()))["version"] == version.get_version()

    labels = [label for label, _ in version.build_info_items(info)]
    assert labels[0] == "Version"
    assert "Git Commit" in labels
    assert "Git Tag" not in labels


def test_format_build_info_aligns_labels(monkeypatch):
    monkeypatch.delenv("SAK_GIT_COMMIT", raising=False)
    lines = version.format_build_info(version.get_build_info()).splitlines()
    colons = {line.index(":") for line in lines}
    assert len(colons) == 1
