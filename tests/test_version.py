from importlib import metadata

from laposte_sdk import version


def test_version_read_from_metadata(monkeypatch):
    monkeypatch.setattr(version.metadata, "version", lambda name: "1.2.3")

    assert version.get_version() == "1.2.3"
    assert version.user_agent() == "laposte-sdk/1.2.3"


def test_missing_metadata_degrades_to_unknown(monkeypatch):
    def missing(name):
        raise metadata.PackageNotFoundError(name)

    monkeypatch.setattr(version.metadata, "version", missing)

    assert version.get_version() == "UNKNOWN"
    assert version.user_agent() == "laposte-sdk/UNKNOWN"


def test_unreadable_metadata_degrades_to_unknown(monkeypatch):
    def unreadable(name):
        raise OSError("permission denied")

    monkeypatch.setattr(version.metadata, "version", unreadable)

    assert version.get_version() == "UNKNOWN"
