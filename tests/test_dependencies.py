from __future__ import annotations

import hashlib
from pathlib import Path

from boot.dependencies import dependencies_bom_entry, list_maven_jars, parse_jar_filename

EMPTY_SHA256 = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


def test_parse_jar_filename() -> None:
    assert parse_jar_filename("test-file-2.2.2.jar") == ("test-file", "2.2.2")
    assert parse_jar_filename("spring-core-5.2.6.RELEASE.jar") == ("spring-core", "5.2.6.RELEASE")
    assert parse_jar_filename("netty-tcnative-2.0.30.Final-linux-x86_64.jar") == (
        "netty-tcnative",
        "2.0.30.Final-linux-x86_64",
    )
    assert parse_jar_filename("unversioned.jar") is None
    assert parse_jar_filename("notes-1.0.txt") is None


def test_list_maven_jars_digests_contents(tmp_path: Path) -> None:
    (tmp_path / "test-file-2.2.2.jar").write_bytes(b"")
    (tmp_path / "alpha-1.0.jar").write_bytes(b"alpha")
    (tmp_path / "README").write_text("skip me", encoding="utf-8")
    (tmp_path / "nested").mkdir()
    (tmp_path / "nested" / "hidden-1.0.jar").write_bytes(b"")

    jars = list_maven_jars(tmp_path)

    assert [(jar.name, jar.version) for jar in jars] == [("alpha", "1.0"), ("test-file", "2.2.2")]
    assert jars[0].sha256 == hashlib.sha256(b"alpha").hexdigest()
    assert jars[1].sha256 == EMPTY_SHA256


def test_bom_entry_for_missing_directory(tmp_path: Path) -> None:
    entry = dependencies_bom_entry(tmp_path / "BOOT-INF" / "lib")
    assert entry.name == "dependencies"
    assert entry.metadata == {"layer": "application", "dependencies": []}
    assert entry.launch is True
    assert entry.build is False
