"""Tests for next_release.releases."""

from __future__ import annotations

import json

import pytest

from next_release.commits import Commit
from next_release.errors import SerializationError
from next_release.models import Release, ReleaseChain
from next_release.releases import Releases


class TestAsJson:
    def test_document_shape(self, tagged_chain: ReleaseChain) -> None:
        doc = json.loads(Releases(releases=list(tagged_chain)).as_json())
        assert list(doc) == ["releases"]
        assert len(doc["releases"]) == 3
        assert doc["releases"][0] == {
            "version": "v0.9.0",
            "commits": [{"message": "feat: initial import", "id": None}],
            "commit_id": "a1b2c3d",
            "timestamp": 1_700_000_000,
        }

    def test_absent_values_are_null(self) -> None:
        doc = json.loads(Releases(releases=[Release()]).as_json())
        assert doc == {
            "releases": [
                {"version": None, "commits": [], "commit_id": None, "timestamp": 0}
            ]
        }

    def test_previous_is_not_serialized(self, tagged_chain: ReleaseChain) -> None:
        doc = json.loads(Releases(releases=list(tagged_chain)).as_json())
        assert all("previous" not in release for release in doc["releases"])

    def test_commit_id_is_not_camel_cased(self) -> None:
        text = Releases(releases=[Release(commit_id="abc")]).as_json()
        assert '"commit_id":"abc"' in text
        assert "commitId" not in text

    def test_keeps_order(self) -> None:
        releases = [Release(version=v) for v in ["3.0.0", "1.0.0", "2.0.0"]]
        doc = json.loads(Releases(releases=releases).as_json())
        assert [r["version"] for r in doc["releases"]] == ["3.0.0", "1.0.0", "2.0.0"]

    def test_does_not_copy_releases(self, tagged_chain: ReleaseChain) -> None:
        view = Releases(releases=list(tagged_chain))
        assert view.releases[0] is tagged_chain[0]

    def test_indent(self) -> None:
        text = Releases(releases=[Release(version="1.0.0")]).as_json(indent=2)
        assert text.startswith('{\n  "releases": [')

    def test_empty(self) -> None:
        assert Releases(releases=[]).as_json() == '{"releases":[]}'


class TestFromJson:
    def test_round_trip(self, tagged_chain: ReleaseChain) -> None:
        original = list(tagged_chain)
        decoded = Releases.from_json(Releases(releases=original).as_json()).releases

        assert len(decoded) == len(original)
        for got, want in zip(decoded, original):
            assert got.version == want.version
            assert got.commits == want.commits
            assert got.commit_id == want.commit_id
            assert got.timestamp == want.timestamp
            assert got.previous is None

    def test_commit_ids_survive(self) -> None:
        release = Release(commits=[Commit(message="fix: x", id="deadbeef")])
        text = Releases(releases=[release]).as_json()
        decoded = Releases.from_json(text).releases[0]
        assert decoded.commits[0].id == "deadbeef"

    def test_accepts_plain_string_commits(self) -> None:
        decoded = Releases.from_json('{"releases": [{"commits": ["feat: a"]}]}')
        assert decoded.releases[0].commits == [Commit(message="feat: a")]

    def test_nested_previous_is_ignored(self) -> None:
        text = json.dumps(
            {
                "releases": [
                    {
                        "version": None,
                        "commits": [{"message": "feat: a", "id": None}],
                        "commit_id": None,
                        "timestamp": 0,
                        "previous": {
                            "version": "1.0.0",
                            "commits": [],
                            "commit_id": None,
                            "timestamp": 0,
                            "previous": None,
                        },
                    }
                ]
            }
        )
        release = Releases.from_json(text).releases[0]
        assert release.previous is None
        assert release.commits == [Commit(message="feat: a")]

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "not json",
            "[]",
            '{"releases": 1}',
            '{"releases": [{"timestamp": "yesterday"}]}',
        ],
    )
    def test_invalid_document(self, text: str) -> None:
        with pytest.raises(SerializationError, match="Cannot decode"):
            Releases.from_json(text)
