import pytest

from triadchat.versioning import parse_semver_tuple, version_supports_room_create_v2


def test_parse_plain_version():
    assert parse_semver_tuple("0.1.1") == (0, 1, 1)
    assert parse_semver_tuple("10.20.30") == (10, 20, 30)


@pytest.mark.parametrize(
    "version", ["", "1.2", "1.2.3.4", "a.b.c", "1..2", "-1.0.0", "1.0.0-beta", " 1.0.0"]
)
def test_parse_rejects_malformed_versions(version):
    assert parse_semver_tuple(version) is None


@pytest.mark.parametrize("version", ["0.1.1", "0.1.2", "0.2.0", "1.0.0"])
def test_versions_from_0_1_1_support_v2(version):
    assert version_supports_room_create_v2(version) is True


@pytest.mark.parametrize("version", ["0.1.0", "0.0.9", "garbage", "0.1"])
def test_older_or_invalid_versions_do_not_support_v2(version):
    assert version_supports_room_create_v2(version) is False


def test_support_matches_tuple_ordering():
    for version in ["0.1.0", "0.1.1", "2.0.0", "0.0.5"]:
        assert version_supports_room_create_v2(version) == (parse_semver_tuple(version) >= (0, 1, 1))