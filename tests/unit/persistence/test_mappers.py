"""Unit tests for row <-> User mappers."""

from gallery.domain.value import LinkedProviders
from gallery.persistence.mappers import profile_to_dict, row_to_user, user_to_dict
from tests.conftest import make_user


def test_user_to_dict_flattens_provider_flags():
    user = make_user(
        linked=LinkedProviders(local=True, google=True), password_hash="hash"
    )

    data = user_to_dict(user)

    assert data["email"] == "a@x.com"
    assert data["password_hash"] == "hash"
    assert data["linked_local"] is True
    assert data["linked_google"] is True
    assert data["linked_discord"] is False
    assert "linked_providers" not in data


def test_row_to_user_reads_flags_and_string_ids():
    user = make_user(linked=LinkedProviders(github=True), display_name="octo")
    row = user_to_dict(user)
    row["id"] = str(user.id)

    mapped = row_to_user(row)

    assert mapped.id == user.id
    assert mapped.linked_providers == LinkedProviders(github=True)
    assert mapped.display_name == "octo"
    assert mapped.password_hash is None


def test_profile_to_dict_excludes_identity_columns():
    data = profile_to_dict(make_user(password_hash="hash"))

    assert set(data) == {
        "display_name",
        "first_name",
        "last_name",
        "avatar_url",
        "phone",
        "updated_at",
    }
