"""Unit tests for AliasTable."""

import dataclasses

import pytest

from dtokit.models.aliases import AliasTable


class TestAliasTable:
    """Tests for external key -> field name resolution."""

    def test_resolves_mapped_key(self) -> None:
        table = AliasTable.from_mapping({"email": "email_address"})
        assert table.resolve("email_address") == "email"

    def test_unmapped_key_passes_through(self) -> None:
        table = AliasTable.from_mapping({"email": "email_address"})
        assert table.resolve("first_name") == "first_name"

    def test_field_name_itself_is_not_reverse_mapped(self) -> None:
        """Only external keys are looked up, never field names."""
        table = AliasTable.from_mapping({"email": "email_address"})
        assert table.resolve("email") == "email"

    def test_first_field_wins_for_shared_external_key(self) -> None:
        """Duplicate external keys resolve to the first field in mapping order."""
        table = AliasTable.from_mapping({"firstName": "name", "lastName": "name"})
        assert table.resolve("name") == "firstName"
        assert len(table) == 1

    @pytest.mark.parametrize("aliases", [None, {}])
    def test_empty_table(self, aliases: dict | None) -> None:
        table = AliasTable.from_mapping(aliases)
        assert len(table) == 0
        assert not table
        assert table.resolve("anything") == "anything"

    def test_is_immutable(self) -> None:
        table = AliasTable.from_mapping({"email": "mail"})
        with pytest.raises(dataclasses.FrozenInstanceError):
            table.by_external_key = {}  # type: ignore[misc]
