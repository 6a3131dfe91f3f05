"""Tests for the Identifier base class."""

from __future__ import annotations

import copy
from enum import StrEnum

import pytest

from sigil.foundation.ids import Identifier, InvalidIdError, Ownership, TextView


class WorkspaceId(Identifier):
    """Workspace identifier used by the tests."""


class ProfileId(Identifier):
    """Profile identifier used by the tests."""


class Region(StrEnum):
    EU_WEST = "eu_west"


@pytest.mark.unit
class TestCheckedConstruction:
    """Tests for checked construction."""

    def test_valid(self) -> None:
        ws = WorkspaceId.new("my_id")
        assert ws.as_str() == "my_id"

    def test_constructor_is_checked(self) -> None:
        assert WorkspaceId("my_id") == WorkspaceId.new("my_id")

    def test_full_charset(self) -> None:
        text = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_"
        assert WorkspaceId.new(text).as_str() == text

    def test_rejects_space(self) -> None:
        with pytest.raises(WorkspaceId.InvalidFmt) as exc_info:
            WorkspaceId.new("invalid id")
        assert exc_info.value.value == "invalid id"

    def test_rejects_empty(self) -> None:
        with pytest.raises(WorkspaceId.InvalidFmt) as exc_info:
            WorkspaceId.new("")
        assert exc_info.value.value == ""

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="is not a valid `WorkspaceId`"):
            WorkspaceId("acme-corp")

    def test_error_types_are_per_type(self) -> None:
        with pytest.raises(InvalidIdError) as exc_info:
            ProfileId("a b")
        assert not isinstance(exc_info.value, WorkspaceId.InvalidFmt)
        assert isinstance(exc_info.value, ProfileId.InvalidFmt)

    def test_str_keeps_owned_mode(self) -> None:
        assert WorkspaceId.new("acme").ownership is Ownership.OWNED

    def test_view_keeps_borrowed_mode(self) -> None:
        source = "/workspaces/acme_prod/profiles"
        ws = WorkspaceId.new(TextView(source, 12, 21))
        assert ws.ownership is Ownership.BORROWED
        assert ws.is_borrowed
        assert ws.as_str() == "acme_prod"

    def test_error_from_view_holds_owned_copy(self) -> None:
        with pytest.raises(WorkspaceId.InvalidFmt) as exc_info:
            WorkspaceId.new(TextView("x acme prod x", 2, 11))
        assert exc_info.value.value == "acme prod"
        assert type(exc_info.value.value) is str

    def test_str_subclass_is_normalized(self) -> None:
        ws = WorkspaceId(Region.EU_WEST)
        assert type(ws.into_inner()) is str
        assert ws == "eu_west"

    @pytest.mark.parametrize("candidate", [None, 42, b"acme", ["acme"]])
    def test_rejects_non_text(self, candidate: object) -> None:
        with pytest.raises(TypeError, match="must be str or TextView"):
            WorkspaceId(candidate)  # type: ignore[arg-type]

    def test_try_from_owned(self) -> None:
        ws = WorkspaceId.try_from("acme")
        assert ws.is_owned

    def test_try_from_view(self) -> None:
        ws = WorkspaceId.try_from(TextView("acme"))
        assert ws.is_borrowed

    def test_try_from_invalid(self) -> None:
        with pytest.raises(WorkspaceId.InvalidFmt):
            WorkspaceId.try_from("acme corp")

    def test_is_valid_id_on_type(self) -> None:
        assert WorkspaceId.is_valid_id("acme")
        assert not WorkspaceId.is_valid_id("invalid with space")


@pytest.mark.unit
class TestUncheckedConstruction:
    """Tests for new_unchecked."""

    def test_stores_invalid_text(self) -> None:
        ws = WorkspaceId.new_unchecked("!!!")
        assert ws.as_str() == "!!!"
        assert not WorkspaceId.is_valid_id("!!!")

    def test_stores_empty_text(self) -> None:
        ws = WorkspaceId.new_unchecked("")
        assert ws.as_str() == ""
        assert not ws

    def test_equals_checked(self) -> None:
        assert WorkspaceId.new("one") == WorkspaceId.new_unchecked("one")

    def test_keeps_borrowed_mode(self) -> None:
        ws = WorkspaceId.new_unchecked(TextView("one"))
        assert ws.is_borrowed


@pytest.mark.unit
class TestParse:
    """Tests for parse."""

    def test_parse_equals_new(self) -> None:
        assert WorkspaceId.parse("abc_123") == WorkspaceId.new("abc_123")

    def test_parse_view_is_owned(self) -> None:
        ws = WorkspaceId.parse(TextView("x_abc_123", 2))
        assert ws.is_owned
        assert ws.into_inner() == "abc_123"

    def test_parse_invalid(self) -> None:
        with pytest.raises(WorkspaceId.InvalidFmt) as exc_info:
            WorkspaceId.parse("abc 123")
        assert exc_info.value.value == "abc 123"


@pytest.mark.unit
class TestAccess:
    """Tests for the read-only access surface."""

    def test_as_str(self) -> None:
        assert WorkspaceId("one").as_str() == "one"

    def test_into_inner_round_trip(self) -> None:
        assert WorkspaceId.new("my_id").into_inner() == "my_id"

    def test_into_inner_keeps_view(self) -> None:
        view = TextView("xx_one", 3)
        assert WorkspaceId(view).into_inner() is view

    def test_str(self) -> None:
        assert str(WorkspaceId("one")) == "one"

    def test_str_of_borrowed(self) -> None:
        assert str(WorkspaceId(TextView("xx_one", 3))) == "one"

    def test_format(self) -> None:
        ws = WorkspaceId("one")
        assert f"{ws}" == "one"
        assert f"[{ws:>5}]" == "[  one]"

    def test_repr(self) -> None:
        assert repr(WorkspaceId("one")) == "WorkspaceId('one')"

    def test_delegates_str_methods(self) -> None:
        ws = WorkspaceId("acme_Prod")
        assert ws.upper() == "ACME_PROD"
        assert ws.startswith("acme")
        assert ws.split("_") == ["acme", "Prod"]

    def test_delegated_results_are_plain_str(self) -> None:
        assert type(WorkspaceId("acme").upper()) is str

    def test_unknown_attribute(self) -> None:
        with pytest.raises(AttributeError):
            WorkspaceId("acme").no_such_method  # noqa: B018

    def test_private_attribute_not_delegated(self) -> None:
        with pytest.raises(AttributeError):
            WorkspaceId("acme")._formatter_parser  # noqa: B018

    def test_len_getitem_iter_contains(self) -> None:
        ws = WorkspaceId(TextView("xx_acme", 3))
        assert len(ws) == 4
        assert ws[0] == "a"
        assert ws[1:3] == "cm"
        assert list(ws) == ["a", "c", "m", "e"]
        assert "cm" in ws
        assert "x" not in ws

    def test_truthy(self) -> None:
        assert WorkspaceId("a")


@pytest.mark.unit
class TestImmutability:
    """Tests for immutability."""

    def test_cannot_assign(self) -> None:
        ws = WorkspaceId("acme")
        with pytest.raises(AttributeError, match="immutable"):
            ws._content = "other"  # type: ignore[misc]

    def test_cannot_add_attribute(self) -> None:
        ws = WorkspaceId("acme")
        with pytest.raises(AttributeError):
            ws.value = "other"  # type: ignore[attr-defined]

    def test_cannot_delete(self) -> None:
        ws = WorkspaceId("acme")
        with pytest.raises(AttributeError):
            del ws._content


@pytest.mark.unit
class TestValueSemantics:
    """Tests for equality, hashing and ordering."""

    def test_borrowed_equals_owned(self) -> None:
        assert WorkspaceId.new(TextView("abc")) == WorkspaceId.new("abc")

    def test_borrowed_hash_equals_owned(self) -> None:
        borrowed = WorkspaceId.new(TextView("xx_abc", 3))
        owned = WorkspaceId.new("abc")
        assert hash(borrowed) == hash(owned)
        assert len({borrowed, owned}) == 1

    def test_inequality(self) -> None:
        assert WorkspaceId("abc") != WorkspaceId("abd")

    def test_equal_to_plain_str(self) -> None:
        assert WorkspaceId("abc") == "abc"
        assert WorkspaceId("abc") != "abd"

    def test_dict_lookup_by_str(self) -> None:
        owners = {WorkspaceId("acme"): "alice", WorkspaceId(TextView("x_globex", 2)): "bob"}
        assert owners["acme"] == "alice"
        assert owners["globex"] == "bob"

    def test_different_types_not_equal(self) -> None:
        assert WorkspaceId("abc") != ProfileId("abc")

    def test_not_equal_to_other_objects(self) -> None:
        assert WorkspaceId("abc") != 42
        assert WorkspaceId("abc") != TextView("abd")

    def test_ordering(self) -> None:
        ids = [WorkspaceId("b"), WorkspaceId(TextView("xa", 1)), WorkspaceId("c")]
        assert sorted(ids) == ["a", "b", "c"]
        assert WorkspaceId("a") < "b"
        assert WorkspaceId("b") >= WorkspaceId("a")

    def test_ordering_against_text_view(self) -> None:
        path = "/workspaces/b"
        view = TextView(path, 12)
        assert WorkspaceId("a") < view
        assert WorkspaceId("c") >= view
        assert view > WorkspaceId("a")
        assert not WorkspaceId("b") < view

    def test_ordering_across_types_unsupported(self) -> None:
        with pytest.raises(TypeError):
            WorkspaceId("a") < ProfileId("b")  # noqa: B015


@pytest.mark.unit
class TestOwnershipElevation:
    """Tests for into_static."""

    def test_borrowed_becomes_owned(self) -> None:
        source = "/workspaces/acme_prod"
        borrowed = WorkspaceId(TextView(source, 12))
        owned = borrowed.into_static()
        assert owned.is_owned
        assert owned == borrowed
        assert type(owned) is WorkspaceId

    def test_result_independent_of_source(self) -> None:
        owned = WorkspaceId(TextView("xx_acme_xx", 3, 7)).into_static()
        assert type(owned.into_inner()) is str
        assert owned.into_inner() == "acme"

    def test_idempotent_for_owned(self) -> None:
        ws = WorkspaceId("acme")
        assert ws.into_static() == ws
        assert ws.into_static().into_static().as_str() == "acme"

    def test_does_not_revalidate(self) -> None:
        ws = WorkspaceId.new_unchecked(TextView("!!!"))
        assert ws.into_static().as_str() == "!!!"


@pytest.mark.unit
class TestEditUnchecked:
    """Tests for the edit_unchecked escape hatch."""

    def test_append(self) -> None:
        ws = WorkspaceId("acme")
        with ws.edit_unchecked() as buf:
            buf.write("_prod")
        assert ws == "acme_prod"

    def test_rewrite(self) -> None:
        ws = WorkspaceId("acme")
        with ws.edit_unchecked() as buf:
            buf.seek(0)
            buf.truncate()
            buf.write("globex")
        assert ws.as_str() == "globex"

    def test_result_is_owned(self) -> None:
        ws = WorkspaceId(TextView("xx_acme", 3))
        with ws.edit_unchecked() as buf:
            buf.write("1")
        assert ws.is_owned
        assert ws == "acme1"

    def test_no_validation(self) -> None:
        ws = WorkspaceId("acme")
        with ws.edit_unchecked() as buf:
            buf.write(" corp")
        assert ws.as_str() == "acme corp"

    def test_exception_leaves_content(self) -> None:
        ws = WorkspaceId("acme")
        with pytest.raises(RuntimeError), ws.edit_unchecked() as buf:
            buf.write("_prod")
            raise RuntimeError
        assert ws.as_str() == "acme"


@pytest.mark.unit
class TestCopy:
    """Tests for copy support."""

    def test_copy(self) -> None:
        ws = WorkspaceId("acme")
        assert copy.copy(ws) == ws
        assert type(copy.copy(ws)) is WorkspaceId

    def test_deepcopy_borrowed_is_owned(self) -> None:
        ws = WorkspaceId(TextView("xx_acme", 3))
        clone = copy.deepcopy(ws)
        assert clone == ws
        assert clone.is_owned
