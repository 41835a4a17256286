"""
Unit tests for the whisky handler helpers.
"""

import pytest

from whisky_api.dto import UpdateWhiskyRequest
from whisky_api.entities import WhiskyEntity
from whisky_api.exceptions import BadWhiskyIdError
from whisky_api.handlers import WhiskyHandler, merge_whisky, parse_whisky_id


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("1", 1),
        ("0", 0),
        ("-5", -5),
        ("+12", 12),
        ("007", 7),
        ("9223372036854775807", 2**63 - 1),
        ("-9223372036854775808", -(2**63)),
    ],
)
def test_parse_whisky_id(raw, expected):
    assert parse_whisky_id(raw) == expected


@pytest.mark.parametrize(
    "raw",
    ["", " 1", "1 ", "abc", "1_000", "1e3", "+", "-", "٣", "9223372036854775808", "99999999999999999999", "1" * 5000],
)
def test_parse_whisky_id_rejects(raw):
    with pytest.raises(BadWhiskyIdError) as exc_info:
        parse_whisky_id(raw)

    assert exc_info.value.raw_id == raw
    assert exc_info.value.message == f'Bad ID. ID="{raw}"'


def test_parse_whisky_id_rejects_none():
    with pytest.raises(BadWhiskyIdError) as exc_info:
        parse_whisky_id(None)
    assert exc_info.value.message == 'Bad ID. ID="None"'


def test_merge_whisky_overwrites_name_and_origin():
    stored = WhiskyEntity(id=3, name="Talisker", origin="Scotland")
    changes = UpdateWhiskyRequest.model_validate_json('{"name": "X", "origin": "Y", "id": 9}')

    merged = merge_whisky(stored, changes)

    assert merged == WhiskyEntity(id=3, name="X", origin="Y")
    assert stored == WhiskyEntity(id=3, name="Talisker", origin="Scotland")


def test_merge_whisky_keeps_absent_fields():
    stored = WhiskyEntity(id=3, name="Talisker", origin="Scotland")

    assert merge_whisky(stored, UpdateWhiskyRequest.model_validate_json("{}")) == stored
    assert merge_whisky(stored, UpdateWhiskyRequest.model_validate_json('{"origin": null}')) == WhiskyEntity(
        id=3, name="Talisker", origin=None
    )


def test_handler_bad_id_stops_before_collaborator(crud_service):
    handler = WhiskyHandler(crud_service=crud_service)

    with pytest.raises(BadWhiskyIdError):
        handler.update_one("abc", b'{"name": "X", "origin": "Y"}')

    assert crud_service.calls == []


def test_handler_add_one_returns_created(crud_service):
    handler = WhiskyHandler(crud_service=crud_service)

    response = handler.add_one(b'{"name": "Talisker", "origin": "Scotland"}')

    assert response.status_code == 201
    assert response.headers["content-type"] == "application/json; charset=utf-8"
    assert response.body == b'{\n  "id": 1,\n  "name": "Talisker",\n  "origin": "Scotland"\n}'
