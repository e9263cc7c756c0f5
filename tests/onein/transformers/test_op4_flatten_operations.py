"""Tests for op4_flatten_operations: one POST path per operation."""

import pytest

from onein.errors import MissingOkResponseError
from onein.transformers.context import TransformContext
from onein.transformers.op4_flatten_operations import flatten_operations, flattened_path


def _op(operation_id: str | None = None, **extra) -> dict:
    operation = {"responses": {"200": {"description": "ok"}}, **extra}
    if operation_id:
        operation["operationId"] = operation_id
    return operation


class TestFlattenedPath:
    @pytest.mark.parametrize(
        "path, method, expected",
        [
            ("/pets", "get", "/pets/get"),
            ("/pets/{petId}", "delete", "/pets/[petId]/delete"),
            ("/a/{x}/b/{y}", "put", "/a/[x]/b/[y]/put"),
            ("/files/{name}.json", "get", "/files/[name].json/get"),
        ],
    )
    def test_keys(self, path, method, expected):
        assert flattened_path(path, method) == expected


class TestFlattenOperations:
    def test_every_method_becomes_post(self):
        ctx = TransformContext(schemas={})
        get_op = _op("getPet")
        delete_op = _op("deletePet")
        spec = {"paths": {"/pets/{petId}": {"get": get_op, "delete": delete_op}}}

        result = flatten_operations(ctx, spec)

        assert result["paths"] == {
            "/pets/[petId]/get": {"post": get_op},
            "/pets/[petId]/delete": {"post": delete_op},
        }

    def test_no_braces_left_in_keys(self):
        ctx = TransformContext(schemas={})
        spec = {"paths": {"/a/{x}/b/{y}": {"patch": _op("patchB")}}}

        result = flatten_operations(ctx, spec)

        for key in result["paths"]:
            assert "{" not in key and "}" not in key
            assert "[x]" in key and "[y]" in key

    def test_methods_in_standard_order(self):
        ctx = TransformContext(schemas={})
        spec = {"paths": {"/p": {"patch": _op("a"), "get": _op("b"), "post": _op("c")}}}

        result = flatten_operations(ctx, spec)

        assert list(result["paths"]) == ["/p/get", "/p/post", "/p/patch"]

    def test_path_level_keys_not_carried_over(self):
        ctx = TransformContext(schemas={})
        spec = {
            "paths": {
                "/p": {
                    "summary": "shared",
                    "parameters": [{"name": "id", "in": "query"}],
                    "get": _op("getP"),
                }
            }
        }

        result = flatten_operations(ctx, spec)

        assert set(result["paths"]["/p/get"]) == {"post"}

    def test_parameters_merged_and_response_wrapped(self):
        ctx = TransformContext(schemas={})
        operation = _op("getPet", parameters=[{"name": "petId", "in": "path", "required": True}])
        spec = {"paths": {"/pets/{petId}": {"get": operation}}}

        flatten_operations(ctx, spec)

        assert "_req_getPet" in ctx.schemas
        assert "parameters" not in operation
        assert operation["requestBody"]["content"]["application/json"]["schema"] == {
            "$ref": "#/components/schemas/_req_getPet"
        }
        assert operation["responses"]["200"]["content"]["application/json"]["schema"] == {
            "$ref": "#/components/schemas/_commonResponse"
        }

    def test_path_level_parameters_inherited(self):
        ctx = TransformContext(schemas={})
        spec = {
            "paths": {
                "/pets/{petId}": {
                    "parameters": [{"name": "petId", "in": "path", "required": True}],
                    "get": _op("getPet"),
                    "delete": _op("deletePet"),
                }
            }
        }

        flatten_operations(ctx, spec)

        assert list(ctx.schemas["_req_getPet"]["properties"]) == ["_path_petId"]
        assert list(ctx.schemas["_req_deletePet"]["properties"]) == ["_path_petId"]

    def test_missing_operation_id_derived_from_path(self):
        ctx = TransformContext(schemas={})
        operation = _op(parameters=[{"name": "petId", "in": "path", "required": True}])
        spec = {"paths": {"/onein/pets/{petId}": {"get": operation}}}

        flatten_operations(ctx, spec)

        assert operation["operationId"] == "onein_pets_petId_get"
        assert "_req_onein_pets_petId_get" in ctx.schemas

    def test_missing_ok_response_aborts(self):
        ctx = TransformContext(schemas={})
        spec = {"paths": {"/p": {"get": {"operationId": "getP", "responses": {}}}}}

        with pytest.raises(MissingOkResponseError):
            flatten_operations(ctx, spec)

    def test_non_operation_entries_ignored(self):
        ctx = TransformContext(schemas={})
        spec = {"paths": {"/p": {"x-internal": True, "get": _op("getP")}}}

        result = flatten_operations(ctx, spec)

        assert list(result["paths"]) == ["/p/get"]
