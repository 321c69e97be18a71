import pytest
from pydantic import BaseModel, ValidationError

from api_config_kit.config.descriptor import EndpointDescriptor, RequestSchemas
from api_config_kit.schema.base import ObjectSchema, Schema


class UserParams(BaseModel):
    id: str


class User(BaseModel):
    id: str
    name: str


class TestRequestSchemas:
    def test_defaults(self):
        request = RequestSchemas()
        assert isinstance(request.body, Schema)
        for name in ("params", "query", "headers", "cookies"):
            assert getattr(request, name).keys() == ()

    def test_coerces_models_and_mappings(self):
        request = RequestSchemas(body=User, params=UserParams, query={"page": int})
        assert isinstance(request.body, ObjectSchema)
        assert request.params.keys() == ("id",)
        assert request.query.keys() == ("page",)

    def test_params_must_be_object_shaped(self):
        with pytest.raises(ValidationError):
            RequestSchemas(params=int)


class TestEndpointDescriptor:
    def test_create_minimal_descriptor(self):
        ep = EndpointDescriptor(method="GET", path="/api/users")
        assert ep.http_method == "GET"
        assert ep.tags == ()
        assert ep.auth is False
        assert ep.disable is False
        assert ep.request_content_type is None

    def test_method_case_variants(self):
        for method in ("get", "Post", "PATCH", "options", "Head"):
            assert EndpointDescriptor(method=method, path="/").http_method == method.upper()

    def test_rejects_unknown_method(self):
        with pytest.raises(ValidationError):
            EndpointDescriptor(method="TRACE", path="/")
        with pytest.raises(ValidationError):
            EndpointDescriptor(method="gEt", path="/")

    def test_path_must_start_with_slash(self):
        with pytest.raises(ValidationError):
            EndpointDescriptor(method="GET", path="api/users")

    def test_tags_must_start_with_hash(self):
        assert EndpointDescriptor(method="GET", path="/", tags=["#users"]).tags == ("#users",)
        with pytest.raises(ValidationError):
            EndpointDescriptor(method="GET", path="/", tags=["users"])

    def test_content_types_checked_against_catalogs(self):
        ep = EndpointDescriptor(
            method="POST",
            path="/upload",
            requestContentType="multipart/form-data",
            response_content_type="application/pdf",
        )
        assert ep.request_content_type == "multipart/form-data"
        assert ep.response_content_type == "application/pdf"
        with pytest.raises(ValidationError):
            EndpointDescriptor(method="GET", path="/", responseContentType="application/graphql")
        with pytest.raises(ValidationError):
            EndpointDescriptor(method="GET", path="/", request_content_type="text/css")

    def test_yes_no_flags(self):
        ep = EndpointDescriptor(method="GET", path="/", auth="YES", disable="NO")
        assert ep.auth is True
        assert ep.disable is False

    def test_full_descriptor(self):
        ep = EndpointDescriptor(
            method="post",
            path="/users/:id",
            summary="Update user",
            description="Updates a user by id",
            request={"body": User, "params": UserParams},
            response={"success": User, "error": {"message": str}},
        )
        assert ep.request.params.keys() == ("id",)
        assert ep.response.error.is_valid({"message": "boom"})

    def test_immutable(self):
        ep = EndpointDescriptor(method="GET", path="/")
        with pytest.raises(ValidationError):
            ep.path = "/other"

    def test_rejects_extra_fields(self):
        with pytest.raises(ValidationError):
            EndpointDescriptor(method="GET", path="/", responseType="json")
