import pytest
from pydantic import BaseModel, ValidationError

from api_config_kit.adapter.wire import FormData
from api_config_kit.config.descriptor import EndpointDescriptor
from api_config_kit.config.factory import ApiConfig, make_api_config
from api_config_kit.errors import InvalidAdapterError


class QuestionParams(BaseModel):
    id: str
    userId: str


class Question(BaseModel):
    id: str
    title: str


def _question_config(path: str = "/admin/question/{id}/info/{userId}") -> ApiConfig:
    return make_api_config(
        method="GET",
        path=path,
        tags=["#admin"],
        auth=True,
        responseContentType="application/json",
        request={"params": QuestionParams, "query": {"lang": str}},
        response={"success": Question, "error": {"message": str}},
    )


class TestMakeApiConfig:
    def test_from_descriptor(self):
        descriptor = EndpointDescriptor(method="GET", path="/users")
        config = make_api_config(descriptor)
        assert config.descriptor is descriptor

    def test_from_fields(self):
        config = _question_config()
        assert config.method == "GET"
        assert config.tags == ("#admin",)
        assert config.auth is True
        assert config.http_method == "GET"

    def test_descriptor_and_fields_conflict(self):
        with pytest.raises(TypeError):
            make_api_config(EndpointDescriptor(method="GET", path="/"), path="/x")

    def test_invalid_fields_raise_validation_error(self):
        with pytest.raises(ValidationError):
            make_api_config(method="GET", path="no-slash")

    def test_unknown_attribute(self):
        with pytest.raises(AttributeError):
            _question_config().does_not_exist

    def test_config_is_frozen(self):
        config = _question_config()
        with pytest.raises(AttributeError):
            config.descriptor = None


class TestPaths:
    def test_full_path_with_brace_template(self):
        config = _question_config()
        assert config.make_full_path({"id": "7890", "userId": "1234"}) == "/admin/question/7890/info/1234"

    def test_full_path_with_colon_template(self):
        config = _question_config("/admin/question/:id/info/:userId")
        assert config.make_full_path({"id": "7890", "userId": "1234"}) == "/admin/question/7890/info/1234"

    def test_openapi_path(self):
        assert _question_config("/admin/question/:id/info/:userId").make_openapi_path() == (
            "/admin/question/{id}/info/{userId}"
        )

    def test_path_placeholders(self):
        assert _question_config().path_placeholders == ["id", "userId"]


class TestNarrowingHelpers:
    def test_helpers_return_argument_unchanged(self):
        config = _question_config()
        value = {"anything": object()}
        for helper in (
            config.make_body,
            config.make_params,
            config.make_queries,
            config.make_headers,
            config.make_cookies,
            config.make_success_response,
            config.make_error_response,
        ):
            assert helper(value) is value

    def test_helpers_do_not_validate(self):
        assert _question_config().make_params({"wrong": 1}) == {"wrong": 1}


class TestBoundAdapters:
    def test_response_type_bound_to_declared_content_type(self):
        config = make_api_config(method="GET", path="/reports/:reportId", responseContentType="application/pdf")
        assert config.convert_response_type("axios") == {"responseType": "blob"}
        assert config.convert_response_type("alova-uniapp") == {"responseType": "arraybuffer"}
        assert config.convert_response_type("fetch") == {"responseMethod": "blob"}

    def test_response_type_defaults_to_json(self):
        config = make_api_config(method="GET", path="/users")
        assert config.convert_response_type("axios") == {"responseType": "json"}

    def test_invalid_adapter(self):
        with pytest.raises(InvalidAdapterError):
            _question_config().convert_response_type("superagent")

    def test_request_body_bound_to_declared_content_type(self):
        config = make_api_config(method="POST", path="/upload", requestContentType="multipart/form-data")
        form = config.convert_request_body({"name": "mohammad"})
        assert isinstance(form, FormData)
        assert config.convert_request_body(form) is form

    def test_request_body_defaults_to_json(self):
        config = make_api_config(method="POST", path="/users")
        assert config.convert_request_body({"name": "a"}) == '{"name":"a"}'


class TestExamples:
    def test_with_examples_returns_new_config(self):
        config = _question_config()
        examples = {"params": {"id": "1", "userId": "2"}, "success": {"id": "1", "title": "Why?"}}
        with_examples = config.with_examples(**examples)
        assert with_examples is not config
        assert dict(with_examples.examples) == examples
        assert dict(config.examples) == {}
        assert with_examples.descriptor is config.descriptor

    def test_examples_accumulate(self):
        config = _question_config().with_examples(query={"lang": "en"}).with_examples(error={"message": "nope"})
        assert set(config.examples) == {"query", "error"}

    def test_examples_are_validated(self):
        with pytest.raises(ValidationError):
            _question_config().with_examples(success={"id": "1"})

    def test_unknown_example_field(self):
        with pytest.raises(TypeError):
            _question_config().with_examples(status=200)

    def test_examples_are_read_only(self):
        config = _question_config().with_examples(query={"lang": "en"})
        with pytest.raises(TypeError):
            config.examples["query"] = {}
