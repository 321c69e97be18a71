from api_config_kit.path.template import placeholders, resolve, to_canonical_form


class TestResolve:
    def test_colon_and_brace_templates_resolve_the_same(self):
        values = {"id": "7", "postId": "9"}
        assert resolve("/users/:id/posts/:postId", values) == "/users/7/posts/9"
        assert resolve("/users/{id}/posts/{postId}", values) == "/users/7/posts/9"

    def test_mixed_notation(self):
        assert resolve("/admin/question/{id}/info/:userId", {"id": "7890", "userId": "1234"}) == (
            "/admin/question/7890/info/1234"
        )

    def test_unknown_keys_are_ignored(self):
        assert resolve("/users", {"id": "7"}) == "/users"

    def test_missing_values_stay_unresolved(self):
        assert resolve("/users/:id/posts/{postId}", {"id": 3}) == "/users/3/posts/{postId}"

    def test_colon_placeholder_needs_segment_end(self):
        # ":id" must not eat the start of ":idx"
        assert resolve("/files/:idx/:id", {"id": "1"}) == "/files/:idx/1"

    def test_values_are_string_coerced(self):
        assert resolve("/pages/:page", {"page": 2}) == "/pages/2"

    def test_repeated_placeholder_replaced_everywhere(self):
        assert resolve("/a/:id/b/{id}", {"id": "x"}) == "/a/x/b/x"

    def test_replacement_is_literal(self):
        assert resolve("/q/:term", {"term": r"\1$&"}) == r"/q/\1$&"

    def test_keys_with_regex_characters(self):
        assert resolve("/x/{a.b}", {"a.b": "1"}) == "/x/1"
        assert resolve("/x/{axb}", {"a.b": "1"}) == "/x/{axb}"


class TestCanonicalForm:
    def test_colon_to_brace(self):
        assert to_canonical_form("/users/:id/posts/:post_id") == "/users/{id}/posts/{post_id}"

    def test_brace_template_unchanged(self):
        assert to_canonical_form("/users/{id}") == "/users/{id}"

    def test_idempotent(self):
        for template in ("/users/:id", "/a/{b}/:c", "/", "/plain/path", "/v1/:_x9/{y}"):
            once = to_canonical_form(template)
            assert to_canonical_form(once) == once


class TestPlaceholders:
    def test_order_of_first_appearance(self):
        assert placeholders("/a/:x/b/{y}/c/:x") == ["x", "y"]

    def test_no_placeholders(self):
        assert placeholders("/health") == []
