# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

from dataclasses import dataclass

import pytest

from webconnector.cancel import CancelToken
from webconnector.errors import RequestBuildError
from webconnector.request import (
    HttpMethod,
    RequestBuilder,
    body,
    build_request,
    cancel_token,
    encoder,
    header,
    headers,
    json,
    method,
    new_builder,
    param,
    params,
    path,
    protocol,
    queries,
    query,
    string,
    xml,
)

HOST = "defaultHost"


def test_defaults():
    req = build_request(HOST)
    assert req.url == "http://defaultHost"
    assert req.method == "GET"
    assert req.content is None
    assert req.cancel_token is None
    assert list(req.headers.multi_items()) == []


def test_method_later_option_wins():
    req = build_request(HOST, method(HttpMethod.POST), method("put"))
    assert req.method == "PUT"


def test_protocol_and_path():
    req = build_request(HOST, protocol("https"), path("/get-endpoint"))
    assert req.url == "https://defaultHost/get-endpoint"


def test_path_without_leading_slash():
    req = build_request(HOST, path("users"))
    assert req.url == "http://defaultHost/users"


def test_path_param_substitution():
    req = build_request(HOST, path("/:id"), param("id", "123"))
    assert req.url == "http://defaultHost/123"


def test_unset_path_param_left_literal():
    req = build_request(HOST, path("/users/:id"))
    assert req.url == "http://defaultHost/users/:id"


def test_path_params_are_escaped():
    req = build_request(HOST, path("/files/:name"), param("name", "a b/c"))
    assert req.url == "http://defaultHost/files/a%20b%2Fc"


def test_params_do_not_clobber_longer_names():
    req = build_request(HOST, path("/:id/:idx"), params({"id": 1, "idx": 2}))
    assert req.url == "http://defaultHost/1/2"


def test_multi_value_query_keeps_order():
    req = build_request(HOST, path("/search"), query("q", "a"), query("q", "b"))
    assert req.url == "http://defaultHost/search?q=a&q=b"


def test_queries_append_lists_after_existing_values():
    req = build_request(HOST, query("page", 1), queries({"page": [2, 3], "size": 10}))
    assert req.url == "http://defaultHost?page=1&page=2&page=3&size=10"


def test_query_values_are_encoded():
    req = build_request(HOST, query("q", "a b&c"))
    assert req.url.endswith("?q=a+b%26c")


def test_headers_accumulate():
    req = build_request(HOST, header("H", 1), header("h", "2"), header("Other", "x"))
    assert req.headers.get_list("H") == ["1", "2"]
    assert req.headers["other"] == "x"


def test_headers_option_replaces_previous_headers():
    req = build_request(HOST, header("Old", "1"), headers({"Accept": ["a", "b"]}))
    assert "Old" not in req.headers
    assert req.headers.get_list("accept") == ["a", "b"]


def test_override_then_append_semantics():
    base = build_request(HOST, method("POST"), header("H", "1"))
    both = build_request(HOST, method("POST"), header("H", "1"), method("DELETE"), header("H", "2"))
    assert base.method == "POST"
    assert both.method == "DELETE"
    assert both.headers.get_list("H") == ["1", "2"]


def test_json_body_sets_single_content_type():
    req = build_request(HOST, json({"name": "ana", "tags": [1, 2]}))
    assert req.headers.get_list("Content-Type") == ["application/json"]
    assert req.content == b'{"name":"ana","tags":[1,2]}'


def test_json_body_overwrites_content_type():
    req = build_request(HOST, header("Content-Type", "text/plain"), header("Content-Type", "x"), json([]))
    assert req.headers.get_list("Content-Type") == ["application/json"]
    assert req.content == b"[]"


def test_json_body_accepts_dataclasses():
    @dataclass
    class User:
        id: int
        name: str

    req = build_request(HOST, json(User(id=1, name="ana")))
    assert req.content == b'{"id":1,"name":"ana"}'


def test_xml_body():
    req = build_request(HOST, xml({"user": {"@id": 7, "name": "ana", "tag": ["a", "b"]}}))
    assert req.headers["content-type"] == "application/xml"
    assert req.content == b'<user id="7"><name>ana</name><tag>a</tag><tag>b</tag></user>'


def test_string_body():
    req = build_request(HOST, string("hello"))
    assert req.content == b"hello"
    assert req.headers["content-type"] == "text/plain; charset=utf-8"


def test_plain_body_uses_json_encoder_without_content_type():
    req = build_request(HOST, body({"a": 1}))
    assert req.content == b'{"a":1}'
    assert "content-type" not in req.headers


def test_custom_encoder_applies_regardless_of_option_order():
    req = build_request(HOST, body(5), encoder(lambda value: f"<{value}>".encode()))
    assert req.content == b"<5>"


def test_encoder_error_propagates_verbatim():
    err = ValueError("cannot encode")

    def failing(_value):
        raise err

    with pytest.raises(ValueError) as excinfo:
        build_request(HOST, body("x"), encoder(failing))
    assert excinfo.value is err


def test_unserializable_json_body_fails():
    with pytest.raises(TypeError):
        build_request(HOST, json(object()))


def test_xml_body_rejects_unsupported_values():
    with pytest.raises(TypeError):
        build_request(HOST, xml(["not", "a", "mapping"]))


def test_failing_option_aborts_build():
    applied = []

    def broken(_builder):
        raise RuntimeError("mocked error")

    with pytest.raises(RuntimeError, match="mocked error"):
        build_request(HOST, broken, lambda b: applied.append(b))
    assert applied == []


@pytest.mark.parametrize("host", ["", "   ", "http://defaultHost"])
def test_malformed_host_rejected(host):
    with pytest.raises(RequestBuildError):
        build_request(host, path("/x"))


def test_malformed_protocol_rejected():
    with pytest.raises(RequestBuildError):
        build_request(HOST, protocol(""))
    with pytest.raises(RequestBuildError):
        build_request(HOST, protocol("ht tp"))


def test_cancel_token_attached():
    token = CancelToken()
    req = build_request(HOST, cancel_token(token))
    assert req.cancel_token is token


def test_fluent_builder():
    req = RequestBuilder(HOST).with_method("patch").with_path("/x/:id").add_param("id", 9).add_query("a", 1).build()
    assert req.method == "PATCH"
    assert req.url == "http://defaultHost/x/9?a=1"


def test_built_request_headers_are_a_copy():
    builder = new_builder(HOST, header("A", "1"))
    req = builder.build()
    builder.add_header("A", "2")
    assert req.headers.get_list("A") == ["1"]


def test_request_body_stream():
    req = build_request(HOST, string("payload"))
    assert req.body().read() == b"payload"
    assert build_request(HOST).body().read() == b""


@pytest.mark.parametrize(
    ("template", "name", "value", "expected"),
    [
        ("/users/:user-id", "user-id", "7", "http://defaultHost/users/7"),
        ("/files/:file.name", "file.name", "a", "http://defaultHost/files/a"),
        ("/:id.json", "id", "3", "http://defaultHost/3.json"),
    ],
)
def test_path_params_with_punctuated_names(template, name, value, expected):
    assert build_request(HOST, path(template), param(name, value)).url == expected


def test_longest_param_name_wins():
    req = build_request(HOST, path("/:id/:idx/:id-x"), params({"id": 1, "id-x": 2}))
    assert req.url == "http://defaultHost/1/:idx/2"


def test_non_ascii_header_value_is_a_build_error():
    with pytest.raises(RequestBuildError, match="X-Name"):
        build_request(HOST, header("X-Name", "José"))
    with pytest.raises(RequestBuildError):
        build_request(HOST, headers({"X-Name": "José"}))
