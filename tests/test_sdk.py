# tests/test_sdk.py
import json

import pytest

from sdk.productclient import ProductClient, ProductApiError, _raise_for_error, _product_payload, _list_params


class FakeResponse:
    def __init__(self, status_code, body=None, text=None):
        self.status_code = status_code
        self._body = body
        self.text = text if text is not None else json.dumps(body)

    def json(self):
        if self._body is None:
            raise ValueError("not json")
        return self._body


def test_success_does_not_raise():
    _raise_for_error(FakeResponse(200, {"id": "1"}))
    _raise_for_error(FakeResponse(204, text=""))


def test_error_body_becomes_api_error():
    r = FakeResponse(404, {"error": {"message": "Product not found", "type": "NotFoundError"}})
    with pytest.raises(ProductApiError) as exc:
        _raise_for_error(r)
    assert exc.value.status_code == 404
    assert exc.value.message == "Product not found"
    assert exc.value.type == "NotFoundError"


def test_non_json_error_keeps_text():
    with pytest.raises(ProductApiError) as exc:
        _raise_for_error(FakeResponse(502, text="Bad Gateway"))
    assert exc.value.status_code == 502
    assert exc.value.message == "Bad Gateway"
    assert exc.value.type == "HTTPError"


def test_json_error_without_error_key():
    for body in ({"detail": "nope"}, ["x"]):
        r = FakeResponse(500, body)
        with pytest.raises(ProductApiError) as exc:
            _raise_for_error(r)
        assert exc.value.status_code == 500
        assert exc.value.message == r.text
        assert exc.value.type == "HTTPError"


def test_payload_leaves_out_unset_fields():
    assert _product_payload("Pen", 2.5, None, None, None) == {"name": "Pen", "price": 2.5}


def test_payload_keeps_set_fields():
    assert _product_payload("Pen", 2.5, "", "Office", False) == {
        "name": "Pen", "price": 2.5, "description": "", "category": "Office", "inStock": False,
    }


def test_list_params_skip_empty():
    assert _list_params(None, "", None, None) == {}
    assert _list_params("Furniture", "chair", 2, 5) == {
        "category": "Furniture", "search": "chair", "page": 2, "limit": 5,
    }


def test_client_sends_api_key_header():
    c = ProductClient(base_url="http://example.test/", api_key="k", api_key_header="x-api-key")
    assert c.base_url == "http://example.test"
    assert c.session.headers["x-api-key"] == "k"
    assert "x-api-key" not in ProductClient().session.headers
