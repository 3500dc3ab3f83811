from uuid import uuid4

from starlette.requests import Request

from config import ApplicationConfig
from src.api import request_context
from src.api.request_context import get_current_request, header_tenant_id


def make_request(headers: dict) -> Request:
    raw = [(key.lower().encode(), value.encode()) for key, value in headers.items()]
    return Request({"type": "http", "method": "GET", "path": "/", "headers": raw})


def bind(request):
    return request_context._current_request.set(request)


def test_nothing_bound_outside_a_request():
    assert get_current_request() is None
    assert header_tenant_id() is None


def test_header_tenant_id_reads_the_bound_request():
    tenant_id = uuid4()
    request = make_request({ApplicationConfig.TENANT_HEADER: f" {tenant_id} "})
    token = bind(request)
    try:
        assert get_current_request() is request
        assert header_tenant_id() == tenant_id
    finally:
        request_context._current_request.reset(token)


def test_header_tenant_id_ignores_malformed_values():
    token = bind(make_request({ApplicationConfig.TENANT_HEADER: "acme"}))
    try:
        assert header_tenant_id() is None
    finally:
        request_context._current_request.reset(token)
