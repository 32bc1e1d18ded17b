from oas_validator.model import HttpResponse, Parameter, PathItem, Request


def test_is_exploded():
    assert Parameter(name="p").is_exploded() is False
    assert Parameter(name="p", explode=True).is_exploded() is True
    assert Parameter(name="p", explode=False).is_exploded() is False


def test_request_header_case_insensitive():
    req = Request(method="POST", path="/x", headers={"Content-Type": "application/json"})
    assert req.get_header("content-type") == "application/json"
    assert req.get_header("Accept") == ""


def test_response_header():
    resp = HttpResponse(headers={"content-type": "application/xml"})
    assert resp.get_header("Content-Type") == "application/xml"


def test_path_item_defaults():
    item = PathItem()
    assert item.get is None
    assert item.parameters == []