import asyncio
import json

import httpx

from contact_relay.config import Settings
from contact_relay.form.transport import (
    Failure,
    HttpPostTransport,
    RelayScriptTransport,
    Success,
    TransportKind,
    build_transport,
)

PAYLOAD = {
    "name": "Jo",
    "email": "jo@x.com",
    "phone": "",
    "inquiryType": "General",
    "message": "Hi",
}


def test_http_post_sends_json_and_parses_reply():
    seen = {}

    def handler(request):
        seen["method"] = request.method
        seen["content_type"] = request.headers["content-type"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"success": True, "message": "Email sent successfully"})

    transport = HttpPostTransport("http://relay.test/sendmail", transport=httpx.MockTransport(handler))
    outcome = asyncio.run(transport.send(PAYLOAD))

    assert outcome == Success(data={"success": True, "message": "Email sent successfully"})
    assert seen == {"method": "POST", "content_type": "application/json", "body": PAYLOAD}


def test_http_post_non_2xx_is_opaque_failure():
    def handler(request):
        return httpx.Response(400, json={"error": "Field 'message' is required"})

    transport = HttpPostTransport("http://relay.test/sendmail", transport=httpx.MockTransport(handler))
    assert asyncio.run(transport.send(PAYLOAD)) == Failure("request failed")


def test_http_post_network_error_is_failure():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    transport = HttpPostTransport("http://relay.test/sendmail", transport=httpx.MockTransport(handler))
    assert isinstance(asyncio.run(transport.send(PAYLOAD)), Failure)


def test_http_post_invalid_json_is_failure():
    def handler(request):
        return httpx.Response(200, text="<html>ok</html>")

    transport = HttpPostTransport("http://relay.test/sendmail", transport=httpx.MockTransport(handler))
    assert asyncio.run(transport.send(PAYLOAD)) == Failure("invalid response")


def test_relay_script_maps_template_params():
    seen = {}

    def handler(request):
        seen["url"] = str(request.url)
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, text="OK")

    transport = RelayScriptTransport(
        service_id="service_1",
        template_id="template_1",
        public_key="public_1",
        to_email="sales@jrbindustries.com",
        api_url="https://relay.test/send",
        transport=httpx.MockTransport(handler),
    )

    assert asyncio.run(transport.send(PAYLOAD)) == Success()
    assert seen["url"] == "https://relay.test/send"
    assert seen["body"] == {
        "service_id": "service_1",
        "template_id": "template_1",
        "user_id": "public_1",
        "template_params": {
            "from_name": "Jo",
            "from_email": "jo@x.com",
            "phone": "",
            "inquiry_type": "General",
            "message": "Hi",
            "to_email": "sales@jrbindustries.com",
        },
    }


def test_relay_script_rejection_is_failure():
    def handler(request):
        return httpx.Response(400, text="The user ID is invalid")

    transport = RelayScriptTransport("s", "t", "bad", "to@x.com", transport=httpx.MockTransport(handler))
    assert asyncio.run(transport.send(PAYLOAD)) == Failure("relay rejected")


def test_build_transport_follows_configuration():
    http = build_transport(Settings(form_transport="http_post", relay_url="http://relay.test/sendmail"))
    assert isinstance(http, HttpPostTransport)
    assert http.url == "http://relay.test/sendmail"

    relay = build_transport(Settings(form_transport=TransportKind.RELAY_SCRIPT, emailjs_service_id="svc"))
    assert isinstance(relay, RelayScriptTransport)
    assert relay.service_id == "svc"
