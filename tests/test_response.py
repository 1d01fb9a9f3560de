import json

import pytest

from speechlink.errors import EncodingFailed
from speechlink.response import encode_error, encode_success


def test_success_body():
    """Success bodies are JSON with an s3Link field."""
    response = encode_success("https://b.s3.amazonaws.com/2024/March/5/abc")
    assert response["statusCode"] == 200
    assert json.loads(response["body"]) == {"s3Link": "https://b.s3.amazonaws.com/2024/March/5/abc"}


def test_success_round_trip():
    """Decoding the success body gives the original link back."""
    link = "https://b.s3.eu-west-1.amazonaws.com/2024/March/5/4f1c%20x?y=1"
    assert json.loads(encode_success(link)["body"])["s3Link"] == link


def test_error_body_is_plain_text():
    """Error bodies are the raw message, not JSON."""
    assert encode_error("text_to_translate is required") == {
        "statusCode": 400,
        "body": "text_to_translate is required",
    }


def test_unserializable_link():
    """Serialization failures raise EncodingFailed."""
    with pytest.raises(EncodingFailed):
        encode_success(object())
