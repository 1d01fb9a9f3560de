import io
import json
from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

FIXED_NOW = datetime(2024, 3, 5, 10, 15, 0, tzinfo=timezone.utc)


class FakeAudioStream(io.BytesIO):
    """BytesIO that records how many times it was read."""

    def __init__(self, data=b"ID3fake-mp3-bytes"):
        super().__init__(data)
        self.reads = 0

    def read(self, *args):
        self.reads += 1
        return super().read(*args)


def make_event(body=None, **fields):
    if body is None:
        body = json.dumps(fields)
    return {"body": body, "isBase64Encoded": False}


@pytest.fixture
def clock():
    return lambda: FIXED_NOW


@pytest.fixture
def audio_stream():
    return FakeAudioStream()


@pytest.fixture
def polly_client(audio_stream):
    client = MagicMock()
    client.synthesize_speech.return_value = {
        "AudioStream": audio_stream,
        "ContentType": "audio/mpeg",
        "RequestCharacters": 11,
    }
    return client


@pytest.fixture
def s3_client():
    client = MagicMock()
    client.meta.endpoint_url = "https://s3.eu-west-1.amazonaws.com"

    def upload_fileobj(fileobj, bucket, key, ExtraArgs=None):
        client.uploaded.append((bucket, key, fileobj.read(), ExtraArgs))

    client.uploaded = []
    client.upload_fileobj.side_effect = upload_fileobj
    return client
