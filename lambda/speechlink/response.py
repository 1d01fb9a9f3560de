import json

from speechlink.errors import EncodingFailed


def encode_success(link):
    try:
        body = json.dumps({"s3Link": link})
    except (TypeError, ValueError) as exc:
        raise EncodingFailed(str(exc)) from exc

    return {"statusCode": 200, "body": body}


def encode_error(message):
    # Error bodies are the raw message, not JSON
    return {"statusCode": 400, "body": message}
