"""
One invocation, five stages:

    decode -> synthesize -> assign id/ttl -> upload -> encode

Each stage either hands its result to the next or raises a SpeechError.
Every SpeechError, whether caused by the caller or by Polly/S3, is turned
into a 400 response carrying the error message.
"""
from speechlink.errors import SpeechError
from speechlink.log import get_logger
from speechlink.request import assign_identity, decode_request, new_id, utc_now
from speechlink.response import encode_error, encode_success

log = get_logger(__name__)


class SpeechPipeline:

    def __init__(self, synthesizer, uploader, clock=utc_now, id_factory=new_id):
        self.synthesizer = synthesizer
        self.uploader = uploader
        self.clock = clock
        self.id_factory = id_factory

    def run(self, event):
        request = decode_request(event)
        log.info(
            "request_decoded",
            extra={"extra_data": {"language": request.target_language,
                                  "voice": request.voice_id,
                                  "chars": len(request.text)}},
        )

        stream = self.synthesizer.synthesize(request)
        assign_identity(request, clock=self.clock, id_factory=self.id_factory)
        link = self.uploader.upload(stream, request.id)
        return encode_success(link)

    def handle(self, event):
        try:
            return self.run(event)
        except SpeechError as err:
            log.warning(
                "request_failed",
                extra={"extra_data": {"code": err.code, "error": err.message}},
            )
            return encode_error(err.message)
