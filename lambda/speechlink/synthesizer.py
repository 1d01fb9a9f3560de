from botocore.exceptions import BotoCoreError, ClientError

from speechlink.errors import SynthesisFailed
from speechlink.log import get_logger

OUTPUT_FORMAT = "mp3"

log = get_logger(__name__)


class PollySynthesizer:

    def __init__(self, polly_client):
        self.polly_client = polly_client

    def synthesize(self, request):
        """Return the Polly audio stream for ``request``.

        The stream can be read once; the caller owns closing it.
        """
        try:
            response = self.polly_client.synthesize_speech(
                LanguageCode=request.target_language,
                OutputFormat=OUTPUT_FORMAT,
                Text=request.text,
                VoiceId=request.voice_id,
            )
        except (BotoCoreError, ClientError) as exc:
            raise SynthesisFailed(str(exc)) from exc

        stream = response.get("AudioStream")
        if stream is None:
            raise SynthesisFailed("Polly returned no audio stream")

        log.info(
            "speech_synthesized",
            extra={"extra_data": {"content_type": response.get("ContentType"),
                                  "characters": response.get("RequestCharacters")}},
        )
        return stream
