import boto3

from speechlink.config import Settings
from speechlink.log import configure_logging, set_request_id
from speechlink.pipeline import SpeechPipeline
from speechlink.synthesizer import PollySynthesizer
from speechlink.uploader import S3Uploader

settings = Settings.from_env()
configure_logging(settings.log_level)

polly_client = boto3.client('polly')
s3_client = boto3.client('s3')

pipeline = SpeechPipeline(
    synthesizer=PollySynthesizer(polly_client),
    uploader=S3Uploader(s3_client, settings.bucket),
)


def handler(event, context):
    set_request_id(getattr(context, 'aws_request_id', None))
    return pipeline.handle(event)
