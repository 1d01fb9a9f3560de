from contextlib import closing
from urllib.parse import quote, urlsplit

from boto3.exceptions import S3UploadFailedError
from botocore.exceptions import BotoCoreError, ClientError

from speechlink.errors import UploadFailed
from speechlink.log import get_logger
from speechlink.request import utc_now

CONTENT_TYPE = "audio/mpeg"
ACL = "public-read"

# Fixed English names; strftime("%B") follows the process locale
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

log = get_logger(__name__)


class S3Uploader:

    def __init__(self, s3_client, bucket, clock=utc_now):
        self.s3_client = s3_client
        self.bucket = bucket
        self.clock = clock

    def object_key(self, object_id):
        now = self.clock()
        return f"{now.year}/{MONTH_NAMES[now.month - 1]}/{now.day}/{object_id}"

    def location(self, key):
        endpoint = urlsplit(self.s3_client.meta.endpoint_url)
        return f"{endpoint.scheme}://{self.bucket}.{endpoint.netloc}/{quote(key)}"

    def upload(self, stream, object_id):
        key = self.object_key(object_id)
        log.info("uploading", extra={"extra_data": {"bucket": self.bucket, "key": key}})

        with closing(stream):
            try:
                self.s3_client.upload_fileobj(
                    stream,
                    self.bucket,
                    key,
                    ExtraArgs={"ContentType": CONTENT_TYPE, "ACL": ACL},
                )
            except (S3UploadFailedError, BotoCoreError, ClientError) as exc:
                raise UploadFailed(str(exc)) from exc

        location = self.location(key)
        log.info("uploaded", extra={"extra_data": {"location": location}})
        return location
