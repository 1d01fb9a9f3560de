import os

from aws_cdk import (
    aws_s3 as s3,
    aws_iam as iam,
    aws_lambda as _lambda,
    aws_apigateway as apigw,
    BundlingOptions,
    CfnOutput,
    Duration,
    RemovalPolicy,
    Stack
)
from constructs import Construct

LAMBDA_DIR = os.path.join(os.path.dirname(__file__), '..', 'lambda')


class TtsGatewayStack(Stack):

    def __init__(self, scope: Construct, id: str, **kwargs) -> None:
        super().__init__(scope, id, **kwargs)

        # Audio objects are uploaded with a public-read ACL, so ACLs must stay usable
        bucket = s3.Bucket(
            self, "SpeechBucket",
            removal_policy=RemovalPolicy.DESTROY,
            object_ownership=s3.ObjectOwnership.BUCKET_OWNER_PREFERRED,
            block_public_access=s3.BlockPublicAccess(
                block_public_acls=False,
                ignore_public_acls=False,
                block_public_policy=True,
                restrict_public_buckets=False
            ),
        )

        # Lambda function for Polly synthesis and upload
        speech_lambda = _lambda.Function(
            self, "TextToSpeechFunction",
            runtime=_lambda.Runtime.PYTHON_3_12,
            handler="speech.handler",
            # The Python runtime only ships boto3; pydantic is installed into the asset
            code=_lambda.Code.from_asset(
                LAMBDA_DIR,
                bundling=BundlingOptions(
                    image=_lambda.Runtime.PYTHON_3_12.bundling_image,
                    command=[
                        "bash", "-c",
                        "pip install -r requirements.txt -t /asset-output && cp -au . /asset-output"
                    ]
                )
            ),
            timeout=Duration.seconds(30),
            environment={
                "S3BUCKET": bucket.bucket_name,
                "LOG_LEVEL": "INFO"
            }
        )

        speech_lambda.add_to_role_policy(
            iam.PolicyStatement(
                resources=["*"],
                actions=["polly:SynthesizeSpeech"]
            )
        )
        bucket.grant_put(speech_lambda)
        bucket.grant_put_acl(speech_lambda)

        # POST /speech -> Lambda proxy integration
        api = apigw.LambdaRestApi(
            self, "SpeechApi",
            handler=speech_lambda,
            proxy=False
        )
        speech = api.root.add_resource("speech")
        speech.add_method("POST")

        CfnOutput(self, "SpeechBucketName", value=bucket.bucket_name)
