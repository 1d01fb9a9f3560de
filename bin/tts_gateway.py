#!/usr/bin/env python3
from aws_cdk import App
from tts_gateway_stack import TtsGatewayStack

app = App()
TtsGatewayStack(app, "TtsGatewayStack")

app.synth()
