class ErrorCode:
    INVALID_REQUEST = "INVALID_REQUEST"
    SYNTHESIS_FAILED = "SYNTHESIS_FAILED"
    UPLOAD_FAILED = "UPLOAD_FAILED"
    ENCODING_FAILED = "ENCODING_FAILED"


class SpeechError(Exception):
    """Base class for failures that end an invocation with a 400 response."""

    code = None

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class InvalidRequest(SpeechError):
    code = ErrorCode.INVALID_REQUEST


class SynthesisFailed(SpeechError):
    code = ErrorCode.SYNTHESIS_FAILED


class UploadFailed(SpeechError):
    code = ErrorCode.UPLOAD_FAILED


class EncodingFailed(SpeechError):
    code = ErrorCode.ENCODING_FAILED


class ConfigError(Exception):
    pass
