"""Text-to-speech pipeline: Polly synthesis, S3 upload, gateway responses."""
