"""Grayscale thumbnail generator for S3 object-created notifications."""

from .handler import ThumbnailHandler, lambda_handler

__all__ = ["ThumbnailHandler", "lambda_handler"]
