"""
Waitlist form handling: body reading, decoding, spam and field validation,
and notification message composition.
"""
from .validation import (
    BodyReadTimeoutError,
    FormValidationError,
    PayloadTooLargeError,
    WaitlistSubmission,
    compose_message,
    escape_text,
    is_spam,
    parse_form_body,
    read_limited_body,
    validate_submission,
)

__all__ = [
    'BodyReadTimeoutError',
    'FormValidationError',
    'PayloadTooLargeError',
    'WaitlistSubmission',
    'compose_message',
    'escape_text',
    'is_spam',
    'parse_form_body',
    'read_limited_body',
    'validate_submission',
]
