# src/new_contributors/errors.py
"""
Error taxonomy for the new contributors pipeline.

Every failure that reaches a caller is one of these classes. Each carries
a coarse ``kind``, the HTTP-style ``status_code`` a transport should use,
and a human-readable message that never includes raw GitHub payloads.
"""

from datetime import datetime
from typing import Optional


class NewContributorsError(Exception):
    """Base class for all classified pipeline errors."""
    kind = 'internal'
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'error': self.kind,
            'statusCode': self.status_code,
            'message': self.message
        }


class BadRequest(NewContributorsError):
    """Caller-supplied year/month is malformed or precedes the repository."""
    kind = 'bad_request'
    status_code = 400


class NotFound(NewContributorsError):
    """Repository does not exist upstream."""
    kind = 'not_found'
    status_code = 404


class RateLimited(NewContributorsError):
    """GitHub quota exhausted."""
    kind = 'rate_limited'
    status_code = 429

    def __init__(self, message: str, reset_at: Optional[datetime] = None):
        super().__init__(message)
        self.reset_at = reset_at

    def to_dict(self) -> dict:
        data = super().to_dict()
        data['resetAt'] = self.reset_at.isoformat() if self.reset_at else None
        return data


class UpstreamFailure(NewContributorsError):
    """Any other remote, network or payload failure."""
    kind = 'upstream_failure'
    status_code = 500
