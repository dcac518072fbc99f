from dataclasses import dataclass


@dataclass(frozen=True)
class TokenClaims:
    """Identity claims carried by a bearer token; timestamps are UNIX seconds"""
    subject_id: str
    username: str
    issued_at: int
    expires_at: int


@dataclass(frozen=True)
class Identity:
    """Resolved caller of a protected request"""
    id: str
    username: str
