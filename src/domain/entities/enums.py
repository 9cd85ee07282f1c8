"""
Blog Service Domain Enums

All enumeration types used across the domain.
"""

from enum import Enum


class TokenType(str, Enum):
    """Kind of signed JWT issued by the token signer"""

    access = "access"
    refresh = "refresh"
