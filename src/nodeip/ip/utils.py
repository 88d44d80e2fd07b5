"""Splitting of comma-separated IP lists."""

from typing import List


def split_ip_list(value: str, trim: bool = True) -> List[str]:
    """
    Split a comma-separated list of IPs into tokens.

    Args:
        value: Raw comma-separated value
        trim: Strip surrounding whitespace from each token

    Returns:
        Tokens in input order; an empty value yields a single empty token
    """
    tokens = value.split(",")
    if trim:
        return [token.strip() for token in tokens]
    return tokens
