from hashlib import sha1


def chip_id(kind: str, text: str) -> str:
    """Stable short id for a suggestion chip, so a client can dismiss it by id."""
    return sha1(f"{kind}|{text}".encode("utf-8")).hexdigest()[:12]
