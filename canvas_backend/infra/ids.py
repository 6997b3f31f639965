import uuid


def new_id() -> str:
    """Random 128-bit identifier in canonical 36-char form, e.g. ``1b4e28ba-2fa1-...``."""
    return str(uuid.uuid4())
