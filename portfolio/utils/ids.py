import re
import uuid

ID_REGEX = re.compile(r"^[0-9a-f]{32}$")


def new_id() -> str:
    return uuid.uuid4().hex


def is_valid_id(value: str) -> bool:
    return bool(value) and ID_REGEX.match(value) is not None
