import re
from typing import Optional

YOUTUBE_ID_REGEX = re.compile(r"^.*(youtu\.be/|v/|u/\w/|embed/|watch\?v=|&v=)([^#&?]*).*")


def youtube_id(url: Optional[str]) -> Optional[str]:
    """Extract the 11-character video id from the usual YouTube url shapes."""
    if not url:
        return None
    match = YOUTUBE_ID_REGEX.match(url)
    if match and len(match.group(2)) == 11:
        return match.group(2)
    return None
