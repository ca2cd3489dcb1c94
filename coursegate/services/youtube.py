import re

# youtu.be/<id>, /v/<id>, /u/<x>/<id>, /embed/<id>, watch?v=<id>, &v=<id>
_URL_RE = re.compile(r"^.*(youtu\.be/|v/|u/\w/|embed/|watch\?v=|&v=)([^#&?]*).*")
_BARE_ID_RE = re.compile(r"^[A-Za-z0-9_-]{11}$")


def extract_youtube_id(value: str | None) -> str | None:
    """Return the 11-character video id from a YouTube URL or a bare id, else None."""
    if not value:
        return None
    value = value.strip()
    if _BARE_ID_RE.match(value):
        return value
    match = _URL_RE.match(value)
    if match and len(match.group(2)) == 11:
        return match.group(2)
    return None


def embed_url(video_id: str) -> str:
    return f"https://www.youtube.com/embed/{video_id}"
