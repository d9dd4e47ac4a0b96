"""Page URI helpers."""


def get_page_uri(location: str) -> str:
    """Return the base URI of ``location``, always ending in ``/``.

    A location that does not already end in a slash has its last path
    segment dropped, so ``http://host/app/index.html`` gives
    ``http://host/app/``.
    """
    if location.endswith("/"):
        return location
    parts = location.split("/")
    parts[-1] = ""
    return "/".join(parts)
