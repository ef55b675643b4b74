"""URL helpers."""

from urllib.parse import parse_qsl, urlsplit


def get_url_parameters(url: str) -> dict[str, str]:
    """
    Query string parameters of ``url`` as a dict; the last repeat wins.

    Example:
        >>> get_url_parameters("http://url.com/page?name=Adam&surname=Smith")
        {'name': 'Adam', 'surname': 'Smith'}
    """
    return dict(parse_qsl(urlsplit(url).query, keep_blank_values=True))
