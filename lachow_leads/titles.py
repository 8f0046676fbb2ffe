import re
from typing import Tuple

DEFAULT_SITE_NAME = "LinkedIn"
NAME_SEPARATOR = " - "


def _strip_site_suffix(title: str, site_name: str = DEFAULT_SITE_NAME) -> str:
    # "Jane Doe - Chef | LinkedIn" -> "Jane Doe - Chef"
    pattern = r"\s*\|\s*" + re.escape(site_name) + r"\s*$"
    return re.sub(pattern, "", title or "", flags=re.I)


def parse_title(title: str, site_name: str = DEFAULT_SITE_NAME) -> Tuple[str, str]:
    """
    Split a search result title like "Name - Headline | LinkedIn" into
    (name, headline). Titles without a separator give an empty headline.
    """
    cleaned = _strip_site_suffix(title, site_name)
    parts = cleaned.split(NAME_SEPARATOR)

    name = parts[0].strip()
    headline = NAME_SEPARATOR.join(parts[1:]).strip() if len(parts) > 1 else ""
    return name, headline


def extract_name_from_title(title: str, site_name: str = DEFAULT_SITE_NAME) -> str:
    return parse_title(title, site_name)[0]


def extract_headline_from_title(title: str, site_name: str = DEFAULT_SITE_NAME) -> str:
    return parse_title(title, site_name)[1]
