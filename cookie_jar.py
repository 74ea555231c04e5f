# cookie_jar.py

"""
Netscape/Mozilla cookies.txt output for cookies read through WebDriver.

One cookie per line, seven tab separated fields:
domain, same-site lax flag, path, secure, expiry, name, value.
"""

import time
from typing import Optional
from urllib.parse import urlparse


def _flag(value: bool) -> str:
    return "TRUE" if value else "FALSE"


def format_cookie_record(cookie: dict, current_url: str, now: Optional[int] = None) -> str:
    """
    Format one WebDriver cookie dict as a cookies.txt line (without newline).

    Missing fields fall back as follows: domain and path come from
    current_url, sameSite counts as Strict, secure counts as set, and a
    cookie without expiry is written as expiring at `now`.

    Args:
        cookie (dict): Cookie as returned by driver.get_cookies().
        current_url (str): URL of the page the cookies were read on.
        now (int): Unix timestamp for cookies without expiry, defaults to the current time.

    Returns:
        str: The tab separated record.
    """
    url = urlparse(current_url)

    domain = cookie.get("domain")
    if domain is None:
        domain = url.hostname or ""

    same_site = cookie.get("sameSite") or "Strict"

    path = cookie.get("path")
    if path is None:
        path = url.path or "/"

    secure = cookie.get("secure")
    if secure is None:
        secure = True

    expiry = cookie.get("expiry")
    if expiry is None:
        expiry = int(time.time()) if now is None else now

    return "\t".join([
        domain,
        _flag(same_site.lower() == "lax"),
        path,
        _flag(secure),
        str(int(expiry)),
        cookie["name"],
        cookie["value"],
    ])


def serialize_cookies(cookies, current_url: str, now: Optional[int] = None) -> str:
    """Join the records of all cookies, ending with a trailing newline."""
    if now is None:
        now = int(time.time())
    records = [format_cookie_record(cookie, current_url, now) for cookie in cookies]
    records.append("")
    return "\n".join(records)


def write_cookie_jar(path, text: str):
    # Truncates and rewrites the whole file in one write
    with open(path, "w", encoding="utf-8", newline="\n") as cookies_txt:
        cookies_txt.write(text)
