# config.py

import os

# Site whose session is kept alive
TARGET_URL = os.getenv("TARGET_URL", "https://www.youtube.com/")

# Process argument defaults
CHROMEDRIVER_PATH = os.getenv("CHROMEDRIVER_PATH", "chromedriver")
COOKIES_TXT_PATH = os.getenv("COOKIES_TXT_PATH", "cookies.txt")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Timings
CONNECT_RETRY_SECONDS = 5
SIGN_IN_GRACE_SECONDS = 10
LOGIN_POLL_SECONDS = 5
EXPORT_INTERVAL_HOURS = 6

SIGN_IN_LINK_TEXT = "Sign in"

# Hides navigator.webdriver and the other automation markers from the site
CHROME_ARGS = ["--disable-blink-features=AutomationControlled"]
