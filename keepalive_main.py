import argparse
import logging
import sys

from config import CHROMEDRIVER_PATH, COOKIES_TXT_PATH, LOG_LEVEL, TARGET_URL
from selenium_setup import SeleniumSetup
from authentication import ensure_logged_in
from cookie_export import run_export_schedule

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Keep a browser session signed in and export its cookies to a cookies.txt file."
    )
    parser.add_argument("--chromedriver-path", default=CHROMEDRIVER_PATH,
                        help="chromedriver executable (default: %(default)s)")
    parser.add_argument("--cookies-txt-path", default=COOKIES_TXT_PATH,
                        help="File the cookies are written to (default: %(default)s)")
    return parser.parse_args(argv)


def run(args):
    setup = SeleniumSetup(args.chromedriver_path)
    driver = setup.start()
    ensure_logged_in(driver, TARGET_URL)
    # Only returns by raising
    run_export_schedule(driver, TARGET_URL, args.cookies_txt_path)


def main(argv=None):
    args = parse_args(argv)
    # Logging setup
    logging.basicConfig(level=LOG_LEVEL)
    try:
        run(args)
    except Exception as e:
        logger.critical(f"Critical error: {e}. Exiting.")
        sys.exit(1)


if __name__ == "__main__":
    main()
