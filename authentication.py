# authentication.py

import enum
import logging
import time
from urllib.parse import urlparse

from selenium.common.exceptions import NoSuchElementException
from selenium.webdriver.common.by import By

from config import LOGIN_POLL_SECONDS, SIGN_IN_GRACE_SECONDS, SIGN_IN_LINK_TEXT

logger = logging.getLogger(__name__)


class LoginState(enum.Enum):
    CHECKING_SIGN_IN = "checking_sign_in"
    AWAITING_LOGIN = "awaiting_login"
    AUTHENTICATED = "authenticated"


def current_domain(driver):
    return urlparse(driver.current_url).hostname


def find_sign_in_link(driver):
    """Return the "Sign in" link element, or None when the page has none."""
    try:
        return driver.find_element(By.LINK_TEXT, SIGN_IN_LINK_TEXT)
    except NoSuchElementException:
        return None


def wait_for_login_redirect(driver, target_domain, poll_interval=LOGIN_POLL_SECONDS, sleep=time.sleep):
    """
    Block until the browser is back on the target domain.

    While the user is signing in on the identity provider the current page
    is on some other domain. There is no timeout.

    Returns:
        int: How many times the domain was polled without a match.
    """
    polls = 0
    while current_domain(driver) != target_domain:
        logger.info(f"Waiting for login flow. Retrying in {poll_interval} seconds...")
        sleep(poll_interval)
        polls += 1
    return polls


def ensure_logged_in(driver, target_url, grace_period=SIGN_IN_GRACE_SECONDS,
                     poll_interval=LOGIN_POLL_SECONDS, sleep=time.sleep):
    """
    Open the target site and wait until a human has signed in.

    The page gets a fixed grace period for the sign-in link to render. If no
    link shows up the session is already authenticated. Otherwise the link is
    clicked, we wait for the redirect back to the site and check again, as
    long as it takes.

    Args:
        driver (WebDriver): Connected session.
        target_url (str): Root URL of the site.
        grace_period (int): Seconds to let the page render before looking for the link.
        poll_interval (int): Seconds between domain checks while awaiting login.
        sleep (callable): Used for all waits.

    Returns:
        LoginState: Always LoginState.AUTHENTICATED.
    """
    target_domain = urlparse(target_url).hostname
    driver.get(target_url)
    sleep(grace_period)

    state = LoginState.CHECKING_SIGN_IN
    while state is not LoginState.AUTHENTICATED:
        if state is LoginState.CHECKING_SIGN_IN:
            link = find_sign_in_link(driver)
            if link is None:
                state = LoginState.AUTHENTICATED
            else:
                logger.info("Not signed in, complete the login in the browser window.")
                link.click()
                state = LoginState.AWAITING_LOGIN
        elif state is LoginState.AWAITING_LOGIN:
            wait_for_login_redirect(driver, target_domain, poll_interval=poll_interval, sleep=sleep)
            state = LoginState.CHECKING_SIGN_IN

    logger.info(f"Signed in to {target_domain}")
    return state
