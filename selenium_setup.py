# selenium_setup.py

import logging
import subprocess
import time

from selenium import webdriver
from selenium.webdriver.chrome.options import Options

from config import CHROME_ARGS, CHROMEDRIVER_PATH, CONNECT_RETRY_SECONDS
from port_reserve import LOCALHOST, ephemeral_port_reserve

logger = logging.getLogger(__name__)


def build_chrome_options():
    chrome_options = Options()
    for arg in CHROME_ARGS:
        chrome_options.add_argument(arg)
    return chrome_options


def start_driver_process(driver_path, port):
    """
    Launch chromedriver listening on the given port.

    The returned handle has to be kept for as long as the program runs.
    Nothing here terminates the child; it goes away with the process.
    Raises OSError (FileNotFoundError, PermissionError) if it can't be spawned.
    """
    process = subprocess.Popen([driver_path, f"--port={port}"])
    logger.info(f"Started {driver_path} (pid {process.pid}) on port {port}")
    return process


def connect_webdriver(port, retry_delay=CONNECT_RETRY_SECONDS, sleep=time.sleep):
    """
    Open a WebDriver session against the local driver, retrying until it's up.

    chromedriver needs a variable amount of time before it accepts
    connections, so there is no cap on the number of attempts.

    Args:
        port (int): Port the driver listens on.
        retry_delay (int): Seconds to wait between attempts.
        sleep (callable): Used for the wait between attempts.

    Returns:
        WebDriver: The connected session.
    """
    command_executor = f"http://{LOCALHOST}:{port}"
    while True:
        try:
            return webdriver.Remote(command_executor=command_executor, options=build_chrome_options())
        except Exception as e:
            logger.error(f"Error starting webdriver client: {e}. Retrying in {retry_delay} seconds...")
            sleep(retry_delay)


class SeleniumSetup:
    """Owns the driver process and the WebDriver session for the whole run."""

    def __init__(self, driver_path=CHROMEDRIVER_PATH, sleep=time.sleep):
        self.driver_path = driver_path
        self.sleep = sleep
        self.port = None
        self.driver_process = None
        self.driver = None

    def start(self):
        self.port = ephemeral_port_reserve()
        self.driver_process = start_driver_process(self.driver_path, self.port)
        self.driver = connect_webdriver(self.port, sleep=self.sleep)
        return self.driver
