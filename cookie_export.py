# cookie_export.py

import logging
from datetime import datetime

from apscheduler.events import EVENT_JOB_ERROR
from apscheduler.executors.pool import ThreadPoolExecutor
from apscheduler.schedulers.blocking import BlockingScheduler
from apscheduler.triggers.interval import IntervalTrigger

from config import EXPORT_INTERVAL_HOURS
from cookie_jar import serialize_cookies, write_cookie_jar

logger = logging.getLogger(__name__)


def export_cookies(driver, target_url, cookies_txt_path):
    """
    Reload the target site and overwrite cookies_txt_path with the session's cookies.

    Any WebDriver or file error is left to propagate; once signed in there is
    no way to recover the session.

    Args:
        driver (WebDriver): Authenticated session.
        target_url (str): Root URL of the site.
        cookies_txt_path (str): File to write in cookies.txt format.

    Returns:
        int: Number of cookies written.
    """
    driver.get(target_url)
    current_url = driver.current_url
    cookies = driver.get_cookies()

    write_cookie_jar(cookies_txt_path, serialize_cookies(cookies, current_url))
    logger.info(f"Wrote {cookies_txt_path}")
    return len(cookies)


def run_export_schedule(driver, target_url, cookies_txt_path,
                        interval_hours=EXPORT_INTERVAL_HOURS, scheduler=None):
    """
    Export cookies now and then every interval_hours, forever.

    Blocks the calling thread. The first failing export stops the scheduler
    and its exception is raised from here.
    """
    if scheduler is None:
        scheduler = BlockingScheduler(executors={"default": ThreadPoolExecutor(1)})
    failures = []

    def on_job_error(event):
        failures.append(event.exception)
        scheduler.shutdown(wait=False)

    scheduler.add_listener(on_job_error, EVENT_JOB_ERROR)
    scheduler.add_job(
        export_cookies,
        IntervalTrigger(hours=interval_hours),
        args=[driver, target_url, cookies_txt_path],
        id="export_cookies",
        next_run_time=datetime.now(),
        max_instances=1,
        coalesce=True,
        misfire_grace_time=None,
        replace_existing=True,
    )
    logger.info(f"Exporting cookies to {cookies_txt_path} every {interval_hours} hours")
    scheduler.start()

    if failures:
        raise failures[0]
