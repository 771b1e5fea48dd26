"""Gunicorn settings for the Sassy API.

Run with ``gunicorn -c deploy/gunicorn.conf.py sassy.wsgi:app``. Every value
can be overridden through ``GUNICORN_*`` environment variables.
"""

from __future__ import annotations

import logging
import multiprocessing
import os


def _int(name: str, default: int) -> int:
    return int(os.environ.get(name, str(default)))


bind = os.environ.get("GUNICORN_BIND", "0.0.0.0:8000")

worker_class = os.environ.get("GUNICORN_WORKER_CLASS", "gthread")
workers = _int("GUNICORN_WORKERS", min(multiprocessing.cpu_count() * 2 + 1, 9))
threads = _int("GUNICORN_THREADS", 4)
max_requests = _int("GUNICORN_MAX_REQUESTS", 5000)
max_requests_jitter = _int("GUNICORN_MAX_REQUESTS_JITTER", 500)

timeout = _int("GUNICORN_TIMEOUT", 60)
graceful_timeout = _int("GUNICORN_GRACEFUL_TIMEOUT", 30)
keepalive = _int("GUNICORN_KEEPALIVE", 5)

accesslog = os.environ.get("GUNICORN_ACCESSLOG", "-")
errorlog = os.environ.get("GUNICORN_ERRORLOG", "-")
loglevel = os.environ.get("GUNICORN_LOGLEVEL", os.environ.get("LOG_LEVEL", "info")).lower()
capture_output = True
access_log_format = os.environ.get(
    "GUNICORN_ACCESS_LOG_FORMAT",
    '{"timestamp": "%(t)s", "remote": "%(h)s", "request": "%(r)s", '
    '"status": %(s)s, "bytes": %(b)s, "response_time": %(D)s}',
)

# Secure cookies need the original scheme from the TLS-terminating proxy.
forwarded_allow_ips = os.environ.get("GUNICORN_FORWARDED_ALLOW_IPS", "127.0.0.1")
limit_request_line = _int("GUNICORN_LIMIT_REQUEST_LINE", 8190)
limit_request_fields = _int("GUNICORN_LIMIT_REQUEST_FIELDS", 100)

preload_app = os.environ.get("GUNICORN_PRELOAD", "true").lower() in ("1", "true", "yes")
proc_name = os.environ.get("GUNICORN_PROC_NAME", "sassy")

statsd_host = os.environ.get("STATSD_HOST")
if statsd_host:
    statsd_prefix = os.environ.get("STATSD_PREFIX", "sassy")

logger = logging.getLogger("gunicorn.error")


def when_ready(server):
    logger.info("Sassy listening on %s (%s workers x %s threads)", bind, workers, threads)


def worker_abort(worker):
    logger.warning("Worker %s timed out after %ss", worker.pid, timeout)
