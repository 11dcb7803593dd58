"""
Gunicorn configuration for the Movement Ranking API.

Env vars that override defaults:
  PORT:    TCP port to bind
  WORKERS: number of worker processes (default: 2)
  TIMEOUT: seconds before an unresponsive worker is killed (default: 30)
"""
import os

bind = f"0.0.0.0:{os.environ.get('PORT', '8000')}"

workers = int(os.environ.get("WORKERS", "2"))

# Each worker runs Uvicorn's ASGI event loop inside Gunicorn's process manager.
worker_class = "uvicorn.workers.UvicornWorker"

keepalive = 5

# Rankings are a single read; anything slower than this is a stuck worker.
timeout = int(os.environ.get("TIMEOUT", "30"))

# Application logs are JSON on stdout (app.core.logging); access log stays plain.
loglevel = "info"
accesslog = "-"
errorlog = "-"
access_log_format = '%(h)s "%(r)s" %(s)s %(b)sB %(D)sµs'

graceful_timeout = 30
