"""
Gunicorn settings for the AllReview API
"""

import multiprocessing
import os

bind = os.getenv("BIND", "0.0.0.0:5000")
workers = int(os.getenv("WORKERS", multiprocessing.cpu_count() * 2 + 1))
worker_class = "uvicorn.workers.UvicornWorker"
preload_app = True

# Must stay above PAYMENT_TIMEOUT; /api/payments/process blocks on the gateway
timeout = int(os.getenv("GUNICORN_TIMEOUT", "60"))
graceful_timeout = 30

accesslog = "-"
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()

proc_name = "allreview-backend"
