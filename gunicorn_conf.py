import os

bind = f"0.0.0.0:{os.getenv('PORT', '8080')}"
worker_class = "uvicorn.workers.UvicornWorker"

workers = int(os.getenv("WEB_CONCURRENCY", "2"))
timeout = 60              # hard kill after N seconds of no response
graceful_timeout = 30     # time to gracefully stop workers
keepalive = 75

# recycle workers after N requests
max_requests = int(os.getenv("MAX_REQUESTS", "1000"))
max_requests_jitter = int(os.getenv("MAX_REQUESTS_JITTER", "100"))

# stdout/stderr, picked up by the container runtime
accesslog = "-"
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()
