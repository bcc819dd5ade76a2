"""Allow running the service with ``python -m whoami_service``."""

from whoami_service.main import run

if __name__ == "__main__":
    run()
