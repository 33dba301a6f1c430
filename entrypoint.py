"""Backend entrypoint. Starts uvicorn with host/port from env."""
import os
import uvicorn

from portfolio_tracker.main import app


def main() -> None:
    host = os.environ.get("PORTFOLIO_HOST", "127.0.0.1")
    port = int(os.environ.get("PORTFOLIO_PORT", "8001"))
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
