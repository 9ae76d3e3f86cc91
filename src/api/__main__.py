"""
Phonebook HTTP server.
Run: python -m api (from repo root, with .env or env vars set).
"""
import uvicorn

from api.main import app, get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(app, host="0.0.0.0", port=settings.http_port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
