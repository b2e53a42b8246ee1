"""Run the forum API under uvicorn: python -m forum."""

import uvicorn

from forum.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("forum.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
