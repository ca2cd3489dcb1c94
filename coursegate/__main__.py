import uvicorn

from coursegate.config import settings


def main() -> None:
    uvicorn.run("coursegate.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
