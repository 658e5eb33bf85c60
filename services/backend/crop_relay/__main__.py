import uvicorn

from crop_relay.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "crop_relay.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        workers=1,
        proxy_headers=False,
    )


if __name__ == "__main__":
    main()
