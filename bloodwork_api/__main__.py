import uvicorn

from bloodwork_api.config import settings


def main() -> None:
    uvicorn.run(
        "bloodwork_api.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.app_env == "dev",
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
