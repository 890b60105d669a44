import os

import uvicorn


def run() -> None:
    """Serve snowdrive.server:app with uvicorn; HOST/PORT from the environment."""
    uvicorn.run(
        "snowdrive.server:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
        reload=os.getenv("UVICORN_RELOAD", "").lower() in ("1", "true", "yes"),
    )


if __name__ == "__main__":
    run()
