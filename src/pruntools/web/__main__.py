"""Entry point: python -m pruntools.web -> uvicorn on :8080."""

import uvicorn

from pruntools.config import load_settings
from pruntools.logging_config import setup_logging
from pruntools.web.app import create_app

settings = load_settings()
setup_logging(settings.data_dir / "logs", level=settings.log_level)

app = create_app(settings)

if __name__ == "__main__":
    uvicorn.run(
        "pruntools.web.__main__:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )
