#!/usr/bin/env python
"""Start the reorder suggestions API with port configuration from the environment."""
import os
import uvicorn

from backoffice.core.config import get_settings

if __name__ == "__main__":
    settings = get_settings()
    port = int(os.environ.get("PORT", 8000))

    print(f"Starting reorder suggestions API ({settings.ENVIRONMENT}) on port {port}")

    uvicorn.run(
        "backoffice.main:app",
        host="0.0.0.0",
        port=port,
        log_level=settings.LOG_LEVEL.lower(),
        reload=settings.DEBUG,
    )
