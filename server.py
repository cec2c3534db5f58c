"""
Server Entry Point

Minimal entry point that configures logging and runs the FastAPI app with uvicorn.
"""

import logging
import os

from app import app

if __name__ == "__main__":
    import uvicorn
    from config import DEFAULT_PORT, LOG_LEVEL

    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Get port from environment variable or default to 8010
    port = int(os.environ.get("PORT", DEFAULT_PORT))

    print(f"Starting server on port {port}")
    print("REST API endpoints:")
    print(f"  - POST   http://localhost:{port}/api/seo/analyze")
    print(f"  - GET    http://localhost:{port}/health")
    print()

    uvicorn.run(app, host="0.0.0.0", port=port)
