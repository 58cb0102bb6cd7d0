#!/usr/bin/env python3
"""Run the sutja API server."""

import logging
import os

import uvicorn


def main():
    host = os.environ.get('SUTJA_HOST', '127.0.0.1')
    port = int(os.environ.get('SUTJA_PORT', '8000'))
    logging.basicConfig(
        level=os.environ.get('SUTJA_LOG_LEVEL', 'INFO').upper(),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )
    print("Starting Sutja API server...")
    print(f"API documentation available at: http://{host}:{port}/docs")
    uvicorn.run(
        "server.app:app",
        host=host,
        port=port,
        reload=os.environ.get('SUTJA_RELOAD') == '1'
    )


if __name__ == "__main__":
    main()
