#!/usr/bin/env python3
"""
Run script for the Task Manager API
"""

from app import create_app
from config import Config

if __name__ == '__main__':
    app = create_app()
    app.logger.info("Starting Task Manager API...")
    app.run(
        host=Config.HOST,
        port=Config.PORT,
        debug=True
    )
